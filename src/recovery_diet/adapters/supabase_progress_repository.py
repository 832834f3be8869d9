"""Supabase implementation for daily progress records."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import uuid4

from supabase import Client

from recovery_diet.adapters.rows import parse_progress, to_row
from recovery_diet.domain.models import UserProgress
from recovery_diet.services.progress import ProgressRepository

TABLE = "user_progress"
WEEK_DAYS = 7


@dataclass
class SupabaseProgressRepository(ProgressRepository):
    """Supabase-backed repository for user progress."""

    client: Client

    def create(self, payload: dict[str, object]) -> UserProgress:
        """Create a progress row and return it."""
        row = {"id": str(uuid4()), **to_row(payload)}
        response = self.client.table(TABLE).insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create progress record")
        return parse_progress(response.data[0])

    def get(self, progress_id: str) -> UserProgress | None:
        """Return a progress record by id, if present."""
        response = (
            self.client.table(TABLE)
            .select("*")
            .eq("id", progress_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_progress(response.data[0])

    def get_by_date(self, user_id: str, day: date) -> UserProgress | None:
        """Return the user's record for a day, if present."""
        response = (
            self.client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_progress(response.data[0])

    def list_for_week(self, user_id: str, week_start: date) -> list[UserProgress]:
        """Return records dated in [week_start, week_start + 7 days)."""
        week_end = week_start + timedelta(days=WEEK_DAYS)
        response = (
            self.client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .gte("date", week_start.isoformat())
            .lt("date", week_end.isoformat())
            .order("date")
            .execute()
        )
        return [parse_progress(row) for row in response.data or []]

    def update(
        self, progress_id: str, changes: dict[str, object]
    ) -> UserProgress | None:
        """Patch a progress row; None when no row matched."""
        response = (
            self.client.table(TABLE)
            .update(to_row(changes))
            .eq("id", progress_id)
            .execute()
        )
        if not response.data:
            return None
        return parse_progress(response.data[0])

    def delete_all(self) -> None:
        """Remove every progress row."""
        self.client.table(TABLE).delete().neq("id", "").execute()
