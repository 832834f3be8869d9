"""Supabase implementation for meal plans."""

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import uuid4

from supabase import Client

from recovery_diet.adapters.rows import parse_meal_plan, to_row
from recovery_diet.domain.models import MealPlan
from recovery_diet.services.meal_plans import MealPlanRepository

TABLE = "meal_plans"
WEEK_DAYS = 7


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase-backed repository for meal plans."""

    client: Client

    def create(self, payload: dict[str, object]) -> MealPlan:
        """Create a meal plan row and return it."""
        row = {"id": str(uuid4()), **to_row(payload)}
        response = self.client.table(TABLE).insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create meal plan")
        return parse_meal_plan(response.data[0])

    def get(self, plan_id: str) -> MealPlan | None:
        """Return a meal plan by id, if present."""
        response = (
            self.client.table(TABLE).select("*").eq("id", plan_id).limit(1).execute()
        )
        if not response.data:
            return None
        return parse_meal_plan(response.data[0])

    def get_by_date(self, user_id: str, day: date) -> MealPlan | None:
        """Return the user's plan for a day, if present."""
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
        return parse_meal_plan(response.data[0])

    def list_for_week(self, user_id: str, week_start: date) -> list[MealPlan]:
        """Return plans dated in [week_start, week_start + 7 days)."""
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
        return [parse_meal_plan(row) for row in response.data or []]

    def update(self, plan_id: str, changes: dict[str, object]) -> MealPlan | None:
        """Patch a plan row; None when no row matched."""
        response = (
            self.client.table(TABLE).update(to_row(changes)).eq("id", plan_id).execute()
        )
        if not response.data:
            return None
        return parse_meal_plan(response.data[0])

    def delete_all(self) -> None:
        """Remove every meal plan row."""
        self.client.table(TABLE).delete().neq("id", "").execute()
