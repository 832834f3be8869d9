"""Daily progress services."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from recovery_diet.domain.models import UserProgress
from recovery_diet.domain.rules import fat_progress, is_fat_intake_safe


class ProgressRepository(Protocol):
    """Persistence interface for daily progress records."""

    def create(self, payload: dict[str, object]) -> UserProgress:
        """Create a progress record and return it."""

    def get(self, progress_id: str) -> UserProgress | None:
        """Return a progress record by id, if present."""

    def get_by_date(self, user_id: str, day: date) -> UserProgress | None:
        """Return the user's record for a day, if present."""

    def list_for_week(self, user_id: str, week_start: date) -> list[UserProgress]:
        """Return the user's records dated within seven days of week_start."""

    def update(
        self, progress_id: str, changes: dict[str, object]
    ) -> UserProgress | None:
        """Merge changes into a record; None when the id is unknown."""

    def delete_all(self) -> None:
        """Remove every progress record."""


@dataclass(frozen=True)
class ProgressSummary:
    """Intake against the limit for one day."""

    date: date
    fat_intake: float
    fat_limit: float
    progress_percentage: float
    is_safe: bool
    remaining_fat: float


@dataclass
class ProgressService:
    """Application service for daily progress."""

    repository: ProgressRepository

    def get_for_date(self, user_id: str, day: date) -> UserProgress | None:
        return self.repository.get_by_date(user_id, day)

    def list_for_week(self, user_id: str, week_start: date) -> list[UserProgress]:
        return self.repository.list_for_week(user_id, week_start)

    def create_progress(self, payload: dict[str, object]) -> UserProgress:
        return self.repository.create(payload)

    def update_progress(
        self, progress_id: str, changes: dict[str, object]
    ) -> UserProgress | None:
        return self.repository.update(progress_id, changes)

    def summarize(self, user_id: str, day: date) -> ProgressSummary | None:
        """Return the day's intake summary, or None without a record."""
        progress = self.repository.get_by_date(user_id, day)
        if progress is None:
            return None
        return ProgressSummary(
            date=progress.date,
            fat_intake=progress.fat_intake,
            fat_limit=progress.fat_limit,
            progress_percentage=fat_progress(progress.fat_intake, progress.fat_limit),
            is_safe=is_fat_intake_safe(progress.fat_intake, progress.fat_limit),
            remaining_fat=max(progress.fat_limit - progress.fat_intake, 0.0),
        )
