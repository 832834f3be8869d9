"""Meal planning services."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from recovery_diet.domain.models import MealPlan, PlannedMeal
from recovery_diet.domain.rules import (
    MealPlanCheck,
    round_half_up,
    validate_meal_plan,
)


class MealPlanRepository(Protocol):
    """Persistence interface for meal plans."""

    def create(self, payload: dict[str, object]) -> MealPlan:
        """Create a meal plan and return it."""

    def get(self, plan_id: str) -> MealPlan | None:
        """Return a meal plan by id, if present."""

    def get_by_date(self, user_id: str, day: date) -> MealPlan | None:
        """Return the user's plan for a day, if present."""

    def list_for_week(self, user_id: str, week_start: date) -> list[MealPlan]:
        """Return the user's plans dated within seven days of week_start."""

    def update(self, plan_id: str, changes: dict[str, object]) -> MealPlan | None:
        """Merge changes into a plan; None when the id is unknown."""

    def delete_all(self) -> None:
        """Remove every meal plan."""


@dataclass
class MealPlanService:
    """Application service for meal plans."""

    repository: MealPlanRepository

    def get_for_date(self, user_id: str, day: date) -> MealPlan | None:
        return self.repository.get_by_date(user_id, day)

    def list_for_week(self, user_id: str, week_start: date) -> list[MealPlan]:
        return self.repository.list_for_week(user_id, week_start)

    def create_plan(self, payload: dict[str, object]) -> MealPlan:
        """Create a plan, totalling meal fat when no total is given."""
        data = dict(payload)
        if data.get("total_fat") is None:
            data["total_fat"] = _total_fat(data.get("meals", []))
        return self.repository.create(data)

    def update_plan(self, plan_id: str, changes: dict[str, object]) -> MealPlan | None:
        """Patch a plan; replacing meals refreshes the total."""
        data = dict(changes)
        if "meals" in data and "total_fat" not in data:
            data["total_fat"] = _total_fat(data["meals"])
        return self.repository.update(plan_id, data)

    @staticmethod
    def check(meals: list[PlannedMeal], daily_limit: float) -> MealPlanCheck:
        """Validate planned meals against a daily fat limit."""
        return validate_meal_plan(meals, daily_limit)


def _total_fat(meals: list[dict[str, object]]) -> float:
    return round_half_up(sum(float(meal.get("fat_content", 0)) for meal in meals))
