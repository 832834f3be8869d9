"""Dict-backed repositories for tests, local runs and seeding.

Rows are kept in the same shape the Supabase tables use, so both backends
parse through the same functions and behave identically.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from uuid import uuid4

from recovery_diet.adapters.rows import (
    parse_food,
    parse_grocery_list,
    parse_meal_plan,
    parse_progress,
    parse_recipe,
    parse_user,
    to_row,
)
from recovery_diet.domain.models import (
    Food,
    GroceryList,
    MealPlan,
    Recipe,
    User,
    UserProgress,
)
from recovery_diet.services.foods import FoodRepository
from recovery_diet.services.grocery import GroceryListRepository
from recovery_diet.services.meal_plans import MealPlanRepository
from recovery_diet.services.progress import ProgressRepository
from recovery_diet.services.recipes import RecipeRepository
from recovery_diet.services.users import UserRepository

WEEK_DAYS = 7


@dataclass
class _RowStore:
    rows: dict[str, dict[str, object]] = field(default_factory=dict)

    def _insert(self, payload: dict[str, object]) -> dict[str, object]:
        row = to_row(payload)
        row["id"] = str(row.get("id") or uuid4())
        self.rows[row["id"]] = row
        return row

    def _merge(self, row_id: str, changes: dict[str, object]) -> dict[str, object] | None:
        existing = self.rows.get(row_id)
        if existing is None:
            return None
        merged = {**existing, **to_row(changes), "id": row_id}
        self.rows[row_id] = merged
        return merged

    def _where(self, **filters: object) -> list[dict[str, object]]:
        wanted = to_row(filters)
        return [
            row
            for row in self.rows.values()
            if all(row.get(column) == value for column, value in wanted.items())
        ]

    def _in_week(self, user_id: str, week_start: date) -> list[dict[str, object]]:
        start = week_start.isoformat()
        end = (week_start + timedelta(days=WEEK_DAYS)).isoformat()
        matches = [
            row
            for row in self._where(user_id=user_id)
            if start <= str(row["date"]) < end
        ]
        return sorted(matches, key=lambda row: str(row["date"]))

    def delete_all(self) -> None:
        self.rows.clear()


@dataclass
class InMemoryUserRepository(_RowStore, UserRepository):
    """In-memory user accounts."""

    def create(self, payload: dict[str, object]) -> User:
        return parse_user(self._insert(payload))

    def get(self, user_id: str) -> User | None:
        row = self.rows.get(user_id)
        return parse_user(row) if row else None

    def get_by_username(self, username: str) -> User | None:
        matches = self._where(username=username)
        return parse_user(matches[0]) if matches else None

    def update(self, user_id: str, changes: dict[str, object]) -> User | None:
        row = self._merge(user_id, changes)
        return parse_user(row) if row else None


@dataclass
class InMemoryFoodRepository(_RowStore, FoodRepository):
    """In-memory food catalogue."""

    def create(self, payload: dict[str, object]) -> Food:
        return parse_food(self._insert(payload))

    def get(self, food_id: str) -> Food | None:
        row = self.rows.get(food_id)
        return parse_food(row) if row else None

    def list_all(self) -> list[Food]:
        return [parse_food(row) for row in self.rows.values()]

    def list_by_category(self, category: str) -> list[Food]:
        return [parse_food(row) for row in self._where(category=category)]

    def search(self, query: str) -> list[Food]:
        needle = query.lower()
        return [
            parse_food(row)
            for row in self.rows.values()
            if any(
                needle in str(row.get(column) or "").lower()
                for column in ("name", "description", "category")
            )
        ]

    def update(self, food_id: str, changes: dict[str, object]) -> Food | None:
        row = self._merge(food_id, changes)
        return parse_food(row) if row else None


@dataclass
class InMemoryRecipeRepository(_RowStore, RecipeRepository):
    """In-memory recipes."""

    def create(self, payload: dict[str, object]) -> Recipe:
        return parse_recipe(self._insert(payload))

    def get(self, recipe_id: str) -> Recipe | None:
        row = self.rows.get(recipe_id)
        return parse_recipe(row) if row else None

    def list_all(self) -> list[Recipe]:
        return [parse_recipe(row) for row in self.rows.values()]

    def list_by_tag(self, tag: str) -> list[Recipe]:
        return [
            parse_recipe(row)
            for row in self.rows.values()
            if tag in (row.get("tags") or [])
        ]

    def list_by_safety_level(self, level: str) -> list[Recipe]:
        return [parse_recipe(row) for row in self._where(safety_level=level)]

    def update(self, recipe_id: str, changes: dict[str, object]) -> Recipe | None:
        row = self._merge(recipe_id, changes)
        return parse_recipe(row) if row else None


@dataclass
class InMemoryMealPlanRepository(_RowStore, MealPlanRepository):
    """In-memory meal plans."""

    def create(self, payload: dict[str, object]) -> MealPlan:
        return parse_meal_plan(self._insert(payload))

    def get(self, plan_id: str) -> MealPlan | None:
        row = self.rows.get(plan_id)
        return parse_meal_plan(row) if row else None

    def get_by_date(self, user_id: str, day: date) -> MealPlan | None:
        matches = self._where(user_id=user_id, date=day)
        return parse_meal_plan(matches[0]) if matches else None

    def list_for_week(self, user_id: str, week_start: date) -> list[MealPlan]:
        return [parse_meal_plan(row) for row in self._in_week(user_id, week_start)]

    def update(self, plan_id: str, changes: dict[str, object]) -> MealPlan | None:
        row = self._merge(plan_id, changes)
        return parse_meal_plan(row) if row else None


@dataclass
class InMemoryGroceryListRepository(_RowStore, GroceryListRepository):
    """In-memory grocery lists."""

    def create(self, payload: dict[str, object]) -> GroceryList:
        return parse_grocery_list(self._insert(payload))

    def get(self, list_id: str) -> GroceryList | None:
        row = self.rows.get(list_id)
        return parse_grocery_list(row) if row else None

    def get_active(self, user_id: str) -> GroceryList | None:
        matches = self._where(user_id=user_id, is_active=True)
        if not matches:
            return None
        newest = max(matches, key=lambda row: str(row.get("created_at") or ""))
        return parse_grocery_list(newest)

    def update(self, list_id: str, changes: dict[str, object]) -> GroceryList | None:
        row = self._merge(list_id, changes)
        return parse_grocery_list(row) if row else None


@dataclass
class InMemoryProgressRepository(_RowStore, ProgressRepository):
    """In-memory daily progress records."""

    def create(self, payload: dict[str, object]) -> UserProgress:
        return parse_progress(self._insert(payload))

    def get(self, progress_id: str) -> UserProgress | None:
        row = self.rows.get(progress_id)
        return parse_progress(row) if row else None

    def get_by_date(self, user_id: str, day: date) -> UserProgress | None:
        matches = self._where(user_id=user_id, date=day)
        return parse_progress(matches[0]) if matches else None

    def list_for_week(self, user_id: str, week_start: date) -> list[UserProgress]:
        return [parse_progress(row) for row in self._in_week(user_id, week_start)]

    def update(
        self, progress_id: str, changes: dict[str, object]
    ) -> UserProgress | None:
        row = self._merge(progress_id, changes)
        return parse_progress(row) if row else None
