"""Grocery list services."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from recovery_diet.domain.models import Food, GroceryList
from recovery_diet.domain.rules import categorize_grocery_items
from recovery_diet.services.foods import FoodService


class GroceryListRepository(Protocol):
    """Persistence interface for grocery lists."""

    def create(self, payload: dict[str, object]) -> GroceryList:
        """Create a grocery list and return it."""

    def get(self, list_id: str) -> GroceryList | None:
        """Return a grocery list by id, if present."""

    def get_active(self, user_id: str) -> GroceryList | None:
        """Return the user's active list, if any."""

    def update(self, list_id: str, changes: dict[str, object]) -> GroceryList | None:
        """Merge changes into a list; None when the id is unknown."""

    def delete_all(self) -> None:
        """Remove every grocery list."""


@dataclass
class GroceryListService:
    """Application service for grocery lists."""

    repository: GroceryListRepository
    food_service: FoodService

    def get_active(self, user_id: str) -> GroceryList | None:
        return self.repository.get_active(user_id)

    def get_list(self, list_id: str) -> GroceryList | None:
        return self.repository.get(list_id)

    def create_list(self, payload: dict[str, object]) -> GroceryList:
        data = dict(payload)
        data.setdefault("created_at", datetime.now(tz=UTC))
        return self.repository.create(data)

    def update_list(
        self, list_id: str, changes: dict[str, object]
    ) -> GroceryList | None:
        return self.repository.update(list_id, changes)

    def set_item_checked(
        self, list_id: str, index: int, checked: bool
    ) -> GroceryList | None:
        """Set one item's checked flag, leaving every other item untouched."""
        grocery_list = self.repository.get(list_id)
        if grocery_list is None or not 0 <= index < len(grocery_list.items):
            return None
        items = [
            replace(item, checked=checked) if position == index else item
            for position, item in enumerate(grocery_list.items)
        ]
        return self.repository.update(list_id, {"items": items})

    def categorize(self, list_id: str) -> dict[str, list[Food]] | None:
        """Group the foods on a list into display categories."""
        grocery_list = self.repository.get(list_id)
        if grocery_list is None:
            return None
        foods = []
        for item in grocery_list.items:
            food = self.food_service.get_food(item.food_id)
            if food is not None:
                foods.append(food)
        return categorize_grocery_items(foods)
