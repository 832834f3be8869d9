"""Food catalogue services."""

from dataclasses import dataclass
from typing import Protocol

from recovery_diet.domain.models import Food
from recovery_diet.domain.rules import (
    classify_serving,
    suggest_lower_fat_alternatives,
)

MIN_SEARCH_QUERY_LENGTH = 2
# Characters with meaning inside a PostgREST or-filter; dropped from queries.
SEARCH_RESERVED_CHARS = frozenset(",()*%")


class FoodRepository(Protocol):
    """Persistence interface for reference foods."""

    def create(self, payload: dict[str, object]) -> Food:
        """Create a food and return it."""

    def get(self, food_id: str) -> Food | None:
        """Return a food by id, if present."""

    def list_all(self) -> list[Food]:
        """Return every food."""

    def list_by_category(self, category: str) -> list[Food]:
        """Return foods in an exact category."""

    def search(self, query: str) -> list[Food]:
        """Return foods whose name, description or category contains the query."""

    def update(self, food_id: str, changes: dict[str, object]) -> Food | None:
        """Merge changes into a food; None when the id is unknown."""

    def delete_all(self) -> None:
        """Remove every food."""


@dataclass
class FoodService:
    """Application service for browsing the food catalogue."""

    repository: FoodRepository

    def list_foods(self) -> list[Food]:
        return self.repository.list_all()

    def get_food(self, food_id: str) -> Food | None:
        return self.repository.get(food_id)

    def list_by_category(self, category: str) -> list[Food]:
        return self.repository.list_by_category(category)

    def search(self, query: str) -> list[Food]:
        """Search foods; queries under two usable characters return nothing."""
        cleaned = "".join(
            char for char in query if char not in SEARCH_RESERVED_CHARS
        ).strip()
        if len(cleaned) < MIN_SEARCH_QUERY_LENGTH:
            return []
        return self.repository.search(cleaned)

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food, deriving its safety level when not supplied."""
        data = dict(payload)
        if not data.get("safety_level"):
            data["safety_level"] = classify_serving(
                float(data["fat_per_100g"]), float(data.get("serving_weight", 100))
            )
        return self.repository.create(data)

    def lower_fat_alternatives(self, food_id: str) -> list[Food] | None:
        """Return leaner foods from the same category, or None if unknown."""
        food = self.repository.get(food_id)
        if food is None:
            return None
        candidates = self.repository.list_by_category(food.category)
        return suggest_lower_fat_alternatives(food, candidates)

    def fat_lookup(self) -> dict[str, float]:
        """Return fat density per 100 g keyed by food id."""
        return {food.id: food.fat_per_100g for food in self.repository.list_all()}
