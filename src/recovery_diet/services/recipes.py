"""Recipe services."""

from dataclasses import dataclass
from typing import Protocol

from recovery_diet.domain.models import Recipe, RecipeIngredient
from recovery_diet.domain.rules import classify_fat, recipe_fat_per_serving
from recovery_diet.services.foods import FoodService


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe and return it."""

    def get(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""

    def list_all(self) -> list[Recipe]:
        """Return every recipe."""

    def list_by_tag(self, tag: str) -> list[Recipe]:
        """Return recipes carrying a tag."""

    def list_by_safety_level(self, level: str) -> list[Recipe]:
        """Return recipes with the given safety level."""

    def update(self, recipe_id: str, changes: dict[str, object]) -> Recipe | None:
        """Merge changes into a recipe; None when the id is unknown."""

    def delete_all(self) -> None:
        """Remove every recipe."""


@dataclass
class RecipeService:
    """Application service for recipes."""

    repository: RecipeRepository
    food_service: FoodService

    def list_recipes(self) -> list[Recipe]:
        return self.repository.list_all()

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        return self.repository.get(recipe_id)

    def list_safe(self) -> list[Recipe]:
        return self.repository.list_by_safety_level("safe")

    def list_by_tag(self, tag: str) -> list[Recipe]:
        return self.repository.list_by_tag(tag)

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe with fat per serving computed from its ingredients."""
        data = dict(payload)
        ingredients = [
            RecipeIngredient(
                food_id=str(item["food_id"]),
                amount=float(item["amount"]),
                unit=str(item.get("unit", "g")),
            )
            for item in data.get("ingredients", [])
        ]
        fat = recipe_fat_per_serving(
            ingredients, self.food_service.fat_lookup(), int(data["servings"])
        )
        data["total_fat_per_serving"] = fat
        data["safety_level"] = classify_fat(fat)
        return self.repository.create(data)
