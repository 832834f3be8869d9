"""Supabase implementation for recipes."""

import json
from dataclasses import dataclass
from uuid import uuid4

from supabase import Client

from recovery_diet.adapters.rows import parse_recipe, to_row
from recovery_diet.domain.models import Recipe
from recovery_diet.services.recipes import RecipeRepository

TABLE = "recipes"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes."""

    client: Client

    def create(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe row and return it."""
        row = {"id": str(uuid4()), **to_row(payload)}
        response = self.client.table(TABLE).insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return parse_recipe(response.data[0])

    def get(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table(TABLE).select("*").eq("id", recipe_id).limit(1).execute()
        )
        if not response.data:
            return None
        return parse_recipe(response.data[0])

    def list_all(self) -> list[Recipe]:
        """Return every recipe."""
        response = self.client.table(TABLE).select("*").order("name").execute()
        return [parse_recipe(row) for row in response.data or []]

    def list_by_tag(self, tag: str) -> list[Recipe]:
        """Return recipes whose jsonb tags array contains the tag."""
        response = (
            self.client.table(TABLE)
            .select("*")
            .contains("tags", json.dumps([tag]))
            .execute()
        )
        return [parse_recipe(row) for row in response.data or []]

    def list_by_safety_level(self, level: str) -> list[Recipe]:
        """Return recipes with the given safety level."""
        response = (
            self.client.table(TABLE).select("*").eq("safety_level", level).execute()
        )
        return [parse_recipe(row) for row in response.data or []]

    def update(self, recipe_id: str, changes: dict[str, object]) -> Recipe | None:
        """Patch a recipe row; None when no row matched."""
        response = (
            self.client.table(TABLE)
            .update(to_row(changes))
            .eq("id", recipe_id)
            .execute()
        )
        if not response.data:
            return None
        return parse_recipe(response.data[0])

    def delete_all(self) -> None:
        """Remove every recipe row."""
        self.client.table(TABLE).delete().neq("id", "").execute()
