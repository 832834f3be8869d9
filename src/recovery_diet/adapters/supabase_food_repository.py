"""Supabase implementation for the food catalogue."""

from dataclasses import dataclass
from uuid import uuid4

from supabase import Client

from recovery_diet.adapters.rows import parse_food, to_row
from recovery_diet.domain.models import Food
from recovery_diet.services.foods import SEARCH_RESERVED_CHARS, FoodRepository

TABLE = "foods"


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for reference foods."""

    client: Client

    def create(self, payload: dict[str, object]) -> Food:
        """Create a food row and return it."""
        row = {"id": str(uuid4()), **to_row(payload)}
        response = self.client.table(TABLE).insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return parse_food(response.data[0])

    def get(self, food_id: str) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table(TABLE).select("*").eq("id", food_id).limit(1).execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def list_all(self) -> list[Food]:
        """Return every food ordered by name."""
        response = self.client.table(TABLE).select("*").order("name").execute()
        return [parse_food(row) for row in response.data or []]

    def list_by_category(self, category: str) -> list[Food]:
        """Return foods in an exact category."""
        response = (
            self.client.table(TABLE).select("*").eq("category", category).execute()
        )
        return [parse_food(row) for row in response.data or []]

    def search(self, query: str) -> list[Food]:
        """Match the query against name, description and category."""
        escaped = _escape(query)
        if not escaped:
            return []
        pattern = f"%{escaped}%"
        response = (
            self.client.table(TABLE)
            .select("*")
            .or_(
                f"name.ilike.{pattern},"
                f"description.ilike.{pattern},"
                f"category.ilike.{pattern}"
            )
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def update(self, food_id: str, changes: dict[str, object]) -> Food | None:
        """Patch a food row; None when no row matched."""
        response = (
            self.client.table(TABLE).update(to_row(changes)).eq("id", food_id).execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def delete_all(self) -> None:
        """Remove every food row."""
        self.client.table(TABLE).delete().neq("id", "").execute()


def _escape(query: str) -> str:
    """Strip characters with meaning inside a PostgREST or-filter."""
    return "".join(char for char in query if char not in SEARCH_RESERVED_CHARS)
