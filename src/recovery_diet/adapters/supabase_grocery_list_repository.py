"""Supabase implementation for grocery lists."""

from dataclasses import dataclass
from uuid import uuid4

from supabase import Client

from recovery_diet.adapters.rows import parse_grocery_list, to_row
from recovery_diet.domain.models import GroceryList
from recovery_diet.services.grocery import GroceryListRepository

TABLE = "grocery_lists"


@dataclass
class SupabaseGroceryListRepository(GroceryListRepository):
    """Supabase-backed repository for grocery lists."""

    client: Client

    def create(self, payload: dict[str, object]) -> GroceryList:
        """Create a grocery list row and return it."""
        row = {"id": str(uuid4()), **to_row(payload)}
        response = self.client.table(TABLE).insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create grocery list")
        return parse_grocery_list(response.data[0])

    def get(self, list_id: str) -> GroceryList | None:
        """Return a grocery list by id, if present."""
        response = (
            self.client.table(TABLE).select("*").eq("id", list_id).limit(1).execute()
        )
        if not response.data:
            return None
        return parse_grocery_list(response.data[0])

    def get_active(self, user_id: str) -> GroceryList | None:
        """Return the user's most recent active list, if any."""
        response = (
            self.client.table(TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("is_active", True)
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_grocery_list(response.data[0])

    def update(self, list_id: str, changes: dict[str, object]) -> GroceryList | None:
        """Patch a grocery list row; None when no row matched."""
        response = (
            self.client.table(TABLE).update(to_row(changes)).eq("id", list_id).execute()
        )
        if not response.data:
            return None
        return parse_grocery_list(response.data[0])

    def delete_all(self) -> None:
        """Remove every grocery list row."""
        self.client.table(TABLE).delete().neq("id", "").execute()
