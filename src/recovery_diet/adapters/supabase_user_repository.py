"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import uuid4

from supabase import Client

from recovery_diet.adapters.rows import parse_user, to_row
from recovery_diet.domain.models import User
from recovery_diet.services.users import UserRepository

TABLE = "users"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def create(self, payload: dict[str, object]) -> User:
        """Create a new user row and return it."""
        row = {"id": str(uuid4()), **to_row(payload)}
        response = self.client.table(TABLE).insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return parse_user(response.data[0])

    def get(self, user_id: str) -> User | None:
        """Return a user by id, if present."""
        response = (
            self.client.table(TABLE).select("*").eq("id", user_id).limit(1).execute()
        )
        if not response.data:
            return None
        return parse_user(response.data[0])

    def get_by_username(self, username: str) -> User | None:
        """Return a user by username, if present."""
        response = (
            self.client.table(TABLE)
            .select("*")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_user(response.data[0])

    def update(self, user_id: str, changes: dict[str, object]) -> User | None:
        """Patch a user row; None when no row matched."""
        response = (
            self.client.table(TABLE).update(to_row(changes)).eq("id", user_id).execute()
        )
        if not response.data:
            return None
        return parse_user(response.data[0])

    def delete_all(self) -> None:
        """Remove every user row."""
        self.client.table(TABLE).delete().neq("id", "").execute()
