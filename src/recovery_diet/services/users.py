"""User account and recovery services."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from recovery_diet.domain.models import User
from recovery_diet.domain.rules import (
    MealRecommendations,
    daily_fat_limit,
    meal_recommendations,
    recovery_day,
    recovery_stage,
)
from recovery_diet.security import hash_password, verify_password


class UserRepository(Protocol):
    """Persistence interface for user accounts."""

    def create(self, payload: dict[str, object]) -> User:
        """Create a user and return it."""

    def get(self, user_id: str) -> User | None:
        """Return a user by id, if present."""

    def get_by_username(self, username: str) -> User | None:
        """Return a user by username, if present."""

    def update(self, user_id: str, changes: dict[str, object]) -> User | None:
        """Merge changes into a user; None when the id is unknown."""

    def delete_all(self) -> None:
        """Remove every user."""


class UsernameTakenError(ValueError):
    """Raised when registering a username that already exists."""


@dataclass(frozen=True)
class RecoverySummary:
    """Where a user is in their recovery."""

    surgery_date: date | None
    recovery_day: int
    stage: str
    recommended_fat_limit: float
    daily_fat_limit: float
    recommendations: MealRecommendations


@dataclass
class UserService:
    """Application service for user accounts."""

    repository: UserRepository

    def get_user(self, user_id: str) -> User | None:
        return self.repository.get(user_id)

    def register(self, payload: dict[str, object]) -> User:
        """Create a user, storing only a hash of the password."""
        data = dict(payload)
        username = str(data["username"])
        if self.repository.get_by_username(username) is not None:
            raise UsernameTakenError(f"Username {username!r} is already taken")
        data["password_hash"] = hash_password(str(data.pop("password")))
        return self.repository.create(data)

    def update_user(self, user_id: str, changes: dict[str, object]) -> User | None:
        """Patch a user; a new password is hashed before storage.

        Raises UsernameTakenError when the new username belongs to another user.
        """
        data = dict(changes)
        if "username" in data:
            username = str(data["username"])
            owner = self.repository.get_by_username(username)
            if owner is not None and owner.id != user_id:
                raise UsernameTakenError(f"Username {username!r} is already taken")
        if "password" in data:
            data["password_hash"] = hash_password(str(data.pop("password")))
        return self.repository.update(user_id, data)

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the user when the credentials match."""
        user = self.repository.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user

    def recovery_summary(
        self, user_id: str, now: datetime | None = None
    ) -> RecoverySummary | None:
        """Return recovery day, stage, limits and guidance for a user."""
        user = self.repository.get(user_id)
        if user is None:
            return None
        day = recovery_day(user.surgery_date, now)
        return RecoverySummary(
            surgery_date=user.surgery_date,
            recovery_day=day,
            stage=recovery_stage(day),
            recommended_fat_limit=daily_fat_limit(day),
            daily_fat_limit=user.daily_fat_limit,
            recommendations=meal_recommendations(day),
        )
