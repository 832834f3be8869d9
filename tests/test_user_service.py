"""Tests for user service."""

from datetime import UTC, date, datetime

import pytest

from recovery_diet.adapters.memory_repositories import InMemoryUserRepository
from recovery_diet.services.users import UsernameTakenError, UserService


def _register(service: UserService, **overrides) -> object:
    payload = {
        "username": "alex",
        "password": "correct horse",
        "name": "Alex",
        "surgery_date": date(2024, 3, 3),
    }
    payload.update(overrides)
    return service.register(payload)


def test_register_stores_hash_not_password() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository)

    user = _register(service)

    row = repository.rows[user.id]
    assert "password" not in row
    assert row["password_hash"] != "correct horse"
    assert row["password_hash"].startswith("$pbkdf2-sha256$")


def test_register_rejects_duplicate_username() -> None:
    service = UserService(InMemoryUserRepository())
    _register(service)

    with pytest.raises(UsernameTakenError):
        _register(service, name="Other")


def test_authenticate() -> None:
    service = UserService(InMemoryUserRepository())
    user = _register(service)

    assert service.authenticate("alex", "correct horse") == user
    assert service.authenticate("alex", "wrong") is None
    assert service.authenticate("nobody", "correct horse") is None


def test_update_user_rehashes_password() -> None:
    service = UserService(InMemoryUserRepository())
    user = _register(service)

    service.update_user(user.id, {"password": "new password"})

    assert service.authenticate("alex", "correct horse") is None
    assert service.authenticate("alex", "new password") is not None


def test_update_unknown_user_returns_none() -> None:
    service = UserService(InMemoryUserRepository())

    assert service.update_user("missing", {"name": "Nobody"}) is None


def test_recovery_summary_for_day_twelve() -> None:
    service = UserService(InMemoryUserRepository())
    user = _register(service)

    summary = service.recovery_summary(user.id, now=datetime(2024, 3, 15, tzinfo=UTC))

    assert summary.recovery_day == 12
    assert summary.stage == "Initial Recovery"
    assert summary.recommended_fat_limit == 20
    assert summary.daily_fat_limit == 30
    assert "Oatmeal" in summary.recommendations.recommended
    assert service.recovery_summary("missing") is None


def test_update_user_rejects_another_users_username() -> None:
    service = UserService(InMemoryUserRepository())
    _register(service)
    other = _register(service, username="robin", name="Robin")

    with pytest.raises(UsernameTakenError):
        service.update_user(other.id, {"username": "alex"})

    assert service.update_user(other.id, {"username": "robin"}).username == "robin"
    assert service.authenticate("alex", "correct horse").name == "Alex"
