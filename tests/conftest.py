"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from recovery_diet.api.app import create_app
from recovery_diet.config import Settings
from recovery_diet.containers import AppContainer, build_container
from recovery_diet.seed import reseed


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        storage_backend="memory",
        seed_on_startup=False,
        environment="test",
    )


@pytest.fixture
def empty_container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def container(empty_container: AppContainer) -> AppContainer:
    """Container backed by in-memory storage loaded with the sample data."""
    reseed(empty_container)
    return empty_container


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
