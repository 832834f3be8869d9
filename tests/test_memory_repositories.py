"""Tests for the in-memory repositories."""

from datetime import date

import pytest

from recovery_diet.adapters.memory_repositories import (
    InMemoryFoodRepository,
    InMemoryGroceryListRepository,
    InMemoryMealPlanRepository,
    InMemoryProgressRepository,
    InMemoryRecipeRepository,
    InMemoryUserRepository,
)


@pytest.mark.parametrize(
    "repository",
    [
        InMemoryUserRepository(),
        InMemoryFoodRepository(),
        InMemoryRecipeRepository(),
        InMemoryMealPlanRepository(),
        InMemoryGroceryListRepository(),
        InMemoryProgressRepository(),
    ],
    ids=["users", "foods", "recipes", "meal_plans", "grocery_lists", "progress"],
)
def test_update_of_unknown_id_returns_none(repository) -> None:
    assert repository.update("missing", {"notes": "x"}) is None
    assert repository.rows == {}


def test_create_assigns_id_unless_supplied() -> None:
    repository = InMemoryMealPlanRepository()

    generated = repository.create(
        {"user_id": "user-1", "date": date(2024, 3, 15), "meals": [], "total_fat": 0}
    )
    fixed = repository.create(
        {
            "id": "plan-1",
            "user_id": "user-1",
            "date": date(2024, 3, 16),
            "meals": [],
            "total_fat": 0,
        }
    )

    assert generated.id
    assert fixed.id == "plan-1"
    assert repository.rows["plan-1"]["date"] == "2024-03-16"


def test_get_by_date_matches_user_and_day() -> None:
    repository = InMemoryProgressRepository()
    repository.create(
        {"user_id": "user-1", "date": date(2024, 3, 15), "fat_intake": 10, "recovery_day": 12}
    )

    assert repository.get_by_date("user-1", date(2024, 3, 15)) is not None
    assert repository.get_by_date("user-2", date(2024, 3, 15)) is None
    assert repository.get_by_date("user-1", date(2024, 3, 16)) is None


def test_update_merges_and_keeps_id() -> None:
    repository = InMemoryUserRepository()
    user = repository.create(
        {"username": "sam", "password_hash": "x", "name": "Sam", "surgery_date": None}
    )

    updated = repository.update(user.id, {"name": "Samuel", "id": "other"})

    assert updated.id == user.id
    assert updated.name == "Samuel"
    assert updated.username == "sam"


def test_recipe_tag_and_safety_filters() -> None:
    repository = InMemoryRecipeRepository()
    for name, tags, level in (
        ("Soup", ["lunch"], "safe"),
        ("Salmon", ["dinner"], "moderate"),
    ):
        repository.create(
            {
                "name": name,
                "instructions": "",
                "servings": 1,
                "total_fat_per_serving": 1.0,
                "safety_level": level,
                "ingredients": [],
                "tags": tags,
            }
        )

    assert [recipe.name for recipe in repository.list_by_tag("dinner")] == ["Salmon"]
    assert [recipe.name for recipe in repository.list_by_safety_level("safe")] == ["Soup"]


def test_delete_all_empties_store() -> None:
    repository = InMemoryFoodRepository()
    repository.rows["food-1"] = {"id": "food-1", "name": "Rice"}

    repository.delete_all()

    assert repository.list_all() == []


def test_food_and_recipe_updates_merge_fields() -> None:
    foods = InMemoryFoodRepository()
    foods.rows["food-1"] = {"id": "food-1", "name": "Rice", "fat_per_100g": 0.3}
    recipes = InMemoryRecipeRepository()
    recipes.rows["recipe-1"] = {"id": "recipe-1", "name": "Soup", "tags": ["lunch"]}

    food = foods.update("food-1", {"recovery_notes": "Easy to digest"})
    recipe = recipes.update("recipe-1", {"tags": ["lunch", "dinner"]})

    assert food.name == "Rice"
    assert food.recovery_notes == "Easy to digest"
    assert recipe.tags == ["lunch", "dinner"]


def test_active_grocery_list_is_the_newest() -> None:
    repository = InMemoryGroceryListRepository()
    for list_id, created_at in (
        ("older", "2024-03-08T09:00:00+00:00"),
        ("newer", "2024-03-15T09:00:00+00:00"),
        ("middle", "2024-03-10T09:00:00+00:00"),
    ):
        repository.create(
            {
                "id": list_id,
                "user_id": "user-1",
                "name": list_id,
                "week_start_date": date(2024, 3, 8),
                "items": [],
                "is_active": True,
                "created_at": created_at,
            }
        )

    assert repository.get_active("user-1").id == "newer"


def test_zero_fat_limit_is_kept() -> None:
    repository = InMemoryProgressRepository()
    repository.rows["progress-1"] = {
        "id": "progress-1",
        "user_id": "user-1",
        "date": "2024-03-15",
        "fat_intake": 0,
        "fat_limit": 0,
        "recovery_day": 1,
    }
    users = InMemoryUserRepository()
    users.rows["user-1"] = {
        "id": "user-1",
        "username": "sam",
        "password_hash": "x",
        "name": "Sam",
        "daily_fat_limit": 0,
    }

    assert repository.get("progress-1").fat_limit == 0
    assert users.get("user-1").daily_fat_limit == 0
    del users.rows["user-1"]["daily_fat_limit"]
    assert users.get("user-1").daily_fat_limit == 30
