"""Tests for the recovery diet rules."""

import random
from datetime import UTC, date, datetime

import pytest

from recovery_diet.domain.models import Food, PlannedMeal, RecipeIngredient
from recovery_diet.domain.rules import (
    categorize_grocery_items,
    classify_fat,
    classify_serving,
    daily_fat_limit,
    estimate_calories,
    fat_progress,
    filter_by_safety,
    is_fat_intake_safe,
    meal_recommendations,
    recipe_fat_per_serving,
    recipe_total_fat,
    recovery_day,
    recovery_stage,
    round_half_up,
    sort_foods_by_fat,
    suggest_lower_fat_alternatives,
    validate_meal_plan,
)


def _food(food_id: str, category: str, fat: float, **overrides) -> Food:
    values = {
        "id": food_id,
        "name": food_id.title(),
        "category": category,
        "fat_per_100g": fat,
        "calories_per_100g": 100,
        "protein_per_100g": 10.0,
        "carbs_per_100g": 5.0,
        "fiber_per_100g": 0.0,
        "serving_size": "100g",
        "serving_weight": 100,
        "safety_level": classify_fat(fat),
    }
    values.update(overrides)
    return Food(**values)


@pytest.mark.parametrize(
    ("fat", "expected"),
    [
        (0.0, "safe"),
        (5.0, "safe"),
        (5.01, "moderate"),
        (15.0, "moderate"),
        (15.01, "avoid"),
    ],
)
def test_classify_fat_boundaries(fat: float, expected: str) -> None:
    assert classify_fat(fat) == expected


def test_classify_serving_uses_serving_weight() -> None:
    assert classify_serving(3.6) == "safe"
    assert classify_serving(13.4, 85) == "moderate"
    assert classify_serving(29.5, 200) == "avoid"


def test_recipe_fat_for_single_ingredient() -> None:
    ingredients = [RecipeIngredient(food_id="salmon", amount=100)]

    fat = recipe_fat_per_serving(ingredients, {"salmon": 13.4}, servings=1)

    assert fat == 13.4
    assert classify_fat(fat) == "moderate"


def test_recipe_fat_divides_by_servings_and_rounds_half_up() -> None:
    ingredients = [RecipeIngredient(food_id="oil", amount=10.5)]

    assert recipe_fat_per_serving(ingredients, {"oil": 100.0}, servings=2) == 5.25
    assert round_half_up(0.125) == 0.13
    assert round_half_up(2.675) == 2.68


def test_recipe_fat_skips_unknown_foods() -> None:
    ingredients = [
        RecipeIngredient(food_id="rice", amount=200),
        RecipeIngredient(food_id="missing", amount=500),
    ]

    assert recipe_total_fat(ingredients, {"rice": 1.8}) == pytest.approx(3.6)


def test_recipe_total_fat_is_order_independent() -> None:
    lookup = {"a": 3.6, "b": 0.4, "c": 0.1, "d": 13.4}
    ingredients = [
        RecipeIngredient(food_id=food_id, amount=amount)
        for food_id, amount in (("a", 100), ("b", 91), ("c", 110), ("d", 85))
    ]
    shuffled = list(ingredients)
    random.Random(7).shuffle(shuffled)

    assert recipe_total_fat(ingredients, lookup) == recipe_total_fat(shuffled, lookup)


def test_recipe_fat_rejects_non_positive_servings() -> None:
    with pytest.raises(ValueError):
        recipe_fat_per_serving([], {}, servings=0)


def test_recovery_day_rounds_up_partial_days() -> None:
    now = datetime(2024, 3, 15, 6, tzinfo=UTC)

    assert recovery_day(date(2024, 3, 3), now) == 13
    assert recovery_day(date(2024, 3, 3), datetime(2024, 3, 15, tzinfo=UTC)) == 12


def test_recovery_day_never_below_one() -> None:
    now = datetime(2024, 3, 3, tzinfo=UTC)

    assert recovery_day(date(2024, 3, 3), now) == 1
    assert recovery_day(None, now) == 1


def test_recovery_day_accepts_naive_now() -> None:
    assert recovery_day(date(2024, 3, 3), datetime(2024, 3, 5)) == 2


@pytest.mark.parametrize(
    ("day", "expected"),
    [(1, 20.0), (28, 20.0), (29, 30.0), (90, 30.0), (91, 40.0)],
)
def test_daily_fat_limit_schedule(day: int, expected: float) -> None:
    assert daily_fat_limit(day) == expected


def test_meal_recommendations_change_at_week_one_and_day_28() -> None:
    assert "Clear broths" in meal_recommendations(7).recommended
    assert "Oatmeal" in meal_recommendations(8).recommended
    assert "Avocado" in meal_recommendations(28).avoid
    assert "Whole grains" in meal_recommendations(29).recommended


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (7, "Early Recovery"),
        (8, "Initial Recovery"),
        (28, "Initial Recovery"),
        (29, "Mid Recovery"),
        (90, "Mid Recovery"),
        (91, "Late Recovery"),
    ],
)
def test_recovery_stage_labels(day: int, expected: str) -> None:
    assert recovery_stage(day) == expected


def test_fat_progress_is_clamped() -> None:
    assert fat_progress(0, 30) == 0
    assert fat_progress(15, 30) == 50
    assert fat_progress(30, 30) == 100
    assert fat_progress(60, 30) == 100


def test_fat_progress_rejects_zero_limit() -> None:
    with pytest.raises(ValueError):
        fat_progress(10, 0)


def test_is_fat_intake_safe_uses_eighty_percent() -> None:
    assert is_fat_intake_safe(24, 30)
    assert not is_fat_intake_safe(24.5, 30)


def test_validate_meal_plan_within_limit_has_no_warnings() -> None:
    meals = [
        PlannedMeal(type="breakfast", fat_content=3.0),
        PlannedMeal(type="lunch", fat_content=4.07),
        PlannedMeal(type="dinner", fat_content=2.66),
    ]

    check = validate_meal_plan(meals, 30)

    assert check.is_valid
    assert check.total_fat == 9.73
    assert check.warnings == []


def test_validate_meal_plan_flags_high_fat_meals_and_total() -> None:
    meals = [
        PlannedMeal(type="lunch", fat_content=12.5),
        PlannedMeal(type="dinner", fat_content=14),
    ]

    check = validate_meal_plan(meals, 30)

    assert check.is_valid
    assert check.warnings == [
        "lunch contains high fat content (12.5g)",
        "dinner contains high fat content (14g)",
        "Total fat intake (26.5g) is approaching daily limit (30g)",
    ]


def test_validate_meal_plan_over_limit_is_invalid() -> None:
    check = validate_meal_plan([PlannedMeal(type="dinner", fat_content=31)], 30)

    assert not check.is_valid


def test_categorize_grocery_items_keeps_order_and_drops_empty() -> None:
    foods = [
        _food("yogurt", "dairy", 0.4),
        _food("chicken", "Proteins", 3.6),
        _food("mystery", "protein", 1.0),
    ]

    categories = categorize_grocery_items(foods)

    assert list(categories) == ["Proteins", "Dairy", "Other"]
    assert [food.id for food in categories["Other"]] == ["mystery"]


def test_suggest_lower_fat_alternatives_same_category_leanest_first() -> None:
    salmon = _food("salmon", "Proteins", 13.4)
    foods = [
        salmon,
        _food("chicken", "Proteins", 3.6),
        _food("cod", "Proteins", 1.3),
        _food("turkey", "Proteins", 2.4),
        _food("tofu", "Proteins", 4.8),
        _food("rice", "Grains", 0.3),
    ]

    alternatives = suggest_lower_fat_alternatives(salmon, foods)

    assert [food.id for food in alternatives] == ["cod", "turkey", "chicken"]


def test_sort_and_filter_helpers() -> None:
    foods = [_food("b", "Fruits", 29.5), _food("a", "Fruits", 0.3)]

    assert [food.id for food in sort_foods_by_fat(foods)] == ["a", "b"]
    assert [food.id for food in filter_by_safety(foods, "avoid")] == ["b"]


def test_estimate_calories_from_macros() -> None:
    food = _food(
        "chicken",
        "Proteins",
        3.6,
        protein_per_100g=31.0,
        carbs_per_100g=0.0,
    )

    assert estimate_calories(food) == 156


def test_meal_plan_warnings_print_full_amounts() -> None:
    check = validate_meal_plan([PlannedMeal(type="dinner", fat_content=1234567.5)], 30)

    assert check.warnings == [
        "dinner contains high fat content (1234567.5g)",
        "Total fat intake (1234567.5g) is approaching daily limit (30g)",
    ]
