"""Fat-safety and recovery rules shared by every layer.

Thresholds live here as named constants so the API, the services and the
seed data all classify foods the same way.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from decimal import ROUND_HALF_UP, Decimal

from recovery_diet.domain.models import (
    Food,
    PlannedMeal,
    RecipeIngredient,
    SafetyLevel,
)

SAFE_FAT_MAX_G = 5.0
MODERATE_FAT_MAX_G = 15.0

# Daily allowance schedule.
EARLY_RECOVERY_LAST_DAY = 28
MID_RECOVERY_LAST_DAY = 90
DAILY_FAT_LIMITS = {
    "early": 20.0,
    "mid": 30.0,
    "late": 40.0,
}

# Recommendation schedule; intentionally split differently from the limits.
FIRST_WEEK_LAST_DAY = 7
INITIAL_RECOVERY_LAST_DAY = 28

SAFE_INTAKE_RATIO = 0.8
HIGH_FAT_MEAL_G = 10.0

GROCERY_CATEGORIES = ("Proteins", "Vegetables", "Fruits", "Grains", "Dairy", "Other")
FALLBACK_CATEGORY = "Other"
MAX_ALTERNATIVES = 3

_SECONDS_PER_DAY = 86400
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class MealRecommendations:
    """Food guidance for a recovery day."""

    recommended: tuple[str, ...]
    caution: tuple[str, ...]
    avoid: tuple[str, ...]


@dataclass(frozen=True)
class MealPlanCheck:
    """Outcome of checking planned meals against a daily limit."""

    is_valid: bool
    total_fat: float
    warnings: list[str]


_FIRST_WEEK = MealRecommendations(
    recommended=(
        "Clear broths",
        "Plain rice",
        "Bananas",
        "Toast",
        "Lean chicken breast",
    ),
    caution=("Small amounts of dairy", "Cooked vegetables", "White fish"),
    avoid=("Fried foods", "High-fat dairy", "Nuts", "Red meat", "Chocolate"),
)
_INITIAL_RECOVERY = MealRecommendations(
    recommended=(
        "Lean proteins",
        "Steamed vegetables",
        "Brown rice",
        "Oatmeal",
        "Fresh fruits",
    ),
    caution=("Low-fat dairy", "Olive oil (small amounts)", "Eggs", "Salmon"),
    avoid=(
        "Fried foods",
        "High-fat meats",
        "Nuts",
        "Avocado",
        "Cream-based sauces",
    ),
)
_LATER_RECOVERY = MealRecommendations(
    recommended=(
        "Varied lean proteins",
        "All vegetables",
        "Whole grains",
        "Most fruits",
    ),
    caution=(
        "Moderate fat foods",
        "Nuts in small amounts",
        "Full-fat dairy occasionally",
    ),
    avoid=("Deep fried foods", "Very high fat meals", "Excessive portions"),
)


def classify_fat(fat_g: float) -> SafetyLevel:
    """Return the safety tier for grams of fat in one serving."""
    if fat_g <= SAFE_FAT_MAX_G:
        return "safe"
    if fat_g <= MODERATE_FAT_MAX_G:
        return "moderate"
    return "avoid"


def fat_per_serving(fat_per_100g: float, serving_weight: float = 100) -> float:
    """Convert a per-100 g fat density to grams for a serving weight."""
    return fat_per_100g * serving_weight / 100


def classify_serving(fat_per_100g: float, serving_weight: float = 100) -> SafetyLevel:
    """Return the safety tier for a food given its density and serving weight."""
    return classify_fat(fat_per_serving(fat_per_100g, serving_weight))


def recipe_total_fat(
    ingredients: Iterable[RecipeIngredient], fat_lookup: Mapping[str, float]
) -> float:
    """Sum ingredient fat; ingredients with unknown foods are skipped."""
    return math.fsum(
        fat_lookup[ingredient.food_id] * ingredient.amount / 100
        for ingredient in ingredients
        if ingredient.food_id in fat_lookup
    )


def recipe_fat_per_serving(
    ingredients: Iterable[RecipeIngredient],
    fat_lookup: Mapping[str, float],
    servings: int,
) -> float:
    """Return per-serving fat rounded half-up to two decimals."""
    if servings <= 0:
        raise ValueError("servings must be a positive integer")
    total = recipe_total_fat(ingredients, fat_lookup)
    return round_half_up(total / servings)


def round_half_up(value: float) -> float:
    """Round to two decimals, ties away from zero."""
    return float(Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def recovery_day(surgery_date: date | None, now: datetime | None = None) -> int:
    """Return whole days since surgery, rounded up, never below 1."""
    if surgery_date is None:
        return 1
    current = now or datetime.now(tz=UTC)
    if current.tzinfo is None:
        current = current.replace(tzinfo=UTC)
    surgery = datetime.combine(surgery_date, time.min, tzinfo=UTC)
    elapsed = abs((current - surgery).total_seconds())
    return max(math.ceil(elapsed / _SECONDS_PER_DAY), 1)


def daily_fat_limit(day: int) -> float:
    """Return the daily fat allowance in grams for a recovery day."""
    if day <= EARLY_RECOVERY_LAST_DAY:
        return DAILY_FAT_LIMITS["early"]
    if day <= MID_RECOVERY_LAST_DAY:
        return DAILY_FAT_LIMITS["mid"]
    return DAILY_FAT_LIMITS["late"]


def meal_recommendations(day: int) -> MealRecommendations:
    """Return food guidance for a recovery day."""
    if day <= FIRST_WEEK_LAST_DAY:
        return _FIRST_WEEK
    if day <= INITIAL_RECOVERY_LAST_DAY:
        return _INITIAL_RECOVERY
    return _LATER_RECOVERY


def recovery_stage(day: int) -> str:
    """Return the display label for a recovery day."""
    if day <= FIRST_WEEK_LAST_DAY:
        return "Early Recovery"
    if day <= INITIAL_RECOVERY_LAST_DAY:
        return "Initial Recovery"
    if day <= MID_RECOVERY_LAST_DAY:
        return "Mid Recovery"
    return "Late Recovery"


def fat_progress(intake_g: float, limit_g: float) -> float:
    """Return intake as a percentage of the limit, capped at 100."""
    if limit_g <= 0:
        raise ValueError("daily fat limit must be positive")
    return min(intake_g / limit_g * 100, 100.0)


def is_fat_intake_safe(intake_g: float, limit_g: float) -> bool:
    """Intake is safe while it stays within 80% of the limit."""
    return intake_g <= limit_g * SAFE_INTAKE_RATIO


def validate_meal_plan(meals: Iterable[PlannedMeal], daily_limit: float) -> MealPlanCheck:
    """Check planned meals against a daily fat limit."""
    total = 0.0
    warnings: list[str] = []
    for meal in meals:
        total += meal.fat_content
        if meal.fat_content > HIGH_FAT_MEAL_G:
            warnings.append(
                f"{meal.type} contains high fat content ({_grams(meal.fat_content)}g)"
            )

    if total > daily_limit * SAFE_INTAKE_RATIO:
        warnings.append(
            f"Total fat intake ({_grams(total)}g) is approaching daily limit "
            f"({_grams(daily_limit)}g)"
        )

    return MealPlanCheck(
        is_valid=total <= daily_limit,
        total_fat=round_half_up(total),
        warnings=warnings,
    )


def categorize_grocery_items(foods: Iterable[Food]) -> dict[str, list[Food]]:
    """Group foods into display categories, dropping empty ones."""
    buckets: dict[str, list[Food]] = {name: [] for name in GROCERY_CATEGORIES}
    for food in foods:
        category = food.category[:1].upper() + food.category[1:]
        buckets.get(category, buckets[FALLBACK_CATEGORY]).append(food)
    return {name: items for name, items in buckets.items() if items}


def suggest_lower_fat_alternatives(
    food: Food, foods: Iterable[Food], limit: int = MAX_ALTERNATIVES
) -> list[Food]:
    """Return leaner foods from the same category, leanest first."""
    candidates = [
        other
        for other in foods
        if other.category == food.category
        and other.id != food.id
        and other.fat_per_100g < food.fat_per_100g
    ]
    return sort_foods_by_fat(candidates)[:limit]


def sort_foods_by_fat(foods: Iterable[Food]) -> list[Food]:
    return sorted(foods, key=lambda food: food.fat_per_100g)


def filter_by_safety(foods: Iterable[Food], level: SafetyLevel) -> list[Food]:
    return [food for food in foods if food.safety_level == level]


def estimate_calories(food: Food) -> int:
    """Estimate kcal per 100 g from macros (9/4/4 per gram)."""
    return round(
        food.fat_per_100g * 9 + food.protein_per_100g * 4 + food.carbs_per_100g * 4
    )


def _grams(value: float) -> str:
    number = float(value)
    return str(int(number)) if number.is_integer() else repr(number)
