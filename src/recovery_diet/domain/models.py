"""Domain models for the recovery diet tracker."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

SafetyLevel = Literal["safe", "moderate", "avoid"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]


@dataclass(frozen=True)
class User:
    """Account holder; the surgery date anchors recovery-day math."""

    id: str
    username: str
    password_hash: str
    name: str
    surgery_date: date | None
    daily_fat_limit: float = 30.0


@dataclass(frozen=True)
class Food:
    """Reference food with nutrients per 100 g."""

    id: str
    name: str
    category: str
    fat_per_100g: float
    calories_per_100g: int
    protein_per_100g: float
    carbs_per_100g: float
    fiber_per_100g: float
    serving_size: str
    serving_weight: int
    safety_level: SafetyLevel
    description: str | None = None
    recovery_notes: str | None = None


@dataclass(frozen=True)
class RecipeIngredient:
    """Amount of a food used by a recipe."""

    food_id: str
    amount: float
    unit: str = "g"


@dataclass(frozen=True)
class Recipe:
    """Recipe with precomputed per-serving fat."""

    id: str
    name: str
    instructions: str
    servings: int
    total_fat_per_serving: float
    safety_level: SafetyLevel
    ingredients: list[RecipeIngredient]
    tags: list[str] = field(default_factory=list)
    description: str | None = None
    prep_time: int | None = None
    cook_time: int | None = None


@dataclass(frozen=True)
class PlannedMeal:
    """Single meal slot in a plan."""

    type: MealType
    fat_content: float
    recipe_id: str | None = None
    custom_meal: str | None = None


@dataclass(frozen=True)
class MealPlan:
    """Meals planned for one user on one day."""

    id: str
    user_id: str
    date: date
    meals: list[PlannedMeal]
    total_fat: float
    notes: str | None = None


@dataclass(frozen=True)
class GroceryItem:
    """Line on a grocery list."""

    food_id: str
    quantity: float
    unit: str
    category: str
    checked: bool = False


@dataclass(frozen=True)
class GroceryList:
    """Weekly grocery list."""

    id: str
    user_id: str
    name: str
    week_start_date: date
    items: list[GroceryItem]
    is_active: bool = True
    created_at: datetime | None = None


@dataclass(frozen=True)
class FoodEaten:
    """Food logged against a day of progress."""

    food_id: str
    amount: float
    meal_type: MealType


@dataclass(frozen=True)
class UserProgress:
    """Fat intake recorded for one user on one day."""

    id: str
    user_id: str
    date: date
    fat_intake: float
    recovery_day: int
    fat_limit: float = 30.0
    notes: str | None = None
    foods_eaten: list[FoodEaten] = field(default_factory=list)
