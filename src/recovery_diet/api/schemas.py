"""Request and response models for the REST API.

JSON keys are camelCase; Python attributes stay snake_case. Responses are
built straight from the domain dataclasses.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from recovery_diet.domain.models import MealType, SafetyLevel


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class ApiModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatchModel(ApiModel):
    """Base for partial updates.

    Unknown fields are rejected. Fields default to None so omitted keys stay
    unset, but only fields typed as optional accept an explicit null.
    """

    model_config = ConfigDict(extra="forbid")


# --- Foods ---


class FoodCreate(ApiModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    fat_per_100g: float = Field(ge=0)
    calories_per_100g: int = Field(ge=0)
    protein_per_100g: float = Field(ge=0)
    carbs_per_100g: float = Field(ge=0)
    fiber_per_100g: float = Field(ge=0)
    serving_size: str
    serving_weight: int = Field(gt=0)
    safety_level: SafetyLevel | None = None
    description: str | None = None
    recovery_notes: str | None = None


class FoodOut(ApiModel):
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


# --- Recipes ---


class RecipeIngredientIn(ApiModel):
    food_id: str
    amount: float = Field(gt=0)
    unit: str = "g"


class RecipeCreate(ApiModel):
    name: str = Field(min_length=1)
    description: str | None = None
    instructions: str
    prep_time: int | None = Field(default=None, ge=0)
    cook_time: int | None = Field(default=None, ge=0)
    servings: int = Field(ge=1)
    ingredients: list[RecipeIngredientIn] = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)


class RecipeOut(ApiModel):
    id: str
    name: str
    description: str | None = None
    instructions: str
    prep_time: int | None = None
    cook_time: int | None = None
    servings: int
    total_fat_per_serving: float
    safety_level: SafetyLevel
    ingredients: list[RecipeIngredientIn]
    tags: list[str]


# --- Meal plans ---


class PlannedMealIn(ApiModel):
    type: MealType
    recipe_id: str | None = None
    custom_meal: str | None = None
    fat_content: float = Field(ge=0)


class MealPlanCreate(ApiModel):
    user_id: str = Field(min_length=1)
    date: dt.date
    meals: list[PlannedMealIn]
    total_fat: float | None = Field(default=None, ge=0)
    notes: str | None = None


class MealPlanUpdate(PatchModel):
    date: dt.date = None
    meals: list[PlannedMealIn] = None
    total_fat: float = Field(default=None, ge=0)
    notes: str | None = None


class MealPlanOut(ApiModel):
    id: str
    user_id: str
    date: dt.date
    meals: list[PlannedMealIn]
    total_fat: float
    notes: str | None = None


class MealPlanValidateRequest(ApiModel):
    user_id: str = Field(min_length=1)
    meals: list[PlannedMealIn]


class MealPlanCheckOut(ApiModel):
    is_valid: bool
    total_fat: float
    daily_limit: float
    warnings: list[str]


# --- Grocery lists ---


class GroceryItemIn(ApiModel):
    food_id: str
    quantity: float = Field(ge=0)
    unit: str
    category: str
    checked: bool = False


class GroceryListCreate(ApiModel):
    user_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    week_start_date: dt.date
    items: list[GroceryItemIn] = Field(default_factory=list)
    is_active: bool = True


class GroceryListUpdate(PatchModel):
    name: str = Field(default=None, min_length=1)
    week_start_date: dt.date = None
    items: list[GroceryItemIn] = None
    is_active: bool = None


class GroceryItemCheck(PatchModel):
    checked: bool


class GroceryListOut(ApiModel):
    id: str
    user_id: str
    name: str
    week_start_date: dt.date
    items: list[GroceryItemIn]
    is_active: bool
    created_at: dt.datetime | None = None


# --- Progress ---


class FoodEatenIn(ApiModel):
    food_id: str
    amount: float = Field(ge=0)
    meal_type: MealType


class ProgressCreate(ApiModel):
    user_id: str = Field(min_length=1)
    date: dt.date
    fat_intake: float = Field(ge=0)
    fat_limit: float = Field(default=30.0, gt=0)
    recovery_day: int = Field(ge=1)
    notes: str | None = None
    foods_eaten: list[FoodEatenIn] = Field(default_factory=list)


class ProgressUpdate(PatchModel):
    fat_intake: float = Field(default=None, ge=0)
    fat_limit: float = Field(default=None, gt=0)
    recovery_day: int = Field(default=None, ge=1)
    notes: str | None = None
    foods_eaten: list[FoodEatenIn] = None


class ProgressOut(ApiModel):
    id: str
    user_id: str
    date: dt.date
    fat_intake: float
    fat_limit: float
    recovery_day: int
    notes: str | None = None
    foods_eaten: list[FoodEatenIn]


class ProgressSummaryOut(ApiModel):
    date: dt.date
    fat_intake: float
    fat_limit: float
    progress_percentage: float
    is_safe: bool
    remaining_fat: float


# --- Users ---


class UserCreate(ApiModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=8)
    name: str = Field(min_length=1)
    surgery_date: dt.date | None = None
    daily_fat_limit: float = Field(default=30.0, gt=0)


class UserUpdate(PatchModel):
    username: str = Field(default=None, min_length=1)
    password: str = Field(default=None, min_length=8)
    name: str = Field(default=None, min_length=1)
    surgery_date: dt.date | None = None
    daily_fat_limit: float = Field(default=None, gt=0)


class UserOut(ApiModel):
    """Public view of a user; never carries the password hash."""

    id: str
    username: str
    name: str
    surgery_date: dt.date | None = None
    daily_fat_limit: float


class LoginRequest(ApiModel):
    username: str
    password: str


class MealRecommendationsOut(ApiModel):
    recommended: list[str]
    caution: list[str]
    avoid: list[str]


class RecoverySummaryOut(ApiModel):
    surgery_date: dt.date | None = None
    recovery_day: int
    stage: str
    recommended_fat_limit: float
    daily_fat_limit: float
    recommendations: MealRecommendationsOut
