"""Row conversion shared by the storage adapters.

Rows are plain dicts keyed by column name, with dates as ISO strings and
nested lists as JSON-ready dicts, matching the ``jsonb`` columns in Postgres.
"""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime

from recovery_diet.domain.models import (
    Food,
    FoodEaten,
    GroceryItem,
    GroceryList,
    MealPlan,
    PlannedMeal,
    Recipe,
    RecipeIngredient,
    User,
    UserProgress,
)


def to_row(payload: dict[str, object]) -> dict[str, object]:
    """Convert a service payload into a storable row."""
    return {key: _to_column(value) for key, value in payload.items()}


def _to_column(value: object) -> object:
    if isinstance(value, datetime | date):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, list):
        return [_to_column(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_column(item) for key, item in value.items()}
    return value


def _parse_date(raw: object) -> date | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw)[:10])


def _parse_datetime(raw: object) -> datetime | None:
    if isinstance(raw, datetime):
        return raw
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def _optional_int(raw: object) -> int | None:
    return int(raw) if raw is not None else None


def _float_or(raw: object, default: float) -> float:
    return float(raw) if raw is not None else default


def parse_user(row: dict[str, object]) -> User:
    return User(
        id=str(row["id"]),
        username=str(row["username"]),
        password_hash=str(row.get("password_hash", "")),
        name=str(row.get("name", "")),
        surgery_date=_parse_date(row.get("surgery_date")),
        daily_fat_limit=_float_or(row.get("daily_fat_limit"), 30.0),
    )


def parse_food(row: dict[str, object]) -> Food:
    return Food(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        fat_per_100g=float(row.get("fat_per_100g", 0.0)),
        calories_per_100g=int(row.get("calories_per_100g", 0)),
        protein_per_100g=float(row.get("protein_per_100g", 0.0)),
        carbs_per_100g=float(row.get("carbs_per_100g", 0.0)),
        fiber_per_100g=float(row.get("fiber_per_100g", 0.0)),
        serving_size=str(row.get("serving_size", "")),
        serving_weight=int(row.get("serving_weight", 100)),
        safety_level=row.get("safety_level", "safe"),
        description=row.get("description"),
        recovery_notes=row.get("recovery_notes"),
    )


def parse_recipe(row: dict[str, object]) -> Recipe:
    return Recipe(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        instructions=str(row.get("instructions", "")),
        servings=int(row.get("servings", 1)),
        total_fat_per_serving=float(row.get("total_fat_per_serving", 0.0)),
        safety_level=row.get("safety_level", "safe"),
        ingredients=[
            RecipeIngredient(
                food_id=str(item["food_id"]),
                amount=float(item.get("amount", 0.0)),
                unit=str(item.get("unit", "g")),
            )
            for item in row.get("ingredients") or []
        ],
        tags=[str(tag) for tag in row.get("tags") or []],
        description=row.get("description"),
        prep_time=_optional_int(row.get("prep_time")),
        cook_time=_optional_int(row.get("cook_time")),
    )


def parse_meal_plan(row: dict[str, object]) -> MealPlan:
    return MealPlan(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        date=_parse_date(row["date"]),
        meals=[
            PlannedMeal(
                type=meal["type"],
                fat_content=float(meal.get("fat_content", 0.0)),
                recipe_id=meal.get("recipe_id"),
                custom_meal=meal.get("custom_meal"),
            )
            for meal in row.get("meals") or []
        ],
        total_fat=float(row.get("total_fat", 0.0)),
        notes=row.get("notes"),
    )


def parse_grocery_list(row: dict[str, object]) -> GroceryList:
    return GroceryList(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        name=str(row.get("name", "")),
        week_start_date=_parse_date(row["week_start_date"]),
        items=[
            GroceryItem(
                food_id=str(item["food_id"]),
                quantity=float(item.get("quantity", 0)),
                unit=str(item.get("unit", "")),
                category=str(item.get("category", "")),
                checked=bool(item.get("checked", False)),
            )
            for item in row.get("items") or []
        ],
        is_active=bool(row.get("is_active", True)),
        created_at=_parse_datetime(row.get("created_at")),
    )


def parse_progress(row: dict[str, object]) -> UserProgress:
    return UserProgress(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        date=_parse_date(row["date"]),
        fat_intake=float(row.get("fat_intake", 0.0)),
        recovery_day=int(row.get("recovery_day", 1)),
        fat_limit=_float_or(row.get("fat_limit"), 30.0),
        notes=row.get("notes"),
        foods_eaten=[
            FoodEaten(
                food_id=str(item["food_id"]),
                amount=float(item.get("amount", 0.0)),
                meal_type=item["meal_type"],
            )
            for item in row.get("foods_eaten") or []
        ],
    )
