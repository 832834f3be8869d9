"""Sample data loader.

``reseed`` wipes every repository and repopulates it. Foods and recipes go
through the services so safety levels and recipe fat are derived by the same
rules the API uses.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recovery_diet.containers import AppContainer

_logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "user-1"
SEED_DAY = date(2024, 3, 15)

_FOODS: list[dict[str, object]] = [
    {
        "id": "food-1",
        "name": "Chicken Breast",
        "category": "Proteins",
        "fat_per_100g": 3.6,
        "calories_per_100g": 165,
        "protein_per_100g": 31.0,
        "carbs_per_100g": 0.0,
        "fiber_per_100g": 0.0,
        "serving_size": "100g",
        "serving_weight": 100,
        "description": "Skinless, boneless chicken breast",
        "recovery_notes": "Excellent lean protein source for recovery",
    },
    {
        "id": "food-2",
        "name": "White Fish Fillet",
        "category": "Proteins",
        "fat_per_100g": 1.3,
        "calories_per_100g": 82,
        "protein_per_100g": 18.0,
        "carbs_per_100g": 0.0,
        "fiber_per_100g": 0.0,
        "serving_size": "100g",
        "serving_weight": 100,
        "description": "Cod, tilapia, or similar white fish",
        "recovery_notes": "Very low fat, easy to digest",
    },
    {
        "id": "food-3",
        "name": "Turkey Breast",
        "category": "Proteins",
        "fat_per_100g": 2.4,
        "calories_per_100g": 135,
        "protein_per_100g": 30.0,
        "carbs_per_100g": 0.0,
        "fiber_per_100g": 0.0,
        "serving_size": "85g",
        "serving_weight": 85,
        "description": "Skinless turkey breast",
        "recovery_notes": "Lean protein, remove all skin",
    },
    {
        "id": "food-4",
        "name": "Brown Rice",
        "category": "Grains",
        "fat_per_100g": 1.8,
        "calories_per_100g": 123,
        "protein_per_100g": 2.6,
        "carbs_per_100g": 25.0,
        "fiber_per_100g": 1.8,
        "serving_size": "1 cup cooked",
        "serving_weight": 195,
        "description": "Cooked brown rice",
        "recovery_notes": "Good source of fiber and energy",
    },
    {
        "id": "food-5",
        "name": "Sweet Potato",
        "category": "Vegetables",
        "fat_per_100g": 0.3,
        "calories_per_100g": 103,
        "protein_per_100g": 2.3,
        "carbs_per_100g": 24.0,
        "fiber_per_100g": 3.0,
        "serving_size": "1 medium",
        "serving_weight": 200,
        "description": "Baked sweet potato",
        "recovery_notes": "Rich in vitamins, very low fat",
    },
    {
        "id": "food-6",
        "name": "Broccoli",
        "category": "Vegetables",
        "fat_per_100g": 0.4,
        "calories_per_100g": 34,
        "protein_per_100g": 2.8,
        "carbs_per_100g": 7.0,
        "fiber_per_100g": 2.6,
        "serving_size": "1 cup",
        "serving_weight": 91,
        "description": "Steamed broccoli",
        "recovery_notes": "High in nutrients, very low fat",
    },
    {
        "id": "food-7",
        "name": "Green Beans",
        "category": "Vegetables",
        "fat_per_100g": 0.1,
        "calories_per_100g": 31,
        "protein_per_100g": 1.8,
        "carbs_per_100g": 7.0,
        "fiber_per_100g": 3.4,
        "serving_size": "1 cup",
        "serving_weight": 110,
        "description": "Steamed green beans",
        "recovery_notes": "Excellent low-fat vegetable",
    },
    {
        "id": "food-8",
        "name": "Oatmeal",
        "category": "Grains",
        "fat_per_100g": 6.9,
        "calories_per_100g": 379,
        "protein_per_100g": 13.2,
        "carbs_per_100g": 67.7,
        "fiber_per_100g": 10.1,
        "serving_size": "1/2 cup dry",
        "serving_weight": 40,
        "description": "Rolled oats, cooked with water",
        "recovery_notes": "Good breakfast option, use water not milk",
    },
    {
        "id": "food-9",
        "name": "Banana",
        "category": "Fruits",
        "fat_per_100g": 0.3,
        "calories_per_100g": 89,
        "protein_per_100g": 1.1,
        "carbs_per_100g": 23.0,
        "fiber_per_100g": 2.6,
        "serving_size": "1 medium",
        "serving_weight": 118,
        "description": "Fresh banana",
        "recovery_notes": "Easy to digest, good for potassium",
    },
    {
        "id": "food-10",
        "name": "Low-fat Greek Yogurt",
        "category": "Dairy",
        "fat_per_100g": 0.4,
        "calories_per_100g": 59,
        "protein_per_100g": 10.0,
        "carbs_per_100g": 3.6,
        "fiber_per_100g": 0.0,
        "serving_size": "1 cup",
        "serving_weight": 245,
        "description": "Plain, non-fat Greek yogurt",
        "recovery_notes": "Good protein source, choose non-fat versions",
    },
    {
        "id": "food-11",
        "name": "Salmon Fillet",
        "category": "Proteins",
        "fat_per_100g": 13.4,
        "calories_per_100g": 208,
        "protein_per_100g": 22.0,
        "carbs_per_100g": 0.0,
        "fiber_per_100g": 0.0,
        "serving_size": "85g",
        "serving_weight": 85,
        "description": "Atlantic salmon fillet",
        "recovery_notes": "Omega-3 rich but higher in fat, use small portions",
    },
    {
        "id": "food-12",
        "name": "Avocado",
        "category": "Fruits",
        "fat_per_100g": 29.5,
        "calories_per_100g": 322,
        "protein_per_100g": 4.0,
        "carbs_per_100g": 17.0,
        "fiber_per_100g": 10.0,
        "serving_size": "1 medium",
        "serving_weight": 200,
        "description": "Fresh avocado",
        "recovery_notes": "Very high fat content, avoid during early recovery",
    },
]

_RECIPES: list[dict[str, object]] = [
    {
        "id": "recipe-1",
        "name": "Grilled Chicken with Steamed Vegetables",
        "description": "Simple, recovery-friendly meal with lean protein and vegetables",
        "instructions": (
            "1. Season chicken breast with herbs and spices (no oil)\n"
            "2. Grill chicken on non-stick pan\n"
            "3. Steam broccoli and green beans\n"
            "4. Serve together"
        ),
        "prep_time": 10,
        "cook_time": 20,
        "servings": 1,
        "ingredients": [
            {"food_id": "food-1", "amount": 100, "unit": "g"},
            {"food_id": "food-6", "amount": 91, "unit": "g"},
            {"food_id": "food-7", "amount": 110, "unit": "g"},
        ],
        "tags": ["lunch", "dinner", "low-fat", "protein-rich"],
    },
    {
        "id": "recipe-2",
        "name": "Oatmeal with Banana",
        "description": "Nutritious breakfast perfect for recovery",
        "instructions": (
            "1. Cook oatmeal with water according to package directions\n"
            "2. Top with sliced banana\n"
            "3. Add a drizzle of honey if desired"
        ),
        "prep_time": 5,
        "cook_time": 5,
        "servings": 1,
        "ingredients": [
            {"food_id": "food-8", "amount": 40, "unit": "g"},
            {"food_id": "food-9", "amount": 80, "unit": "g"},
        ],
        "tags": ["breakfast", "low-fat", "fiber-rich"],
    },
    {
        "id": "recipe-3",
        "name": "Baked Cod with Sweet Potato",
        "description": "Low-fat fish dinner with nutritious sweet potato",
        "instructions": (
            "1. Bake cod fillet with herbs and lemon\n"
            "2. Bake sweet potato until tender\n"
            "3. Steam green beans\n"
            "4. Serve together"
        ),
        "prep_time": 15,
        "cook_time": 25,
        "servings": 1,
        "ingredients": [
            {"food_id": "food-2", "amount": 150, "unit": "g"},
            {"food_id": "food-5", "amount": 200, "unit": "g"},
            {"food_id": "food-7", "amount": 110, "unit": "g"},
        ],
        "tags": ["dinner", "low-fat", "omega-3"],
    },
    {
        "id": "recipe-4",
        "name": "Salmon with Brown Rice",
        "description": "Omega-3 dinner for later recovery, keep the portion small",
        "instructions": (
            "1. Bake salmon fillet on parchment without oil\n"
            "2. Cook brown rice\n"
            "3. Serve with lemon"
        ),
        "prep_time": 10,
        "cook_time": 30,
        "servings": 1,
        "ingredients": [
            {"food_id": "food-11", "amount": 85, "unit": "g"},
            {"food_id": "food-4", "amount": 195, "unit": "g"},
        ],
        "tags": ["dinner", "omega-3"],
    },
]

_GROCERY_ITEMS: list[dict[str, object]] = [
    {"food_id": "food-1", "quantity": 2, "unit": "lbs", "category": "Proteins"},
    {"food_id": "food-2", "quantity": 1, "unit": "lb", "category": "Proteins"},
    {"food_id": "food-10", "quantity": 1, "unit": "container", "category": "Dairy"},
    {"food_id": "food-6", "quantity": 2, "unit": "heads", "category": "Vegetables"},
    {"food_id": "food-7", "quantity": 1, "unit": "bag", "category": "Vegetables"},
    {"food_id": "food-5", "quantity": 3, "unit": "pieces", "category": "Vegetables"},
]


@dataclass(frozen=True)
class SeedSummary:
    """Counts of records written by a reseed."""

    users: int
    foods: int
    recipes: int
    meal_plans: int
    grocery_lists: int
    progress: int


def reseed(container: "AppContainer") -> SeedSummary:
    """Wipe every repository and load the sample data set."""
    _wipe(container)

    container.user_service.register(
        {
            "id": DEFAULT_USER_ID,
            "username": "sarah",
            "password": "password123",
            "name": "Sarah",
            "surgery_date": date(2024, 3, 3),
            "daily_fat_limit": 30.0,
        }
    )
    for food in _FOODS:
        container.food_service.create_food(food)
    recipes = [container.recipe_service.create_recipe(recipe) for recipe in _RECIPES]

    breakfast, lunch, dinner = recipes[1], recipes[0], recipes[2]
    container.meal_plan_service.create_plan(
        {
            "id": "mealplan-1",
            "user_id": DEFAULT_USER_ID,
            "date": SEED_DAY,
            "meals": [
                {
                    "type": meal_type,
                    "recipe_id": recipe.id,
                    "fat_content": recipe.total_fat_per_serving,
                }
                for meal_type, recipe in (
                    ("breakfast", breakfast),
                    ("lunch", lunch),
                    ("dinner", dinner),
                )
            ],
            "notes": "Good variety today, staying well under limit",
        }
    )
    container.progress_service.create_progress(
        {
            "id": "progress-1",
            "user_id": DEFAULT_USER_ID,
            "date": SEED_DAY,
            "fat_intake": 18.0,
            "fat_limit": 30.0,
            "recovery_day": 12,
            "notes": "Feeling good today",
            "foods_eaten": [
                {"food_id": "food-8", "amount": 40, "meal_type": "breakfast"},
                {"food_id": "food-9", "amount": 80, "meal_type": "breakfast"},
                {"food_id": "food-1", "amount": 100, "meal_type": "lunch"},
                {"food_id": "food-6", "amount": 91, "meal_type": "lunch"},
                {"food_id": "food-7", "amount": 110, "meal_type": "lunch"},
            ],
        }
    )
    container.grocery_list_service.create_list(
        {
            "id": "grocery-1",
            "user_id": DEFAULT_USER_ID,
            "name": "Week of March 15",
            "week_start_date": SEED_DAY,
            "items": [{**item, "checked": False} for item in _GROCERY_ITEMS],
            "is_active": True,
        }
    )

    summary = SeedSummary(
        users=1,
        foods=len(_FOODS),
        recipes=len(recipes),
        meal_plans=1,
        grocery_lists=1,
        progress=1,
    )
    _logger.info("Seeded sample data: %s", summary)
    return summary


def _wipe(container: "AppContainer") -> None:
    # Records that reference users, foods and recipes go first.
    container.progress_service.repository.delete_all()
    container.meal_plan_service.repository.delete_all()
    container.grocery_list_service.repository.delete_all()
    container.recipe_service.repository.delete_all()
    container.food_service.repository.delete_all()
    container.user_service.repository.delete_all()
