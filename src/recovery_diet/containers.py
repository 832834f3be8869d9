"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from supabase import create_client

from recovery_diet.adapters.memory_repositories import (
    InMemoryFoodRepository,
    InMemoryGroceryListRepository,
    InMemoryMealPlanRepository,
    InMemoryProgressRepository,
    InMemoryRecipeRepository,
    InMemoryUserRepository,
)
from recovery_diet.adapters.supabase_food_repository import SupabaseFoodRepository
from recovery_diet.adapters.supabase_grocery_list_repository import (
    SupabaseGroceryListRepository,
)
from recovery_diet.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from recovery_diet.adapters.supabase_progress_repository import (
    SupabaseProgressRepository,
)
from recovery_diet.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from recovery_diet.adapters.supabase_user_repository import SupabaseUserRepository
from recovery_diet.config import STORAGE_BACKENDS, Settings
from recovery_diet.services.foods import FoodRepository, FoodService
from recovery_diet.services.grocery import GroceryListRepository, GroceryListService
from recovery_diet.services.meal_plans import MealPlanRepository, MealPlanService
from recovery_diet.services.progress import ProgressRepository, ProgressService
from recovery_diet.services.recipes import RecipeRepository, RecipeService
from recovery_diet.services.users import UserRepository, UserService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    food_service: FoodService
    recipe_service: RecipeService
    meal_plan_service: MealPlanService
    grocery_list_service: GroceryListService
    progress_service: ProgressService


@dataclass
class _Repositories:
    users: UserRepository
    foods: FoodRepository
    recipes: RecipeRepository
    meal_plans: MealPlanRepository
    grocery_lists: GroceryListRepository
    progress: ProgressRepository


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    backend = resolved_settings.storage_backend.lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown storage backend: {resolved_settings.storage_backend}")

    if backend == "supabase":
        repositories = _supabase_repositories(resolved_settings)
    else:
        repositories = _memory_repositories()
    _logger.info("Using %s storage backend", backend)

    food_service = FoodService(repositories.foods)

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(repositories.users),
        food_service=food_service,
        recipe_service=RecipeService(repositories.recipes, food_service),
        meal_plan_service=MealPlanService(repositories.meal_plans),
        grocery_list_service=GroceryListService(
            repositories.grocery_lists, food_service
        ),
        progress_service=ProgressService(repositories.progress),
    )


def _memory_repositories() -> _Repositories:
    return _Repositories(
        users=InMemoryUserRepository(),
        foods=InMemoryFoodRepository(),
        recipes=InMemoryRecipeRepository(),
        meal_plans=InMemoryMealPlanRepository(),
        grocery_lists=InMemoryGroceryListRepository(),
        progress=InMemoryProgressRepository(),
    )


def _supabase_repositories(settings: Settings) -> _Repositories:
    if not settings.supabase_url or not settings.supabase_service_key:
        raise ValueError(
            "SUPABASE_URL and SUPABASE_SERVICE_KEY are required for supabase storage"
        )
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return _Repositories(
        users=SupabaseUserRepository(client),
        foods=SupabaseFoodRepository(client),
        recipes=SupabaseRecipeRepository(client),
        meal_plans=SupabaseMealPlanRepository(client),
        grocery_lists=SupabaseGroceryListRepository(client),
        progress=SupabaseProgressRepository(client),
    )
