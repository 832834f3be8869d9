"""Recipe endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recovery_diet.api.schemas import RecipeCreate, RecipeOut
from recovery_diet.domain.models import Recipe

if TYPE_CHECKING:
    from recovery_diet.containers import AppContainer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("", response_model=list[RecipeOut])
async def list_recipes(request: Request) -> list[Recipe]:
    container: AppContainer = request.app.state.container
    return container.recipe_service.list_recipes()


@router.get("/safe", response_model=list[RecipeOut])
async def safe_recipes(request: Request) -> list[Recipe]:
    """Return recipes classified as safe per serving."""
    container: AppContainer = request.app.state.container
    return container.recipe_service.list_safe()


@router.get("/tag/{tag}", response_model=list[RecipeOut])
async def recipes_by_tag(tag: str, request: Request) -> list[Recipe]:
    container: AppContainer = request.app.state.container
    return container.recipe_service.list_by_tag(tag)


@router.get("/{recipe_id}", response_model=RecipeOut)
async def get_recipe(recipe_id: str, request: Request) -> Recipe:
    container: AppContainer = request.app.state.container
    recipe = container.recipe_service.get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found"
        )
    return recipe


@router.post("", response_model=RecipeOut, status_code=status.HTTP_201_CREATED)
async def create_recipe(payload: RecipeCreate, request: Request) -> Recipe:
    """Create a recipe; fat per serving and safety level are computed."""
    container: AppContainer = request.app.state.container
    return container.recipe_service.create_recipe(payload.model_dump())
