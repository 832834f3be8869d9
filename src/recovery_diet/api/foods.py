"""Food catalogue endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recovery_diet.api.schemas import FoodCreate, FoodOut
from recovery_diet.domain.models import Food

if TYPE_CHECKING:
    from recovery_diet.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("", response_model=list[FoodOut])
async def list_foods(request: Request) -> list[Food]:
    """Return the whole catalogue."""
    container: AppContainer = request.app.state.container
    return container.food_service.list_foods()


@router.get("/search", response_model=list[FoodOut])
async def search_foods(request: Request, q: str = "") -> list[Food]:
    """Case-insensitive search over name, description and category."""
    container: AppContainer = request.app.state.container
    return container.food_service.search(q)


@router.get("/category/{category}", response_model=list[FoodOut])
async def foods_by_category(category: str, request: Request) -> list[Food]:
    container: AppContainer = request.app.state.container
    return container.food_service.list_by_category(category)


@router.get("/{food_id}", response_model=FoodOut)
async def get_food(food_id: str, request: Request) -> Food:
    container: AppContainer = request.app.state.container
    food = container.food_service.get_food(food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food not found")
    return food


@router.get("/{food_id}/alternatives", response_model=list[FoodOut])
async def food_alternatives(food_id: str, request: Request) -> list[Food]:
    """Return up to three leaner foods from the same category."""
    container: AppContainer = request.app.state.container
    alternatives = container.food_service.lower_fat_alternatives(food_id)
    if alternatives is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food not found")
    return alternatives


@router.post("", response_model=FoodOut, status_code=status.HTTP_201_CREATED)
async def create_food(payload: FoodCreate, request: Request) -> Food:
    """Add a food; the safety level is derived when omitted."""
    container: AppContainer = request.app.state.container
    return container.food_service.create_food(payload.model_dump())
