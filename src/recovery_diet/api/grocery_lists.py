"""Grocery list endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recovery_diet.api.schemas import (
    FoodOut,
    GroceryItemCheck,
    GroceryListCreate,
    GroceryListOut,
    GroceryListUpdate,
)
from recovery_diet.domain.models import Food, GroceryList

if TYPE_CHECKING:
    from recovery_diet.containers import AppContainer

router = APIRouter(prefix="/api/grocery-lists", tags=["grocery-lists"])

_NOT_FOUND = "Grocery list not found"


@router.post("", response_model=GroceryListOut, status_code=status.HTTP_201_CREATED)
async def create_grocery_list(
    payload: GroceryListCreate, request: Request
) -> GroceryList:
    container: AppContainer = request.app.state.container
    return container.grocery_list_service.create_list(payload.model_dump())


@router.get("/{user_id}/active", response_model=GroceryListOut)
async def active_grocery_list(user_id: str, request: Request) -> GroceryList:
    """Return the user's active list."""
    container: AppContainer = request.app.state.container
    grocery_list = container.grocery_list_service.get_active(user_id)
    if grocery_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return grocery_list


@router.get("/{list_id}/categories", response_model=dict[str, list[FoodOut]])
async def grocery_list_categories(
    list_id: str, request: Request
) -> dict[str, list[Food]]:
    """Group the list's foods by display category."""
    container: AppContainer = request.app.state.container
    categories = container.grocery_list_service.categorize(list_id)
    if categories is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return categories


@router.get("/{list_id}", response_model=GroceryListOut)
async def get_grocery_list(list_id: str, request: Request) -> GroceryList:
    container: AppContainer = request.app.state.container
    grocery_list = container.grocery_list_service.get_list(list_id)
    if grocery_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return grocery_list


@router.patch("/{list_id}", response_model=GroceryListOut)
async def update_grocery_list(
    list_id: str, payload: GroceryListUpdate, request: Request
) -> GroceryList:
    container: AppContainer = request.app.state.container
    grocery_list = container.grocery_list_service.update_list(
        list_id, payload.model_dump(exclude_unset=True)
    )
    if grocery_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return grocery_list


@router.patch("/{list_id}/items/{index}", response_model=GroceryListOut)
async def check_grocery_item(
    list_id: str, index: int, payload: GroceryItemCheck, request: Request
) -> GroceryList:
    """Tick or untick a single item by position."""
    container: AppContainer = request.app.state.container
    grocery_list = container.grocery_list_service.set_item_checked(
        list_id, index, payload.checked
    )
    if grocery_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Grocery item not found"
        )
    return grocery_list
