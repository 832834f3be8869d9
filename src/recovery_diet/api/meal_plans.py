"""Meal plan endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recovery_diet.api.schemas import (
    MealPlanCheckOut,
    MealPlanCreate,
    MealPlanOut,
    MealPlanUpdate,
    MealPlanValidateRequest,
)
from recovery_diet.domain.models import MealPlan, PlannedMeal

if TYPE_CHECKING:
    from recovery_diet.containers import AppContainer

router = APIRouter(prefix="/api/meal-plans", tags=["meal-plans"])


@router.post("", response_model=MealPlanOut, status_code=status.HTTP_201_CREATED)
async def create_meal_plan(payload: MealPlanCreate, request: Request) -> MealPlan:
    container: AppContainer = request.app.state.container
    return container.meal_plan_service.create_plan(payload.model_dump())


@router.post("/validate", response_model=MealPlanCheckOut)
async def validate_meal_plan(
    payload: MealPlanValidateRequest, request: Request
) -> dict[str, object]:
    """Check planned meals against the user's daily fat limit."""
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(payload.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    meals = [PlannedMeal(**meal.model_dump()) for meal in payload.meals]
    check = container.meal_plan_service.check(meals, user.daily_fat_limit)
    return {
        "is_valid": check.is_valid,
        "total_fat": check.total_fat,
        "daily_limit": user.daily_fat_limit,
        "warnings": check.warnings,
    }


@router.get("/{user_id}/week/{week_start}", response_model=list[MealPlanOut])
async def meal_plans_for_week(
    user_id: str, week_start: date, request: Request
) -> list[MealPlan]:
    """Return plans dated within the seven days starting at week_start."""
    container: AppContainer = request.app.state.container
    return container.meal_plan_service.list_for_week(user_id, week_start)


@router.get("/{user_id}/{day}", response_model=MealPlanOut)
async def meal_plan_for_date(user_id: str, day: date, request: Request) -> MealPlan:
    container: AppContainer = request.app.state.container
    plan = container.meal_plan_service.get_for_date(user_id, day)
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Meal plan not found"
        )
    return plan


@router.patch("/{plan_id}", response_model=MealPlanOut)
async def update_meal_plan(
    plan_id: str, payload: MealPlanUpdate, request: Request
) -> MealPlan:
    container: AppContainer = request.app.state.container
    plan = container.meal_plan_service.update_plan(
        plan_id, payload.model_dump(exclude_unset=True)
    )
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Meal plan not found"
        )
    return plan
