"""User account and login endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recovery_diet.api.schemas import (
    LoginRequest,
    RecoverySummaryOut,
    UserCreate,
    UserOut,
    UserUpdate,
)
from recovery_diet.domain.models import User
from recovery_diet.services.users import RecoverySummary, UsernameTakenError

if TYPE_CHECKING:
    from recovery_diet.containers import AppContainer

router = APIRouter(prefix="/api", tags=["users"])

_NOT_FOUND = "User not found"


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register_user(payload: UserCreate, request: Request) -> User:
    """Register an account; the password is stored hashed."""
    container: AppContainer = request.app.state.container
    try:
        return container.user_service.register(payload.model_dump())
    except UsernameTakenError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.post("/auth/login", response_model=UserOut)
async def login(payload: LoginRequest, request: Request) -> User:
    container: AppContainer = request.app.state.container
    user = container.user_service.authenticate(payload.username, payload.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )
    return user


@router.get("/users/{user_id}", response_model=UserOut)
async def get_user(user_id: str, request: Request) -> User:
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return user


@router.patch("/users/{user_id}", response_model=UserOut)
async def update_user(user_id: str, payload: UserUpdate, request: Request) -> User:
    container: AppContainer = request.app.state.container
    try:
        user = container.user_service.update_user(
            user_id, payload.model_dump(exclude_unset=True)
        )
    except UsernameTakenError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return user


@router.get("/users/{user_id}/recovery", response_model=RecoverySummaryOut)
async def recovery_summary(user_id: str, request: Request) -> RecoverySummary:
    """Return recovery day, stage, fat limits and food guidance."""
    container: AppContainer = request.app.state.container
    summary = container.user_service.recovery_summary(user_id)
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return summary
