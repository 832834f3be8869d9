"""Daily progress endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recovery_diet.api.schemas import (
    ProgressCreate,
    ProgressOut,
    ProgressSummaryOut,
    ProgressUpdate,
)
from recovery_diet.domain.models import UserProgress
from recovery_diet.services.progress import ProgressSummary

if TYPE_CHECKING:
    from recovery_diet.containers import AppContainer

router = APIRouter(prefix="/api/progress", tags=["progress"])

_NOT_FOUND = "Progress not found"


@router.post("", response_model=ProgressOut, status_code=status.HTTP_201_CREATED)
async def create_progress(payload: ProgressCreate, request: Request) -> UserProgress:
    container: AppContainer = request.app.state.container
    return container.progress_service.create_progress(payload.model_dump())


@router.get("/{user_id}/week/{week_start}", response_model=list[ProgressOut])
async def progress_for_week(
    user_id: str, week_start: date, request: Request
) -> list[UserProgress]:
    container: AppContainer = request.app.state.container
    return container.progress_service.list_for_week(user_id, week_start)


@router.get("/{user_id}/{day}/summary", response_model=ProgressSummaryOut)
async def progress_summary(
    user_id: str, day: date, request: Request
) -> ProgressSummary:
    """Return intake against the limit for one day."""
    container: AppContainer = request.app.state.container
    summary = container.progress_service.summarize(user_id, day)
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return summary


@router.get("/{user_id}/{day}", response_model=ProgressOut)
async def progress_for_date(user_id: str, day: date, request: Request) -> UserProgress:
    container: AppContainer = request.app.state.container
    progress = container.progress_service.get_for_date(user_id, day)
    if progress is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return progress


@router.patch("/{progress_id}", response_model=ProgressOut)
async def update_progress(
    progress_id: str, payload: ProgressUpdate, request: Request
) -> UserProgress:
    container: AppContainer = request.app.state.container
    progress = container.progress_service.update_progress(
        progress_id, payload.model_dump(exclude_unset=True)
    )
    if progress is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND)
    return progress
