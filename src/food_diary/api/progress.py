"""Progress, streak and calendar endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from food_diary.api.serializers import (
    serialize_aggregate,
    serialize_calendar_day,
    serialize_month_stats,
)

if TYPE_CHECKING:
    from food_diary.containers import AppContainer

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/days/{day}")
async def day_progress(day: date, request: Request) -> dict[str, object]:
    """Return the aggregate for a calendar day."""
    container: AppContainer = request.app.state.container
    aggregator = container.progress_aggregator
    await aggregator.refresh()
    aggregate = aggregator.get_aggregate(day)
    if aggregate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {
        "progress": serialize_aggregate(aggregate, aggregator.goals()),
        "part_of_streak": aggregator.is_part_of_streak(day),
    }


@router.get("/streak")
async def streak(request: Request) -> dict[str, object]:
    """Return the current goal-met streak."""
    container: AppContainer = request.app.state.container
    aggregator = container.progress_aggregator
    await aggregator.refresh()
    today = aggregator.today()
    return {
        "today": today.isoformat(),
        "current_streak": aggregator.current_streak(today),
    }


@router.get("/months/{year}/{month}")
async def month_progress(year: int, month: int, request: Request) -> dict[str, object]:
    """Return month statistics and per-day calendar highlighting."""
    try:
        first_day = date(year, month, 1)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid month"
        ) from exc
    container: AppContainer = request.app.state.container
    aggregator = container.progress_aggregator
    await aggregator.refresh()
    today = aggregator.today()
    if first_day > today:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Month is in the future",
        )
    return {
        "month": first_day.isoformat(),
        "stats": serialize_month_stats(aggregator.month_stats(first_day, today)),
        "current_streak": aggregator.current_streak(today),
        "days": [
            serialize_calendar_day(day)
            for day in aggregator.month_calendar(first_day, today)
        ],
    }


@router.post("/refresh")
async def refresh(request: Request) -> dict[str, object]:
    """Force a recompute of the aggregate map."""
    container: AppContainer = request.app.state.container
    aggregator = container.progress_aggregator
    committed = await aggregator.refresh(force=True)
    return {"committed": committed, "days": len(aggregator.aggregates)}
