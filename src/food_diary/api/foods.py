"""Food log endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from food_diary.api.schemas import (
    AnalyzeFoodRequest,
    FoodEntryRequest,
    FoodUpdateRequest,
    QuickFoodRequest,
)
from food_diary.api.serializers import serialize_analysis, serialize_food

if TYPE_CHECKING:
    from food_diary.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def list_foods(request: Request, day: date | None = None) -> dict[str, object]:
    """Return logged foods, optionally for a single calendar day."""
    container: AppContainer = request.app.state.container
    service = container.food_log_service
    if day is None:
        entries = sorted(service.list_entries(), key=lambda entry: entry.timestamp)
    else:
        entries = service.list_for_day(day, container.settings.tzinfo)
    return {"foods": [serialize_food(entry) for entry in entries]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_food(payload: FoodEntryRequest, request: Request) -> dict[str, object]:
    """Log a manually entered food."""
    container: AppContainer = request.app.state.container
    entry = await container.food_log_service.log_food(
        name=payload.name,
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fats=payload.fats,
        serving_size=payload.serving_size,
        meal_category=payload.meal_category,
        timestamp=payload.timestamp,
    )
    return serialize_food(entry)


@router.post("/quick", status_code=status.HTTP_201_CREATED)
async def quick_log_food(
    payload: QuickFoodRequest, request: Request
) -> dict[str, object]:
    """Analyze a food name and log the estimate."""
    container: AppContainer = request.app.state.container
    entry = await container.food_log_service.add_food(
        payload.name, payload.meal_category, payload.timestamp
    )
    return serialize_food(entry)


@router.post("/analyze")
async def analyze_food(
    payload: AnalyzeFoodRequest, request: Request
) -> dict[str, object]:
    """Return a nutrition estimate without logging it."""
    container: AppContainer = request.app.state.container
    analysis = await container.food_log_service.analyze(payload.description)
    return serialize_analysis(analysis)


@router.put("/{entry_id}")
async def update_food(
    entry_id: UUID, payload: FoodUpdateRequest, request: Request
) -> dict[str, object]:
    """Replace a logged food's fields."""
    container: AppContainer = request.app.state.container
    entry = await container.food_log_service.update_food(
        entry_id,
        name=payload.name,
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fats=payload.fats,
        serving_size=payload.serving_size,
        meal_category=payload.meal_category,
    )
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_food(entry)


@router.delete("/{entry_id}")
async def delete_food(entry_id: UUID, request: Request) -> dict[str, str]:
    """Delete a logged food."""
    container: AppContainer = request.app.state.container
    if not await container.food_log_service.delete_food(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted"}
