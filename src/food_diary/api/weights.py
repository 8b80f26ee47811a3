"""Weight tracking endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status

from food_diary.api.schemas import WeightEntryRequest
from food_diary.api.serializers import serialize_weight

if TYPE_CHECKING:
    from food_diary.containers import AppContainer

router = APIRouter(prefix="/weights", tags=["weights"])


@router.get("")
async def list_weights(request: Request) -> dict[str, object]:
    """Return weight entries, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.weight_service.list_entries()
    return {"weights": [serialize_weight(entry) for entry in entries]}


@router.get("/latest")
async def latest_weight(request: Request) -> dict[str, object]:
    """Return the most recent weight measurement, if any."""
    container: AppContainer = request.app.state.container
    entry = container.weight_service.latest()
    return {"weight": serialize_weight(entry) if entry else None}


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_weight(
    payload: WeightEntryRequest, request: Request
) -> dict[str, object]:
    """Record a weight measurement."""
    container: AppContainer = request.app.state.container
    entry = container.weight_service.add_entry(
        payload.weight, note=payload.note, date=payload.date
    )
    return serialize_weight(entry)


@router.delete("/{entry_id}")
async def delete_weight(entry_id: UUID, request: Request) -> dict[str, str]:
    """Delete a weight measurement."""
    container: AppContainer = request.app.state.container
    if not container.weight_service.delete_entry(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted"}
