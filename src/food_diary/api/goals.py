"""Goal settings and energy calculator endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from food_diary.api.schemas import EnergyPlanRequest, GoalsUpdateRequest
from food_diary.api.serializers import serialize_energy_plan, serialize_goals
from food_diary.domain.goals import BodyProfile
from food_diary.services.energy import calculate_energy_plan

if TYPE_CHECKING:
    from food_diary.containers import AppContainer

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("")
async def get_goals(request: Request) -> dict[str, object]:
    """Return the current daily goals."""
    container: AppContainer = request.app.state.container
    return serialize_goals(container.goal_settings_service.get_goals())


@router.put("")
async def update_goals(
    payload: GoalsUpdateRequest, request: Request
) -> dict[str, object]:
    """Update daily goals from free-text values."""
    container: AppContainer = request.app.state.container
    goals = await container.goal_settings_service.update_goals(
        calorie_goal=payload.calorie_goal,
        protein_goal=payload.protein_goal,
        exercise_goal=payload.exercise_goal,
    )
    return serialize_goals(goals)


@router.post("/calculate")
async def calculate_goals(
    payload: EnergyPlanRequest, request: Request
) -> dict[str, object]:
    """Compute energy needs and optionally adopt them as goals."""
    container: AppContainer = request.app.state.container
    plan = calculate_energy_plan(
        BodyProfile(
            weight=payload.weight,
            height=payload.height,
            age=payload.age,
            sex=payload.sex,
            activity_level=payload.activity_level,
            metric=payload.metric,
        )
    )
    if payload.apply_to_goals:
        goals = await container.goal_settings_service.apply_energy_plan(plan)
    else:
        goals = container.goal_settings_service.get_goals()
    return {"plan": serialize_energy_plan(plan), "goals": serialize_goals(goals)}
