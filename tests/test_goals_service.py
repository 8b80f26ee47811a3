"""Tests for goal settings."""

import asyncio

import pytest

from food_diary.domain.goals import EnergyPlan, Goals
from food_diary.services.goals import (
    CALORIE_GOAL_KEY,
    GoalSettingsService,
    parse_goal,
)
from tests.conftest import InMemoryGoalSettingsRepository


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 2000.0),
        ("", 2000.0),
        ("   ", 2000.0),
        ("abc", 2000.0),
        ("0", 2000.0),
        ("-150", 2000.0),
        ("nan", 2000.0),
        ("inf", 2000.0),
        (" 1800 ", 1800.0),
        ("1750.5", 1750.5),
    ],
)
def test_parse_goal(raw: str | None, expected: float) -> None:
    assert parse_goal(raw, 2000.0) == expected


def test_get_goals_defaults_when_unset() -> None:
    service = GoalSettingsService(InMemoryGoalSettingsRepository())

    assert service.get_goals() == Goals()


def test_update_goals_stores_text_and_notifies() -> None:
    repository = InMemoryGoalSettingsRepository()
    service = GoalSettingsService(repository)
    emitted: list[int] = []

    async def on_changed() -> None:
        emitted.append(1)

    service.changed.subscribe(on_changed)

    goals = asyncio.run(service.update_goals(calorie_goal=1800.0, protein_goal=" 120 "))

    assert repository.values[CALORIE_GOAL_KEY] == "1800"
    assert goals.calorie_goal == 1800
    assert goals.protein_goal == 120
    assert goals.exercise_goal == 500
    assert emitted == [1]


def test_update_goals_without_values_does_not_notify() -> None:
    service = GoalSettingsService(InMemoryGoalSettingsRepository())
    emitted: list[int] = []

    async def on_changed() -> None:
        emitted.append(1)

    service.changed.subscribe(on_changed)

    asyncio.run(service.update_goals())

    assert emitted == []


def test_apply_energy_plan_sets_calorie_and_protein_goals() -> None:
    service = GoalSettingsService(InMemoryGoalSettingsRepository())
    plan = EnergyPlan(bmr=1673.75, tdee=2594.3125, recommended_protein_g=126.0)

    goals = asyncio.run(service.apply_energy_plan(plan))

    assert goals.calorie_goal == 2594
    assert goals.protein_goal == 126
