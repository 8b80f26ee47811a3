"""Goal settings service."""

import logging
import math
from dataclasses import dataclass, field
from typing import Protocol

from food_diary.domain.goals import (
    DEFAULT_CALORIE_GOAL,
    DEFAULT_EXERCISE_GOAL,
    DEFAULT_PROTEIN_GOAL,
    EnergyPlan,
    Goals,
)
from food_diary.services.signals import Signal

CALORIE_GOAL_KEY = "daily_calorie_goal"
PROTEIN_GOAL_KEY = "daily_protein_goal"
EXERCISE_GOAL_KEY = "daily_exercise_goal"

_logger = logging.getLogger(__name__)


class GoalSettingsRepository(Protocol):
    """Persistence interface for free-text goal values."""

    def get_values(self) -> dict[str, str]:
        """Return stored goal values keyed by setting name."""

    def set_values(self, values: dict[str, str]) -> None:
        """Create or replace the given goal values."""


class GoalSource(Protocol):
    """Read access to the current goals plus a change signal."""

    changed: Signal

    def get_goals(self) -> Goals:
        """Return the current goals."""


@dataclass
class GoalSettingsService(GoalSource):
    """Service that parses stored goal text into numeric goals."""

    repository: GoalSettingsRepository
    changed: Signal = field(default_factory=Signal)

    def get_goals(self) -> Goals:
        """Return goals, falling back to defaults for blank or bad values."""
        values = self.repository.get_values()
        return Goals(
            calorie_goal=parse_goal(values.get(CALORIE_GOAL_KEY), DEFAULT_CALORIE_GOAL),
            protein_goal=parse_goal(values.get(PROTEIN_GOAL_KEY), DEFAULT_PROTEIN_GOAL),
            exercise_goal=parse_goal(
                values.get(EXERCISE_GOAL_KEY), DEFAULT_EXERCISE_GOAL
            ),
        )

    async def update_goals(
        self,
        *,
        calorie_goal: str | float | None = None,
        protein_goal: str | float | None = None,
        exercise_goal: str | float | None = None,
    ) -> Goals:
        """Store the provided goal values and notify subscribers."""
        updates: dict[str, str] = {}
        if calorie_goal is not None:
            updates[CALORIE_GOAL_KEY] = _to_text(calorie_goal)
        if protein_goal is not None:
            updates[PROTEIN_GOAL_KEY] = _to_text(protein_goal)
        if exercise_goal is not None:
            updates[EXERCISE_GOAL_KEY] = _to_text(exercise_goal)
        if not updates:
            return self.get_goals()
        self.repository.set_values(updates)
        _logger.info("Goals updated: %s", sorted(updates))
        await self.changed.emit()
        return self.get_goals()

    async def apply_energy_plan(self, plan: EnergyPlan) -> Goals:
        """Use a computed energy plan as the calorie and protein goals."""
        return await self.update_goals(
            calorie_goal=int(plan.tdee),
            protein_goal=int(plan.recommended_protein_g),
        )


def parse_goal(raw: str | None, default: float) -> float:
    """Parse a free-text goal, returning the default when unusable."""
    if raw is None:
        return default
    cleaned = raw.strip()
    if not cleaned:
        return default
    try:
        value = float(cleaned)
    except ValueError:
        return default
    if not math.isfinite(value) or value <= 0:
        return default
    return value


def _to_text(value: str | float) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
