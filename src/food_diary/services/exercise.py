"""Exercise data providers."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from food_diary.domain.goals import Goals
from food_diary.domain.progress import DEFAULT_MINUTES_GOAL, ExerciseSummary


class ExerciseProvider(Protocol):
    """Source of per-day exercise totals."""

    def summary_for(self, day: date, goals: Goals) -> ExerciseSummary:
        """Return the exercise summary for a calendar day."""


@dataclass
class PlaceholderExerciseProvider(ExerciseProvider):
    """Provider used until device activity data is wired in.

    Reports no activity and carries the active-calorie goal it is given.
    """

    minutes_goal: int = DEFAULT_MINUTES_GOAL

    def summary_for(self, day: date, goals: Goals) -> ExerciseSummary:
        """Return an empty summary carrying the configured goals."""
        return ExerciseSummary(
            active_calories=0.0,
            active_calorie_goal=goals.exercise_goal,
            active_minutes=0,
            minutes_goal=self.minutes_goal,
        )
