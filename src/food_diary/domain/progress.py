"""Domain models for daily progress."""

from dataclasses import dataclass
from datetime import date

DEFAULT_MINUTES_GOAL = 30


@dataclass(frozen=True)
class ExerciseSummary:
    """Exercise totals for a day."""

    active_calories: float
    active_calorie_goal: float
    active_minutes: int
    minutes_goal: int = DEFAULT_MINUTES_GOAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "active_calories", max(0.0, self.active_calories))
        object.__setattr__(self, "active_minutes", max(0, self.active_minutes))


@dataclass(frozen=True)
class DailyAggregate:
    """Nutrition totals for one calendar day."""

    day: date
    total_calories: float
    total_protein: float
    exercise: ExerciseSummary


@dataclass(frozen=True)
class MonthStats:
    """Goal statistics for a calendar month."""

    successful_days: int
    total_tracked_days: int
    longest_streak_in_month: int


@dataclass(frozen=True)
class CalendarDay:
    """Per-day view of a month used for calendar highlighting."""

    day: date
    aggregate: DailyAggregate | None
    goal_met: bool
    part_of_streak: bool
    is_future: bool
