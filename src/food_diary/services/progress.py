"""Daily progress aggregation, goal evaluation and streaks.

The module-level functions are pure and operate on a mapping of calendar
day to :class:`DailyAggregate`. :class:`ProgressAggregator` owns the live
mapping: it recomputes it from the food log, swaps it in atomically and
notifies subscribers once per committed recompute.
"""

import asyncio
import calendar
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta, tzinfo
from types import MappingProxyType
from typing import Protocol

from food_diary.domain.foods import FoodEntry
from food_diary.domain.goals import Goals
from food_diary.domain.progress import (
    CalendarDay,
    DailyAggregate,
    ExerciseSummary,
    MonthStats,
)
from food_diary.services.exercise import ExerciseProvider
from food_diary.services.goals import GoalSource
from food_diary.services.signals import Signal

DEFAULT_RETENTION_DAYS = 30
DEFAULT_MIN_RELOAD_INTERVAL = timedelta(seconds=5)
_EMPTY_EXERCISE = ExerciseSummary(
    active_calories=0.0,
    active_calorie_goal=Goals().exercise_goal,
    active_minutes=0,
)

_logger = logging.getLogger(__name__)


class FoodLogSource(Protocol):
    """Read access to the food log plus a change signal."""

    changed: Signal

    def list_entries(self) -> list[FoodEntry]:
        """Return a snapshot of all logged entries."""


def calendar_day(moment: datetime, tz: tzinfo | None = None) -> date:
    """Return the local calendar day of a timestamp.

    Naive timestamps are taken to already be local time.
    """
    if tz is None or moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(tz).date()


def group_by_day(
    entries: Iterable[FoodEntry], tz: tzinfo | None = None
) -> dict[date, list[FoodEntry]]:
    """Bucket entries by the calendar day of their timestamp."""
    buckets: dict[date, list[FoodEntry]] = {}
    for entry in entries:
        buckets.setdefault(calendar_day(entry.timestamp, tz), []).append(entry)
    return buckets


def retention_cutoff(reference_date: date, retention_days: int) -> date:
    """Return the oldest day kept by the retention window."""
    return reference_date - timedelta(days=retention_days)


def build_aggregate(
    day: date, entries: Iterable[FoodEntry], exercise: ExerciseSummary
) -> DailyAggregate:
    """Sum calories and protein of a day's entries."""
    total_calories = 0.0
    total_protein = 0.0
    for entry in entries:
        total_calories += entry.calories
        total_protein += entry.protein
    return DailyAggregate(
        day=day,
        total_calories=total_calories,
        total_protein=total_protein,
        exercise=exercise,
    )


def aggregate(  # noqa: PLR0913
    entries: Iterable[FoodEntry],
    reference_date: date,
    retention_days: int = DEFAULT_RETENTION_DAYS,
    *,
    tz: tzinfo | None = None,
    exercise: Callable[[date], ExerciseSummary] | None = None,
    previous: Mapping[date, DailyAggregate] | None = None,
) -> dict[date, DailyAggregate]:
    """Group entries into per-day aggregates within the retention window.

    Days before ``reference_date - retention_days`` are dropped. When a
    previous mapping is given, unchanged aggregates keep their identity.
    """
    cutoff = retention_cutoff(reference_date, retention_days)
    lookup = exercise or _no_exercise
    result: dict[date, DailyAggregate] = {}
    for day, bucket in group_by_day(entries, tz).items():
        if day < cutoff:
            continue
        result[day] = _reuse_unchanged(
            build_aggregate(day, bucket, lookup(day)), previous
        )
    return result


def is_goal_met(aggregate: DailyAggregate | None, calorie_goal: float) -> bool:
    """Return True when the day's calories do not exceed the goal.

    A day without an aggregate is never goal-met.
    """
    if aggregate is None:
        return False
    return aggregate.total_calories <= calorie_goal


def current_streak(
    aggregates: Mapping[date, DailyAggregate], calorie_goal: float, today: date
) -> int:
    """Count consecutive goal-met days walking backward from ``today``."""
    return sum(1 for _ in _streak_days(aggregates, calorie_goal, today))


def is_part_of_streak(
    day: date,
    aggregates: Mapping[date, DailyAggregate],
    calorie_goal: float,
    today: date,
) -> bool:
    """Return True when ``day`` lies in the current streak ending at ``today``."""
    if day > today:
        return False
    return any(
        streak_day == day
        for streak_day in _streak_days(aggregates, calorie_goal, today)
    )


def month_days(month: date) -> list[date]:
    """Return every day of the calendar month containing ``month``."""
    first = month.replace(day=1)
    _, length = calendar.monthrange(first.year, first.month)
    return [first + timedelta(days=offset) for offset in range(length)]


def month_stats(
    aggregates: Mapping[date, DailyAggregate],
    calorie_goal: float,
    month: date,
    today: date,
) -> MonthStats:
    """Summarize goal results for a month up to and including ``today``.

    The longest streak is scoped to the month; untracked days reset it.
    """
    successful = 0
    tracked = 0
    running = 0
    longest = 0
    for day in month_days(month):
        if day > today:
            break
        aggregate = aggregates.get(day)
        if aggregate is not None:
            tracked += 1
        if is_goal_met(aggregate, calorie_goal):
            successful += 1
            running += 1
            longest = max(longest, running)
        else:
            running = 0
    return MonthStats(
        successful_days=successful,
        total_tracked_days=tracked,
        longest_streak_in_month=longest,
    )


def _streak_days(
    aggregates: Mapping[date, DailyAggregate], calorie_goal: float, today: date
) -> Iterator[date]:
    day = today
    while is_goal_met(aggregates.get(day), calorie_goal):
        yield day
        day -= timedelta(days=1)


def _reuse_unchanged(
    computed: DailyAggregate, previous: Mapping[date, DailyAggregate] | None
) -> DailyAggregate:
    if previous is None:
        return computed
    existing = previous.get(computed.day)
    if existing == computed:
        return existing
    return computed


def _no_exercise(day: date) -> ExerciseSummary:
    return _EMPTY_EXERCISE


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ProgressAggregator:
    """Owner of the per-day aggregate map.

    Each refresh takes a snapshot of the food log and builds a new map.
    Starting a refresh bumps the generation counter; an in-flight refresh
    that sees a newer generation abandons its work, so only the most
    recently started refresh commits. Readers always see a complete map.
    """

    food_log: FoodLogSource
    goal_source: GoalSource
    exercise_provider: ExerciseProvider
    timezone: tzinfo = UTC
    retention_days: int = DEFAULT_RETENTION_DAYS
    min_reload_interval: timedelta = DEFAULT_MIN_RELOAD_INTERVAL
    clock: Callable[[], datetime] = _utc_now
    updated: Signal = field(default_factory=Signal)
    _aggregates: Mapping[date, DailyAggregate] = field(
        default_factory=lambda: MappingProxyType({}), init=False, repr=False
    )
    _generation: int = field(default=0, init=False, repr=False)
    _last_load_at: datetime | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.food_log.changed.subscribe(self._on_source_changed)
        self.goal_source.changed.subscribe(self._on_source_changed)

    @property
    def aggregates(self) -> Mapping[date, DailyAggregate]:
        """Return the current read-only aggregate map."""
        return self._aggregates

    @property
    def generation(self) -> int:
        """Return the generation of the most recently started refresh."""
        return self._generation

    @property
    def last_load_at(self) -> datetime | None:
        """Return when the current map was committed."""
        return self._last_load_at

    def today(self) -> date:
        """Return the current calendar day in the configured timezone."""
        return calendar_day(self.clock(), self.timezone)

    def goals(self) -> Goals:
        """Return the goals used for evaluation."""
        return self.goal_source.get_goals()

    def get_aggregate(self, day: date | datetime) -> DailyAggregate | None:
        """Return the aggregate for a day or timestamp, if tracked."""
        if isinstance(day, datetime):
            day = calendar_day(day, self.timezone)
        return self._aggregates.get(day)

    def current_streak(self, today: date | None = None) -> int:
        """Return the current goal-met streak."""
        return current_streak(
            self._aggregates, self.goals().calorie_goal, today or self.today()
        )

    def is_part_of_streak(self, day: date, today: date | None = None) -> bool:
        """Return True when a day belongs to the current streak."""
        return is_part_of_streak(
            day, self._aggregates, self.goals().calorie_goal, today or self.today()
        )

    def month_stats(self, month: date, today: date | None = None) -> MonthStats:
        """Return goal statistics for a month."""
        return month_stats(
            self._aggregates, self.goals().calorie_goal, month, today or self.today()
        )

    def month_calendar(
        self, month: date, today: date | None = None
    ) -> list[CalendarDay]:
        """Return per-day highlighting data for a month."""
        resolved_today = today or self.today()
        aggregates = self._aggregates
        calorie_goal = self.goals().calorie_goal
        streak = set(_streak_days(aggregates, calorie_goal, resolved_today))
        days = []
        for day in month_days(month):
            aggregate = aggregates.get(day)
            days.append(
                CalendarDay(
                    day=day,
                    aggregate=aggregate,
                    goal_met=is_goal_met(aggregate, calorie_goal),
                    part_of_streak=day in streak,
                    is_future=day > resolved_today,
                )
            )
        return days

    async def refresh(self, *, force: bool = False) -> bool:
        """Recompute the aggregate map from the food log.

        Without ``force`` the refresh is skipped when the last commit is
        younger than the minimum reload interval. Returns True when this
        call committed a new map.
        """
        now = self.clock()
        if (
            not force
            and self._last_load_at is not None
            and now - self._last_load_at < self.min_reload_interval
        ):
            _logger.debug(
                "Progress refresh skipped: last load at %s", self._last_load_at
            )
            return False

        self._generation += 1
        generation = self._generation
        reference_date = calendar_day(now, self.timezone)
        cutoff = retention_cutoff(reference_date, self.retention_days)
        previous = self._aggregates
        buckets = group_by_day(self.food_log.list_entries(), self.timezone)
        goals = self.goal_source.get_goals()

        computed: dict[date, DailyAggregate] = {}
        for day, bucket in buckets.items():
            await asyncio.sleep(0)
            if generation != self._generation:
                _logger.debug("Progress refresh %s superseded", generation)
                return False
            if day < cutoff:
                continue
            summary = self.exercise_provider.summary_for(day, goals)
            computed[day] = _reuse_unchanged(
                build_aggregate(day, bucket, summary), previous
            )

        if generation != self._generation:
            _logger.debug("Progress refresh %s superseded", generation)
            return False
        self._aggregates = MappingProxyType(computed)
        self._last_load_at = self.clock()
        _logger.info(
            "Progress refresh %s committed: days=%s", generation, len(computed)
        )
        await self.updated.emit()
        return True

    async def run_periodic_refresh(self, interval_seconds: float) -> None:
        """Refresh on a fixed interval until cancelled."""
        while True:
            await asyncio.sleep(interval_seconds)
            try:
                await self.refresh()
            except Exception:
                _logger.exception("Periodic progress refresh failed")

    async def _on_source_changed(self) -> None:
        try:
            await self.refresh(force=True)
        except Exception:
            _logger.exception("Progress refresh after source change failed")
