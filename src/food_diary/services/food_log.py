"""Food log service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, tzinfo
from typing import Protocol
from uuid import UUID

from food_diary.domain.foods import FoodEntry, MealCategory
from food_diary.domain.nutrition import FoodAnalysis
from food_diary.services.nutrition import (
    NutritionAnalysisService,
    NutritionAnalysisUnavailableError,
)
from food_diary.services.progress import FoodLogSource, calendar_day
from food_diary.services.signals import Signal

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food entries."""

    def list_foods(self) -> list[FoodEntry]:
        """Return all stored food entries."""

    def create_food(self, entry: FoodEntry) -> FoodEntry:
        """Persist a new entry and return it."""

    def update_food(self, entry: FoodEntry) -> FoodEntry | None:
        """Replace a stored entry by id, returning None when missing."""

    def delete_food(self, entry_id: UUID) -> bool:
        """Delete an entry by id, returning False when missing."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class FoodLogService(FoodLogSource):
    """Service that owns the in-memory food log and persists changes.

    The log is loaded from the repository on first use. Every successful
    mutation emits ``changed``.
    """

    repository: FoodLogRepository
    nutrition_service: NutritionAnalysisService | None = None
    clock: Callable[[], datetime] = _utc_now
    changed: Signal = field(default_factory=Signal)
    _entries: list[FoodEntry] | None = field(default=None, init=False, repr=False)

    def list_entries(self) -> list[FoodEntry]:
        """Return a snapshot of all entries."""
        return list(self._load())

    def list_for_day(self, day: date, tz: tzinfo | None = None) -> list[FoodEntry]:
        """Return entries logged on a calendar day, oldest first."""
        entries = [
            entry
            for entry in self._load()
            if calendar_day(entry.timestamp, tz) == day
        ]
        return sorted(entries, key=lambda entry: entry.timestamp)

    def get_entry(self, entry_id: UUID) -> FoodEntry | None:
        """Return an entry by id, if present."""
        for entry in self._load():
            if entry.id == entry_id:
                return entry
        return None

    async def log_food(  # noqa: PLR0913
        self,
        *,
        name: str,
        calories: float,
        protein: float,
        carbs: float,
        fats: float,
        serving_size: str | None = None,
        meal_category: MealCategory = MealCategory.SNACKS,
        timestamp: datetime | None = None,
    ) -> FoodEntry:
        """Persist a manually entered food."""
        entry = FoodEntry(
            name=name,
            calories=calories,
            protein=protein,
            carbs=carbs,
            fats=fats,
            serving_size=serving_size,
            timestamp=timestamp or self.clock(),
            meal_category=meal_category,
        )
        return await self._add(entry)

    async def add_food(
        self,
        name: str,
        meal_category: MealCategory,
        timestamp: datetime | None = None,
    ) -> FoodEntry:
        """Estimate macros for a food name and log it."""
        analysis = await self._require_nutrition().analyze(name)
        entry = FoodEntry(
            name=analysis.name,
            calories=analysis.calories,
            protein=analysis.protein,
            carbs=analysis.carbs,
            fats=analysis.fats,
            serving_size=analysis.serving_size,
            timestamp=timestamp or self.clock(),
            meal_category=meal_category,
        )
        return await self._add(entry)

    async def analyze(self, description: str) -> FoodAnalysis:
        """Return a detailed estimate without logging anything."""
        return await self._require_nutrition().analyze(description, detailed=True)

    async def update_food(  # noqa: PLR0913
        self,
        entry_id: UUID,
        *,
        name: str,
        calories: float,
        protein: float,
        carbs: float,
        fats: float,
        serving_size: str | None,
        meal_category: MealCategory,
    ) -> FoodEntry | None:
        """Replace an entry's fields, keeping its id and timestamp."""
        current = self.get_entry(entry_id)
        if current is None:
            return None
        updated = current.replace(
            name=name,
            calories=calories,
            protein=protein,
            carbs=carbs,
            fats=fats,
            serving_size=serving_size,
            meal_category=meal_category,
        )
        stored = self.repository.update_food(updated)
        if stored is None:
            return None
        entries = self._load()
        self._entries = [stored if entry.id == entry_id else entry for entry in entries]
        _logger.info("Food entry updated: %s", entry_id)
        await self.changed.emit()
        return stored

    async def delete_food(self, entry_id: UUID) -> bool:
        """Delete an entry, returning False when it does not exist."""
        if self.get_entry(entry_id) is None:
            return False
        if not self.repository.delete_food(entry_id):
            return False
        self._entries = [entry for entry in self._load() if entry.id != entry_id]
        _logger.info("Food entry deleted: %s", entry_id)
        await self.changed.emit()
        return True

    def reload(self) -> None:
        """Drop the in-memory log so the next read hits the repository."""
        self._entries = None

    async def _add(self, entry: FoodEntry) -> FoodEntry:
        stored = self.repository.create_food(entry)
        self._entries = [*self._load(), stored]
        _logger.info("Food entry logged: %s (%s kcal)", stored.id, stored.calories)
        await self.changed.emit()
        return stored

    def _load(self) -> list[FoodEntry]:
        if self._entries is None:
            self._entries = self.repository.list_foods()
        return self._entries

    def _require_nutrition(self) -> NutritionAnalysisService:
        if self.nutrition_service is None:
            raise NutritionAnalysisUnavailableError(
                "Nutrition analysis is not configured"
            )
        return self.nutrition_service
