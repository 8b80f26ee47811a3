"""Body weight tracking service."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from food_diary.domain.weights import WeightEntry


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def list_entries(self) -> list[WeightEntry]:
        """Return all weight entries."""

    def create_entry(self, entry: WeightEntry) -> WeightEntry:
        """Persist a weight entry and return it."""

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete a weight entry, returning False when missing."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class WeightTrackingService:
    """Service for recording body weight over time."""

    repository: WeightRepository
    clock: Callable[[], datetime] = _utc_now

    def list_entries(self) -> list[WeightEntry]:
        """Return entries, newest first."""
        return sorted(
            self.repository.list_entries(), key=lambda entry: entry.date, reverse=True
        )

    def latest(self) -> WeightEntry | None:
        """Return the most recent entry, if any."""
        entries = self.list_entries()
        return entries[0] if entries else None

    def add_entry(
        self, weight: float, note: str | None = None, date: datetime | None = None
    ) -> WeightEntry:
        """Record a new weight measurement."""
        cleaned_note = note.strip() if note else None
        entry = WeightEntry(
            weight=weight,
            date=date or self.clock(),
            note=cleaned_note or None,
        )
        return self.repository.create_entry(entry)

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete a weight entry by id."""
        return self.repository.delete_entry(entry_id)
