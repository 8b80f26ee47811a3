"""Domain models for body weight tracking."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class WeightEntry:
    """A body weight measurement."""

    weight: float
    date: datetime
    note: str | None = None
    id: UUID = field(default_factory=uuid4)
