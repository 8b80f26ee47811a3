"""Tests for weight tracking."""

from datetime import timedelta

from food_diary.services.weights import WeightTrackingService
from tests.conftest import NOW, FakeClock, InMemoryWeightRepository


def test_add_entry_defaults_date_and_trims_note() -> None:
    service = WeightTrackingService(InMemoryWeightRepository(), clock=FakeClock())

    entry = service.add_entry(72.4, note="  after run ")
    blank = service.add_entry(72.0, note="   ")

    assert entry.date == NOW
    assert entry.note == "after run"
    assert blank.note is None


def test_list_entries_newest_first() -> None:
    service = WeightTrackingService(InMemoryWeightRepository(), clock=FakeClock())
    older = service.add_entry(73.0, date=NOW - timedelta(days=7))
    newer = service.add_entry(72.0, date=NOW)

    assert service.list_entries() == [newer, older]
    assert service.latest() == newer


def test_delete_entry() -> None:
    service = WeightTrackingService(InMemoryWeightRepository(), clock=FakeClock())
    entry = service.add_entry(70.0)

    assert service.delete_entry(entry.id)
    assert service.latest() is None
    assert not service.delete_entry(entry.id)
