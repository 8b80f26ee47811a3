"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from food_diary.adapters.supabase_food_repository import SupabaseFoodRepository
from food_diary.adapters.supabase_goal_settings_repository import (
    SupabaseGoalSettingsRepository,
)
from food_diary.adapters.supabase_weight_repository import SupabaseWeightRepository
from food_diary.domain.foods import FoodEntry, MealCategory
from food_diary.domain.weights import WeightEntry


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _food_row(entry_id: str, **overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": entry_id,
        "name": "Oatmeal",
        "calories": 300,
        "protein": 10,
        "carbs": 54,
        "fats": 5,
        "serving_size": "1 cup",
        "logged_at": "2024-03-15T08:30:00+00:00",
        "meal_category": "breakfast",
    }
    row.update(overrides)
    return row


def test_food_repository_lists_entries() -> None:
    client = FakeSupabaseClient()
    entry_id = str(uuid4())
    client.table("food_entries").queue(
        "select", [_food_row(entry_id), _food_row(str(uuid4()), meal_category="x")]
    )

    entries = SupabaseFoodRepository(client).list_foods()

    assert str(entries[0].id) == entry_id
    assert entries[0].timestamp == datetime(2024, 3, 15, 8, 30, tzinfo=UTC)
    assert entries[0].meal_category is MealCategory.BREAKFAST
    assert entries[1].meal_category is MealCategory.SNACKS


def test_food_repository_create_update_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("food_entries")
    entry = FoodEntry(
        name="Oatmeal",
        calories=300,
        protein=10,
        carbs=54,
        fats=5,
        timestamp=datetime(2024, 3, 15, 8, 30, tzinfo=UTC),
        meal_category=MealCategory.BREAKFAST,
    )
    table.queue("insert", [_food_row(str(entry.id))])
    table.queue("update", [])
    table.queue("delete", [_food_row(str(entry.id))])
    repository = SupabaseFoodRepository(client)

    created = repository.create_food(entry)
    assert created.id == entry.id
    payload = table.last_payload
    assert isinstance(payload, dict)
    assert payload["logged_at"] == "2024-03-15T08:30:00+00:00"

    assert repository.update_food(entry) is None
    assert "id" not in table.last_payload  # type: ignore[operator]

    assert repository.delete_food(entry.id)
    assert table.last_filters[-1] == ("id", str(entry.id))


def test_food_repository_create_requires_data() -> None:
    repository = SupabaseFoodRepository(FakeSupabaseClient())
    entry = FoodEntry(
        name="Tea", calories=0, protein=0, carbs=0, fats=0, timestamp=datetime.now(UTC)
    )

    with pytest.raises(RuntimeError):
        repository.create_food(entry)


def test_weight_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("weight_entries")
    entry = WeightEntry(weight=72.5, date=datetime(2024, 3, 15, 7, 0, tzinfo=UTC))
    row = {
        "id": str(entry.id),
        "weight": 72.5,
        "measured_at": "2024-03-15T07:00:00+00:00",
        "note": None,
    }
    table.queue("insert", [row])
    table.queue("select", [row])
    repository = SupabaseWeightRepository(client)

    created = repository.create_entry(entry)
    listed = repository.list_entries()

    assert created == entry
    assert listed == [entry]
    assert not repository.delete_entry(entry.id)


def test_goal_settings_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("goal_settings")
    table.queue(
        "select",
        [
            {"key": "daily_calorie_goal", "value": "1800"},
            {"key": "daily_protein_goal", "value": None},
        ],
    )
    repository = SupabaseGoalSettingsRepository(client)

    assert repository.get_values() == {"daily_calorie_goal": "1800"}

    repository.set_values({"daily_exercise_goal": "600"})
    payload = table.last_payload
    assert isinstance(payload, list)
    assert payload[0]["key"] == "daily_exercise_goal"
    assert payload[0]["value"] == "600"
