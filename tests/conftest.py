"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest

from food_diary.config import Settings
from food_diary.containers import AppContainer
from food_diary.domain.foods import FoodEntry
from food_diary.domain.weights import WeightEntry
from food_diary.services.cache import InMemoryCache
from food_diary.services.exercise import PlaceholderExerciseProvider
from food_diary.services.food_log import FoodLogRepository, FoodLogService
from food_diary.services.goals import GoalSettingsRepository, GoalSettingsService
from food_diary.services.nutrition import NutritionAnalysisService, NutritionClient
from food_diary.services.progress import ProgressAggregator
from food_diary.services.weights import WeightRepository, WeightTrackingService

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


@dataclass
class FakeClock:
    """Settable clock for deterministic time-based behaviour."""

    now: datetime = NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@dataclass
class InMemoryFoodRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    foods: dict[UUID, FoodEntry] = field(default_factory=dict)
    list_calls: int = 0

    def list_foods(self) -> list[FoodEntry]:
        self.list_calls += 1
        return list(self.foods.values())

    def create_food(self, entry: FoodEntry) -> FoodEntry:
        self.foods[entry.id] = entry
        return entry

    def update_food(self, entry: FoodEntry) -> FoodEntry | None:
        if entry.id not in self.foods:
            return None
        self.foods[entry.id] = entry
        return entry

    def delete_food(self, entry_id: UUID) -> bool:
        return self.foods.pop(entry_id, None) is not None


@dataclass
class InMemoryWeightRepository(WeightRepository):
    """In-memory weight repository for tests."""

    entries: dict[UUID, WeightEntry] = field(default_factory=dict)

    def list_entries(self) -> list[WeightEntry]:
        return list(self.entries.values())

    def create_entry(self, entry: WeightEntry) -> WeightEntry:
        self.entries[entry.id] = entry
        return entry

    def delete_entry(self, entry_id: UUID) -> bool:
        return self.entries.pop(entry_id, None) is not None


@dataclass
class InMemoryGoalSettingsRepository(GoalSettingsRepository):
    """In-memory goal settings repository for tests."""

    values: dict[str, str] = field(default_factory=dict)
    get_calls: int = 0

    def get_values(self) -> dict[str, str]:
        self.get_calls += 1
        return dict(self.values)

    def set_values(self, values: dict[str, str]) -> None:
        self.values.update(values)


@dataclass
class FakeNutritionClient(NutritionClient):
    """Fake nutrition client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "name": "Greek yogurt with honey",
            "calories": 250,
            "protein": 12,
            "carbs": 15,
            "fats": 3,
            "serving_size": "1 bowl",
            "meal_category": "breakfast",
        }
    )
    prompts: list[str] = field(default_factory=list)

    async def analyze(
        self,
        *,
        model: str,
        store: bool,
        system_prompt: str,
        prompt: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        return self.payload


def make_food(
    calories: float,
    timestamp: datetime,
    protein: float = 0.0,
    name: str = "food",
) -> FoodEntry:
    return FoodEntry(
        name=name,
        calories=calories,
        protein=protein,
        carbs=0.0,
        fats=0.0,
        timestamp=timestamp,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        openai_api_key="openai-key",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def nutrition_client() -> FakeNutritionClient:
    return FakeNutritionClient()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def goal_settings_service() -> GoalSettingsService:
    return GoalSettingsService(InMemoryGoalSettingsRepository())


@pytest.fixture
def food_log_service(
    food_repository: InMemoryFoodRepository,
    nutrition_client: FakeNutritionClient,
    clock: FakeClock,
) -> FoodLogService:
    nutrition_service = NutritionAnalysisService(
        client=nutrition_client,
        model="gpt-test",
        cache=InMemoryCache(),
    )
    return FoodLogService(
        repository=food_repository,
        nutrition_service=nutrition_service,
        clock=clock,
    )


@pytest.fixture
def aggregator(
    food_log_service: FoodLogService,
    goal_settings_service: GoalSettingsService,
    clock: FakeClock,
) -> ProgressAggregator:
    return ProgressAggregator(
        food_log=food_log_service,
        goal_source=goal_settings_service,
        exercise_provider=PlaceholderExerciseProvider(),
        clock=clock,
    )


@pytest.fixture
def container(
    settings: Settings,
    food_log_service: FoodLogService,
    goal_settings_service: GoalSettingsService,
    aggregator: ProgressAggregator,
    clock: FakeClock,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        goal_settings_service=goal_settings_service,
        nutrition_service=food_log_service.nutrition_service,
        food_log_service=food_log_service,
        weight_service=WeightTrackingService(InMemoryWeightRepository(), clock=clock),
        progress_aggregator=aggregator,
        close_resources=close_resources,
    )
