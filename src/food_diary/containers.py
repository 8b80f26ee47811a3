"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from food_diary.adapters.openai_nutrition_client import OpenAINutritionClient
from food_diary.adapters.supabase_food_repository import SupabaseFoodRepository
from food_diary.adapters.supabase_goal_settings_repository import (
    SupabaseGoalSettingsRepository,
)
from food_diary.adapters.supabase_weight_repository import SupabaseWeightRepository
from food_diary.config import Settings
from food_diary.services.cache import InMemoryCache
from food_diary.services.exercise import PlaceholderExerciseProvider
from food_diary.services.food_log import FoodLogService
from food_diary.services.goals import GoalSettingsService
from food_diary.services.nutrition import NutritionAnalysisService
from food_diary.services.progress import ProgressAggregator
from food_diary.services.weights import WeightTrackingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    goal_settings_service: GoalSettingsService
    nutrition_service: NutritionAnalysisService | None
    food_log_service: FoodLogService
    weight_service: WeightTrackingService
    progress_aggregator: ProgressAggregator
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    goal_settings_service = GoalSettingsService(
        SupabaseGoalSettingsRepository(supabase_client)
    )

    openai_client: OpenAINutritionClient | None = None
    nutrition_service: NutritionAnalysisService | None = None
    if resolved_settings.analysis_enabled:
        openai_client = OpenAINutritionClient.create(
            str(resolved_settings.openai_api_key)
        )
        nutrition_service = NutritionAnalysisService(
            client=openai_client,
            model=resolved_settings.openai_model,
            cache=InMemoryCache(),
            store=resolved_settings.openai_store,
        )

    food_log_service = FoodLogService(
        repository=SupabaseFoodRepository(supabase_client),
        nutrition_service=nutrition_service,
    )
    weight_service = WeightTrackingService(SupabaseWeightRepository(supabase_client))
    progress_aggregator = ProgressAggregator(
        food_log=food_log_service,
        goal_source=goal_settings_service,
        exercise_provider=PlaceholderExerciseProvider(),
        timezone=resolved_settings.tzinfo,
        retention_days=resolved_settings.retention_days,
        min_reload_interval=timedelta(
            seconds=resolved_settings.min_reload_interval_seconds
        ),
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        goal_settings_service=goal_settings_service,
        nutrition_service=nutrition_service,
        food_log_service=food_log_service,
        weight_service=weight_service,
        progress_aggregator=progress_aggregator,
        close_resources=close_resources,
    )
