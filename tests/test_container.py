"""Tests for container wiring."""

import asyncio

from food_diary.config import Settings
from food_diary.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.nutrition_service is not None
    assert container.progress_aggregator.food_log is container.food_log_service
    assert container.food_log_service.changed.listener_count == 1
    assert container.goal_settings_service.changed.listener_count == 1
    asyncio.run(container.close_resources())


def test_build_container_without_openai_key() -> None:
    settings = Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        openai_api_key=" ",
        timezone="Europe/Berlin",
    )

    container = build_container(settings)

    assert container.nutrition_service is None
    assert container.food_log_service.nutrition_service is None
    assert str(container.progress_aggregator.timezone) == "Europe/Berlin"
    asyncio.run(container.close_resources())
