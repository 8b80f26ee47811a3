"""AI nutrition analysis service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from food_diary.domain.foods import MealCategory
from food_diary.domain.nutrition import FoodAnalysis
from food_diary.services.cache import Cache

SYSTEM_PROMPT = (
    "You are a nutrition expert that analyzes food descriptions and provides "
    "detailed nutritional information."
)

ANALYSIS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "calories": {"type": "number"},
        "protein": {"type": "number"},
        "carbs": {"type": "number"},
        "fats": {"type": "number"},
        "serving_size": {"anyOf": [{"type": "string"}, {"type": "null"}]},
        "meal_category": {
            "anyOf": [
                {"type": "string", "enum": [member.value for member in MealCategory]},
                {"type": "null"},
            ]
        },
    },
    "required": [
        "name",
        "calories",
        "protein",
        "carbs",
        "fats",
        "serving_size",
        "meal_category",
    ],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


class NutritionAnalysisError(RuntimeError):
    """Raised when a nutrition estimate cannot be produced."""


class NutritionAnalysisUnavailableError(NutritionAnalysisError):
    """Raised when no analysis backend is configured."""


class NutritionClient(Protocol):
    """Interface for LLM-backed nutrition estimates."""

    async def analyze(
        self,
        *,
        model: str,
        store: bool,
        system_prompt: str,
        prompt: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Return structured nutrition data for a prompt."""


@dataclass
class NutritionAnalysisService:
    """Service that builds analysis prompts and validates results."""

    client: NutritionClient
    model: str
    cache: Cache
    store: bool = False
    cache_ttl_seconds: int = 3600

    async def analyze(
        self, description: str, *, detailed: bool = False
    ) -> FoodAnalysis:
        """Estimate macros for a free-text food description."""
        normalized = description.strip()
        if not normalized:
            raise NutritionAnalysisError("Food description is empty")

        depth = "detailed" if detailed else "basic"
        cache_key = f"analysis:{depth}:{normalized.lower()}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodAnalysis):
            return cached

        raw = await self.client.analyze(
            model=self.model,
            store=self.store,
            system_prompt=SYSTEM_PROMPT,
            prompt=build_prompt(normalized, detailed=detailed),
            schema=ANALYSIS_SCHEMA,
        )
        try:
            analysis = FoodAnalysis.model_validate(raw)
        except ValidationError as exc:
            _logger.warning("Invalid nutrition analysis for %r: %s", normalized, exc)
            raise NutritionAnalysisError(
                "Failed to parse nutrition information"
            ) from exc
        self.cache.set(cache_key, analysis, ttl_seconds=self.cache_ttl_seconds)
        return analysis


def build_prompt(description: str, *, detailed: bool) -> str:
    """Return the user prompt for a food description."""
    depth = (
        "Provide detailed analysis including ingredients and portion sizes."
        if detailed
        else "Provide basic nutritional estimates."
    )
    return (
        "Analyze the following food description and return its nutritional "
        "information.\n"
        f'Food description: "{description}"\n'
        "Report calories, protein, carbs and fats in grams, a short serving "
        "size description and, if obvious, the meal category.\n"
        f"{depth}\n"
        "Be conservative with estimates. If unsure, provide lower estimates."
    )
