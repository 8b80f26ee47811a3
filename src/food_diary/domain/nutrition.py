"""Models for AI nutrition analysis results."""

from pydantic import BaseModel, Field, field_validator

from food_diary.domain.foods import DEFAULT_SERVING_SIZE, MealCategory


class FoodAnalysis(BaseModel):
    """Structured nutrition estimate for a food description."""

    name: str = Field(min_length=1)
    calories: float
    protein: float
    carbs: float
    fats: float
    serving_size: str | None = DEFAULT_SERVING_SIZE
    meal_category: MealCategory | None = None

    @field_validator("calories", "protein", "carbs", "fats")
    @classmethod
    def _clamp_non_negative(cls, value: float) -> float:
        return max(0.0, value)

    @field_validator("meal_category", mode="before")
    @classmethod
    def _normalize_meal_category(cls, value: object) -> object:
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "snack":
                return MealCategory.SNACKS
            if normalized in {member.value for member in MealCategory}:
                return normalized
            return None
        return value
