"""Request models for the food diary API."""

from datetime import datetime

from pydantic import BaseModel, Field

from food_diary.domain.foods import MealCategory
from food_diary.domain.goals import ActivityLevel, Sex


class FoodEntryRequest(BaseModel):
    """Manually entered food."""

    name: str = Field(min_length=1)
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    serving_size: str | None = None
    meal_category: MealCategory = MealCategory.SNACKS
    timestamp: datetime | None = None


class FoodUpdateRequest(BaseModel):
    """Full replacement of an entry's editable fields."""

    name: str = Field(min_length=1)
    calories: float
    protein: float
    carbs: float
    fats: float
    serving_size: str | None = None
    meal_category: MealCategory


class QuickFoodRequest(BaseModel):
    """Food name to analyze and log in one step."""

    name: str = Field(min_length=1)
    meal_category: MealCategory = MealCategory.SNACKS
    timestamp: datetime | None = None


class AnalyzeFoodRequest(BaseModel):
    """Free-text food description to analyze."""

    description: str = Field(min_length=1, max_length=2000)


class WeightEntryRequest(BaseModel):
    """New body weight measurement."""

    weight: float = Field(gt=0)
    note: str | None = Field(default=None, max_length=500)
    date: datetime | None = None


class GoalsUpdateRequest(BaseModel):
    """Free-text goal values; omitted fields are left unchanged."""

    calorie_goal: str | float | None = None
    protein_goal: str | float | None = None
    exercise_goal: str | float | None = None


class EnergyPlanRequest(BaseModel):
    """Body metrics for the energy calculator."""

    weight: float = Field(gt=0)
    height: float = Field(gt=0)
    age: float = Field(gt=0)
    sex: Sex
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    metric: bool = True
    apply_to_goals: bool = False
