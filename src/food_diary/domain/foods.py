"""Domain models for logged food entries."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4

DEFAULT_SERVING_SIZE = "1 serving"


class MealCategory(StrEnum):
    """Meal a food entry belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACKS = "snacks"


@dataclass(frozen=True)
class FoodEntry:
    """A single logged food with its macros.

    Entries are immutable; an edit builds a new entry with the same id.
    Negative macro values are clamped to zero and text fields are trimmed.
    """

    name: str
    calories: float
    protein: float
    carbs: float
    fats: float
    timestamp: datetime
    serving_size: str | None = DEFAULT_SERVING_SIZE
    meal_category: MealCategory = MealCategory.SNACKS
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "calories", max(0.0, float(self.calories)))
        object.__setattr__(self, "protein", max(0.0, float(self.protein)))
        object.__setattr__(self, "carbs", max(0.0, float(self.carbs)))
        object.__setattr__(self, "fats", max(0.0, float(self.fats)))
        serving = (self.serving_size or "").strip()
        object.__setattr__(self, "serving_size", serving or DEFAULT_SERVING_SIZE)
        object.__setattr__(self, "meal_category", MealCategory(self.meal_category))

    def replace(  # noqa: PLR0913
        self,
        *,
        name: str,
        calories: float,
        protein: float,
        carbs: float,
        fats: float,
        serving_size: str | None,
        meal_category: MealCategory,
    ) -> "FoodEntry":
        """Return an edited copy that keeps the id and timestamp."""
        return FoodEntry(
            id=self.id,
            name=name,
            calories=calories,
            protein=protein,
            carbs=carbs,
            fats=fats,
            serving_size=serving_size,
            timestamp=self.timestamp,
            meal_category=meal_category,
        )
