"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from food_diary.domain.foods import FoodEntry, MealCategory
from food_diary.services.food_log import FoodLogRepository

_COLUMNS = (
    "id, name, calories, protein, carbs, fats, serving_size, logged_at, meal_category"
)


@dataclass
class SupabaseFoodRepository(FoodLogRepository):
    """Supabase implementation for the food log."""

    client: Client

    def list_foods(self) -> list[FoodEntry]:
        """Return all food entries ordered by log time."""
        response = (
            self.client.table("food_entries")
            .select(_COLUMNS)
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def create_food(self, entry: FoodEntry) -> FoodEntry:
        """Insert a food entry row."""
        response = self.client.table("food_entries").insert(_to_row(entry)).execute()
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_row(response.data[0])

    def update_food(self, entry: FoodEntry) -> FoodEntry | None:
        """Replace a food entry row by id."""
        payload = _to_row(entry)
        payload.pop("id")
        response = (
            self.client.table("food_entries")
            .update(payload)
            .eq("id", str(entry.id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_food(self, entry_id: UUID) -> bool:
        """Delete a food entry row."""
        response = (
            self.client.table("food_entries").delete().eq("id", str(entry_id)).execute()
        )
        return bool(response.data)


def _to_row(entry: FoodEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "name": entry.name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fats": entry.fats,
        "serving_size": entry.serving_size,
        "logged_at": entry.timestamp.isoformat(),
        "meal_category": entry.meal_category.value,
    }


def _parse_row(row: dict[str, object]) -> FoodEntry:
    category_raw = row.get("meal_category")
    try:
        category = MealCategory(str(category_raw).lower())
    except ValueError:
        category = MealCategory.SNACKS
    return FoodEntry(
        id=UUID(str(row["id"])),
        name=str(row.get("name") or ""),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
        serving_size=row.get("serving_size"),
        timestamp=datetime.fromisoformat(str(row["logged_at"])),
        meal_category=category,
    )
