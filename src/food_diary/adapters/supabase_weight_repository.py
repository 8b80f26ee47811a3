"""Supabase repository for weight entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from food_diary.domain.weights import WeightEntry
from food_diary.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight tracking."""

    client: Client

    def list_entries(self) -> list[WeightEntry]:
        """Return weight entries, newest first."""
        response = (
            self.client.table("weight_entries")
            .select("id, weight, measured_at, note")
            .order("measured_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def create_entry(self, entry: WeightEntry) -> WeightEntry:
        """Insert a weight entry row."""
        response = (
            self.client.table("weight_entries")
            .insert(
                {
                    "id": str(entry.id),
                    "weight": entry.weight,
                    "measured_at": entry.date.isoformat(),
                    "note": entry.note,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight entry")
        return _parse_row(response.data[0])

    def delete_entry(self, entry_id: UUID) -> bool:
        """Delete a weight entry row."""
        response = (
            self.client.table("weight_entries")
            .delete()
            .eq("id", str(entry_id))
            .execute()
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=UUID(str(row["id"])),
        weight=float(row.get("weight") or 0.0),
        date=datetime.fromisoformat(str(row["measured_at"])),
        note=row.get("note"),
    )
