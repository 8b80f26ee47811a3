"""Supabase repository for goal settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from food_diary.services.goals import GoalSettingsRepository


@dataclass
class SupabaseGoalSettingsRepository(GoalSettingsRepository):
    """Supabase implementation storing goals as key/value rows."""

    client: Client

    def get_values(self) -> dict[str, str]:
        """Return stored goal values."""
        response = self.client.table("goal_settings").select("key, value").execute()
        values: dict[str, str] = {}
        for row in response.data or []:
            key = row.get("key")
            value = row.get("value")
            if isinstance(key, str) and value is not None:
                values[key] = str(value)
        return values

    def set_values(self, values: dict[str, str]) -> None:
        """Upsert goal values."""
        updated_at = datetime.now(tz=UTC).isoformat()
        payload = [
            {"key": key, "value": value, "updated_at": updated_at}
            for key, value in values.items()
        ]
        if payload:
            self.client.table("goal_settings").upsert(payload).execute()
