"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from dinner_planner.domain.settings import DEFAULT_PLANNER_SETTINGS, PlannerSettings
from dinner_planner.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_settings(self, user_id: UUID) -> PlannerSettings | None:
        """Return the stored planner settings for a user."""
        response = (
            self.client.table("user_settings")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        defaults = DEFAULT_PLANNER_SETTINGS
        return PlannerSettings(
            dinners_per_week=int(row.get("dinners_per_week") or defaults.dinners_per_week),
            max_cook_time_minutes=int(
                row.get("max_cook_time_minutes") or defaults.max_cook_time_minutes
            ),
            excluded_ingredients=[
                str(term) for term in row.get("excluded_ingredients") or []
            ],
            allow_repeats=bool(row.get("allow_repeats", defaults.allow_repeats)),
        )

    def save_settings(self, user_id: UUID, settings: PlannerSettings) -> None:
        """Insert or replace the user's planner settings."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "dinners_per_week": settings.dinners_per_week,
                "max_cook_time_minutes": settings.max_cook_time_minutes,
                "excluded_ingredients": list(settings.excluded_ingredients),
                "allow_repeats": settings.allow_repeats,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
