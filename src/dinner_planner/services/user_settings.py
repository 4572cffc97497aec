"""User settings service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from dinner_planner.domain.settings import (
    DEFAULT_PLANNER_SETTINGS,
    MAX_DINNERS_PER_WEEK,
    MIN_DINNERS_PER_WEEK,
    PlannerSettings,
)


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_settings(self, user_id: UUID) -> PlannerSettings | None:
        """Return the user's stored planner settings, if any."""

    def save_settings(self, user_id: UUID, settings: PlannerSettings) -> None:
        """Insert or replace the user's planner settings."""


@dataclass
class UserSettingsService:
    """Service for planner settings."""

    repository: UserSettingsRepository

    def get_settings(self, user_id: UUID) -> PlannerSettings:
        """Return the user's settings or the defaults if unset."""
        return self.repository.get_settings(user_id) or DEFAULT_PLANNER_SETTINGS

    def save_settings(self, user_id: UUID, settings: PlannerSettings) -> PlannerSettings:
        """Validate and persist a user's settings."""
        if not MIN_DINNERS_PER_WEEK <= settings.dinners_per_week <= MAX_DINNERS_PER_WEEK:
            raise ValueError("dinners_per_week must be between 1 and 7")
        if settings.max_cook_time_minutes <= 0:
            raise ValueError("max_cook_time_minutes must be positive")
        cleaned = PlannerSettings(
            dinners_per_week=settings.dinners_per_week,
            max_cook_time_minutes=settings.max_cook_time_minutes,
            excluded_ingredients=_clean_terms(settings.excluded_ingredients),
            allow_repeats=settings.allow_repeats,
        )
        self.repository.save_settings(user_id, cleaned)
        return cleaned


def _clean_terms(terms: list[str]) -> list[str]:
    """Strip blanks and drop case-insensitive duplicates, keeping order."""
    seen: set[str] = set()
    cleaned = []
    for term in terms:
        value = term.strip()
        if not value or value.lower() in seen:
            continue
        seen.add(value.lower())
        cleaned.append(value)
    return cleaned
