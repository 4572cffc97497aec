"""Domain models for planner settings."""

from dataclasses import dataclass, field

MIN_DINNERS_PER_WEEK = 1
MAX_DINNERS_PER_WEEK = 7


@dataclass(frozen=True)
class PlannerSettings:
    """Per-user constraints used when generating plans."""

    dinners_per_week: int = 5
    max_cook_time_minutes: int = 45
    excluded_ingredients: list[str] = field(default_factory=list)
    allow_repeats: bool = False


DEFAULT_PLANNER_SETTINGS = PlannerSettings()
