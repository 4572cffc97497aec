"""Domain models for the meal library."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class Ingredient:
    """Ingredient line of a meal; quantity is free display text."""

    name: str
    quantity: str | None = None


@dataclass(frozen=True)
class Meal:
    """Represents a meal in a user's library."""

    id: UUID
    owner_id: UUID
    name: str
    cook_time_minutes: int
    tags: list[str] = field(default_factory=list)
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    image_url: str | None = None
    servings: int | None = None
    source_url: str | None = None
    nutrition: dict[str, float] | None = None
