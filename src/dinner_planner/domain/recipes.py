"""Domain models for imported recipes."""

from dataclasses import dataclass, field

from dinner_planner.domain.meals import Ingredient


@dataclass(frozen=True)
class ParsedRecipe:
    """Normalized recipe extracted from a web page."""

    name: str
    cook_time_minutes: int
    ingredients: list[Ingredient]
    instructions: list[str] = field(default_factory=list)
    image_url: str | None = None
    servings: int | None = None
    nutrition: dict[str, float] | None = None
    tags: list[str] = field(default_factory=list)
    source_url: str = ""
