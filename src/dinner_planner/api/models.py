"""Pydantic models for API request bodies."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from dinner_planner.domain.settings import (
    MAX_DINNERS_PER_WEEK,
    MIN_DINNERS_PER_WEEK,
    PlannerSettings,
)


class IngredientIn(BaseModel):
    """Ingredient line of a meal."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    quantity: str | None = None


class MealIn(BaseModel):
    """Meal create/update payload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    cook_time_minutes: int = Field(gt=0)
    tags: list[str] = Field(default_factory=list)
    ingredients: list[IngredientIn] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    image_url: str | None = None
    servings: int | None = Field(default=None, gt=0)
    source_url: str | None = None
    nutrition: dict[str, float] | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the repository payload for this meal."""
        payload = self.model_dump()
        payload["tags"] = list(dict.fromkeys(tag for tag in self.tags if tag))
        return payload


class RecipeUrlIn(BaseModel):
    """Recipe page to import."""

    url: HttpUrl


class SettingsIn(BaseModel):
    """Planner settings payload."""

    dinners_per_week: int = Field(ge=MIN_DINNERS_PER_WEEK, le=MAX_DINNERS_PER_WEEK)
    max_cook_time_minutes: int = Field(gt=0)
    excluded_ingredients: list[str] = Field(default_factory=list)
    allow_repeats: bool = False

    def to_domain(self) -> PlannerSettings:
        """Convert to the domain settings record."""
        return PlannerSettings(**self.model_dump())


class RerollIn(BaseModel):
    """Day to reroll."""

    day: date


class SwapIn(BaseModel):
    """Two days whose meals are exchanged."""

    date_a: date
    date_b: date


class DayMealIn(BaseModel):
    """Manual meal assignment; null clears the day."""

    meal_id: UUID | None = None


class HouseholdCreateIn(BaseModel):
    """New household payload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    display_name: str = Field(min_length=1)


class HouseholdJoinIn(BaseModel):
    """Invite code redemption payload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    invite_code: str = Field(min_length=1)
    display_name: str = Field(min_length=1)


class MealRequestIn(BaseModel):
    """Meal request submitted by a household member."""

    meal_id: UUID
    week_start: date
    day_date: date | None = None
    note: str | None = None


class ApproveIn(BaseModel):
    """Optional target day when approving a request."""

    day_date: date | None = None
