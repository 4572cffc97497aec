"""Services for managing the meal library."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from dinner_planner.domain.meals import Meal
from dinner_planner.domain.recipes import ParsedRecipe
from dinner_planner.services.recipes import RecipeImportService


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, owner_id: UUID) -> list[Meal]:
        """Return all meals for an owner."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def get_meals(self, meal_ids: list[UUID]) -> list[Meal]:
        """Return the meals that exist among the given ids."""

    def list_meals_for_owners(self, owner_ids: list[UUID]) -> list[Meal]:
        """Return all meals belonging to any of the owners."""

    def create_meal(self, owner_id: UUID, payload: dict[str, object]) -> Meal:
        """Create a meal and return it."""

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal:
        """Update a meal and return it."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal."""


@dataclass
class MealService:
    """Application service for the meal library."""

    repository: MealRepository
    recipe_import_service: RecipeImportService

    def list_meals(self, owner_id: UUID) -> list[Meal]:
        """Return the owner's meals."""
        return self.repository.list_meals(owner_id)

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""
        return self.repository.get_meal(meal_id)

    def list_household_meals(self, member_ids: list[UUID]) -> list[Meal]:
        """Return the meals shared by a household's members."""
        if not member_ids:
            return []
        return self.repository.list_meals_for_owners(member_ids)

    def create_meal(self, owner_id: UUID, payload: dict[str, object]) -> Meal:
        """Create a meal from a validated payload."""
        return self.repository.create_meal(owner_id, payload)

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal | None:
        """Update a meal, returning None when it does not exist."""
        if self.repository.get_meal(meal_id) is None:
            return None
        return self.repository.update_meal(meal_id, payload)

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a meal; plans referencing it are left untouched."""
        if self.repository.get_meal(meal_id) is None:
            return False
        self.repository.delete_meal(meal_id)
        return True

    async def import_meal(self, owner_id: UUID, url: str) -> Meal | None:
        """Parse a recipe page and store it as a meal."""
        recipe = await self.recipe_import_service.parse_url(url)
        if recipe is None:
            return None
        return self.repository.create_meal(owner_id, recipe_to_payload(recipe, url))


def recipe_to_payload(recipe: ParsedRecipe, url: str) -> dict[str, object]:
    """Build a meal payload from a parsed recipe."""
    return {
        "name": recipe.name,
        "tags": list(recipe.tags),
        "cook_time_minutes": recipe.cook_time_minutes,
        "ingredients": [
            {"name": ingredient.name, "quantity": ingredient.quantity}
            for ingredient in recipe.ingredients
        ],
        "instructions": list(recipe.instructions),
        "image_url": recipe.image_url,
        "servings": recipe.servings,
        "source_url": recipe.source_url or url,
        "nutrition": recipe.nutrition,
    }
