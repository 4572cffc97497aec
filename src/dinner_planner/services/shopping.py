"""Shopping list derivation from weekly plans."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from dinner_planner.domain.meals import Meal
from dinner_planner.domain.plans import WeekPlan
from dinner_planner.domain.shopping import ShoppingItem, ShoppingList
from dinner_planner.services.meals import MealRepository
from dinner_planner.services.planner import PlanRepository
from dinner_planner.services.weeks import week_start_of


class ShoppingListRepository(Protocol):
    """Persistence interface for saved shopping lists."""

    def get_list(self, owner_id: UUID, week_start: date) -> ShoppingList | None:
        """Return the saved list for a week, if present."""

    def save_list(self, shopping_list: ShoppingList) -> None:
        """Insert or overwrite the saved list for its week."""


def build_shopping_items(plan: WeekPlan, meals: list[Meal]) -> list[ShoppingItem]:
    """Collect unique ingredient names across the plan's meals."""
    meals_by_id = {meal.id: meal for meal in meals}
    seen: dict[str, None] = {}
    for meal_id in plan.meal_ids():
        meal = meals_by_id.get(meal_id)
        if meal is None:
            continue
        for ingredient in meal.ingredients:
            key = ingredient.name.strip().lower()
            if key:
                seen.setdefault(key, None)
    return [ShoppingItem(name=key[:1].upper() + key[1:]) for key in seen]


@dataclass
class ShoppingListService:
    """Derives, stores and updates weekly shopping lists."""

    plan_repository: PlanRepository
    meal_repository: MealRepository
    repository: ShoppingListRepository

    def generate_shopping_list(
        self, owner_id: UUID, week_start: date
    ) -> list[ShoppingItem]:
        """Derive the unchecked shopping list for a week's plan."""
        plan = self.plan_repository.get_plan(owner_id, week_start_of(week_start))
        if plan is None:
            return []
        meal_ids = list(dict.fromkeys(plan.meal_ids()))
        meals = self.meal_repository.get_meals(meal_ids)
        return build_shopping_items(plan, meals)

    def regenerate(self, owner_id: UUID, week_start: date) -> ShoppingList | None:
        """Derive a fresh list and overwrite the saved one."""
        monday = week_start_of(week_start)
        if self.plan_repository.get_plan(owner_id, monday) is None:
            return None
        shopping_list = ShoppingList(
            owner_id=owner_id,
            week_start=monday,
            items=self.generate_shopping_list(owner_id, monday),
        )
        self.repository.save_list(shopping_list)
        return shopping_list

    def get_shopping_list(
        self, owner_id: UUID, week_start: date
    ) -> ShoppingList | None:
        """Return the saved list, deriving one on first access."""
        monday = week_start_of(week_start)
        saved = self.repository.get_list(owner_id, monday)
        if saved is not None:
            return saved
        return self.regenerate(owner_id, monday)

    def toggle_item(
        self, owner_id: UUID, week_start: date, index: int
    ) -> ShoppingList | None:
        """Flip the checked flag of one item in the saved list."""
        saved = self.repository.get_list(owner_id, week_start_of(week_start))
        if saved is None or not 0 <= index < len(saved.items):
            return None
        items = list(saved.items)
        items[index] = replace(items[index], checked=not items[index].checked)
        updated = replace(saved, items=items)
        self.repository.save_list(updated)
        return updated
