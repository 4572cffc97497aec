"""Supabase implementation for the meal library."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from dinner_planner.domain.meals import Ingredient, Meal
from dinner_planner.services.meals import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase-backed repository for meals."""

    client: Client

    def list_meals(self, owner_id: UUID) -> list[Meal]:
        """Return all meals for an owner, newest first."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("user_id", str(owner_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""
        response = (
            self.client.table("meals")
            .select("*")
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def get_meals(self, meal_ids: list[UUID]) -> list[Meal]:
        """Return the meals that exist among the given ids."""
        if not meal_ids:
            return []
        response = (
            self.client.table("meals")
            .select("*")
            .in_("id", [str(meal_id) for meal_id in meal_ids])
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def list_meals_for_owners(self, owner_ids: list[UUID]) -> list[Meal]:
        """Return all meals belonging to any of the owners, newest first."""
        if not owner_ids:
            return []
        response = (
            self.client.table("meals")
            .select("*")
            .in_("user_id", [str(owner_id) for owner_id in owner_ids])
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def create_meal(self, owner_id: UUID, payload: dict[str, object]) -> Meal:
        """Create a meal and return it."""
        response = (
            self.client.table("meals")
            .insert({"user_id": str(owner_id), **_to_row(payload)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(self, meal_id: UUID, payload: dict[str, object]) -> Meal:
        """Update a meal and return it."""
        response = (
            self.client.table("meals")
            .update(_to_row(payload))
            .eq("id", str(meal_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal")
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    """Map a meal payload onto column names."""
    row = dict(payload)
    if "cook_time_minutes" in row:
        row["cook_time_minutes"] = int(row["cook_time_minutes"])
    return row


def _parse_meal(row: dict[str, object]) -> Meal:
    """Parse a meal row into a domain model."""
    return Meal(
        id=UUID(row["id"]),
        owner_id=UUID(row["user_id"]),
        name=str(row.get("name", "")),
        cook_time_minutes=int(row.get("cook_time_minutes") or 0),
        tags=[str(tag) for tag in row.get("tags") or []],
        ingredients=[
            Ingredient(name=str(item.get("name", "")), quantity=item.get("quantity"))
            for item in row.get("ingredients") or []
            if isinstance(item, dict)
        ],
        instructions=[str(step) for step in row.get("instructions") or []],
        image_url=row.get("image_url"),
        servings=row.get("servings"),
        source_url=row.get("source_url"),
        nutrition=row.get("nutrition"),
    )
