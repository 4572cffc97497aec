"""Supabase repository for saved shopping lists."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from dinner_planner.domain.shopping import ShoppingItem, ShoppingList
from dinner_planner.services.shopping import ShoppingListRepository
from dinner_planner.services.weeks import format_date, parse_date


@dataclass
class SupabaseShoppingListRepository(ShoppingListRepository):
    """Supabase-backed repository for shopping lists."""

    client: Client

    def get_list(self, owner_id: UUID, week_start: date) -> ShoppingList | None:
        """Return the saved list for a week, if present."""
        response = (
            self.client.table("shopping_lists")
            .select("*")
            .eq("user_id", str(owner_id))
            .eq("week_start", format_date(week_start))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return ShoppingList(
            owner_id=UUID(row["user_id"]),
            week_start=parse_date(str(row["week_start"])),
            items=[
                ShoppingItem(name=str(item.get("name", "")), checked=bool(item.get("checked")))
                for item in row.get("items") or []
            ],
        )

    def save_list(self, shopping_list: ShoppingList) -> None:
        """Insert or overwrite the list for its week."""
        response = (
            self.client.table("shopping_lists")
            .upsert(
                {
                    "user_id": str(shopping_list.owner_id),
                    "week_start": format_date(shopping_list.week_start),
                    "items": [
                        {"name": item.name, "checked": item.checked}
                        for item in shopping_list.items
                    ],
                },
                on_conflict="user_id,week_start",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save shopping list")
