"""Domain models for shopping lists."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class ShoppingItem:
    """Ingredient to buy for a week."""

    name: str
    checked: bool = False


@dataclass(frozen=True)
class ShoppingList:
    """Saved shopping list for an owner's week."""

    owner_id: UUID
    week_start: date
    items: list[ShoppingItem]
