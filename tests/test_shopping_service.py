"""Tests for shopping list derivation."""

from datetime import date
from uuid import uuid4

from dinner_planner.domain.meals import Ingredient, Meal
from dinner_planner.domain.plans import DayPlan, WeekPlan
from dinner_planner.domain.shopping import ShoppingItem
from dinner_planner.services.shopping import ShoppingListService, build_shopping_items
from dinner_planner.services.weeks import week_days
from tests.conftest import (
    InMemoryMealRepository,
    InMemoryPlanRepository,
    InMemoryShoppingListRepository,
)

MONDAY = date(2024, 1, 1)


def _plan(owner_id, meal_ids) -> WeekPlan:  # type: ignore[no-untyped-def]
    days = [
        DayPlan(date=day, meal_id=meal_ids[i] if i < len(meal_ids) else None)
        for i, day in enumerate(week_days(MONDAY))
    ]
    return WeekPlan(owner_id=owner_id, week_start=MONDAY, days=days)


def _meal(owner_id, name, *ingredients: str) -> Meal:  # type: ignore[no-untyped-def]
    return Meal(
        id=uuid4(),
        owner_id=owner_id,
        name=name,
        cook_time_minutes=20,
        ingredients=[Ingredient(name=item, quantity="1") for item in ingredients],
    )


def test_build_items_dedupes_case_and_whitespace() -> None:
    owner_id = uuid4()
    tacos = _meal(owner_id, "Tacos", "Onion", "ground beef")
    chili = _meal(owner_id, "Chili", "  onion ", "Kidney Beans", "Ground Beef")

    items = build_shopping_items(_plan(owner_id, [tacos.id, chili.id]), [tacos, chili])

    assert items == [
        ShoppingItem(name="Onion"),
        ShoppingItem(name="Ground beef"),
        ShoppingItem(name="Kidney beans"),
    ]


def test_build_items_skips_dangling_meal_references() -> None:
    owner_id = uuid4()
    soup = _meal(owner_id, "Soup", "Leek")

    items = build_shopping_items(_plan(owner_id, [uuid4(), soup.id]), [soup])

    assert items == [ShoppingItem(name="Leek")]


def _service():  # type: ignore[no-untyped-def]
    plans = InMemoryPlanRepository()
    meals = InMemoryMealRepository()
    lists = InMemoryShoppingListRepository()
    return ShoppingListService(plans, meals, lists), plans, meals, lists


def test_generate_without_plan_is_empty() -> None:
    service, *_ = _service()

    assert service.generate_shopping_list(uuid4(), MONDAY) == []
    assert service.get_shopping_list(uuid4(), MONDAY) is None


def test_get_list_derives_and_saves_on_first_access() -> None:
    service, plans, meals, lists = _service()
    owner_id = uuid4()
    pasta = meals.add(_meal(owner_id, "Pasta", "Penne", "Tomato"))
    plans.upsert_plan(_plan(owner_id, [pasta.id]))

    shopping_list = service.get_shopping_list(owner_id, date(2024, 1, 5))

    assert shopping_list is not None
    assert [item.name for item in shopping_list.items] == ["Penne", "Tomato"]
    assert lists.get_list(owner_id, MONDAY) == shopping_list


def test_toggle_then_regenerate_resets_checked_state() -> None:
    service, plans, meals, _ = _service()
    owner_id = uuid4()
    pasta = meals.add(_meal(owner_id, "Pasta", "Penne", "Tomato"))
    plans.upsert_plan(_plan(owner_id, [pasta.id]))
    service.get_shopping_list(owner_id, MONDAY)

    toggled = service.toggle_item(owner_id, MONDAY, 1)
    assert toggled is not None
    assert toggled.items[1].checked is True
    assert service.get_shopping_list(owner_id, MONDAY).items[1].checked is True

    regenerated = service.regenerate(owner_id, MONDAY)

    assert regenerated is not None
    assert all(not item.checked for item in regenerated.items)


def test_toggle_out_of_range_returns_none() -> None:
    service, plans, meals, _ = _service()
    owner_id = uuid4()
    pasta = meals.add(_meal(owner_id, "Pasta", "Penne"))
    plans.upsert_plan(_plan(owner_id, [pasta.id]))
    service.regenerate(owner_id, MONDAY)

    assert service.toggle_item(owner_id, MONDAY, 5) is None
    assert service.toggle_item(owner_id, MONDAY, -1) is None


def test_saved_empty_list_is_not_rewritten_on_read() -> None:
    service, plans, _, lists = _service()
    owner_id = uuid4()
    plans.upsert_plan(_plan(owner_id, []))

    first = service.get_shopping_list(owner_id, MONDAY)
    second = service.get_shopping_list(owner_id, MONDAY)

    assert first is not None
    assert first.items == []
    assert second == first
    assert lists.writes == 1
