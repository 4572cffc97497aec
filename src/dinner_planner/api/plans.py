"""Weekly plan and shopping list endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from dinner_planner.api.auth import current_user_id, get_container, require_api_token
from dinner_planner.api.models import DayMealIn, RerollIn, SwapIn
from dinner_planner.api.serializers import (
    serialize_items,
    serialize_plan,
    serialize_shopping_list,
)
from dinner_planner.domain.plans import WeekPlan

router = APIRouter(tags=["plans"], dependencies=[Depends(require_api_token)])


def _plan_or_404(plan: WeekPlan | None) -> dict[str, object]:
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_plan(plan)


@router.get("/plans/{week}")
async def get_plan(
    week: date, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the stored plan for the week containing the given date."""
    return _plan_or_404(get_container(request).plan_service.get_plan(user_id, week))


@router.post("/plans/{week}/generate")
async def generate_plan(
    week: date, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Generate and save a new plan for the week."""
    plan = get_container(request).plan_service.generate(user_id, week)
    return serialize_plan(plan)


@router.post("/plans/{week}/reroll")
async def reroll_day(
    week: date,
    body: RerollIn,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Pick a new random meal for one day."""
    plan = get_container(request).plan_service.reroll(user_id, week, body.day)
    return _plan_or_404(plan)


@router.post("/plans/{week}/swap")
async def swap_days(
    week: date,
    body: SwapIn,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Exchange the meals of two days."""
    plan = get_container(request).plan_service.swap(
        user_id, week, body.date_a, body.date_b
    )
    return _plan_or_404(plan)


@router.put("/plans/{week}/days/{day}")
async def set_day_meal(
    week: date,
    day: date,
    body: DayMealIn,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Set or clear a day's meal manually."""
    plan = get_container(request).plan_service.set_day_meal(
        user_id, week, day, body.meal_id
    )
    return _plan_or_404(plan)


@router.get("/shopping/{week}")
async def get_shopping_list(
    week: date, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the saved shopping list, deriving it on first access."""
    service = get_container(request).shopping_list_service
    shopping_list = service.get_shopping_list(user_id, week)
    if shopping_list is None:
        return {"week_start": None, "items": serialize_items([])}
    return serialize_shopping_list(shopping_list)


@router.post("/shopping/{week}/generate")
async def regenerate_shopping_list(
    week: date, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Rebuild the shopping list from the week's plan."""
    shopping_list = get_container(request).shopping_list_service.regenerate(
        user_id, week
    )
    if shopping_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="No plan for this week"
        )
    return serialize_shopping_list(shopping_list)


@router.post("/shopping/{week}/items/{index}/toggle")
async def toggle_item(
    week: date,
    index: int,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Flip the checked state of a shopping list item."""
    shopping_list = get_container(request).shopping_list_service.toggle_item(
        user_id, week, index
    )
    if shopping_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_shopping_list(shopping_list)
