"""Household and meal request endpoints."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from dinner_planner.api.auth import current_user_id, get_container, require_api_token
from dinner_planner.api.models import (
    ApproveIn,
    HouseholdCreateIn,
    HouseholdJoinIn,
    MealRequestIn,
)
from dinner_planner.api.serializers import (
    serialize_household,
    serialize_meal,
    serialize_member,
    serialize_plan,
    serialize_request,
)

router = APIRouter(tags=["households"], dependencies=[Depends(require_api_token)])


@router.post("/households", status_code=status.HTTP_201_CREATED)
async def create_household(
    body: HouseholdCreateIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Create a household owned by the caller."""
    household = get_container(request).household_service.create_household(
        user_id, body.name, body.display_name
    )
    return serialize_household(household)


@router.post("/households/join")
async def join_household(
    body: HouseholdJoinIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Join a household with an invite code."""
    household = get_container(request).household_service.join_household(
        user_id, body.invite_code, body.display_name
    )
    if household is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invalid invite code"
        )
    return serialize_household(household)


@router.get("/households/{household_id}/members")
async def list_members(
    household_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the household's members."""
    service = get_container(request).household_service
    if not service.is_member(household_id, user_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
    return {
        "members": [serialize_member(m) for m in service.list_members(household_id)]
    }


@router.get("/households/{household_id}/meals")
async def list_household_meals(
    household_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the meals every member can request for the household plan."""
    container = get_container(request)
    household_service = container.household_service
    if not household_service.is_member(household_id, user_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
    member_ids = [m.user_id for m in household_service.list_members(household_id)]
    meals = container.meal_service.list_household_meals(member_ids)
    return {"meals": [serialize_meal(meal) for meal in meals]}


@router.get("/households/{household_id}/requests")
async def list_requests(
    household_id: UUID,
    request: Request,
    status_filter: str | None = Query(default=None, alias="status"),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return the household's meal requests."""
    container = get_container(request)
    if not container.household_service.is_member(household_id, user_id):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
    requests = container.meal_request_service.list_requests(household_id, status_filter)
    return {"requests": [serialize_request(item) for item in requests]}


@router.post(
    "/households/{household_id}/requests", status_code=status.HTTP_201_CREATED
)
async def submit_request(
    household_id: UUID,
    body: MealRequestIn,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Ask for a meal to be added to the household plan."""
    meal_request = get_container(request).meal_request_service.submit_request(
        household_id=household_id,
        requested_by=user_id,
        meal_id=body.meal_id,
        week_start=body.week_start,
        day_date=body.day_date,
        note=body.note,
    )
    if meal_request is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not a member, or the meal is not shared with this household",
        )
    return serialize_request(meal_request)


@router.post("/requests/{request_id}/approve")
async def approve_request(
    request_id: UUID,
    request: Request,
    body: ApproveIn | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Approve a request into the household owner's plan."""
    plan = get_container(request).meal_request_service.approve_request(
        request_id, user_id, day_date=body.day_date if body else None
    )
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Request, target day or plan not found",
        )
    return serialize_plan(plan)


@router.post("/requests/{request_id}/reject")
async def reject_request(
    request_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Reject a pending request."""
    meal_request = get_container(request).meal_request_service.reject_request(
        request_id, user_id
    )
    if meal_request is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return serialize_request(meal_request)
