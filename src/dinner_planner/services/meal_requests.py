"""Meal requests submitted by household members."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from dinner_planner.domain.households import (
    REQUEST_APPROVED,
    REQUEST_PENDING,
    REQUEST_REJECTED,
    MealRequest,
)
from dinner_planner.domain.plans import WeekPlan
from dinner_planner.services.households import HouseholdService
from dinner_planner.services.meals import MealRepository
from dinner_planner.services.planner import PlanService
from dinner_planner.services.weeks import week_start_of

_logger = logging.getLogger(__name__)


class MealRequestRepository(Protocol):
    """Persistence interface for meal requests."""

    def create_request(self, payload: dict[str, object]) -> MealRequest:
        """Create a meal request and return it."""

    def get_request(self, request_id: UUID) -> MealRequest | None:
        """Return a meal request by id, if present."""

    def list_requests(
        self, household_id: UUID, status: str | None
    ) -> list[MealRequest]:
        """Return a household's requests, optionally filtered by status."""

    def update_status(self, request_id: UUID, status: str) -> MealRequest:
        """Set a request's status and return it."""


@dataclass
class MealRequestService:
    """Routes approved requests into the household owner's plan."""

    repository: MealRequestRepository
    household_service: HouseholdService
    plan_service: PlanService
    meal_repository: MealRepository

    def submit_request(  # noqa: PLR0913
        self,
        household_id: UUID,
        requested_by: UUID,
        meal_id: UUID,
        week_start: date,
        day_date: date | None = None,
        note: str | None = None,
    ) -> MealRequest | None:
        """Store a pending request for a meal shared within the household.

        Returns None when the requester is not a member, or when the meal does
        not exist or belongs to someone outside the household.
        """
        if not self.household_service.is_member(household_id, requested_by):
            return None
        meal = self.meal_repository.get_meal(meal_id)
        if meal is None or not self.household_service.is_member(
            household_id, meal.owner_id
        ):
            _logger.info(
                "Rejected meal request for unshared meal: household=%s meal=%s",
                household_id,
                meal_id,
            )
            return None
        return self.repository.create_request(
            {
                "household_id": household_id,
                "requested_by": requested_by,
                "meal_id": meal_id,
                "week_start": week_start_of(week_start),
                "day_date": day_date,
                "note": note.strip() if note else None,
                "status": REQUEST_PENDING,
            }
        )

    def list_requests(
        self, household_id: UUID, status: str | None = None
    ) -> list[MealRequest]:
        """Return the household's requests."""
        return self.repository.list_requests(household_id, status)

    def approve_request(
        self, request_id: UUID, approver_id: UUID, day_date: date | None = None
    ) -> WeekPlan | None:
        """Place the requested meal on the owner's plan and mark it approved."""
        request = self._pending_request(request_id, approver_id)
        if request is None:
            return None
        target_day = day_date or request.day_date
        household = self.household_service.get_household(request.household_id)
        if target_day is None or household is None:
            return None
        plan = self.plan_service.set_day_meal(
            household.owner_id, request.week_start, target_day, request.meal_id
        )
        if plan is None or plan.find_day(target_day) is None:
            return None
        self.repository.update_status(request.id, REQUEST_APPROVED)
        _logger.info(
            "Approved meal request: request=%s day=%s", request.id, target_day
        )
        return plan

    def reject_request(self, request_id: UUID, approver_id: UUID) -> MealRequest | None:
        """Mark a pending request as rejected."""
        request = self._pending_request(request_id, approver_id)
        if request is None:
            return None
        return self.repository.update_status(request.id, REQUEST_REJECTED)

    def _pending_request(
        self, request_id: UUID, approver_id: UUID
    ) -> MealRequest | None:
        request = self.repository.get_request(request_id)
        if request is None or request.status != REQUEST_PENDING:
            return None
        if not self.household_service.is_member(request.household_id, approver_id):
            return None
        return request
