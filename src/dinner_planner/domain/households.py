"""Domain models for households and meal requests."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

ROLE_OWNER = "owner"
ROLE_MEMBER = "member"

REQUEST_PENDING = "pending"
REQUEST_APPROVED = "approved"
REQUEST_REJECTED = "rejected"


@dataclass(frozen=True)
class Household:
    """A group of users sharing meals and plans."""

    id: UUID
    name: str
    invite_code: str
    owner_id: UUID


@dataclass(frozen=True)
class HouseholdMember:
    """Membership of a user in a household."""

    household_id: UUID
    user_id: UUID
    display_name: str
    role: str


@dataclass(frozen=True)
class MealRequest:
    """A member's request to put a meal on the household plan."""

    id: UUID
    household_id: UUID
    requested_by: UUID
    meal_id: UUID
    week_start: date
    day_date: date | None
    note: str | None
    status: str
    created_at: datetime | None = None
