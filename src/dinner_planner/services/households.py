"""Household creation and membership."""

import logging
import random
import string
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from dinner_planner.domain.households import (
    ROLE_MEMBER,
    ROLE_OWNER,
    Household,
    HouseholdMember,
)

_logger = logging.getLogger(__name__)

_INVITE_ALPHABET = string.ascii_uppercase + string.digits


class HouseholdRepository(Protocol):
    """Persistence interface for households and members."""

    def create_household(self, name: str, invite_code: str, owner_id: UUID) -> Household:
        """Create a household row and return it."""

    def delete_household(self, household_id: UUID) -> None:
        """Delete a household row."""

    def get_household(self, household_id: UUID) -> Household | None:
        """Return a household by id, if present."""

    def find_by_invite_code(self, invite_code: str) -> Household | None:
        """Return the household for an invite code, if present."""

    def add_member(
        self, household_id: UUID, user_id: UUID, display_name: str, role: str
    ) -> HouseholdMember:
        """Add a user to a household."""

    def get_member(self, household_id: UUID, user_id: UUID) -> HouseholdMember | None:
        """Return a membership row, if present."""

    def list_members(self, household_id: UUID) -> list[HouseholdMember]:
        """Return all members of a household."""


@dataclass
class HouseholdService:
    """Service for creating and joining households."""

    repository: HouseholdRepository
    invite_code_length: int = 6
    rng: random.Random = field(default_factory=random.Random)

    def create_household(
        self, owner_id: UUID, name: str, display_name: str
    ) -> Household:
        """Create a household with the caller as its owner."""
        household = self.repository.create_household(
            name=name.strip(),
            invite_code=self._invite_code(),
            owner_id=owner_id,
        )
        try:
            self.repository.add_member(
                household.id, owner_id, display_name.strip(), ROLE_OWNER
            )
        except Exception:
            _logger.warning(
                "Removing household after failed owner membership: household=%s",
                household.id,
            )
            self.repository.delete_household(household.id)
            raise
        return household

    def join_household(
        self, user_id: UUID, invite_code: str, display_name: str
    ) -> Household | None:
        """Join the household matching an invite code."""
        household = self.repository.find_by_invite_code(invite_code.strip().upper())
        if household is None:
            return None
        if self.repository.get_member(household.id, user_id) is None:
            self.repository.add_member(
                household.id, user_id, display_name.strip(), ROLE_MEMBER
            )
        return household

    def get_household(self, household_id: UUID) -> Household | None:
        """Return a household by id."""
        return self.repository.get_household(household_id)

    def is_member(self, household_id: UUID, user_id: UUID) -> bool:
        """Return True when the user belongs to the household."""
        return self.repository.get_member(household_id, user_id) is not None

    def list_members(self, household_id: UUID) -> list[HouseholdMember]:
        """Return the household's members."""
        return self.repository.list_members(household_id)

    def _invite_code(self) -> str:
        return "".join(
            self.rng.choice(_INVITE_ALPHABET) for _ in range(self.invite_code_length)
        )
