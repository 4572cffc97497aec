"""Supabase repository for households and their members."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from dinner_planner.domain.households import Household, HouseholdMember
from dinner_planner.services.households import HouseholdRepository


@dataclass
class SupabaseHouseholdRepository(HouseholdRepository):
    """Supabase implementation for household persistence."""

    client: Client

    def create_household(self, name: str, invite_code: str, owner_id: UUID) -> Household:
        """Create a household row and return it."""
        response = (
            self.client.table("households")
            .insert({"name": name, "invite_code": invite_code, "owner_id": str(owner_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create household")
        return _parse_household(response.data[0])

    def delete_household(self, household_id: UUID) -> None:
        """Delete a household row."""
        self.client.table("households").delete().eq("id", str(household_id)).execute()

    def get_household(self, household_id: UUID) -> Household | None:
        """Return a household by id, if present."""
        return self._find_one("id", str(household_id))

    def find_by_invite_code(self, invite_code: str) -> Household | None:
        """Return the household for an invite code, if present."""
        return self._find_one("invite_code", invite_code)

    def add_member(
        self, household_id: UUID, user_id: UUID, display_name: str, role: str
    ) -> HouseholdMember:
        """Add a user to a household."""
        response = (
            self.client.table("household_members")
            .insert(
                {
                    "household_id": str(household_id),
                    "user_id": str(user_id),
                    "display_name": display_name,
                    "role": role,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to add household member")
        return _parse_member(response.data[0])

    def get_member(self, household_id: UUID, user_id: UUID) -> HouseholdMember | None:
        """Return a membership row, if present."""
        response = (
            self.client.table("household_members")
            .select("*")
            .eq("household_id", str(household_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_member(response.data[0])

    def list_members(self, household_id: UUID) -> list[HouseholdMember]:
        """Return all members of a household."""
        response = (
            self.client.table("household_members")
            .select("*")
            .eq("household_id", str(household_id))
            .execute()
        )
        return [_parse_member(row) for row in response.data or []]

    def _find_one(self, column: str, value: str) -> Household | None:
        response = (
            self.client.table("households")
            .select("*")
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_household(response.data[0])


def _parse_household(row: dict[str, object]) -> Household:
    return Household(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        invite_code=str(row.get("invite_code", "")),
        owner_id=UUID(row["owner_id"]),
    )


def _parse_member(row: dict[str, object]) -> HouseholdMember:
    return HouseholdMember(
        household_id=UUID(row["household_id"]),
        user_id=UUID(row["user_id"]),
        display_name=str(row.get("display_name", "")),
        role=str(row.get("role", "")),
    )
