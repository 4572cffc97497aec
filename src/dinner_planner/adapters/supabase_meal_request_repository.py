"""Supabase repository for household meal requests."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from dinner_planner.domain.households import MealRequest
from dinner_planner.services.meal_requests import MealRequestRepository
from dinner_planner.services.weeks import parse_date


@dataclass
class SupabaseMealRequestRepository(MealRequestRepository):
    """Supabase-backed meal request repository."""

    client: Client

    def create_request(self, payload: dict[str, object]) -> MealRequest:
        """Create a meal request and return it."""
        response = (
            self.client.table("meal_requests")
            .insert({key: _to_column(value) for key, value in payload.items()})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal request")
        return _parse_request(response.data[0])

    def get_request(self, request_id: UUID) -> MealRequest | None:
        """Return a meal request by id, if present."""
        response = (
            self.client.table("meal_requests")
            .select("*")
            .eq("id", str(request_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_request(response.data[0])

    def list_requests(
        self, household_id: UUID, status: str | None
    ) -> list[MealRequest]:
        """Return a household's requests, newest first."""
        query = (
            self.client.table("meal_requests")
            .select("*")
            .eq("household_id", str(household_id))
        )
        if status:
            query = query.eq("status", status)
        response = query.order("created_at", desc=True).execute()
        return [_parse_request(row) for row in response.data or []]

    def update_status(self, request_id: UUID, status: str) -> MealRequest:
        """Set a request's status and return it."""
        response = (
            self.client.table("meal_requests")
            .update({"status": status})
            .eq("id", str(request_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal request")
        return _parse_request(response.data[0])


def _to_column(value: object) -> object:
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


def _parse_request(row: dict[str, object]) -> MealRequest:
    """Parse a meal request row into a domain model."""
    created_raw = row.get("created_at")
    day_raw = row.get("day_date")
    return MealRequest(
        id=UUID(row["id"]),
        household_id=UUID(row["household_id"]),
        requested_by=UUID(row["requested_by"]),
        meal_id=UUID(row["meal_id"]),
        week_start=parse_date(str(row["week_start"])),
        day_date=parse_date(day_raw) if isinstance(day_raw, str) and day_raw else None,
        note=row.get("note"),
        status=str(row.get("status", "")),
        created_at=datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None,
    )
