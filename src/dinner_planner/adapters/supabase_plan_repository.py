"""Supabase repository for weekly plans."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from dinner_planner.domain.plans import DayPlan, WeekPlan
from dinner_planner.services.planner import PlanRepository
from dinner_planner.services.weeks import format_date, parse_date


@dataclass
class SupabasePlanRepository(PlanRepository):
    """Supabase-backed repository for weekly plans."""

    client: Client

    def get_plan(self, owner_id: UUID, week_start: date) -> WeekPlan | None:
        """Return the plan for an owner's week, if present."""
        response = (
            self.client.table("weekly_plans")
            .select("*")
            .eq("user_id", str(owner_id))
            .eq("week_start", format_date(week_start))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def upsert_plan(self, plan: WeekPlan) -> None:
        """Insert or overwrite the plan keyed by owner and week."""
        response = (
            self.client.table("weekly_plans")
            .upsert(
                {
                    "user_id": str(plan.owner_id),
                    "week_start": format_date(plan.week_start),
                    "days": [
                        {
                            "date": format_date(day.date),
                            "mealId": str(day.meal_id) if day.meal_id else None,
                        }
                        for day in plan.days
                    ],
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id,week_start",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save week plan")


def _parse_plan(row: dict[str, object]) -> WeekPlan:
    """Parse a weekly plan row into a domain model."""
    days = []
    for item in row.get("days") or []:
        raw_meal_id = item.get("mealId")
        days.append(
            DayPlan(
                date=parse_date(str(item["date"])),
                meal_id=UUID(raw_meal_id) if raw_meal_id else None,
            )
        )
    return WeekPlan(
        owner_id=UUID(row["user_id"]),
        week_start=parse_date(str(row["week_start"])),
        days=days,
    )
