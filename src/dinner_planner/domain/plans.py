"""Domain models for weekly dinner plans."""

from dataclasses import dataclass, replace
from datetime import date
from uuid import UUID

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class DayPlan:
    """A single day of a plan; meal_id None means no dinner planned."""

    date: date
    meal_id: UUID | None = None


@dataclass(frozen=True)
class WeekPlan:
    """Seven consecutive days starting on a Monday."""

    owner_id: UUID
    week_start: date
    days: list[DayPlan]

    def find_day(self, day_date: date) -> DayPlan | None:
        """Return the day entry for a date, if it is part of this week."""
        for day in self.days:
            if day.date == day_date:
                return day
        return None

    def meal_ids(self) -> list[UUID]:
        """Return planned meal ids in week order, skipping empty days."""
        return [day.meal_id for day in self.days if day.meal_id is not None]

    def with_meals(self, assignments: dict[date, UUID | None]) -> "WeekPlan":
        """Return a copy with the given days reassigned."""
        days = [
            replace(day, meal_id=assignments[day.date])
            if day.date in assignments
            else day
            for day in self.days
        ]
        return replace(self, days=days)
