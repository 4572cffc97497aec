"""Week and calendar date helpers."""

from datetime import date, datetime, timedelta

from dinner_planner.domain.plans import DAYS_PER_WEEK


def week_start_of(value: date | datetime) -> date:
    """Return the Monday of the ISO week containing the given date."""
    day = value.date() if isinstance(value, datetime) else value
    return day - timedelta(days=day.weekday())


def week_days(week_start: date) -> list[date]:
    """Return the seven consecutive dates starting at week_start."""
    return [week_start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()


def parse_date(raw: str) -> date:
    """Parse a YYYY-MM-DD string, ignoring any time component."""
    return date.fromisoformat(raw.strip()[:10])
