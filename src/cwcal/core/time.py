from __future__ import annotations
from datetime import date, timedelta

# ISO weekday numbering: Monday=1 .. Sunday=7
SUNDAY = 7


def iso_weekday(d: date) -> int:
    return d.isoweekday()


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def add_weeks(d: date, weeks: int) -> date:
    return d + timedelta(weeks=weeks)


def day_range(start: date, count: int) -> list[date]:
    """`count` consecutive days beginning at `start`."""
    return [start + timedelta(days=i) for i in range(count)]


def sunday_on_or_after(d: date) -> date:
    """Advance day by day until the weekday is Sunday (at most 6 steps)."""
    while d.isoweekday() != SUNDAY:
        d += timedelta(days=1)
    return d


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def try_date(year: int, month: int, day: int) -> date | None:
    """Return date(year, month, day), or None when the combination does not exist."""
    try:
        return date(year, month, day)
    except ValueError:
        return None
