"""
cwcal.engines.advent
--------------------
Advent Sunday and church-year arithmetic.

Church year N runs from the First Sunday of Advent of calendar year N-1 up to
the Saturday before the First Sunday of Advent of calendar year N.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Tuple

from ..core.time import add_days, sunday_on_or_after
from ..core.errors import OutOfRangeError
from ..core.validate import MAX_YEAR, validate_date, validate_year


def first_sunday_of_advent(calendar_year: int) -> date:
    """The Sunday falling on or between November 27 and December 3."""
    year = validate_year(calendar_year)
    return sunday_on_or_after(date(year, 11, 27))


def opening_advent_sunday(church_year: int) -> date:
    """Advent Sunday that opens church year `church_year` (in calendar year N-1).

    `church_year` must already be validated; the year before it may lie just
    outside the supported window (Advent 1582 opens church year 1583).
    """
    return sunday_on_or_after(date(church_year - 1, 11, 27))


def christmas_day(calendar_year: int) -> date:
    return date(validate_year(calendar_year), 12, 25)


def church_year(year_or_date: Any) -> int:
    """Church year containing a date; a bare year means January 1 of that year."""
    d = validate_date(year_or_date)
    if d >= first_sunday_of_advent(d.year):
        return d.year + 1
    return d.year


def resolve_church_year(year_or_date: Any) -> int:
    """Integers are taken as the year itself; any date shape maps to its church year.

    A bare year is read as January 1, which always lies in the church year of
    the same number, so both branches agree for integers. Dates after Advent
    Sunday 9999 belong to church year 10000 and are rejected.
    """
    if isinstance(year_or_date, int) and not isinstance(year_or_date, bool):
        return validate_year(year_or_date)
    cy = church_year(year_or_date)
    if cy > MAX_YEAR:
        raise OutOfRangeError(f"Invalid year: church year {cy} must be <= {MAX_YEAR}")
    return cy


def church_year_bounds(year_or_date: Any) -> Tuple[date, date]:
    """First and last day of the church year (integer input is the church year)."""
    cy = resolve_church_year(year_or_date)
    first = opening_advent_sunday(cy)
    last = add_days(first_sunday_of_advent(cy), -1)
    return first, last
