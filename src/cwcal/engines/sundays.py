from __future__ import annotations

from datetime import date
from typing import Any, List

from ..core.time import SUNDAY, add_days, add_weeks, iso_weekday
from ..core.validate import validate_date
from .advent import first_sunday_of_advent, opening_advent_sunday, resolve_church_year


def is_sunday(d: Any) -> bool:
    return iso_weekday(validate_date(d)) == SUNDAY


def next_sunday(d: Any) -> date:
    """The first Sunday strictly after `d` (a week later when `d` is a Sunday)."""
    today = validate_date(d)
    dow = iso_weekday(today)
    if dow == SUNDAY:
        return add_weeks(today, 1)
    return add_days(today, SUNDAY - dow)


def previous_sunday(d: Any) -> date:
    """The last Sunday strictly before `d` (a week earlier when `d` is a Sunday)."""
    today = validate_date(d)
    dow = iso_weekday(today)
    if dow == SUNDAY:
        return add_weeks(today, -1)
    return add_days(today, -dow)


def closest_sunday(d: Any) -> date:
    """`d` itself when a Sunday, else the nearer neighbouring Sunday.

    Distances are compared with `<=`, so the following Sunday wins a tie.
    """
    today = validate_date(d)
    dow = iso_weekday(today)
    if dow == SUNDAY:
        return today
    ahead = SUNDAY - dow
    behind = dow
    if ahead <= behind:
        return add_days(today, ahead)
    return add_days(today, -behind)


def sundays_of_church_year(year_or_date: Any) -> List[date]:
    """Every Sunday from Advent Sunday up to (not including) the next Advent Sunday.

    An integer is taken as the church year itself. Returns 52 or 53 dates.
    """
    cy = resolve_church_year(year_or_date)
    current = opening_advent_sunday(cy)
    last = add_weeks(first_sunday_of_advent(cy), -1)
    out: List[date] = []
    while current <= last:
        out.append(current)
        current = add_weeks(current, 1)
    return out
