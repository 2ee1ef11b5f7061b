"""
cwcal.core.validate
-------------------
Normalizes the accepted input shapes for a "year or date" parameter into a
single canonical value before any calculation runs.

Accepted shapes:
  int                      -> a calendar year (Jan 1 where a full date is needed)
  str                      -> ISO date "YYYY-MM-DD"
  datetime.date            -> itself (a datetime is reduced to its date)
  mapping with year/month/day keys
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from numbers import Real
from typing import Any, Mapping, Union

from .errors import InputTypeError, InvalidArgumentError, OutOfRangeError
from .time import is_leap_year

MIN_YEAR = 1583
MAX_YEAR = 9999

_ISO_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def validate_year(year: Any) -> int:
    """Return `year` as an int in [MIN_YEAR, MAX_YEAR] or raise."""
    if isinstance(year, bool) or not isinstance(year, Real):
        raise InputTypeError(f"Invalid year: expected an integer, got {type(year).__name__}")
    if isinstance(year, float):
        if not math.isfinite(year) or not year.is_integer():
            raise InvalidArgumentError(f"Invalid year: {year!r} is not an integer")
        year = int(year)
    elif not isinstance(year, int):
        if int(year) != year:
            raise InvalidArgumentError(f"Invalid year: {year!r} is not an integer")
        year = int(year)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(f"Invalid year: {year} must be >= {MIN_YEAR} and <= {MAX_YEAR}")
    return year


def _days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def _checked_date(year: Any, month: Any, day: Any) -> date:
    y = validate_year(year)
    for name, value in (("month", month), ("day", day)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"Invalid date: {name} {value!r} is not an integer")
    if month < 1 or month > 12:
        raise InvalidArgumentError(f"Invalid date: month {month} is not between 1 and 12")
    last = _days_in_month(y, month)
    if day < 1 or day > last:
        raise InvalidArgumentError(f"Invalid date: day {day} is not between 1 and {last} for {y}-{month:02d}")
    return date(y, month, day)


def _parse_iso(s: str) -> date:
    m = _ISO_RE.match(s.strip())
    if m is None:
        raise InvalidArgumentError(f"Invalid date string: {s!r}")
    y, mo, d = (int(x) for x in m.groups())
    return _checked_date(y, mo, d)


def validate_date(value: Any) -> date:
    """Normalize any accepted input shape into a date."""
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        validate_year(value.year)
        return value
    if isinstance(value, str):
        return _parse_iso(value)
    if isinstance(value, Mapping):
        missing = [k for k in ("year", "month", "day") if value.get(k) is None]
        if missing:
            raise InvalidArgumentError(
                f"Invalid date: year, month and day are required (missing {', '.join(missing)})"
            )
        return _checked_date(value["year"], value["month"], value["day"])
    if isinstance(value, Real) and not isinstance(value, bool):
        return date(validate_year(value), 1, 1)
    raise InputTypeError(f"Invalid date: unsupported input type {type(value).__name__}")


def validate_year_or_date(value: Any) -> Union[int, date]:
    """Integers stay years; every other accepted shape becomes a date."""
    if isinstance(value, Real) and not isinstance(value, bool):
        return validate_year(value)
    return validate_date(value)
