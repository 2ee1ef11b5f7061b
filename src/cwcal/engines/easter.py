"""
cwcal.engines.easter
--------------------
Closed-form Easter computus (Gauss congruences in Lichtenberg's form).

The same arithmetic serves three reckonings:
  - Western: Gregorian correction terms (m, s) from the century number.
  - Julian: m=15, s=0; the result is a Julian-calendar month/day.
  - Orthodox: Julian computation, then shifted by the Julian-Gregorian gap
    so that the month/day is a Gregorian date.

All intermediate quantities are integers; `os` is a 1-based day offset
from March 1 (so os=22 is March 22).
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.types import EasterOptions
from ..core.validate import validate_year

WESTERN = EasterOptions()
JULIAN = EasterOptions(gregorian=False, julian=True)
ORTHODOX = EasterOptions(gregorian=True, julian=True)

# Month lengths March..August. Orthodox dates near the top of the year range
# run past May, so the walk continues up to August.
_MONTH_LENGTHS = ((3, 31), (4, 30), (5, 31), (6, 30), (7, 31), (8, 31))


def julian_gregorian_gap(year: int) -> int:
    """Days between the Julian and Gregorian calendars in the spring of `year`."""
    return year // 100 - year // 400 - 2


def easter_offset(year: int, options: EasterOptions = WESTERN) -> int:
    """Day offset of Easter Sunday from March 1 (1-based) before month conversion."""
    k = year // 100
    if options.is_julian:
        m = 15
        s = 0
    else:
        m = 15 + (3 * k + 3) // 4 - (8 * k + 13) // 25
        s = 2 - (3 * k + 3) // 4

    a = year % 19
    d = (19 * a + m) % 30
    # floor((d + a/11) / 29) without floating point
    r = (11 * d + a) // 319
    og = 21 + d - r                       # paschal full moon, as an offset
    sz = 7 - (year + year // 4 + s) % 7   # first Sunday in March, as an offset
    oe = 7 - (og - sz) % 7                # days from the full moon to the Sunday after
    os_ = og + oe

    if options.converts_to_gregorian:
        os_ += julian_gregorian_gap(year)
    return os_


def offset_to_month_day(offset: int) -> tuple[int, int]:
    day = offset
    for month, length in _MONTH_LENGTHS:
        if day <= length or month == 8:
            return month, day
        day -= length
    raise AssertionError("unreachable")


def compute_easter(year: int, options: Optional[EasterOptions] = None) -> date:
    """Easter Sunday of `year` under the given reckoning (Western by default)."""
    year = validate_year(year)
    opts = options if options is not None else WESTERN
    month, day = offset_to_month_day(easter_offset(year, opts))
    return date(year, month, day)


def western_easter(year: int) -> date:
    return compute_easter(year, WESTERN)


def julian_easter(year: int) -> date:
    """Easter computed on the Julian calendar, returned as its Julian month/day."""
    return compute_easter(year, JULIAN)


def orthodox_easter(year: int) -> date:
    """Eastern Orthodox Easter expressed as a Gregorian date."""
    return compute_easter(year, ORTHODOX)
