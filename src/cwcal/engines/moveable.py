"""
cwcal.engines.moveable
----------------------
Dates derived from Easter, Advent and Epiphany for one church year.

Every function accepts a year or any date shape: integers are used as the
year itself, dates are reduced to the church year they fall in. Nothing is
cached; each call re-derives Easter from scratch.
"""

from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from ..core.time import SUNDAY, add_days, add_weeks, day_range, iso_weekday, sunday_on_or_after
from ..core.types import (
    EasterOptions,
    EastertideDays,
    MoveableDates,
    PrincipalFeasts,
    PrincipalHolyDays,
)
from .advent import first_sunday_of_advent, opening_advent_sunday, resolve_church_year
from .easter import compute_easter
from .sundays import next_sunday


# Ember Days: anchor, then the Friday and Saturday following a Wednesday anchor
EMBER_OFFSETS = (0, 2, 3)


def easter_sunday(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    return compute_easter(resolve_church_year(year_or_date), options)


# ---------------------------------------------------------
# Christmas / Epiphany cycle
# ---------------------------------------------------------

def epiphany(year_or_date: Any, transfer_to_sunday: bool = False) -> date:
    """January 6, or with `transfer_to_sunday` the following Sunday when Jan 6 is a weekday."""
    year = resolve_church_year(year_or_date)
    d = date(year, 1, 6)
    if transfer_to_sunday and iso_weekday(d) != SUNDAY:
        return next_sunday(d)
    return d


def baptism_of_christ(year_or_date: Any) -> date:
    """The Sunday after the Epiphany.

    When the Epiphany itself is a Sunday the feast falls a week later; an
    Epiphany kept on January 7 or 8 pushes it on to the Monday.
    """
    ep = epiphany(year_or_date)
    if iso_weekday(ep) == SUNDAY:
        return add_weeks(ep, 1)
    sunday_after = add_days(ep, SUNDAY - iso_weekday(ep))
    if ep.day <= 6:
        return sunday_after
    return add_days(sunday_after, 1)


def presentation_of_christ(year_or_date: Any, transfer_to_sunday: bool = False) -> date:
    """Candlemas: February 2, or the Sunday falling between January 28 and February 3."""
    year = resolve_church_year(year_or_date)
    if transfer_to_sunday:
        return sunday_on_or_after(date(year, 1, 28))
    return date(year, 2, 2)


# ---------------------------------------------------------
# Lent and Holy Week
# ---------------------------------------------------------

def ash_wednesday(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    return add_days(easter_sunday(year_or_date, options), -46)


def palm_sunday(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    return add_weeks(easter_sunday(year_or_date, options), -1)


def maundy_thursday(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    return add_days(easter_sunday(year_or_date, options), -3)


def good_friday(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    return add_days(easter_sunday(year_or_date, options), -2)


def easter_eve(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    return add_days(easter_sunday(year_or_date, options), -1)


def holy_week(year_or_date: Any, options: Optional[EasterOptions] = None) -> List[date]:
    """Palm Sunday through Easter Eve."""
    return day_range(palm_sunday(year_or_date, options), 7)


def annunciation(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    """March 25, moved to the Monday after the Second Sunday of Easter when it
    falls between Palm Sunday and the Second Sunday of Easter inclusive."""
    year = resolve_church_year(year_or_date)
    d = date(year, 3, 25)
    easter = compute_easter(year, options)
    if add_weeks(easter, -1) <= d <= add_weeks(easter, 1):
        return add_days(easter, 8)
    return d


# ---------------------------------------------------------
# Eastertide
# ---------------------------------------------------------

def ascension_day(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    """The fortieth day of Easter, a Thursday."""
    return add_days(easter_sunday(year_or_date, options), 39)


def rogation_days(year_or_date: Any, options: Optional[EasterOptions] = None) -> List[date]:
    """Monday to Wednesday before Ascension Day."""
    ascension = ascension_day(year_or_date, options)
    return [add_days(ascension, -n) for n in (3, 2, 1)]


def novena(year_or_date: Any, options: Optional[EasterOptions] = None) -> List[date]:
    """The nine days from the day after Ascension Day to the eve of Pentecost."""
    return day_range(add_days(ascension_day(year_or_date, options), 1), 9)


def day_of_pentecost(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    return add_days(easter_sunday(year_or_date, options), 49)


def trinity_sunday(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    return add_days(day_of_pentecost(year_or_date, options), 7)


def corpus_christi(year_or_date: Any, options: Optional[EasterOptions] = None) -> date:
    """Thursday after Trinity Sunday."""
    return add_days(trinity_sunday(year_or_date, options), 4)


# ---------------------------------------------------------
# End of the year
# ---------------------------------------------------------

def all_saints_day(year_or_date: Any, transfer_to_sunday: bool = False) -> date:
    """November 1, or the Sunday falling between October 30 and November 5."""
    year = resolve_church_year(year_or_date)
    if transfer_to_sunday:
        return sunday_on_or_after(date(year, 10, 30))
    return date(year, 11, 1)


def christ_the_king(year_or_date: Any) -> date:
    """The Sunday next before Advent."""
    return add_weeks(first_sunday_of_advent(resolve_church_year(year_or_date)), -1)


def ember_days(year_or_date: Any, options: Optional[EasterOptions] = None) -> List[date]:
    """Twelve Ember Days after Ash Wednesday, Pentecost, Holy Cross Day and St Lucy."""
    year = resolve_church_year(year_or_date)
    anchors = (
        ash_wednesday(year, options),
        day_of_pentecost(year, options),
        date(year, 9, 14),
        date(year, 12, 13),
    )
    return [add_days(a, off) for a in anchors for off in EMBER_OFFSETS]


# ---------------------------------------------------------
# Aggregates
# ---------------------------------------------------------

def moveable_dates(year_or_date: Any, options: Optional[EasterOptions] = None) -> MoveableDates:
    """All moveable dates of one church year."""
    year = resolve_church_year(year_or_date)
    opts = options if options is not None else EasterOptions()
    easter = compute_easter(year, opts)
    pentecost = add_days(easter, 49)
    trinity = add_days(pentecost, 7)
    next_advent = first_sunday_of_advent(year)
    return MoveableDates(
        church_year=year,
        options=opts,
        advent_sunday=opening_advent_sunday(year),
        christmas_day=date(year - 1, 12, 25),
        epiphany=epiphany(year),
        baptism_of_christ=baptism_of_christ(year),
        presentation=presentation_of_christ(year),
        ash_wednesday=add_days(easter, -46),
        annunciation=annunciation(year, opts),
        palm_sunday=add_weeks(easter, -1),
        maundy_thursday=add_days(easter, -3),
        good_friday=add_days(easter, -2),
        easter_eve=add_days(easter, -1),
        easter=easter,
        ascension_day=add_days(easter, 39),
        day_of_pentecost=pentecost,
        trinity_sunday=trinity,
        corpus_christi=add_days(trinity, 4),
        all_saints_day=all_saints_day(year),
        christ_the_king=add_weeks(next_advent, -1),
        next_advent_sunday=next_advent,
    )


def principal_feasts(year_or_date: Any, options: Optional[EasterOptions] = None) -> PrincipalFeasts:
    year = resolve_church_year(year_or_date)
    easter = compute_easter(year, options)
    return PrincipalFeasts(
        christmas=date(year, 12, 25),
        epiphany=epiphany(year),
        presentation=presentation_of_christ(year),
        annunciation=annunciation(year, options),
        easter=easter,
        ascension=add_days(easter, 39),
        pentecost=add_days(easter, 49),
        trinity_sunday=add_days(easter, 56),
        all_saints_day=all_saints_day(year),
    )


def principal_holy_days(year_or_date: Any, options: Optional[EasterOptions] = None) -> PrincipalHolyDays:
    year = resolve_church_year(year_or_date)
    return PrincipalHolyDays(
        ash_wednesday=ash_wednesday(year, options),
        maundy_thursday=maundy_thursday(year, options),
        good_friday=good_friday(year, options),
    )


def eastertide_days(year_or_date: Any, options: Optional[EasterOptions] = None) -> EastertideDays:
    year = resolve_church_year(year_or_date)
    return EastertideDays(
        holy_week=tuple(holy_week(year, options)),
        rogation_days=tuple(rogation_days(year, options)),
        novena=tuple(novena(year, options)),
    )
