"""
cwcal.engines.seasons
---------------------
Partitions a church year into contiguous season intervals.

Canonical seasons of church year N (Advent and Christmas begin in N-1):

  A  Advent          Advent Sunday .. Christmas Eve
  C  Christmas       Christmas Day .. January 5
  I  Epiphany        Epiphany .. eve of Ash Wednesday
  L  Lent            Ash Wednesday .. eve of Palm Sunday
  H  Holy Week       Palm Sunday .. Easter Eve
  E  Eastertide      Easter Day .. eve of Pentecost
  P  Pentecost       Day of Pentecost .. eve of Trinity Sunday
  O  Ordinary Time   Trinity Sunday .. eve of the next Advent Sunday

Caller intervals are merged in and the whole list is stably sorted by start;
overlaps are not checked, so a custom interval may shadow or duplicate a
canonical one.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from ..core.time import add_days
from ..core.types import UNKNOWN_SEASON, SeasonInterval, SeasonOptions
from ..core.validate import validate_date
from .advent import resolve_church_year
from .moveable import moveable_dates

SEASON_CODES: Dict[str, str] = {
    "A": "Advent",
    "C": "Christmas",
    "I": "Epiphany",
    "L": "Lent",
    "H": "Holy Week",
    "E": "Eastertide",
    "P": "Pentecost",
    "O": "Ordinary Time",
}


def season_codes() -> Dict[str, str]:
    return dict(SEASON_CODES)


def _interval(code: str, start: date, end: date) -> SeasonInterval:
    return SeasonInterval(name=SEASON_CODES[code], start=start, end=end, code=code)


def canonical_seasons(year_or_date: Any, options: Optional[SeasonOptions] = None) -> List[SeasonInterval]:
    opts = options if options is not None else SeasonOptions()
    md = moveable_dates(year_or_date, opts.easter)
    return [
        _interval("A", md.advent_sunday, add_days(md.christmas_day, -1)),
        _interval("C", md.christmas_day, add_days(md.epiphany, -1)),
        _interval("I", md.epiphany, add_days(md.ash_wednesday, -1)),
        _interval("L", md.ash_wednesday, add_days(md.palm_sunday, -1)),
        _interval("H", md.palm_sunday, md.easter_eve),
        _interval("E", md.easter, add_days(md.day_of_pentecost, -1)),
        _interval("P", md.day_of_pentecost, add_days(md.trinity_sunday, -1)),
        _interval("O", md.trinity_sunday, add_days(md.next_advent_sunday, -1)),
    ]


def seasons_of_year(year_or_date: Any, options: Optional[SeasonOptions] = None) -> List[SeasonInterval]:
    """Season intervals of one church year, sorted by start date."""
    opts = options if options is not None else SeasonOptions()
    seasons: List[SeasonInterval] = []
    if opts.canonical:
        seasons.extend(canonical_seasons(year_or_date, opts))
    else:
        resolve_church_year(year_or_date)
    seasons.extend(opts.custom_seasons)
    return sorted(seasons, key=lambda s: s.start or date.min)


def liturgical_season(d: Any, options: Optional[SeasonOptions] = None) -> SeasonInterval:
    """The first season (in start order) containing `d`, else UNKNOWN_SEASON."""
    day = validate_date(d)
    for season in seasons_of_year(day, options):
        if season.contains(day):
            return season
    return UNKNOWN_SEASON
