from __future__ import annotations
from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

EventType = Literal["F", "C", "L", "P"]

@dataclass(frozen=True)
class EasterOptions:
    """Easter reckoning flags.

    gregorian=False, julian=False  -> Western Easter (default)
    gregorian=False, julian=True   -> Julian computation, Julian-calendar date
    gregorian=True,  julian=True   -> Orthodox Easter (Julian computation shown in Gregorian)

    gregorian=True without julian has no meaning of its own and is treated as Western.
    """
    gregorian: bool = False
    julian: bool = False

    @property
    def is_julian(self) -> bool:
        return self.julian

    @property
    def converts_to_gregorian(self) -> bool:
        return self.gregorian and self.julian

    @property
    def label(self) -> str:
        if not self.julian:
            return "western"
        return "orthodox" if self.gregorian else "julian"

@dataclass(frozen=True)
class ReckoningSpec:
    name: str
    options: EasterOptions
    description: str = ""

@dataclass(frozen=True)
class SeasonInterval:
    name: str
    start: Optional[date]
    end: Optional[date]
    code: Optional[str] = None

    def contains(self, d: date) -> bool:
        if self.start is None or self.end is None:
            return False
        return self.start <= d <= self.end

    @property
    def days(self) -> int:
        if self.start is None or self.end is None:
            return 0
        return (self.end - self.start).days + 1

UNKNOWN_SEASON = SeasonInterval(name="Unknown", start=None, end=None)

@dataclass(frozen=True)
class SeasonOptions:
    easter: EasterOptions = EasterOptions()
    custom_seasons: Tuple[SeasonInterval, ...] = ()
    canonical: bool = True

@dataclass(frozen=True)
class MoveableDates:
    """Moveable dates of one church year under one Easter reckoning."""
    church_year: int
    options: EasterOptions
    advent_sunday: date
    christmas_day: date
    epiphany: date
    baptism_of_christ: date
    presentation: date
    ash_wednesday: date
    annunciation: date
    palm_sunday: date
    maundy_thursday: date
    good_friday: date
    easter_eve: date
    easter: date
    ascension_day: date
    day_of_pentecost: date
    trinity_sunday: date
    corpus_christi: date
    all_saints_day: date
    christ_the_king: date
    next_advent_sunday: date

    def as_dict(self) -> Dict[str, date]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in ("church_year", "options")}

@dataclass(frozen=True)
class PrincipalFeasts:
    christmas: date
    epiphany: date
    presentation: date
    annunciation: date
    easter: date
    ascension: date
    pentecost: date
    trinity_sunday: date
    all_saints_day: date

@dataclass(frozen=True)
class PrincipalHolyDays:
    ash_wednesday: date
    maundy_thursday: date
    good_friday: date

@dataclass(frozen=True)
class EastertideDays:
    holy_week: Tuple[date, ...]
    rogation_days: Tuple[date, ...]
    novena: Tuple[date, ...]

@dataclass(frozen=True)
class ObservedDate:
    month: int
    day: int
    alt: Optional[Tuple[int, int]] = None  # (month, day)

@dataclass(frozen=True)
class FixedEvent:
    id: int
    title: str
    type: EventType
    group: Optional[int]
    observed: ObservedDate

@dataclass(frozen=True)
class EventGroup:
    id: int
    title: str
    events: Tuple[int, ...]

@dataclass(frozen=True)
class FixedCalendar:
    """Static fixed-calendar reference table (read-only once loaded)."""
    version: str
    types: Mapping[str, str]
    seasons: Mapping[str, str]
    groups: Tuple[EventGroup, ...]
    events: Tuple[FixedEvent, ...]

    def type_name(self, code: str) -> str:
        return self.types.get(code, code)

    def group(self, group_id: int) -> EventGroup:
        for g in self.groups:
            if g.id == group_id:
                return g
        raise KeyError(f"Unknown event group {group_id}")

@dataclass(frozen=True)
class CalendarEvent:
    """A fixed event projected onto a concrete year."""
    id: int
    title: str
    type: EventType
    group: Optional[int]
    observed: Tuple[date, ...]

    def type_name(self, calendar: FixedCalendar) -> str:
        return calendar.type_name(self.type)

@dataclass(frozen=True)
class DayInfo:
    date: date
    church_year: int
    options: EasterOptions = EasterOptions()
    attributes: Optional[Dict[str, Any]] = field(default=None)
