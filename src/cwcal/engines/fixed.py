"""
cwcal.engines.fixed
-------------------
The Common Worship fixed calendar: a static table of observances pinned to a
month/day (with an optional alternative month/day), and its projection onto a
concrete year.

The table is read-only. The packaged copy is parsed once and shared; callers
may inject any other `FixedCalendar` instead (tests do).

Search order for the default table:
  1) CWCAL_FIXED_CALENDAR environment variable (path to a JSON file)
  2) packaged data (cwcal/data/common_worship_fixed_calendar.json)
"""

from __future__ import annotations

import importlib.resources
import json
import os
from datetime import date
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Union

from ..core.errors import CalendarDataError
from ..core.time import try_date
from ..core.types import CalendarEvent, EventGroup, FixedCalendar, FixedEvent, ObservedDate
from ..core.validate import validate_date, validate_year

ENV_VAR = "CWCAL_FIXED_CALENDAR"
DATA_FILE = "common_worship_fixed_calendar.json"
EVENT_TYPES = ("F", "C", "L", "P")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _month_day(raw: Mapping[str, Any], where: str) -> tuple[int, int]:
    try:
        month, day = int(raw["isoMonth"]), int(raw["isoDay"])
    except (KeyError, TypeError, ValueError) as e:
        raise CalendarDataError(f"{where}: observed date needs integer isoMonth and isoDay") from e
    # 2000 is a leap year, so February 29 passes here and is resolved per year later
    if try_date(2000, month, day) is None:
        raise CalendarDataError(f"{where}: {month:02d}-{day:02d} is not a calendar day")
    return month, day


def _parse_event(raw: Mapping[str, Any]) -> FixedEvent:
    where = f"event {raw.get('id')!r}"
    try:
        event_id = int(raw["id"])
        title = str(raw["title"])
        event_type = raw["type"]
        observed = raw["observed"]
    except (KeyError, TypeError, ValueError) as e:
        raise CalendarDataError(f"{where}: missing or invalid field ({e})") from e
    if event_type not in EVENT_TYPES:
        raise CalendarDataError(f"{where}: unknown type {event_type!r}")

    month, day = _month_day(observed, where)
    alt_raw = observed.get("alt")
    alt = _month_day(alt_raw, where + " (alt)") if alt_raw else None
    group = raw.get("group")
    return FixedEvent(
        id=event_id,
        title=title,
        type=event_type,
        group=int(group) if group is not None else None,
        observed=ObservedDate(month=month, day=day, alt=alt),
    )


def parse_fixed_calendar(data: Mapping[str, Any]) -> FixedCalendar:
    """Build an immutable FixedCalendar from the decoded JSON document."""
    if not isinstance(data, Mapping):
        raise CalendarDataError("fixed calendar must be a JSON object")
    try:
        events = tuple(_parse_event(e) for e in data["events"])
        groups = tuple(
            EventGroup(id=int(g["id"]), title=str(g["title"]), events=tuple(int(x) for x in g["events"]))
            for g in data.get("groups", ())
        )
    except (KeyError, TypeError, ValueError) as e:
        raise CalendarDataError(f"malformed fixed calendar: {e}") from e

    known = {e.id for e in events}
    for e in events:
        if e.group is not None and all(g.id != e.group for g in groups):
            raise CalendarDataError(f"event {e.id} refers to unknown group {e.group}")
    for g in groups:
        stray = [x for x in g.events if x not in known]
        if stray:
            raise CalendarDataError(f"group {g.id} lists unknown events {stray}")

    return FixedCalendar(
        version=str(data.get("version", "")),
        types=MappingProxyType(dict(data.get("types", {}))),
        seasons=MappingProxyType(dict(data.get("seasons", {}))),
        groups=groups,
        events=events,
    )


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise CalendarDataError(f"{path}: invalid JSON ({e})") from e


@lru_cache(maxsize=1)
def _load_default(env_path: str) -> FixedCalendar:
    if env_path:
        path = Path(env_path).expanduser()
        if not path.is_file():
            raise CalendarDataError(f"{ENV_VAR} points to a missing file: {path}")
        return parse_fixed_calendar(_read_json(path))

    resource = importlib.resources.files("cwcal.data").joinpath(DATA_FILE)
    with resource.open("r", encoding="utf-8") as f:
        return parse_fixed_calendar(json.load(f))


def load_fixed_calendar(path: Optional[Union[str, Path]] = None) -> FixedCalendar:
    """Load a fixed calendar table.

    With no `path` the default table is returned (cached per value of the
    environment override).
    """
    if path is not None:
        return parse_fixed_calendar(_read_json(Path(path)))
    return _load_default(os.environ.get(ENV_VAR, "").strip())


# ---------------------------------------------------------------------------
# Materialization
# ---------------------------------------------------------------------------

def _calendar_year(year_or_date: Any) -> int:
    if isinstance(year_or_date, int) and not isinstance(year_or_date, bool):
        return validate_year(year_or_date)
    return validate_date(year_or_date).year


def observed_dates(event: FixedEvent, year: int) -> tuple[date, ...]:
    """Primary and alternative dates of `event` that exist in `year`."""
    o = event.observed
    candidates = [try_date(year, o.month, o.day)]
    if o.alt is not None:
        candidates.append(try_date(year, o.alt[0], o.alt[1]))
    return tuple(d for d in candidates if d is not None)


def fixed_dates_for_year(year_or_date: Any, calendar: Optional[FixedCalendar] = None) -> List[CalendarEvent]:
    """Project every fixed event onto a calendar year.

    Dates that do not exist in the year (February 29 in a common year) are
    dropped; an event left with no date at all is omitted.
    """
    year = _calendar_year(year_or_date)
    table = calendar if calendar is not None else load_fixed_calendar()
    out: List[CalendarEvent] = []
    for event in table.events:
        observed = observed_dates(event, year)
        if not observed:
            continue
        out.append(CalendarEvent(
            id=event.id,
            title=event.title,
            type=event.type,
            group=event.group,
            observed=observed,
        ))
    return out


def fixed_events_on(d: Any, calendar: Optional[FixedCalendar] = None) -> List[CalendarEvent]:
    """Fixed events with `d` among their observed dates."""
    day = validate_date(d)
    return [e for e in fixed_dates_for_year(day.year, calendar) if day in e.observed]
