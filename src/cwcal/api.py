from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from .core.engine import ReckoningRegistry
from .core.errors import InputTypeError
from .core.types import (
    CalendarEvent,
    DayInfo,
    EasterOptions,
    EastertideDays,
    FixedCalendar,
    MoveableDates,
    PrincipalFeasts,
    PrincipalHolyDays,
    ReckoningSpec,
    SeasonInterval,
    SeasonOptions,
)
from .core.validate import validate_date, validate_year, validate_year_or_date  # noqa: F401
from .attributes.registry import compute_attributes, list_attributes  # noqa: F401
from .attributes import standard as _standard  # noqa: F401  (registers the standard attributes)
from .engines import fixed as _fixed
from .engines import lectionary as _lectionary
from .engines import moveable as _moveable
from .engines import seasons as _seasons
from .engines.advent import (  # noqa: F401
    christmas_day,
    church_year,
    church_year_bounds,
    first_sunday_of_advent,
)
from .engines.easter import compute_easter as _compute_easter
from .engines.easter import julian_easter, orthodox_easter, western_easter  # noqa: F401
from .engines.moveable import (  # noqa: F401
    all_saints_day,
    baptism_of_christ,
    christ_the_king,
    epiphany,
    presentation_of_christ,
)
from .engines.sundays import (  # noqa: F401
    closest_sunday,
    is_sunday,
    next_sunday,
    previous_sunday,
    sundays_of_church_year,
)

Reckoning = Union[str, EasterOptions, None]

_registry: Optional[ReckoningRegistry] = None

def set_registry(reg: ReckoningRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ReckoningRegistry:
    if _registry is None:
        raise RuntimeError("Reckoning registry not initialized")
    return _registry

# ============================================================
# Reckonings
# ============================================================

def list_reckonings() -> List[str]:
    return _reg().list()

def reckoning_info(name: str) -> Dict[str, Any]:
    spec = _reg().get(name)
    return {
        "name": spec.name,
        "label": spec.options.label,
        "gregorian": spec.options.gregorian,
        "julian": spec.options.julian,
        "description": spec.description,
    }

def register_reckoning(
    name: str,
    options: EasterOptions,
    *,
    description: str = "",
    overwrite: bool = False,
) -> None:
    if not isinstance(options, EasterOptions):
        raise InputTypeError(f"options must be EasterOptions, got {type(options).__name__}")
    _reg().register(name, ReckoningSpec(name=name, options=options, description=description), overwrite=overwrite)

def resolve_options(reckoning: Reckoning = None) -> EasterOptions:
    """Map a reckoning name (or explicit EasterOptions) to EasterOptions; None means Western."""
    if reckoning is None:
        return EasterOptions()
    if isinstance(reckoning, EasterOptions):
        return reckoning
    if isinstance(reckoning, str):
        return _reg().get(reckoning).options
    raise InputTypeError(f"reckoning must be a name or EasterOptions, got {type(reckoning).__name__}")

def _season_options(options: Optional[SeasonOptions], reckoning: Reckoning) -> SeasonOptions:
    if options is None:
        return SeasonOptions(easter=resolve_options(reckoning))
    if reckoning is not None:
        return replace(options, easter=resolve_options(reckoning))
    return options

# ============================================================
# Easter and the moveable cycle
# ============================================================

def compute_easter(year: int, *, reckoning: Reckoning = None) -> date:
    return _compute_easter(year, resolve_options(reckoning))

def easter_sunday(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.easter_sunday(year_or_date, resolve_options(reckoning))

def ash_wednesday(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.ash_wednesday(year_or_date, resolve_options(reckoning))

def palm_sunday(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.palm_sunday(year_or_date, resolve_options(reckoning))

def maundy_thursday(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.maundy_thursday(year_or_date, resolve_options(reckoning))

def good_friday(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.good_friday(year_or_date, resolve_options(reckoning))

def easter_eve(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.easter_eve(year_or_date, resolve_options(reckoning))

def holy_week(year_or_date: Any, *, reckoning: Reckoning = None) -> List[date]:
    return _moveable.holy_week(year_or_date, resolve_options(reckoning))

def annunciation(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.annunciation(year_or_date, resolve_options(reckoning))

def ascension_day(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.ascension_day(year_or_date, resolve_options(reckoning))

def rogation_days(year_or_date: Any, *, reckoning: Reckoning = None) -> List[date]:
    return _moveable.rogation_days(year_or_date, resolve_options(reckoning))

def novena(year_or_date: Any, *, reckoning: Reckoning = None) -> List[date]:
    return _moveable.novena(year_or_date, resolve_options(reckoning))

def day_of_pentecost(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.day_of_pentecost(year_or_date, resolve_options(reckoning))

def trinity_sunday(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.trinity_sunday(year_or_date, resolve_options(reckoning))

def corpus_christi(year_or_date: Any, *, reckoning: Reckoning = None) -> date:
    return _moveable.corpus_christi(year_or_date, resolve_options(reckoning))

def ember_days(year_or_date: Any, *, reckoning: Reckoning = None) -> List[date]:
    return _moveable.ember_days(year_or_date, resolve_options(reckoning))

def moveable_dates(year_or_date: Any, *, reckoning: Reckoning = None) -> MoveableDates:
    return _moveable.moveable_dates(year_or_date, resolve_options(reckoning))

def principal_feasts(year_or_date: Any, *, reckoning: Reckoning = None) -> PrincipalFeasts:
    return _moveable.principal_feasts(year_or_date, resolve_options(reckoning))

def principal_holy_days(year_or_date: Any, *, reckoning: Reckoning = None) -> PrincipalHolyDays:
    return _moveable.principal_holy_days(year_or_date, resolve_options(reckoning))

def eastertide_days(year_or_date: Any, *, reckoning: Reckoning = None) -> EastertideDays:
    return _moveable.eastertide_days(year_or_date, resolve_options(reckoning))

# ============================================================
# Seasons and lectionary
# ============================================================

def season_codes() -> Dict[str, str]:
    return _seasons.season_codes()

def seasons_of_year(
    year_or_date: Any,
    options: Optional[SeasonOptions] = None,
    *,
    reckoning: Reckoning = None,
) -> List[SeasonInterval]:
    return _seasons.seasons_of_year(year_or_date, _season_options(options, reckoning))

def liturgical_season(
    d: Any,
    options: Optional[SeasonOptions] = None,
    *,
    reckoning: Reckoning = None,
) -> SeasonInterval:
    return _seasons.liturgical_season(d, _season_options(options, reckoning))

def weekday_lectionary_number(d: Any) -> int:
    return _lectionary.weekday_lectionary_number(d)

def sunday_lectionary_letter(d: Any) -> str:
    return _lectionary.sunday_lectionary_letter(d)

def lectionary(d: Any) -> tuple[str, int]:
    return _lectionary.lectionary(d)

# ============================================================
# Fixed calendar
# ============================================================

def load_fixed_calendar(path: Optional[str] = None) -> FixedCalendar:
    return _fixed.load_fixed_calendar(path)

def fixed_dates_for_year(year_or_date: Any, calendar: Optional[FixedCalendar] = None) -> List[CalendarEvent]:
    return _fixed.fixed_dates_for_year(year_or_date, calendar)

def fixed_events_on(d: Any, calendar: Optional[FixedCalendar] = None) -> List[CalendarEvent]:
    return _fixed.fixed_events_on(d, calendar)

# ============================================================
# Day view
# ============================================================

def day_info(
    d: Any,
    *,
    reckoning: Reckoning = None,
    attributes: Sequence[str] = (),
) -> DayInfo:
    day = validate_date(d)
    info = DayInfo(date=day, church_year=church_year(day), options=resolve_options(reckoning))
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info
