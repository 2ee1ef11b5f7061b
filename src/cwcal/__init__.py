"""cwcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    validate_year,
    validate_date,
    validate_year_or_date,
    list_reckonings,
    reckoning_info,
    register_reckoning,
    resolve_options,
    compute_easter,
    easter_sunday,
    western_easter,
    julian_easter,
    orthodox_easter,
    first_sunday_of_advent,
    christmas_day,
    church_year,
    church_year_bounds,
    is_sunday,
    next_sunday,
    previous_sunday,
    closest_sunday,
    sundays_of_church_year,
    epiphany,
    baptism_of_christ,
    presentation_of_christ,
    ash_wednesday,
    palm_sunday,
    maundy_thursday,
    good_friday,
    easter_eve,
    holy_week,
    annunciation,
    ascension_day,
    rogation_days,
    novena,
    day_of_pentecost,
    trinity_sunday,
    corpus_christi,
    all_saints_day,
    christ_the_king,
    ember_days,
    moveable_dates,
    principal_feasts,
    principal_holy_days,
    eastertide_days,
    season_codes,
    seasons_of_year,
    liturgical_season,
    weekday_lectionary_number,
    sunday_lectionary_letter,
    lectionary,
    load_fixed_calendar,
    fixed_dates_for_year,
    fixed_events_on,
    list_attributes,
    day_info,
)
from .core.errors import (
    CwcalError,
    InputTypeError,
    InvalidArgumentError,
    OutOfRangeError,
    CalendarDataError,
    UnknownReckoningError,
)
from .core.types import (
    EasterOptions,
    SeasonOptions,
    SeasonInterval,
    UNKNOWN_SEASON,
    MoveableDates,
    CalendarEvent,
    FixedCalendar,
    DayInfo,
)

__all__ = [
    "validate_year",
    "validate_date",
    "validate_year_or_date",
    "list_reckonings",
    "reckoning_info",
    "register_reckoning",
    "resolve_options",
    "compute_easter",
    "easter_sunday",
    "western_easter",
    "julian_easter",
    "orthodox_easter",
    "first_sunday_of_advent",
    "christmas_day",
    "church_year",
    "church_year_bounds",
    "is_sunday",
    "next_sunday",
    "previous_sunday",
    "closest_sunday",
    "sundays_of_church_year",
    "epiphany",
    "baptism_of_christ",
    "presentation_of_christ",
    "ash_wednesday",
    "palm_sunday",
    "maundy_thursday",
    "good_friday",
    "easter_eve",
    "holy_week",
    "annunciation",
    "ascension_day",
    "rogation_days",
    "novena",
    "day_of_pentecost",
    "trinity_sunday",
    "corpus_christi",
    "all_saints_day",
    "christ_the_king",
    "ember_days",
    "moveable_dates",
    "principal_feasts",
    "principal_holy_days",
    "eastertide_days",
    "season_codes",
    "seasons_of_year",
    "liturgical_season",
    "weekday_lectionary_number",
    "sunday_lectionary_letter",
    "lectionary",
    "load_fixed_calendar",
    "fixed_dates_for_year",
    "fixed_events_on",
    "list_attributes",
    "day_info",
    "CwcalError",
    "InputTypeError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "CalendarDataError",
    "UnknownReckoningError",
    "EasterOptions",
    "SeasonOptions",
    "SeasonInterval",
    "UNKNOWN_SEASON",
    "MoveableDates",
    "CalendarEvent",
    "FixedCalendar",
    "DayInfo",
]
