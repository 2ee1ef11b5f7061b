from __future__ import annotations
from typing import Any, Dict

from ..core.time import SUNDAY, iso_weekday
from ..core.types import SeasonOptions
from ..engines.lectionary import lectionary as _lectionary
from ..engines.seasons import liturgical_season
from ..engines.sundays import closest_sunday
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    # ISO convention: 1=Mon..7=Sun
    return {"weekday": iso_weekday(info.date)}

def season(info) -> Dict[str, Any]:
    s = liturgical_season(info.date, SeasonOptions(easter=info.options))
    return {"season": s.name, "season_code": s.code}

def lectionary(info) -> Dict[str, Any]:
    letter, number = _lectionary(info.date)
    return {"sunday_lectionary": letter, "weekday_lectionary": number}

def sunday(info) -> Dict[str, Any]:
    return {
        "is_sunday": iso_weekday(info.date) == SUNDAY,
        "closest_sunday": closest_sunday(info.date),
    }

register_attribute("weekday", weekday)
register_attribute("season", season)
register_attribute("lectionary", lectionary)
register_attribute("sunday", sunday)
