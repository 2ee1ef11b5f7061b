# tests/test_seasons.py

import pytest
from datetime import date, timedelta

from cwcal.core.errors import OutOfRangeError
from cwcal.core.types import UNKNOWN_SEASON, SeasonInterval, SeasonOptions
from cwcal.engines.advent import church_year_bounds
from cwcal.engines.easter import ORTHODOX
from cwcal.engines.seasons import liturgical_season, season_codes, seasons_of_year

def _d(s: str) -> date:
    return date.fromisoformat(s)

def test_canonical_seasons_2023():
    """Church year 2023: Advent 2022-11-27, Easter 2023-04-09, next Advent 2023-12-03."""
    got = [(s.code, s.name, s.start, s.end) for s in seasons_of_year(2023)]
    assert got == [
        ("A", "Advent", _d("2022-11-27"), _d("2022-12-24")),
        ("C", "Christmas", _d("2022-12-25"), _d("2023-01-05")),
        ("I", "Epiphany", _d("2023-01-06"), _d("2023-02-21")),
        ("L", "Lent", _d("2023-02-22"), _d("2023-04-01")),
        ("H", "Holy Week", _d("2023-04-02"), _d("2023-04-08")),
        ("E", "Eastertide", _d("2023-04-09"), _d("2023-05-27")),
        ("P", "Pentecost", _d("2023-05-28"), _d("2023-06-03")),
        ("O", "Ordinary Time", _d("2023-06-04"), _d("2023-12-02")),
    ]

def test_canonical_seasons_partition_the_church_year():
    for year in range(1600, 2400, 11):
        seasons = seasons_of_year(year)
        first, last = church_year_bounds(year)
        assert seasons[0].start == first
        assert seasons[-1].end == last
        for a, b in zip(seasons, seasons[1:]):
            assert b.start == a.end + timedelta(days=1)
        assert sum(s.days for s in seasons) == (last - first).days + 1

def test_liturgical_season_lookup():
    assert liturgical_season("2023-12-25").name == "Christmas"
    assert liturgical_season("2023-12-03").code == "A"
    assert liturgical_season("2024-03-31").name == "Eastertide"
    assert liturgical_season("2023-07-01").code == "O"
    assert liturgical_season(date(2023, 2, 22)).name == "Lent"

def test_orthodox_options_shift_the_moveable_seasons():
    opts = SeasonOptions(easter=ORTHODOX)
    assert liturgical_season("2023-04-10").name == "Eastertide"
    assert liturgical_season("2023-04-10", opts).name == "Holy Week"

def test_custom_seasons_are_merged_in_start_order():
    passiontide = SeasonInterval("Passiontide", _d("2023-03-26"), _d("2023-04-08"))
    opts = SeasonOptions(custom_seasons=(passiontide,))
    seasons = seasons_of_year(2023, opts)
    assert len(seasons) == 9
    assert [s.name for s in seasons][3:6] == ["Lent", "Passiontide", "Holy Week"]
    # Lent starts first, so it wins the overlap
    assert liturgical_season("2023-03-27", opts).name == "Lent"

def test_custom_seasons_only():
    passiontide = SeasonInterval("Passiontide", _d("2023-03-26"), _d("2023-04-08"))
    opts = SeasonOptions(custom_seasons=(passiontide,), canonical=False)
    assert seasons_of_year(2023, opts) == [passiontide]
    assert liturgical_season("2023-03-27", opts) == passiontide
    assert liturgical_season("2023-07-01", opts) is UNKNOWN_SEASON

def test_unknown_season_sentinel():
    assert UNKNOWN_SEASON.name == "Unknown"
    assert UNKNOWN_SEASON.start is None and UNKNOWN_SEASON.end is None
    assert not UNKNOWN_SEASON.contains(date(2023, 1, 1))
    assert UNKNOWN_SEASON.days == 0

def test_season_codes():
    codes = season_codes()
    assert set(codes) == {"A", "C", "I", "L", "H", "E", "P", "O"}
    codes["X"] = "mutated"
    assert "X" not in season_codes()

def test_validation_runs_even_without_canonical_seasons():
    with pytest.raises(OutOfRangeError):
        seasons_of_year(1500, SeasonOptions(canonical=False))
