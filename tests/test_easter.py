# tests/test_easter.py

import pytest
import random
from datetime import date, timedelta

from cwcal.core.errors import OutOfRangeError
from cwcal.core.types import EasterOptions
from cwcal.engines.easter import (
    JULIAN,
    ORTHODOX,
    WESTERN,
    compute_easter,
    julian_easter,
    julian_gregorian_gap,
    offset_to_month_day,
    orthodox_easter,
    western_easter,
)

WESTERN_CASES = [
    (1818, date(1818, 3, 22)),   # earliest possible
    (1943, date(1943, 4, 25)),   # latest possible
    (1954, date(1954, 4, 18)),
    (1981, date(1981, 4, 19)),
    (1999, date(1999, 4, 4)),
    (2000, date(2000, 4, 23)),
    (2023, date(2023, 4, 9)),
    (2024, date(2024, 3, 31)),
    (2025, date(2025, 4, 20)),
    (2026, date(2026, 4, 5)),
    (2027, date(2027, 3, 28)),
    (2028, date(2028, 4, 16)),
    (2100, date(2100, 3, 28)),
]

ORTHODOX_CASES = [
    (1983, date(1983, 5, 8)),
    (2010, date(2010, 4, 4)),
    (2023, date(2023, 4, 16)),
    (2024, date(2024, 5, 5)),
    (2025, date(2025, 4, 20)),
    (2026, date(2026, 4, 12)),
    (2027, date(2027, 5, 2)),
]

@pytest.mark.parametrize("year,expected", WESTERN_CASES)
def test_western_easter_reference_dates(year, expected):
    assert compute_easter(year) == expected
    assert western_easter(year) == expected

@pytest.mark.parametrize("year,expected", ORTHODOX_CASES)
def test_orthodox_easter_reference_dates(year, expected):
    assert compute_easter(year, ORTHODOX) == expected
    assert orthodox_easter(year) == expected

def test_julian_easter_is_a_julian_calendar_date():
    """2023: Orthodox Easter April 16 (Gregorian) is April 3 on the Julian calendar."""
    assert julian_easter(2023) == date(2023, 4, 3)
    assert compute_easter(2023, JULIAN) == date(2023, 4, 3)

def test_gregorian_flag_alone_is_western():
    assert compute_easter(2023, EasterOptions(gregorian=True)) == date(2023, 4, 9)

def test_options_labels():
    assert WESTERN.label == "western"
    assert JULIAN.label == "julian"
    assert ORTHODOX.label == "orthodox"
    assert ORTHODOX.converts_to_gregorian and not JULIAN.converts_to_gregorian

def test_western_bounds_and_weekday_full_range():
    """Every supported year: a Sunday between March 22 and April 25."""
    for year in range(1583, 10000):
        d = compute_easter(year)
        assert date(year, 3, 22) <= d <= date(year, 4, 25), year
        assert d.isoweekday() == 7, year

def test_orthodox_bounds_twentieth_and_twenty_first_centuries():
    """While the calendars are 13 days apart Orthodox Easter falls April 4 .. May 8."""
    for year in range(1900, 2100):
        d = compute_easter(year, ORTHODOX)
        assert date(year, 4, 4) <= d <= date(year, 5, 8), year
        assert d.isoweekday() == 7, year

def test_orthodox_is_julian_shifted_by_the_gap():
    random.seed(42)
    for _ in range(500):
        year = random.randint(1583, 9999)
        shifted = julian_easter(year) + timedelta(days=julian_gregorian_gap(year))
        assert orthodox_easter(year) == shifted

def test_gap_values():
    assert julian_gregorian_gap(1600) == 10
    assert julian_gregorian_gap(1900) == 13
    assert julian_gregorian_gap(2024) == 13
    assert julian_gregorian_gap(2100) == 14

def test_offset_conversion():
    assert offset_to_month_day(1) == (3, 1)
    assert offset_to_month_day(31) == (3, 31)
    assert offset_to_month_day(32) == (4, 1)
    assert offset_to_month_day(62) == (5, 1)

def test_year_is_validated():
    with pytest.raises(OutOfRangeError):
        compute_easter(1582)

def test_idempotent():
    assert compute_easter(2023) == compute_easter(2023)
