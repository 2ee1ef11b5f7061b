# tests/test_sundays.py

import pytest
import random
from datetime import date, timedelta

from cwcal.core.errors import InvalidArgumentError
from cwcal.engines.sundays import (
    closest_sunday,
    is_sunday,
    next_sunday,
    previous_sunday,
    sundays_of_church_year,
)

def test_is_sunday():
    assert is_sunday("2023-04-09")
    assert not is_sunday(date(2023, 4, 10))

def test_next_and_previous_are_strict():
    """From a Sunday the neighbours are a full week away."""
    assert next_sunday("2023-04-09") == date(2023, 4, 16)
    assert previous_sunday("2023-04-09") == date(2023, 4, 2)
    assert next_sunday("2023-04-05") == date(2023, 4, 9)
    assert previous_sunday("2023-04-05") == date(2023, 4, 2)
    assert next_sunday("2023-04-08") == date(2023, 4, 9)
    assert previous_sunday("2023-04-10") == date(2023, 4, 9)

def test_closest_sunday():
    assert closest_sunday("2023-04-09") == date(2023, 4, 9)     # Sunday
    assert closest_sunday("2023-04-05") == date(2023, 4, 2)     # Wednesday -> back 3
    assert closest_sunday("2023-04-06") == date(2023, 4, 9)     # Thursday -> ahead 3
    assert closest_sunday("2023-04-10") == date(2023, 4, 9)     # Monday
    assert closest_sunday("2023-04-15") == date(2023, 4, 16)    # Saturday

def test_closest_sunday_is_within_three_days():
    random.seed(42)
    start = date(1600, 1, 1)
    for _ in range(500):
        d = start + timedelta(days=random.randint(0, 3_000_000))
        c = closest_sunday(d)
        assert c.isoweekday() == 7
        assert abs((c - d).days) <= 3

def test_sundays_of_church_year_2023():
    """Church year 2023 runs 2022-11-27 .. 2023-12-02 and has 53 Sundays."""
    sundays = sundays_of_church_year(2023)
    assert len(sundays) == 53
    assert sundays[0] == date(2022, 11, 27)
    assert sundays[-1] == date(2023, 11, 26)

def test_sundays_of_church_year_2024():
    sundays = sundays_of_church_year(2024)
    assert len(sundays) == 52
    assert sundays[0] == date(2023, 12, 3)
    assert sundays[-1] == date(2024, 11, 24)

def test_sundays_enumeration_property():
    for year in range(1600, 2400, 7):
        sundays = sundays_of_church_year(year)
        assert len(sundays) in (52, 53)
        assert all(d.isoweekday() == 7 for d in sundays)
        assert all((b - a).days == 7 for a, b in zip(sundays, sundays[1:]))

def test_date_input_resolves_to_church_year():
    assert sundays_of_church_year("2023-12-25") == sundays_of_church_year(2024)

def test_invalid_date():
    with pytest.raises(InvalidArgumentError):
        next_sunday("2023-02-30")
