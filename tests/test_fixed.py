# tests/test_fixed.py

import json
import pytest
from datetime import date

from cwcal.core.errors import CalendarDataError
from cwcal.engines import fixed
from cwcal.engines.fixed import (
    fixed_dates_for_year,
    fixed_events_on,
    load_fixed_calendar,
    parse_fixed_calendar,
)

def _event(id, month, day, alt=None, type="C", group=None, title=None):
    return {
        "id": id,
        "group": group,
        "type": type,
        "title": title or f"event {id}",
        "observed": {
            "isoMonth": month,
            "isoDay": day,
            "alt": {"isoMonth": alt[0], "isoDay": alt[1]} if alt else None,
        },
    }

@pytest.fixture
def leap_table():
    """Small injected table exercising leap-day handling."""
    return parse_fixed_calendar({
        "version": "test",
        "types": {"F": "Festival", "C": "Commemoration"},
        "seasons": {"A": "Advent"},
        "groups": [{"id": 1, "title": "Pair", "events": [1, 3]}],
        "events": [
            _event(1, 2, 29, alt=(3, 1), type="F", group=1),
            _event(2, 2, 29),
            _event(3, 7, 3, alt=(12, 21), group=1),
        ],
    })

def test_leap_day_in_common_year(leap_table):
    got = {e.id: e.observed for e in fixed_dates_for_year(2023, leap_table)}
    assert got[1] == (date(2023, 3, 1),)
    assert 2 not in got
    assert got[3] == (date(2023, 7, 3), date(2023, 12, 21))

def test_leap_day_in_leap_year(leap_table):
    got = {e.id: e.observed for e in fixed_dates_for_year(2024, leap_table)}
    assert got[1] == (date(2024, 2, 29), date(2024, 3, 1))
    assert got[2] == (date(2024, 2, 29),)

def test_fields_other_than_dates_are_preserved(leap_table):
    ev = fixed_dates_for_year(2024, leap_table)[0]
    assert (ev.id, ev.title, ev.type, ev.group) == (1, "event 1", "F", 1)
    assert leap_table.type_name("F") == "Festival"
    assert leap_table.group(1).events == (1, 3)
    with pytest.raises(KeyError):
        leap_table.group(99)

def test_date_input_uses_calendar_year(leap_table):
    """Unlike the moveable functions, a date picks its calendar year here."""
    by_date = fixed_dates_for_year("2023-12-25", leap_table)
    assert all(d.year == 2023 for e in by_date for d in e.observed)

def test_events_on_a_date(leap_table):
    assert [e.id for e in fixed_events_on("2024-02-29", leap_table)] == [1, 2]
    assert [e.id for e in fixed_events_on("2023-12-21", leap_table)] == [3]
    assert fixed_events_on("2023-01-01", leap_table) == []

def test_table_is_read_only(leap_table):
    with pytest.raises(TypeError):
        leap_table.types["X"] = "nope"

@pytest.mark.parametrize("doc", [
    {"events": [_event(1, 13, 1)]},
    {"events": [_event(1, 2, 30)]},
    {"events": [_event(1, 1, 1, type="X")]},
    {"events": [{"id": 1, "title": "no observed", "type": "C"}]},
    {"events": [_event(1, 1, 1, group=5)]},
    {"groups": [{"id": 1, "title": "g", "events": [9]}], "events": [_event(1, 1, 1)]},
    {"version": "no events"},
    [],
])
def test_malformed_tables(doc):
    with pytest.raises(CalendarDataError):
        parse_fixed_calendar(doc)

def test_packaged_table():
    table = load_fixed_calendar()
    assert table.version
    assert len(table.events) > 200
    assert set(table.types) == {"F", "C", "L", "P"}
    assert load_fixed_calendar() is table

def test_packaged_principal_feasts():
    principal = {e.title for e in fixed_dates_for_year(2023) if e.type == "P"}
    assert "Christmas Day" in principal
    assert "The Epiphany" in principal
    assert "All Saints' Day" in principal
    assert len(principal) == 5

def test_packaged_alternative_dates():
    matthias = [e for e in fixed_dates_for_year(2023) if e.title == "Matthias the Apostle"]
    assert matthias[0].observed == (date(2023, 5, 14), date(2023, 2, 24))
    assert any(e.title == "Christmas Day" for e in fixed_events_on("2023-12-25"))

def test_packaged_dates_stay_in_year():
    for year in (1900, 2023, 2024, 2100):
        for e in fixed_dates_for_year(year):
            assert all(d.year == year for d in e.observed)

def test_env_override(tmp_path, monkeypatch):
    path = tmp_path / "calendar.json"
    path.write_text(json.dumps({"version": "env", "events": [_event(7, 6, 1)]}), encoding="utf-8")
    monkeypatch.setenv(fixed.ENV_VAR, str(path))
    table = load_fixed_calendar()
    assert table.version == "env"
    assert [e.id for e in fixed_dates_for_year(2023)] == [7]

def test_env_override_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv(fixed.ENV_VAR, str(tmp_path / "absent.json"))
    with pytest.raises(CalendarDataError):
        load_fixed_calendar()

def test_explicit_path_with_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CalendarDataError):
        load_fixed_calendar(path)

def test_event_type_name(leap_table):
    ev = fixed_dates_for_year(2024, leap_table)[0]
    assert ev.type_name(leap_table) == "Festival"
    christmas = [e for e in fixed_events_on("2023-12-25") if e.title == "Christmas Day"][0]
    assert christmas.type_name(load_fixed_calendar()) == "Principal Feast or Holy Day"
