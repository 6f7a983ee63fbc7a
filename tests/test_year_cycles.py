from datetime import date, datetime, timezone

import pytest

from ninestar.services import year_cycles
from ninestar.services.year_cycles import (
    YEAR_CYCLES,
    YearCycleNotFoundError,
    get_all_year_cycles,
    get_current_year_cycle,
    get_cycle_number,
    get_year_cycle_timeline,
)


@pytest.mark.parametrize("star", range(1, 10))
def test_reference_year_alignment(star):
    assert get_cycle_number(star, 2022) == star


@pytest.mark.parametrize("star", range(1, 10))
def test_cycle_periodicity(star):
    for year in range(1900, 2100, 7):
        assert get_cycle_number(star, year) == get_cycle_number(star, year + 9)
        assert 1 <= get_cycle_number(star, year) <= 9


def test_cycle_advances_by_one_per_year():
    assert get_cycle_number(1, 2023) == 2
    assert get_cycle_number(9, 2023) == 1
    assert get_cycle_number(5, 2026) == 9
    assert get_cycle_number(3, 2013) == 3


def test_cycle_table_complete():
    assert sorted(YEAR_CYCLES) == list(range(1, 10))
    for number, cycle in YEAR_CYCLES.items():
        assert cycle.number == number
        assert cycle.keywords


def test_current_cycle_uses_feb_4_boundary():
    assert get_current_year_cycle(5, date(2026, 2, 3)).number == 8
    assert get_current_year_cycle(5, date(2026, 2, 4)).number == 9
    assert get_current_year_cycle(5, datetime(2026, 1, 10, tzinfo=timezone.utc)).number == 8


def test_current_cycle_defaults_to_today():
    assert 1 <= get_current_year_cycle(3).number <= 9


def test_missing_cycle_data_raises(monkeypatch):
    monkeypatch.delitem(year_cycles.YEAR_CYCLES, 9)
    with pytest.raises(YearCycleNotFoundError, match="cycle number 9"):
        get_current_year_cycle(9, date(2022, 6, 1))


def test_all_cycles_enumerates_inclusive_range():
    entries = get_all_year_cycles(1, 2000, years_ahead=5, today=date(2024, 6, 1))
    assert len(entries) == 30
    assert entries[0].calendar_year == 2000
    assert entries[-1].calendar_year == 2029
    assert all(e.solar_year == e.calendar_year for e in entries)
    assert entries[0].cycle_number == 6
    assert entries[0].cycle_data is YEAR_CYCLES[6]


def test_all_cycles_default_horizon():
    entries = get_all_year_cycles(2, 2020, today=date(2024, 6, 1))
    assert entries[-1].calendar_year == 2054


def test_timeline():
    timeline = get_year_cycle_timeline(1, date(2024, 6, 1))
    assert timeline.solar_year == 2024
    assert timeline.previous.cycle.number == 2
    assert timeline.current.cycle.number == 3
    assert timeline.next.cycle.number == 4
    assert timeline.current.start_date == date(2024, 2, 4)
    assert timeline.current.end_date == date(2025, 2, 3)
    assert timeline.current.days_remaining == 247
    assert timeline.previous.days_remaining is None
