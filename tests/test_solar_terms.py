from datetime import date, datetime, timedelta, timezone

import pytest

from ninestar.services.solar_terms import (
    MonthNotFoundError,
    get_data_confidence,
    month_index_for_date,
    resolve_term_source,
    solar_terms_for_year,
    solar_year_for_date,
)

UTC = timezone.utc


def _noon(y, m, d):
    return datetime(y, m, d, 12, tzinfo=UTC)


def test_fixed_table_order_and_dates():
    table = solar_terms_for_year(2024, "fixed")
    assert table.source == "fixed"
    assert [t.key for t in table.terms][0] == "li_chun"
    assert table.li_chun == _noon(2024, 2, 4)
    assert table.term("xiao_han").instant == _noon(2025, 1, 6)
    assert table.term("da_xue").instant == _noon(2024, 12, 7)
    assert all(a < b for a, b in zip(table.boundaries, table.boundaries[1:]))


def test_term_table_is_memoized():
    assert solar_terms_for_year(1990, "fixed") is solar_terms_for_year(1990, "fixed")


@pytest.mark.parametrize("year", [1900, 1955, 2024, 2100, 3000])
def test_total_for_any_year(year):
    for source in ("fixed", "astronomical"):
        table = solar_terms_for_year(year, source)
        assert len(table.terms) == 12


@pytest.mark.parametrize("year", [1950, 1986, 2001, 2024, 2099])
def test_solar_year_boundary_property(year):
    for day in range(1, 32):
        assert solar_year_for_date(_noon(year, 1, day)).solar_year == year - 1
    for day in (1, 2, 3):
        assert solar_year_for_date(_noon(year, 2, day)).solar_year == year - 1
    assert solar_year_for_date(_noon(year, 2, 4)).solar_year == year
    assert solar_year_for_date(_noon(year, 12, 31)).solar_year == year


def test_li_chun_date_is_feb_4_of_gregorian_year():
    result = solar_year_for_date(_noon(1995, 1, 20))
    assert result.solar_year == 1994
    assert result.li_chun_date == _noon(1995, 2, 4)


def test_boundary_day_belongs_to_new_month_regardless_of_hour():
    early = datetime(2000, 8, 8, 0, 5, tzinfo=UTC)
    assert month_index_for_date(early, 2000, "fixed") == 6
    assert month_index_for_date(datetime(2000, 8, 7, 23, 59, tzinfo=UTC), 2000, "fixed") == 5


def test_december_and_january_months():
    assert month_index_for_date(_noon(1999, 12, 6), 1999) == 9
    assert month_index_for_date(_noon(1999, 12, 7), 1999) == 10
    assert month_index_for_date(_noon(2000, 1, 5), 1999) == 10
    assert month_index_for_date(_noon(2000, 1, 6), 1999) == 11
    assert month_index_for_date(_noon(2000, 2, 3), 1999) == 11


@pytest.mark.parametrize("year", [1984, 2000, 2023])
def test_month_tiling_every_day(year):
    start = date(year, 2, 4)
    end = date(year + 1, 2, 3)
    seen = []
    current = start
    while current <= end:
        moment = datetime(current.year, current.month, current.day, 12, tzinfo=UTC)
        index = month_index_for_date(moment, year)
        assert 0 <= index <= 11
        seen.append(index)
        current += timedelta(days=1)
    assert seen == sorted(seen)
    assert set(seen) == set(range(12))


def test_date_outside_solar_year_raises():
    with pytest.raises(MonthNotFoundError):
        month_index_for_date(_noon(2030, 6, 1), 2000)


def test_astronomical_rows_use_precise_instants():
    table = solar_terms_for_year(2024, "astronomical")
    assert table.li_chun == datetime(2024, 2, 4, 8, 27, tzinfo=UTC)
    assert table.term("jing_zhe").instant == datetime(2024, 3, 5, 2, 23, tzinfo=UTC)
    assert table.term("xiao_han").instant == datetime(2025, 1, 5, 2, 33, tzinfo=UTC)


def test_astronomical_li_chun_only_years_fall_back_for_other_terms():
    table = solar_terms_for_year(1920, "astronomical")
    assert table.li_chun == datetime(1920, 2, 5, 2, 23, tzinfo=UTC)
    assert table.term("jing_zhe").instant == _noon(1920, 3, 6)


def test_astronomical_solar_year_compares_instants():
    li_chun = datetime(2025, 2, 3, 14, 10, tzinfo=UTC)
    before = solar_year_for_date(li_chun - timedelta(minutes=1), "astronomical")
    after = solar_year_for_date(li_chun, "astronomical")
    assert before.solar_year == 2024
    assert after.solar_year == 2025
    assert after.li_chun_date == li_chun


def test_astronomical_month_tie_goes_to_new_month():
    jing_zhe = datetime(2024, 3, 5, 2, 23, tzinfo=UTC)
    assert month_index_for_date(jing_zhe, 2024, "astronomical") == 1
    assert month_index_for_date(jing_zhe - timedelta(seconds=1), 2024, "astronomical") == 0


def test_source_from_environment(monkeypatch):
    monkeypatch.setenv("NINESTAR_TERM_SOURCE", "astronomical")
    assert resolve_term_source() == "astronomical"
    assert resolve_term_source("fixed") == "fixed"
    monkeypatch.setenv("NINESTAR_TERM_SOURCE", "bogus")
    assert resolve_term_source() == "fixed"
    monkeypatch.delenv("NINESTAR_TERM_SOURCE")
    assert resolve_term_source() == "fixed"


@pytest.mark.parametrize(
    "year,level",
    [(1920, "verified"), (2030, "verified"), (1850, "historical"), (1919, "historical"), (2031, "projected"), (1700, "projected")],
)
def test_data_confidence_ranges(year, level):
    result = get_data_confidence(year)
    assert result.level == level
    if level == "verified":
        assert result.note is None
    else:
        assert str(year) in result.note


def test_naive_datetime_is_utc():
    assert solar_year_for_date(datetime(2024, 2, 4, 0, 30)).solar_year == 2024
