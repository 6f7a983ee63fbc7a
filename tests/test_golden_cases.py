import pytest

from ninestar.services.orchestrators.profile_full import (
    CalculationInput,
    calculate_profile,
    format_profile_shorthand,
)


GOLDEN_UTC_NOON = [
    ("1986-03-15", "5.7.3"),
    ("1990-07-10", "1.3.3"),
    ("1995-11-20", "5.2.8"),
    ("1999-12-25", "1.7.8"),
    ("1954-04-20", "1.6.9"),
    ("2008-06-15", "1.4.2"),
    ("1972-09-10", "1.1.5"),
    ("1963-05-15", "1.5.1"),
    ("1977-10-31", "5.3.7"),
    ("2010-06-21", "8.7.6"),
    ("1995-01-20", "6.9.3"),
    ("1986-02-05", "5.8.2"),
    ("1986-02-03", "6.6.3"),
    ("1971-01-31", "3.6.2"),
    ("1920-02-04", "8.2.2"),
    ("2020-02-04", "1.8.7"),
    ("1999-12-31", "1.7.8"),
    ("2000-01-01", "1.6.9"),
    ("2024-02-03", "1.6.9"),
    ("2024-02-04", "1.8.7"),
    ("1995-03-06", "5.7.3"),
    ("1995-03-05", "5.7.3"),
    ("2000-08-08", "9.8.6"),
    ("2000-08-07", "9.6.8"),
    ("1985-11-08", "5.2.8"),
    ("1985-11-07", "5.7.3"),
    ("2015-04-05", "3.3.5"),
    ("2015-04-04", "3.6.2"),
    ("2005-12-07", "4.7.2"),
    ("1998-01-06", "2.9.7"),
    ("1954-04-15", "1.6.9"),
    ("1972-07-20", "1.3.3"),
    ("1980-09-05", "2.1.6"),
]


@pytest.mark.parametrize("day,expected", GOLDEN_UTC_NOON)
def test_golden_profiles_at_utc_noon(day, expected):
    profile = calculate_profile(CalculationInput(date=f"{day}T12:00:00Z"))
    assert format_profile_shorthand(profile) == expected


@pytest.mark.parametrize(
    "day,solar_year",
    [
        ("1995-01-20", 1994),
        ("1986-02-03", 1985),
        ("1971-01-31", 1970),
        ("2000-01-01", 1999),
        ("2024-02-03", 2023),
        ("2024-02-04", 2024),
        ("1986-03-15", 1986),
    ],
)
def test_golden_solar_years(day, solar_year):
    profile = calculate_profile(CalculationInput(date=f"{day}T12:00:00Z"))
    assert profile.solar_year == solar_year


@pytest.mark.parametrize(
    "day,clock,tz,expected",
    [
        ("2024-02-04", "02:00", "America/Los_Angeles", "1.6.9"),
        ("2024-02-04", "18:00", "America/Los_Angeles", "1.8.7"),
        ("2024-02-04", "02:00", "Asia/Tokyo", "1.8.7"),
        ("2024-02-03", "20:00", "Asia/Tokyo", "1.8.7"),
    ],
)
def test_golden_timezone_cases(day, clock, tz, expected):
    profile = calculate_profile(CalculationInput(date=day, time=clock, timezone=tz))
    assert format_profile_shorthand(profile) == expected


@pytest.mark.parametrize("day", ["1986-03-15", "1990-07-10", "1995-11-20"])
def test_traditional_method_matches_default(day):
    default = calculate_profile(CalculationInput(date=f"{day}T12:00:00Z"))
    explicit = calculate_profile(CalculationInput(date=f"{day}T12:00:00Z", method="traditional"))
    assert format_profile_shorthand(default) == format_profile_shorthand(explicit)
    assert explicit.method == "traditional"


def test_profile_metadata_is_complete():
    profile = calculate_profile(CalculationInput(date="1986-03-15T12:00:00Z"))
    assert profile.solar_year == 1986
    assert profile.method == "traditional"
    assert profile.metadata.principal.number == 5
    assert profile.metadata.month.number == 7
    assert profile.metadata.energetic.number == 3
    assert profile.metadata.principal.element == "Earth"
