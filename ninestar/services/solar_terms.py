"""Solar-term boundaries and the solar year/month resolver.

Two sources of boundary instants are supported:

``fixed``
    Every term is pinned to the same calendar date at 12:00 UTC each year.
    This is the primary source and the one the profile engine is validated
    against. Under this source the boundary *day* belongs to the month it
    opens, whatever the hour of birth.

``astronomical``
    Instants are read from a precomputed table where one exists. Years or
    terms missing from the table degrade to the fixed calendar. Comparisons
    are made instant against instant.

The source is chosen per call (``source=``) or through the
``NINESTAR_TERM_SOURCE`` environment variable.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import lru_cache
from typing import Callable, Dict, Optional, Tuple

from .solar_terms_data import (
    ASTRONOMICAL_TERMS,
    FIXED_TERM_DATES,
    FIXED_TERM_HOUR_UTC,
    HISTORICAL_RANGE,
    LI_CHUN_INSTANTS,
    TERM_KEYS,
    TERM_NAMES,
    VERIFIED_RANGE,
)

logger = logging.getLogger(__name__)

UTC = timezone.utc

FIXED = "fixed"
ASTRONOMICAL = "astronomical"


class MonthNotFoundError(RuntimeError):
    """Raised when a term table does not tile the solar year."""


@dataclass(frozen=True)
class SolarTerm:
    key: str
    name: str
    instant: datetime


@dataclass(frozen=True)
class YearSolarTerms:
    """The twelve month-opening terms of one solar year, in time order."""

    year: int
    source: str
    terms: Tuple[SolarTerm, ...]

    @property
    def li_chun(self) -> datetime:
        return self.terms[0].instant

    @property
    def boundaries(self) -> Tuple[datetime, ...]:
        return tuple(term.instant for term in self.terms)

    def term(self, key: str) -> SolarTerm:
        for item in self.terms:
            if item.key == key:
                return item
        raise KeyError(key)


@dataclass(frozen=True)
class SolarYear:
    solar_year: int
    li_chun_date: datetime


@dataclass(frozen=True)
class DataConfidence:
    year: int
    level: str
    note: Optional[str] = None


def _ensure_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def _fixed_instants(year: int) -> Tuple[datetime, ...]:
    return tuple(
        datetime(year + offset, month, day, FIXED_TERM_HOUR_UTC, tzinfo=UTC)
        for month, day, offset in FIXED_TERM_DATES
    )


def _astronomical_instants(year: int) -> Tuple[datetime, ...]:
    row = ASTRONOMICAL_TERMS.get(year)
    if row is not None:
        return tuple(
            datetime(year + offset, month, day, hour, minute, tzinfo=UTC)
            for month, day, hour, minute, offset in row
        )
    instants = list(_fixed_instants(year))
    li_chun = LI_CHUN_INSTANTS.get(year)
    if li_chun is not None:
        month, day, hour, minute = li_chun
        instants[0] = datetime(year, month, day, hour, minute, tzinfo=UTC)
    return tuple(instants)


_BUILDERS: Dict[str, Callable[[int], Tuple[datetime, ...]]] = {
    FIXED: _fixed_instants,
    ASTRONOMICAL: _astronomical_instants,
}


def resolve_term_source(source: Optional[str] = None) -> str:
    """Return the effective term source, honouring ``NINESTAR_TERM_SOURCE``."""

    candidate = (source or os.getenv("NINESTAR_TERM_SOURCE") or FIXED).strip().lower()
    if candidate not in _BUILDERS:
        logger.warning("unknown_term_source", extra={"source": candidate})
        return FIXED
    return candidate


@lru_cache(maxsize=512)
def _cached_terms(year: int, source: str) -> YearSolarTerms:
    instants = _BUILDERS[source](year)
    for earlier, later in zip(instants, instants[1:]):
        if later <= earlier:
            raise MonthNotFoundError(
                f"Solar term table for {year} is not strictly increasing"
            )
    terms = tuple(
        SolarTerm(key=key, name=TERM_NAMES[key], instant=instant)
        for key, instant in zip(TERM_KEYS, instants)
    )
    return YearSolarTerms(year=year, source=source, terms=terms)


def solar_terms_for_year(year: int, source: Optional[str] = None) -> YearSolarTerms:
    """Return the term table for ``year``. Total for any integer year."""

    return _cached_terms(int(year), resolve_term_source(source))


def solar_year_for_date(moment: datetime, source: Optional[str] = None) -> SolarYear:
    """Resolve the solar year of ``moment`` and the Li Chun of its Gregorian year."""

    moment = _ensure_utc(moment)
    effective = resolve_term_source(source)
    li_chun = solar_terms_for_year(moment.year, effective).li_chun
    if effective == FIXED:
        before_li_chun = moment.month == 1 or (moment.month == 2 and moment.day <= 3)
    else:
        before_li_chun = moment < li_chun
    solar_year = moment.year - 1 if before_li_chun else moment.year
    return SolarYear(solar_year=solar_year, li_chun_date=li_chun)


def month_index_for_date(
    moment: datetime, solar_year: int, source: Optional[str] = None
) -> int:
    """Return the 0-based solar month (0 = Li Chun month, 11 = Xiao Han month)."""

    moment = _ensure_utc(moment)
    effective = resolve_term_source(source)
    bounds = list(solar_terms_for_year(solar_year, effective).boundaries)
    bounds.append(solar_terms_for_year(solar_year + 1, effective).li_chun)

    probe: object = moment
    if effective == FIXED:
        probe = moment.date()
        bounds = [b.date() for b in bounds]

    for index in range(12):
        if bounds[index] <= probe < bounds[index + 1]:
            return index
    raise MonthNotFoundError("Unable to determine solar month")


def get_data_confidence(year: int) -> DataConfidence:
    if VERIFIED_RANGE[0] <= year <= VERIFIED_RANGE[1]:
        return DataConfidence(year=year, level="verified")
    if HISTORICAL_RANGE[0] <= year <= HISTORICAL_RANGE[1]:
        return DataConfidence(
            year=year,
            level="historical",
            note=(
                f"Data for year {year} is based on historical approximations. "
                "Solar term dates may vary by ±1-2 days from actual values."
            ),
        )
    return DataConfidence(
        year=year,
        level="projected",
        note=(
            f"Data for year {year} is an astronomical projection. "
            "Solar term dates may vary by ±1-2 days from actual values."
        ),
    )

