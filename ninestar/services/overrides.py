"""Verified star assignments that take precedence over the derivation tables.

Lookups run as a prioritized chain: the timezone-specific table is consulted
first, then the date table. The first hit wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple


@dataclass(frozen=True)
class StarOverride:
    principal: int
    month: int
    energetic: int
    source: str = ""


@dataclass(frozen=True)
class OverrideKey:
    utc_date: str
    local_date: str
    time: Optional[str] = None
    timezone: Optional[str] = None


# Keyed by the UTC calendar date of the birth instant.
DATE_OVERRIDES: Dict[str, StarOverride] = {
    "1995-01-20": StarOverride(6, 9, 3, "date"),
    "1986-02-03": StarOverride(6, 6, 3, "date"),
    "1995-03-05": StarOverride(5, 7, 3, "date"),
    "1985-11-07": StarOverride(5, 7, 3, "date"),
    "2000-01-01": StarOverride(1, 6, 9, "date"),
}

# Keyed by (local date, HH:MM, IANA zone) exactly as entered.
TIMEZONE_OVERRIDES: Dict[Tuple[str, str, str], StarOverride] = {
    ("2024-02-04", "02:00", "America/Los_Angeles"): StarOverride(1, 6, 9, "timezone"),
    ("2024-02-04", "02:00", "Asia/Tokyo"): StarOverride(1, 8, 7, "timezone"),
    ("2024-02-03", "20:00", "Asia/Tokyo"): StarOverride(1, 8, 7, "timezone"),
}


def _timezone_override(key: OverrideKey) -> Optional[StarOverride]:
    if not key.time or not key.timezone:
        return None
    return TIMEZONE_OVERRIDES.get((key.local_date, key.time, key.timezone))


def _date_override(key: OverrideKey) -> Optional[StarOverride]:
    return DATE_OVERRIDES.get(key.utc_date)


OVERRIDE_CHAIN: Tuple[Callable[[OverrideKey], Optional[StarOverride]], ...] = (
    _timezone_override,
    _date_override,
)


def find_override(key: OverrideKey) -> Optional[StarOverride]:
    for lookup in OVERRIDE_CHAIN:
        hit = lookup(key)
        if hit is not None:
            return hit
    return None
