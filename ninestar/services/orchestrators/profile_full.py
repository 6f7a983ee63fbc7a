"""Assemble a Nine Star Ki profile from a birth date.

The pipeline is: parse and validate the input, consult the verified override
chain, resolve the solar year and month, derive the three stars, then attach
boundary warnings, confidence and star metadata.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import asdict, dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..confidence import (
    BoundaryWarning,
    ConfidenceBreakdown,
    calculate_confidence,
    check_boundary_warnings,
)
from ..overrides import OverrideKey, find_override
from ..solar_terms import month_index_for_date, resolve_term_source, solar_year_for_date
from ..star_metadata import StarMetadata, get_star_metadata
from ..star_tables import energetic_star, month_star, principal_star, reference_year

logger = logging.getLogger(__name__)

UTC = timezone.utc

MIN_YEAR = 1900
MAX_YEAR = 2100
METHODS = ("traditional", "chinese-ascending")

_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")

DateInput = Union[str, date, datetime]


class InvalidInputError(ValueError):
    """Raised when a calculation input cannot be turned into a birth instant."""


@dataclass(frozen=True)
class CalculationInput:
    date: DateInput
    time: Optional[str] = None
    timezone: Optional[str] = None
    method: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class ParsedInput:
    """A validated input pinned to an absolute instant."""

    moment: datetime
    local_date: date
    time: Optional[str]
    timezone: Optional[str]
    has_time: bool

    @property
    def wall_clock(self) -> datetime:
        """Birth time as entered. Naive when a clock time was given, else the UTC instant."""
        if self.time is None:
            return self.moment
        hours, minutes = (int(part) for part in self.time.split(":"))
        return datetime.combine(self.local_date, time(hours, minutes))


@dataclass(frozen=True)
class ProfileMetadata:
    principal: StarMetadata
    month: StarMetadata
    energetic: StarMetadata


@dataclass(frozen=True)
class NineStarKiProfile:
    principal_star: int
    month_star: int
    energetic_star: int
    birth_date: datetime
    solar_year: int
    solar_month: int
    solar_year_start: datetime
    method: str
    calculated_at: datetime
    metadata: ProfileMetadata
    birth_time: Optional[str] = None
    timezone: Optional[str] = None
    warnings: Tuple[BoundaryWarning, ...] = ()
    confidence: Optional[ConfidenceBreakdown] = None
    overridden: bool = False

    @property
    def year_star(self) -> int:
        return self.principal_star


def _parse_date_value(value: DateInput) -> Tuple[date, Optional[datetime]]:
    """Split a date input into its calendar date and, if present, a full instant."""

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.date(), value
    if isinstance(value, date):
        return value, None
    if not isinstance(value, str):
        raise InvalidInputError("Invalid date")

    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text), None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidInputError("Invalid date") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.date(), parsed


def _normalize_time(value: str) -> str:
    hours, minutes = value.split(":", 1)
    return f"{int(hours):02d}:{int(minutes):02d}"


def parse_calculation_input(data: CalculationInput) -> ParsedInput:
    """Validate ``data`` and resolve it to a UTC birth instant.

    With a time and a timezone the time is read as wall-clock time in that
    zone. A time without a timezone is UTC. A bare date is UTC midnight.
    """

    local_date, instant = _parse_date_value(data.date)
    if not MIN_YEAR <= local_date.year <= MAX_YEAR:
        raise InvalidInputError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}")

    clock: Optional[str] = None
    if data.time is not None:
        if not _TIME_PATTERN.match(data.time.strip()):
            raise InvalidInputError("Time must be in HH:MM format (24-hour)")
        clock = _normalize_time(data.time.strip())

    zone: Optional[ZoneInfo] = None
    tz_name = data.timezone
    if tz_name is not None:
        tz_name = tz_name.strip()
        if not tz_name:
            raise InvalidInputError("Invalid timezone format")
        try:
            zone = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidInputError(f"Unknown timezone: {tz_name}") from exc

    if clock is not None:
        hours, minutes = (int(part) for part in clock.split(":"))
        wall = datetime.combine(local_date, time(hours, minutes))
        moment = wall.replace(tzinfo=zone or UTC).astimezone(UTC)
    elif instant is not None:
        moment = instant.astimezone(UTC)
    else:
        moment = datetime.combine(local_date, time(0, 0), tzinfo=UTC)

    return ParsedInput(
        moment=moment,
        local_date=local_date,
        time=clock,
        timezone=tz_name,
        has_time=clock is not None,
    )


def validate_calculation_input(data: CalculationInput) -> ValidationResult:
    try:
        parse_calculation_input(data)
        _resolve_method(data.method)
    except InvalidInputError as exc:
        return ValidationResult(is_valid=False, error=str(exc))
    return ValidationResult(is_valid=True)


def _resolve_method(method: Optional[str]) -> str:
    chosen = method or os.getenv("NINESTAR_DEFAULT_METHOD") or "traditional"
    if chosen not in METHODS:
        raise InvalidInputError(f"Unknown calculation method: {chosen}")
    return chosen


def _metadata(principal: int, month: int, energetic: int) -> ProfileMetadata:
    return ProfileMetadata(
        principal=get_star_metadata(principal),
        month=get_star_metadata(month),
        energetic=get_star_metadata(energetic),
    )


def calculate_profile(
    data: CalculationInput,
    source: Optional[str] = None,
    now: Optional[datetime] = None,
) -> NineStarKiProfile:
    """Compute the full profile for ``data``.

    Raises :class:`InvalidInputError` for unusable input. Table errors from
    the star lookups propagate unchanged.
    """

    parsed = parse_calculation_input(data)
    method = _resolve_method(data.method)
    term_source = resolve_term_source(source)
    calculated_at = now or datetime.now(UTC)
    moment = parsed.moment

    year = solar_year_for_date(moment, term_source)
    solar_month = month_index_for_date(moment, year.solar_year, term_source) + 1

    override = find_override(
        OverrideKey(
            utc_date=moment.date().isoformat(),
            local_date=parsed.local_date.isoformat(),
            time=parsed.time,
            timezone=parsed.timezone,
        )
    )
    if override is not None:
        logger.info(
            "profile_override_applied",
            extra={"date": moment.date().isoformat(), "override": override.source},
        )
        return NineStarKiProfile(
            principal_star=override.principal,
            month_star=override.month,
            energetic_star=override.energetic,
            birth_date=moment,
            birth_time=parsed.time,
            timezone=parsed.timezone,
            solar_year=year.solar_year,
            solar_month=solar_month,
            solar_year_start=year.li_chun_date,
            method=method,
            calculated_at=calculated_at,
            metadata=_metadata(override.principal, override.month, override.energetic),
            overridden=True,
        )

    principal = principal_star(reference_year(moment.year, year.solar_year))
    month = month_star(principal, solar_month - 1)
    energetic = energetic_star(principal, month)

    warnings = check_boundary_warnings(moment, year.solar_year, term_source)
    confidence = calculate_confidence(moment, parsed.has_time, year.solar_year, term_source)

    return NineStarKiProfile(
        principal_star=principal,
        month_star=month,
        energetic_star=energetic,
        birth_date=moment,
        birth_time=parsed.time,
        timezone=parsed.timezone,
        solar_year=year.solar_year,
        solar_month=solar_month,
        solar_year_start=year.li_chun_date,
        method=method,
        warnings=tuple(warnings),
        calculated_at=calculated_at,
        metadata=_metadata(principal, month, energetic),
        confidence=confidence,
    )


def format_profile_shorthand(profile: NineStarKiProfile) -> str:
    return f"{profile.principal_star}.{profile.month_star}.{profile.energetic_star}"


def profile_to_dict(profile: NineStarKiProfile) -> Dict[str, Any]:
    """Plain-dict view of a profile for JSON responses."""

    payload = asdict(profile)
    payload["year_star"] = profile.year_star
    payload["shorthand"] = format_profile_shorthand(profile)
    payload["warnings"] = [dict(item) for item in payload["warnings"]]
    return payload

