"""Boundary warnings and confidence scoring near solar-term boundaries."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .solar_terms import SolarTerm, solar_terms_for_year

UTC = timezone.utc

WARNING_WINDOW_DAYS = 3
_DAY_SECONDS = 86400.0

CONFIDENCE_LEVELS = ("very_low", "low", "medium", "high", "very_high")

RECOMMENDATIONS = {
    "very_high": "Very confident in this calculation",
    "high": "Confident in this calculation",
    "medium": "Moderately confident - verify birth time if possible",
    "low": "Low confidence - birth time verification recommended",
    "very_low": "Very low confidence - exact birth time needed for accuracy",
}


@dataclass(frozen=True)
class BoundaryWarning:
    type: str
    term: str
    term_date: datetime
    days_difference: int
    hours_to_term: int
    minutes_to_term: int
    direction: str
    term_time: str
    impact_zone: str
    message: str


@dataclass(frozen=True)
class NearestBoundary:
    name: str
    date: datetime
    affected_star: str


@dataclass(frozen=True)
class ConfidenceScore:
    level: str
    percentage: float
    days_from_boundary: float
    nearest_boundary: NearestBoundary
    recommendation: str


@dataclass(frozen=True)
class ConfidenceBreakdown:
    principal: ConfidenceScore
    month: ConfidenceScore
    energetic: ConfidenceScore
    overall: ConfidenceScore


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def _round1(value: float) -> float:
    # half-up, not banker's rounding
    return math.floor(value * 10 + 0.5) / 10


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_term_time(instant: datetime) -> str:
    instant = _as_utc(instant)
    return f"{instant.strftime('%b')} {instant.day}, {instant.strftime('%H:%M')} UTC"


def _impact_zone(total_hours: float) -> str:
    if total_hours <= 24:
        return "high"
    if total_hours <= 72:
        return "medium"
    return "low"


def _warning_for(
    moment: datetime, term: SolarTerm, warning_type: str, affected: str
) -> Optional[BoundaryWarning]:
    diff = (moment - term.instant).total_seconds()
    distance = abs(diff)
    if distance / _DAY_SECONDS > WARNING_WINDOW_DAYS:
        return None

    total_minutes = int(distance // 60)
    hours, minutes = divmod(total_minutes, 60)
    direction = "before" if diff < 0 else "after"
    term_time = format_term_time(term.instant)
    message = (
        f"Birth was {_plural(hours, 'hour')} and {_plural(minutes, 'minute')} "
        f"{direction.upper()} {term.name} ({term_time}). "
        f"This could affect your {affected} star."
    )
    return BoundaryWarning(
        type=warning_type,
        term=term.name,
        term_date=term.instant,
        days_difference=int(math.floor(distance / _DAY_SECONDS + 0.5)),
        hours_to_term=hours,
        minutes_to_term=minutes,
        direction=direction,
        term_time=term_time,
        impact_zone=_impact_zone(distance / 3600.0),
        message=message,
    )


def check_boundary_warnings(
    moment: datetime, solar_year: int, source: Optional[str] = None
) -> List[BoundaryWarning]:
    """Warnings for every boundary within three days of ``moment``.

    Li Chun of the Gregorian year comes first, then the remaining eleven
    terms of ``solar_year`` in calendar order.
    """

    moment = _as_utc(moment)
    li_chun = solar_terms_for_year(moment.year, source).terms[0]
    warnings: List[BoundaryWarning] = []

    hit = _warning_for(moment, li_chun, "li_chun_boundary", "principal")
    if hit is not None:
        warnings.append(hit)

    for term in solar_terms_for_year(solar_year, source).terms[1:]:
        hit = _warning_for(moment, term, "solar_term_boundary", "month")
        if hit is not None:
            warnings.append(hit)
    return warnings


def score_distance(
    days: float,
    has_time: bool,
    boundary: NearestBoundary,
) -> ConfidenceScore:
    """Map a distance in days from a boundary onto a confidence score."""

    hours = days * 24
    if days >= 7:
        level = "very_high"
        percentage = 95 + min(5.0, (days - 7) / 3)
    elif days >= 3:
        level = "high"
        percentage = 85 + (days - 3) / 4 * 9
    elif days >= 1:
        level = "medium"
        percentage = 70 + (days - 1) / 2 * 14
    elif hours >= 6 or has_time:
        level = "low"
        percentage = 50 + (hours / 24 if has_time else 0.5) * 19
    else:
        level = "very_low"
        percentage = 30 + hours / 6 * 20

    return ConfidenceScore(
        level=level,
        percentage=min(100.0, _round1(percentage)),
        days_from_boundary=_round1(days),
        nearest_boundary=boundary,
        recommendation=RECOMMENDATIONS[level],
    )


def _nearest(moment: datetime, terms: Tuple[SolarTerm, ...]) -> Tuple[SolarTerm, float]:
    best = min(terms, key=lambda term: abs((moment - term.instant).total_seconds()))
    return best, abs((moment - best.instant).total_seconds()) / _DAY_SECONDS


def calculate_confidence(
    moment: datetime,
    has_time: bool,
    solar_year: int,
    source: Optional[str] = None,
) -> ConfidenceBreakdown:
    """Per-star confidence from the distance to the governing boundaries.

    The principal star is governed by Li Chun of the Gregorian year, the month
    star by the nearest of the other eleven terms of ``solar_year``. Overall
    takes the closer of the two and the energetic star mirrors overall.
    """

    moment = _as_utc(moment)
    li_chun = solar_terms_for_year(moment.year, source).terms[0]
    li_chun_days = abs((moment - li_chun.instant).total_seconds()) / _DAY_SECONDS
    month_term, month_days = _nearest(
        moment, solar_terms_for_year(solar_year, source).terms[1:]
    )

    principal = score_distance(
        li_chun_days,
        has_time,
        NearestBoundary(name=li_chun.name, date=li_chun.instant, affected_star="principal"),
    )
    month = score_distance(
        month_days,
        has_time,
        NearestBoundary(name=month_term.name, date=month_term.instant, affected_star="month"),
    )
    overall = principal if li_chun_days < month_days else month
    energetic = replace(
        overall,
        nearest_boundary=replace(overall.nearest_boundary, affected_star="both"),
    )
    return ConfidenceBreakdown(
        principal=principal,
        month=month,
        energetic=energetic,
        overall=overall,
    )
