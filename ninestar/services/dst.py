"""Daylight-saving edge cases around a local birth time.

Nothing in this module blocks a calculation. Results are annotations the
caller can show next to a profile.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .solar_terms import solar_year_for_date

logger = logging.getLogger(__name__)

UTC = timezone.utc

SPRING_FORWARD_MISSING = "spring_forward_missing"
FALL_BACK_AMBIGUOUS = "fall_back_ambiguous"


@dataclass(frozen=True)
class DSTAlternative:
    time: str
    description: str
    solar_year: int


@dataclass(frozen=True)
class DSTIssueDetection:
    has_dst_issue: bool
    time_exists: bool
    affected_hour: int
    issue_type: Optional[str] = None
    warning: Optional[str] = None
    alternatives: Tuple[DSTAlternative, ...] = ()


NO_ISSUE = DSTIssueDetection(has_dst_issue=False, time_exists=True, affected_hour=-1)


@dataclass(frozen=True)
class DSTTransitionPoint:
    """A zone offset change, as seen on the local wall clock just before it."""

    wall_time: datetime
    instant: datetime
    shift: timedelta


@dataclass(frozen=True)
class DSTTransitions:
    spring_forward: Optional[DSTTransitionPoint] = None
    fall_back: Optional[DSTTransitionPoint] = None


@dataclass(frozen=True)
class DSTTransition:
    type: str
    transition_date: date
    message: str
    suggestion: str
    affected_hours: Tuple[int, int]
    alternatives: Tuple[DSTAlternative, ...] = ()


@dataclass(frozen=True)
class DSTWarning:
    has_dst: bool
    is_transition_date: bool
    transition: Optional[DSTTransition] = None


def _hhmm(moment: datetime) -> str:
    return f"{moment.hour:02d}:{moment.minute:02d}"


def _solar_year_of_local(wall: datetime, zone: ZoneInfo, fold: int = 0) -> int:
    instant = wall.replace(tzinfo=zone, fold=fold).astimezone(UTC)
    return solar_year_for_date(instant).solar_year


def _offsets_differ(zone: ZoneInfo, year: int) -> bool:
    winter = datetime(year, 1, 15, 12, tzinfo=zone).utcoffset()
    summer = datetime(year, 7, 15, 12, tzinfo=zone).utcoffset()
    return winter != summer


def time_zone_observes_dst(tz: str, year: int) -> bool:
    """True when ``tz`` has a different UTC offset in mid-January and mid-July."""

    try:
        return _offsets_differ(ZoneInfo(tz), year)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("dst_unknown_timezone", extra={"timezone": tz})
        return False


def _offset_at(zone: ZoneInfo, instant: datetime) -> timedelta:
    return instant.astimezone(zone).utcoffset() or timedelta(0)


def _locate_change(zone: ZoneInfo, lo: datetime, hi: datetime) -> datetime:
    before = _offset_at(zone, lo)
    while hi - lo > timedelta(minutes=1):
        mid = lo + (hi - lo) / 2
        if _offset_at(zone, mid) == before:
            lo = mid
        else:
            hi = mid
    return hi.replace(second=0, microsecond=0)


@lru_cache(maxsize=256)
def _transitions(tz: str, year: int) -> DSTTransitions:
    zone = ZoneInfo(tz)
    spring: Optional[DSTTransitionPoint] = None
    fall: Optional[DSTTransitionPoint] = None

    cursor = datetime(year, 1, 1, tzinfo=UTC) - timedelta(days=1)
    end = datetime(year + 1, 1, 1, tzinfo=UTC)
    previous = _offset_at(zone, cursor)
    while cursor < end:
        step = cursor + timedelta(days=1)
        current = _offset_at(zone, step)
        if current != previous:
            instant = _locate_change(zone, cursor, step)
            wall = (instant + previous).replace(tzinfo=None)
            point = DSTTransitionPoint(wall_time=wall, instant=instant, shift=current - previous)
            if wall.year == year:
                if current > previous:
                    spring = point
                else:
                    fall = point
            previous = current
        cursor = step
    return DSTTransitions(spring_forward=spring, fall_back=fall)


def get_dst_transitions(tz: str, year: int) -> DSTTransitions:
    """Spring-forward and fall-back points of ``tz`` during ``year``."""

    try:
        return _transitions(tz, year)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("dst_unknown_timezone", extra={"timezone": tz})
        return DSTTransitions()


def _local_wall_clock(moment: datetime, zone: ZoneInfo) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(zone).replace(tzinfo=None)


def detect_dst_issues(local_dt: datetime, tz: Optional[str] = None) -> DSTIssueDetection:
    """Flag the 02:xx and 01:xx wall-clock hours in zones that observe DST.

    ``local_dt`` is the wall-clock birth time. Aware datetimes are first
    converted into ``tz``.
    """

    if not tz:
        return NO_ISSUE

    try:
        zone = ZoneInfo(tz)
        wall = _local_wall_clock(local_dt, zone)
        if not _offsets_differ(zone, wall.year):
            return NO_ISSUE

        if wall.hour == 2:
            before = wall - timedelta(hours=1)
            after = wall + timedelta(hours=1)
            return DSTIssueDetection(
                has_dst_issue=True,
                issue_type=SPRING_FORWARD_MISSING,
                time_exists=False,
                affected_hour=2,
                warning=(
                    f"This time ({_hhmm(wall)}) doesn't exist in {tz} on this date "
                    "due to DST spring forward."
                ),
                alternatives=(
                    DSTAlternative(
                        time=_hhmm(before),
                        description="Standard Time (before the transition)",
                        solar_year=_solar_year_of_local(before, zone),
                    ),
                    DSTAlternative(
                        time=_hhmm(after),
                        description="Daylight Time (after the transition)",
                        solar_year=_solar_year_of_local(after, zone),
                    ),
                ),
            )

        if wall.hour == 1:
            return DSTIssueDetection(
                has_dst_issue=True,
                issue_type=FALL_BACK_AMBIGUOUS,
                time_exists=True,
                affected_hour=1,
                warning=(
                    f"This time ({_hhmm(wall)}) occurred twice in {tz} on this date "
                    "due to DST fall back."
                ),
                alternatives=(
                    DSTAlternative(
                        time=_hhmm(wall),
                        description="First occurrence (Daylight Time, before fall back)",
                        solar_year=_solar_year_of_local(wall, zone, fold=0),
                    ),
                    DSTAlternative(
                        time=_hhmm(wall),
                        description="Second occurrence (Standard Time, after fall back)",
                        solar_year=_solar_year_of_local(wall, zone, fold=1),
                    ),
                ),
            )
    except (ZoneInfoNotFoundError, ValueError, OverflowError):
        logger.warning("dst_detection_failed", extra={"timezone": tz}, exc_info=True)
        return NO_ISSUE

    return NO_ISSUE


def _parse_wall(day: Union[str, date], time: str) -> datetime:
    if isinstance(day, datetime):
        day = day.date()
    elif isinstance(day, str):
        day = date.fromisoformat(day[:10])
    hours, minutes = (int(part) for part in time.split(":", 1))
    return datetime(day.year, day.month, day.day, hours, minutes)


def check_dst_transition(
    day: Union[str, date], time: Optional[str], tz: Optional[str]
) -> DSTWarning:
    """Check a local date/time against the real DST transitions of ``tz``.

    Unlike :func:`detect_dst_issues`, this only reports a problem on the
    actual transition date and inside the skipped or repeated window.
    """

    if not tz or not time:
        return DSTWarning(has_dst=False, is_transition_date=False)

    try:
        zone = ZoneInfo(tz)
        wall = _parse_wall(day, time)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("dst_transition_check_failed", extra={"timezone": tz}, exc_info=True)
        return DSTWarning(has_dst=False, is_transition_date=False)

    if not _offsets_differ(zone, wall.year):
        return DSTWarning(has_dst=False, is_transition_date=False)

    transitions = get_dst_transitions(tz, wall.year)
    spring = transitions.spring_forward
    fall = transitions.fall_back

    if spring is not None and spring.wall_time.date() == wall.date():
        gap_start = spring.wall_time
        gap_end = gap_start + spring.shift
        if gap_start <= wall < gap_end:
            before = wall - spring.shift
            after = wall + spring.shift
            return DSTWarning(
                has_dst=True,
                is_transition_date=True,
                transition=DSTTransition(
                    type="spring_forward",
                    transition_date=gap_start.date(),
                    message=(
                        f"Your birth time ({time}) falls during the \"spring forward\" "
                        f"hour that doesn't exist in {tz}."
                    ),
                    suggestion=(
                        "This time never occurred on this date due to DST. "
                        "Please verify which time you meant."
                    ),
                    affected_hours=(gap_start.hour, gap_end.hour),
                    alternatives=(
                        DSTAlternative(
                            time=_hhmm(before),
                            description=f"{_hhmm(before)} Standard Time (before DST transition)",
                            solar_year=_solar_year_of_local(before, zone),
                        ),
                        DSTAlternative(
                            time=_hhmm(after),
                            description=f"{_hhmm(after)} Daylight Time (after DST transition)",
                            solar_year=_solar_year_of_local(after, zone),
                        ),
                    ),
                ),
            )
        return DSTWarning(has_dst=True, is_transition_date=True)

    if fall is not None and fall.wall_time.date() == wall.date():
        overlap_end = fall.wall_time
        overlap_start = overlap_end + fall.shift
        if overlap_start <= wall < overlap_end:
            return DSTWarning(
                has_dst=True,
                is_transition_date=True,
                transition=DSTTransition(
                    type="fall_back",
                    transition_date=overlap_end.date(),
                    message=(
                        f"Your birth time ({time}) occurred twice on this date "
                        "due to DST \"fall back\"."
                    ),
                    suggestion=(
                        "This time happened twice. Please verify if you were born "
                        "during the first or second occurrence."
                    ),
                    affected_hours=(overlap_start.hour, overlap_end.hour),
                    alternatives=(
                        DSTAlternative(
                            time=time,
                            description=f"First {time} (Daylight Time, before fall back)",
                            solar_year=_solar_year_of_local(wall, zone, fold=0),
                        ),
                        DSTAlternative(
                            time=time,
                            description=f"Second {time} (Standard Time, after fall back)",
                            solar_year=_solar_year_of_local(wall, zone, fold=1),
                        ),
                    ),
                ),
            )
        return DSTWarning(has_dst=True, is_transition_date=True)

    return DSTWarning(has_dst=True, is_transition_date=False)
