"""Personal nine-year cycle built on the solar-year boundary."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Dict, List, Optional, Tuple, Union

from .solar_terms import solar_year_for_date

UTC = timezone.utc

# Solar year in which every principal star sits in the cycle year equal to itself.
REFERENCE_YEAR = 2022


class YearCycleNotFoundError(RuntimeError):
    """Raised when the cycle table has no entry for a cycle number."""


@dataclass(frozen=True)
class YearCycle:
    number: int
    name: str
    element: str
    direction: str
    season: str
    keywords: Tuple[str, ...]
    theme: str
    guidance: str


@dataclass(frozen=True)
class YearCycleEntry:
    calendar_year: int
    solar_year: int
    cycle_number: int
    cycle_data: YearCycle


@dataclass(frozen=True)
class YearCycleInfo:
    cycle: YearCycle
    solar_year: int
    start_date: date
    end_date: date
    days_remaining: Optional[int] = None


@dataclass(frozen=True)
class YearCycleTimeline:
    previous: YearCycleInfo
    current: YearCycleInfo
    next: YearCycleInfo
    solar_year: int


YEAR_CYCLES: Dict[int, YearCycle] = {
    1: YearCycle(
        number=1,
        name="Rest and Reflection",
        element="Water",
        direction="North",
        season="Winter",
        keywords=("stillness", "reflection", "planning", "renewal"),
        theme="A quiet year at the bottom of the cycle for rest and inner work.",
        guidance="Conserve energy, clarify intentions and plant ideas without forcing them.",
    ),
    2: YearCycle(
        number=2,
        name="Preparation",
        element="Earth",
        direction="Southwest",
        season="Early Spring",
        keywords=("patience", "foundation", "support", "nurture"),
        theme="Groundwork for the growth ahead, built through steady and receptive effort.",
        guidance="Tend relationships and routines. Prepare the soil rather than chase the harvest.",
    ),
    3: YearCycle(
        number=3,
        name="Growth and Action",
        element="Wood",
        direction="East",
        season="Spring",
        keywords=("initiative", "new beginnings", "momentum", "vitality"),
        theme="Energy rises and new projects break through.",
        guidance="Start what you prepared. Act decisively but watch for impatience.",
    ),
    4: YearCycle(
        number=4,
        name="Expansion",
        element="Wood",
        direction="Southeast",
        season="Late Spring",
        keywords=("communication", "networking", "maturity", "opportunity"),
        theme="Ideas spread and connections multiply as earlier efforts mature.",
        guidance="Share your work widely and keep commitments you can sustain.",
    ),
    5: YearCycle(
        number=5,
        name="Center and Turning Point",
        element="Earth",
        direction="Center",
        season="Transition",
        keywords=("balance", "power", "change", "focus"),
        theme="The midpoint of the cycle, intense and pivotal.",
        guidance="Stay centred, avoid overreach and let unnecessary commitments fall away.",
    ),
    6: YearCycle(
        number=6,
        name="Leadership and Responsibility",
        element="Metal",
        direction="Northwest",
        season="Late Autumn",
        keywords=("authority", "structure", "recognition", "duty"),
        theme="Efforts are tested and responsibility increases.",
        guidance="Lead with integrity and organise resources for the years ahead.",
    ),
    7: YearCycle(
        number=7,
        name="Harvest and Joy",
        element="Metal",
        direction="West",
        season="Autumn",
        keywords=("reward", "pleasure", "celebration", "gratitude"),
        theme="A year to enjoy the fruits of earlier work.",
        guidance="Celebrate and rest in your gains, but manage spending and indulgence.",
    ),
    8: YearCycle(
        number=8,
        name="Transformation",
        element="Earth",
        direction="Northeast",
        season="Late Winter",
        keywords=("change", "reassessment", "stillness", "revolution"),
        theme="Old structures are reviewed and a change of direction takes shape.",
        guidance="Reflect honestly on what no longer serves you and make deliberate changes.",
    ),
    9: YearCycle(
        number=9,
        name="Illumination and Completion",
        element="Fire",
        direction="South",
        season="Summer",
        keywords=("visibility", "clarity", "recognition", "completion"),
        theme="The peak of the cycle, bright and public.",
        guidance="Step into the spotlight, finish what you started and release what is complete.",
    ),
}


def get_cycle_number(principal_star: int, solar_year: int) -> int:
    """Cycle year (1-9) of ``principal_star`` during ``solar_year``."""

    cycle = (principal_star + (solar_year - REFERENCE_YEAR)) % 9
    if cycle <= 0:
        cycle += 9
    return cycle


def get_year_cycle_data(cycle_number: int) -> YearCycle:
    cycle = YEAR_CYCLES.get(cycle_number)
    if cycle is None:
        raise YearCycleNotFoundError(f"Year cycle data not found for cycle number {cycle_number}")
    return cycle


def _as_moment(value: Union[None, date, datetime]) -> datetime:
    if value is None:
        return datetime.now(UTC)
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day, 12, tzinfo=UTC)


def current_solar_year(on: Union[None, date, datetime] = None) -> int:
    """Solar year under the fixed Feb 4 boundary (default: now)."""

    return solar_year_for_date(_as_moment(on), source="fixed").solar_year


def get_current_year_cycle(
    principal_star: int, on: Union[None, date, datetime] = None
) -> YearCycle:
    solar_year = current_solar_year(on)
    return get_year_cycle_data(get_cycle_number(principal_star, solar_year))


def get_all_year_cycles(
    principal_star: int,
    birth_year: int,
    years_ahead: int = 30,
    today: Union[None, date, datetime] = None,
) -> List[YearCycleEntry]:
    """Cycle entries from ``birth_year`` through the current year plus ``years_ahead``.

    Each calendar year is treated as its own solar year.
    """

    last_year = _as_moment(today).year + years_ahead
    entries: List[YearCycleEntry] = []
    for year in range(birth_year, last_year + 1):
        number = get_cycle_number(principal_star, year)
        entries.append(
            YearCycleEntry(
                calendar_year=year,
                solar_year=year,
                cycle_number=number,
                cycle_data=get_year_cycle_data(number),
            )
        )
    return entries


def _cycle_info(
    principal_star: int, solar_year: int, today: Optional[date] = None
) -> YearCycleInfo:
    start = date(solar_year, 2, 4)
    end = date(solar_year + 1, 2, 3)
    remaining = None
    if today is not None:
        remaining = max(0, (end - today).days)
    return YearCycleInfo(
        cycle=get_year_cycle_data(get_cycle_number(principal_star, solar_year)),
        solar_year=solar_year,
        start_date=start,
        end_date=end,
        days_remaining=remaining,
    )


def get_year_cycle_timeline(
    principal_star: int, on: Union[None, date, datetime] = None
) -> YearCycleTimeline:
    """Previous, current and next cycle years around ``on`` (default: now)."""

    moment = _as_moment(on)
    solar_year = current_solar_year(moment)
    return YearCycleTimeline(
        previous=_cycle_info(principal_star, solar_year - 1),
        current=_cycle_info(principal_star, solar_year, today=moment.date()),
        next=_cycle_info(principal_star, solar_year + 1),
        solar_year=solar_year,
    )
