import os
from dataclasses import asdict
from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from ..schemas import (
    CurrentYearCycleResponse,
    YearCycleListResponse,
    YearCycleTimelineResponse,
)
from ..services.year_cycles import (
    current_solar_year,
    get_all_year_cycles,
    get_current_year_cycle,
    get_cycle_number,
    get_year_cycle_timeline,
)

router = APIRouter(prefix="/v1/ninestar/year-cycles", tags=["year-cycles"])


def _default_years_ahead() -> int:
    return int(os.getenv("NINESTAR_YEARS_AHEAD", "30"))


@router.get("/current", response_model=CurrentYearCycleResponse)
def current_cycle(
    principal_star: int = Query(..., ge=1, le=9),
    on: Optional[date] = Query(None, alias="date", description="Defaults to today"),
):
    solar_year = current_solar_year(on)
    return {
        "principal_star": principal_star,
        "solar_year": solar_year,
        "cycle_number": get_cycle_number(principal_star, solar_year),
        "cycle": asdict(get_current_year_cycle(principal_star, on)),
    }


@router.get("", response_model=YearCycleListResponse)
def all_cycles(
    principal_star: int = Query(..., ge=1, le=9),
    birth_year: int = Query(..., ge=1900, le=2100),
    years_ahead: Optional[int] = Query(None, ge=0, le=100),
):
    ahead = _default_years_ahead() if years_ahead is None else years_ahead
    entries = get_all_year_cycles(principal_star, birth_year, years_ahead=ahead)
    return {
        "principal_star": principal_star,
        "birth_year": birth_year,
        "years_ahead": ahead,
        "cycles": [asdict(entry) for entry in entries],
    }


@router.get("/timeline", response_model=YearCycleTimelineResponse)
def cycle_timeline(
    principal_star: int = Query(..., ge=1, le=9),
    on: Optional[date] = Query(None, alias="date"),
):
    return asdict(get_year_cycle_timeline(principal_star, on))
