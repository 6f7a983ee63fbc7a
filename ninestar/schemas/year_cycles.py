from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date


class YearCycleOut(BaseModel):
    number: int = Field(..., ge=1, le=9)
    name: str
    element: str
    direction: str
    season: str
    keywords: List[str]
    theme: str
    guidance: str


class CurrentYearCycleResponse(BaseModel):
    principal_star: int
    solar_year: int
    cycle_number: int
    cycle: YearCycleOut


class YearCycleEntryOut(BaseModel):
    calendar_year: int
    solar_year: int
    cycle_number: int
    cycle_data: YearCycleOut


class YearCycleListResponse(BaseModel):
    principal_star: int
    birth_year: int
    years_ahead: int
    cycles: List[YearCycleEntryOut]


class YearCycleInfoOut(BaseModel):
    cycle: YearCycleOut
    solar_year: int
    start_date: date
    end_date: date
    days_remaining: Optional[int] = None


class YearCycleTimelineResponse(BaseModel):
    previous: YearCycleInfoOut
    current: YearCycleInfoOut
    next: YearCycleInfoOut
    solar_year: int
