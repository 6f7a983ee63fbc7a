from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal
from datetime import datetime

from .dst import DSTIssueOut

Method = Literal["traditional", "chinese-ascending"]
ConfidenceLevel = Literal["very_high", "high", "medium", "low", "very_low"]


class CalculationRequest(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD or a full ISO-8601 timestamp")
    time: Optional[str] = Field(None, description="HH:MM, 24-hour")
    timezone: Optional[str] = Field(None, description="IANA zone, e.g. Asia/Tokyo")
    method: Optional[Method] = None
    include_dst: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "date": "1986-03-15",
                "time": "14:30",
                "timezone": "America/New_York",
                "method": "traditional",
                "include_dst": True,
            }
        }
    )


class ValidationOut(BaseModel):
    is_valid: bool
    error: Optional[str] = None


class StarMetadataOut(BaseModel):
    number: int = Field(..., ge=1, le=9)
    element: str
    polarity: str
    trigram: str
    direction: str
    color: str
    description: str
    characteristics: List[str]
    keywords: List[str]


class ProfileMetadataOut(BaseModel):
    principal: StarMetadataOut
    month: StarMetadataOut
    energetic: StarMetadataOut


class BoundaryWarningOut(BaseModel):
    type: Literal["li_chun_boundary", "solar_term_boundary"]
    term: str
    term_date: datetime
    days_difference: int
    hours_to_term: int
    minutes_to_term: int
    direction: Literal["before", "after"]
    term_time: str
    impact_zone: Literal["high", "medium", "low"]
    message: str


class NearestBoundaryOut(BaseModel):
    name: str
    date: datetime
    affected_star: Literal["principal", "month", "both"]


class ConfidenceScoreOut(BaseModel):
    level: ConfidenceLevel
    percentage: float
    days_from_boundary: float
    nearest_boundary: NearestBoundaryOut
    recommendation: str


class ConfidenceBreakdownOut(BaseModel):
    principal: ConfidenceScoreOut
    month: ConfidenceScoreOut
    energetic: ConfidenceScoreOut
    overall: ConfidenceScoreOut


class ProfileResponse(BaseModel):
    principal_star: int = Field(..., ge=1, le=9)
    month_star: int = Field(..., ge=1, le=9)
    energetic_star: int = Field(..., ge=1, le=9)
    year_star: int = Field(..., ge=1, le=9)
    shorthand: str
    birth_date: datetime
    birth_time: Optional[str] = None
    timezone: Optional[str] = None
    solar_year: int
    solar_month: int = Field(..., ge=1, le=12)
    solar_year_start: datetime
    method: Method
    warnings: List[BoundaryWarningOut] = []
    calculated_at: datetime
    metadata: ProfileMetadataOut
    confidence: Optional[ConfidenceBreakdownOut] = None
    overridden: bool = False
    dst: Optional[DSTIssueOut] = None
