from pydantic import BaseModel, Field
from typing import Optional, List, Literal, Tuple
from datetime import date


class DSTRequest(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    time: str = Field(..., description="HH:MM, 24-hour")
    timezone: str


class DSTAlternativeOut(BaseModel):
    time: str
    description: str
    solar_year: int


class DSTIssueOut(BaseModel):
    has_dst_issue: bool
    time_exists: bool
    affected_hour: int
    issue_type: Optional[Literal["spring_forward_missing", "fall_back_ambiguous"]] = None
    warning: Optional[str] = None
    alternatives: List[DSTAlternativeOut] = []


class DSTTransitionOut(BaseModel):
    type: Literal["spring_forward", "fall_back"]
    transition_date: date
    message: str
    suggestion: str
    affected_hours: Tuple[int, int]
    alternatives: List[DSTAlternativeOut] = []


class DSTWarningOut(BaseModel):
    has_dst: bool
    is_transition_date: bool
    transition: Optional[DSTTransitionOut] = None


class DSTResponse(BaseModel):
    detection: DSTIssueOut
    transition_check: DSTWarningOut
