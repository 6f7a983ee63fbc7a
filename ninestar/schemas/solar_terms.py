from pydantic import BaseModel
from typing import Optional, List, Literal
from datetime import datetime


class SolarTermOut(BaseModel):
    key: str
    name: str
    instant: datetime


class SolarTermsResponse(BaseModel):
    year: int
    source: Literal["fixed", "astronomical"]
    data_confidence: Literal["verified", "historical", "projected"]
    note: Optional[str] = None
    terms: List[SolarTermOut]
