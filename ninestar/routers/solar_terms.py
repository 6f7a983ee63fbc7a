from dataclasses import asdict
from typing import Literal, Optional

from fastapi import APIRouter, Path, Query

from ..schemas import SolarTermsResponse
from ..services.solar_terms import get_data_confidence, solar_terms_for_year

router = APIRouter(prefix="/v1/ninestar/solar-terms", tags=["solar-terms"])


@router.get("/{year}", response_model=SolarTermsResponse)
def terms_for_year(
    year: int = Path(..., ge=1, le=9998),
    source: Optional[Literal["fixed", "astronomical"]] = Query(None),
):
    table = solar_terms_for_year(year, source)
    confidence = get_data_confidence(year)
    return {
        "year": table.year,
        "source": table.source,
        "data_confidence": confidence.level,
        "note": confidence.note,
        "terms": [asdict(term) for term in table.terms],
    }
