from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from ..schemas import StarMetadataOut
from ..services.star_metadata import (
    STAR_METADATA,
    get_star_metadata,
    get_stars_by_element,
    get_stars_by_polarity,
)

router = APIRouter(prefix="/v1/ninestar/stars", tags=["stars"])


@router.get("", response_model=List[StarMetadataOut])
def list_stars(
    element: Optional[str] = Query(None, description="Water, Wood, Fire, Earth or Metal"),
    polarity: Optional[str] = Query(None, description="Yin or Yang"),
):
    stars = list(STAR_METADATA.values())
    if element:
        stars = [s for s in get_stars_by_element(element) if s in stars]
    if polarity:
        stars = [s for s in get_stars_by_polarity(polarity) if s in stars]
    return [s.as_dict() for s in stars]


@router.get("/{number}", response_model=StarMetadataOut)
def star_detail(number: int):
    try:
        return get_star_metadata(number).as_dict()
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown star number: {number}")
