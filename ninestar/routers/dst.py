from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from ..schemas import DSTRequest, DSTResponse
from ..services.dst import check_dst_transition, detect_dst_issues
from ..services.orchestrators.profile_full import (
    CalculationInput,
    InvalidInputError,
    parse_calculation_input,
)

router = APIRouter(prefix="/v1/ninestar", tags=["dst"])


@router.post("/dst", response_model=DSTResponse)
def dst_check(req: DSTRequest):
    try:
        parsed = parse_calculation_input(
            CalculationInput(date=req.date, time=req.time, timezone=req.timezone)
        )
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return {
        "detection": asdict(detect_dst_issues(parsed.wall_clock, parsed.timezone)),
        "transition_check": asdict(
            check_dst_transition(parsed.local_date, parsed.time, parsed.timezone)
        ),
    }
