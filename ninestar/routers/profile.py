from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from ..schemas import CalculationRequest, ProfileResponse, ValidationOut
from ..services.dst import detect_dst_issues
from ..services.orchestrators.profile_full import (
    CalculationInput,
    InvalidInputError,
    calculate_profile,
    parse_calculation_input,
    profile_to_dict,
    validate_calculation_input,
)

router = APIRouter(prefix="/v1/ninestar", tags=["ninestar"])


def _to_input(req: CalculationRequest) -> CalculationInput:
    return CalculationInput(date=req.date, time=req.time, timezone=req.timezone, method=req.method)


@router.post("/profile", response_model=ProfileResponse)
def compute_profile(req: CalculationRequest):
    data = _to_input(req)
    try:
        profile = calculate_profile(data)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    payload = profile_to_dict(profile)
    if req.include_dst:
        parsed = parse_calculation_input(data)
        payload["dst"] = asdict(detect_dst_issues(parsed.wall_clock, parsed.timezone))
    return payload


@router.post("/validate", response_model=ValidationOut)
def validate_input(req: CalculationRequest):
    return asdict(validate_calculation_input(_to_input(req)))
