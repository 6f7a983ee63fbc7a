from .profile import (
    CalculationRequest,
    ValidationOut,
    StarMetadataOut,
    ProfileResponse,
)
from .dst import DSTRequest, DSTResponse, DSTIssueOut, DSTWarningOut
from .year_cycles import (
    CurrentYearCycleResponse,
    YearCycleListResponse,
    YearCycleTimelineResponse,
)
from .solar_terms import SolarTermsResponse
