# This project was developed with assistance from AI tools.
"""Public calculator route -- no authentication required."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ..schemas.calculator import AffordabilityRequest, AffordabilityResponse
from ..schemas.error import ErrorResponse
from ..services.affordability_validation import validate_affordability_request
from ..services.calculator import calculate_affordability
from ..services.errors import AffordabilityValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/validate",
    response_model=AffordabilityResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def validate(req: AffordabilityRequest):
    """Validate the submitted figures and project affordability.

    Calculation: initial costs (moving + deposit) plus monthly costs (living +
    rent) over ``monthsToEvaluate`` months, compared with savings plus income
    over the same period.
    """
    try:
        data = validate_affordability_request(req)
    except AffordabilityValidationError as exc:
        logger.debug("Rejected %s: %s", exc.field, exc.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=exc.message).model_dump(),
        )

    try:
        return calculate_affordability(data)
    except Exception:
        logger.exception("Error processing validation")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Error processing your request.").model_dump(),
        )
