# This project was developed with assistance from AI tools.
"""Feedback submission route."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..schemas.error import ErrorResponse, FieldErrorsResponse
from ..schemas.feedback import FeedbackRecord, FeedbackRequest
from ..services.errors import InvalidFeedbackError, StorageError
from ..services.feedback import FeedbackRecorder, get_feedback_recorder

router = APIRouter()


@router.post(
    "/feedback",
    response_model=FeedbackRecord,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": FieldErrorsResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def submit_feedback(
    req: FeedbackRequest,
    recorder: FeedbackRecorder = Depends(get_feedback_recorder),
):
    """Store one piece of free-text feedback and return the saved row."""
    try:
        return await recorder.record(req.feedback)
    except InvalidFeedbackError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=FieldErrorsResponse(errors=exc.issues).model_dump(mode="json"),
        )
    except StorageError:
        # Cause already logged by the recorder
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error").model_dump(),
        )
