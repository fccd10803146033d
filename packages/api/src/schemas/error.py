# This project was developed with assistance from AI tools.
"""Error response schemas.

Two shapes are used on the wire: a single ``error`` message for calculator
and server failures, and an ``errors`` list of field issues for feedback
validation.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Single human-readable error message."""

    error: str = Field(description="Client-safe description of what went wrong.")


class FieldIssue(BaseModel):
    """One failed check on a request body field."""

    type: str = "field"
    msg: str
    path: str
    location: str = "body"
    value: Any = None


class FieldErrorsResponse(BaseModel):
    """Batched field issues."""

    errors: list[FieldIssue]
