# This project was developed with assistance from AI tools.
"""Feedback submission schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class FeedbackRequest(BaseModel):
    """``POST /feedback`` body. Type checks happen during sanitization."""

    model_config = ConfigDict(extra="ignore")

    feedback: Any = None


class FeedbackRecord(BaseModel):
    """A stored feedback row as returned to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    created_at: datetime | None = None
