# This project was developed with assistance from AI tools.
"""Feedback sanitization and persistence.

``FeedbackRecorder`` is given the process-wide session factory at
construction and performs a single ``INSERT ... RETURNING`` per submission.
The module exposes a singleton initialised at app startup via
``init_feedback_recorder()``.
"""

import logging
from typing import Any

from db import Feedback
from markupsafe import escape
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..schemas.error import FieldIssue
from ..schemas.feedback import FeedbackRecord
from .errors import InvalidFeedbackError, StorageError

logger = logging.getLogger(__name__)

FEEDBACK_FIELD = "feedback"

# Escaped on top of markupsafe's &<>"' set
_EXTRA_ENTITIES = str.maketrans({"/": "&#x2F;", "\\": "&#x5C;", "`": "&#96;"})


def sanitize_feedback(value: Any, max_length: int) -> str:
    """Trim and HTML-escape feedback text.

    Raises:
        InvalidFeedbackError: value is not a string, is blank, or is longer
            than ``max_length`` characters once trimmed.
    """
    if not isinstance(value, str):
        raise InvalidFeedbackError(
            [FieldIssue(msg="Feedback must be a string.", path=FEEDBACK_FIELD, value=value)]
        )

    trimmed = value.strip()
    issues = []
    if not trimmed:
        issues.append(FieldIssue(msg="Feedback must not be empty.", path=FEEDBACK_FIELD, value=trimmed))
    if len(trimmed) > max_length:
        issues.append(
            FieldIssue(
                msg=f"Feedback must be at most {max_length} characters.",
                path=FEEDBACK_FIELD,
            )
        )
    if issues:
        raise InvalidFeedbackError(issues)

    return str(escape(trimmed)).translate(_EXTRA_ENTITIES)


class FeedbackRecorder:
    """Appends sanitized feedback rows."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], max_length: int):
        self._session_factory = session_factory
        self._max_length = max_length

    async def record(self, value: Any) -> FeedbackRecord:
        """Sanitize ``value`` and insert it.

        Raises:
            InvalidFeedbackError: sanitization failed; nothing was written.
            StorageError: the insert or commit failed; cause is logged.
        """
        content = sanitize_feedback(value, self._max_length)

        stmt = (
            insert(Feedback)
            .values(content=content)
            .returning(Feedback.id, Feedback.content, Feedback.created_at)
        )
        # Leaving the context manager closes the session, which rolls back
        # anything uncommitted and returns the connection to the pool.
        async with self._session_factory() as session:
            try:
                result = await session.execute(stmt)
                row = result.one()
                await session.commit()
            except (SQLAlchemyError, OSError) as exc:
                logger.exception("Error saving feedback")
                raise StorageError("Failed to save feedback") from exc

        record = FeedbackRecord.model_validate(row)
        logger.info("Feedback saved (id=%s)", record.id)
        return record


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_recorder: FeedbackRecorder | None = None


def init_feedback_recorder(
    session_factory: async_sessionmaker[AsyncSession],
    max_length: int,
) -> FeedbackRecorder:
    """Initialise the singleton (called once from app lifespan)."""
    global _recorder  # noqa: PLW0603
    _recorder = FeedbackRecorder(session_factory, max_length)
    logger.info("FeedbackRecorder initialised (max_length=%d)", max_length)
    return _recorder


def get_feedback_recorder() -> FeedbackRecorder:
    """Return the initialised FeedbackRecorder singleton."""
    if _recorder is None:
        raise RuntimeError("FeedbackRecorder not initialised -- call init_feedback_recorder() first")
    return _recorder
