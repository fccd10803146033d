# This project was developed with assistance from AI tools.
"""
Apartment Cost Analyzer -- persisted models

The only persisted entity is user feedback. Rows are append-only: the API
inserts them and never updates or deletes.
"""

from sqlalchemy import Column, DateTime, Integer, Text, func

from .database import Base


class Feedback(Base):
    """Free-text user comment, stored already sanitized."""

    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Feedback(id={self.id}, length={len(self.content or '')})>"
