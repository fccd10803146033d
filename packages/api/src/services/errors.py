# This project was developed with assistance from AI tools.
"""Service-layer exceptions, translated to HTTP responses by the routes."""

from ..schemas.error import FieldIssue


class AffordabilityValidationError(ValueError):
    """A calculator input failed validation. ``str(exc)`` is client-safe."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class MissingFieldError(AffordabilityValidationError):
    """Field absent, null or falsy."""


class OutOfRangeError(AffordabilityValidationError):
    """Field present but outside its allowed range."""


class NotANumberError(AffordabilityValidationError):
    """Field is not a finite decimal number."""


class CalculationError(RuntimeError):
    """Validated input still produced an undefined result."""


class InvalidFeedbackError(ValueError):
    """Feedback failed sanitization. Carries every issue found."""

    def __init__(self, issues: list[FieldIssue]):
        super().__init__("; ".join(issue.msg for issue in issues))
        self.issues = issues


class StorageError(RuntimeError):
    """Persisting to the database failed. Details stay server-side."""
