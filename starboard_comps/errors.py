"""
Error taxonomy for the comparable search client.

Every error is terminal to the operation that raised it and is handled at the
screen boundary (the Reflex event handlers in state.py).
"""
from typing import Optional, Sequence


class ComparableSearchError(Exception):
    """Base class for all client-side search errors."""


class ValidationError(ComparableSearchError):
    """A required subject-property field is missing or malformed."""

    def __init__(self, message: str, missing_fields: Sequence[str] = ()):
        super().__init__(message)
        self.missing_fields = list(missing_fields)


class SearchFailedError(ComparableSearchError):
    """The remote comparable search failed (network error or non-2xx status)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SessionMissingError(ComparableSearchError):
    """Results were requested without a complete search session."""
