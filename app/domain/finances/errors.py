"""
Domain-specific errors for the finances bounded context.

No framework imports allowed.
"""

from app.domain.errors import InvalidRequestError


class InvalidScheduleError(InvalidRequestError):
    """Raised when a template's schedule fields cannot be advanced."""
