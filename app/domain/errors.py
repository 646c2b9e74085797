"""
Base domain errors shared by every bounded context.

Each context defines its own subclasses in its `errors.py`.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class DomainError(Exception):
    """Base error for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidRequestError(DomainError):
    """Raised when a command is missing required data or is malformed."""


class ResourceNotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class ExternalServiceError(DomainError):
    """Raised when a third-party service fails or answers unusably."""

    def __init__(self, service: str, reason: str) -> None:
        super().__init__(f"{service} failed: {reason}")
        self.service = service
        self.reason = reason
