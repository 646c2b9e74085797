"""
Domain-specific errors for the operations bounded context.

All errors raised from the operations domain are defined here.
No framework imports allowed.
"""

from app.domain.errors import (
    ExternalServiceError,
    InvalidRequestError,
    ResourceNotFoundError,
)


class OperationNotFoundError(ResourceNotFoundError):
    """Raised when a trading operation cannot be found."""

    def __init__(self, operation_id: str) -> None:
        super().__init__(f"Operation not found: {operation_id}")
        self.operation_id = operation_id


class EmptyImportError(InvalidRequestError):
    """Raised when an import confirmation carries no operations."""

    def __init__(self) -> None:
        super().__init__("At least one operation is required")


class AIGatewayError(ExternalServiceError):
    """Raised when the chat-completion gateway answers with an error."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__("AI gateway", reason)
        self.status_code = status_code


class AIRateLimitedError(AIGatewayError):
    """Raised when the gateway rejects the call with HTTP 429."""

    def __init__(self) -> None:
        super().__init__("rate limit reached, try again shortly", 429)


class AICreditsExhaustedError(AIGatewayError):
    """Raised when the gateway rejects the call with HTTP 402."""

    def __init__(self) -> None:
        super().__init__("insufficient credits", 402)


class UnparseableNoteError(ExternalServiceError):
    """Raised when the model's reply holds no usable JSON array."""

    def __init__(self, reason: str) -> None:
        super().__init__("Brokerage note extraction", reason)
