"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Every error body has the shape {"success": false, "error": ..., "detail": ...}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.errors import (
    DomainError,
    ExternalServiceError,
    InvalidRequestError,
    ResourceNotFoundError,
)
from app.domain.operations.errors import AICreditsExhaustedError, AIRateLimitedError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_402 = 402
HTTP_404 = 404
HTTP_422 = 422
HTTP_429 = 429
HTTP_500 = 500
HTTP_502 = 502


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, object] = {"success": False, "error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Starlette resolves handlers by walking the exception's MRO, so the
    most specific registered class wins.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request bodies and query parameters."""
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        logger.warning("Request validation failed: %s", ", ".join(fields))
        return _error_response(HTTP_422, "Invalid request", ", ".join(fields))

    @app.exception_handler(InvalidRequestError)
    async def handle_invalid_request(
        _request: Request, exc: InvalidRequestError
    ) -> JSONResponse:
        logger.warning("Invalid request: %s", exc.message)
        return _error_response(HTTP_400, "Invalid request", exc.message)

    @app.exception_handler(ResourceNotFoundError)
    async def handle_not_found(
        _request: Request, exc: ResourceNotFoundError
    ) -> JSONResponse:
        logger.warning("Resource not found: %s", exc.message)
        return _error_response(HTTP_404, "Not found", exc.message)

    @app.exception_handler(AIRateLimitedError)
    async def handle_ai_rate_limited(
        _request: Request, exc: AIRateLimitedError
    ) -> JSONResponse:
        """The AI gateway throttled us; the client may retry later."""
        logger.warning("AI gateway rate limited")
        return _error_response(HTTP_429, "Rate limit exceeded", exc.reason)

    @app.exception_handler(AICreditsExhaustedError)
    async def handle_ai_credits(
        _request: Request, exc: AICreditsExhaustedError
    ) -> JSONResponse:
        logger.error("AI gateway credits exhausted")
        return _error_response(HTTP_402, "Insufficient credits", exc.reason)

    @app.exception_handler(ExternalServiceError)
    async def handle_external_service(
        _request: Request, exc: ExternalServiceError
    ) -> JSONResponse:
        """Handle upstream failures (AI gateway, market providers)."""
        logger.error("External service error: %s", exc.message)
        return _error_response(HTTP_502, "Upstream service failed", exc.service)

    @app.exception_handler(DomainError)
    async def handle_domain(_request: Request, exc: DomainError) -> JSONResponse:
        """Catch-all for unmapped domain errors."""
        logger.error("Unhandled domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
