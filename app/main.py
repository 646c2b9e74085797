"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- CORS and security middleware, rate limiting
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.interfaces.accounts.router import router as accounts_router
from app.interfaces.community.router import router as community_router
from app.interfaces.finances.router import router as finances_router
from app.interfaces.health import router as health_router
from app.interfaces.market.router import router as market_router
from app.interfaces.operations.router import router as operations_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware (last added runs first) ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=settings.cors_allow_headers,
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(finances_router, prefix=API_PREFIX)
    app.include_router(community_router, prefix=API_PREFIX)
    app.include_router(accounts_router, prefix=API_PREFIX)
    app.include_router(operations_router, prefix=API_PREFIX)
    app.include_router(market_router, prefix=API_PREFIX)

    return app


app = create_app()
