"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for AI-backed endpoints.
        cors_allow_origins: Origins allowed by the CORS middleware.
        cors_allow_headers: Request headers allowed on preflight.

    External services (AI gateway, central bank, quote providers) are
    configured here so that adapters never read the environment directly.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "TradeJournal"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"

    cors_allow_origins: list[str] = ["*"]
    cors_allow_headers: list[str] = [
        "authorization",
        "x-client-info",
        "apikey",
        "content-type",
    ]

    # Postgres
    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "tradejournal"

    # AI chat-completion gateway (OpenAI-compatible)
    ai_gateway_url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    ai_api_key: Optional[str] = None
    ai_model: str = "google/gemini-2.5-flash"
    ai_timeout_seconds: float = 60.0

    # Market data providers
    bcb_base_url: str = "https://api.bcb.gov.br/dados/serie"
    brapi_base_url: str = "https://brapi.dev/api"
    awesomeapi_base_url: str = "https://economia.awesomeapi.com.br/json"
    http_timeout_seconds: float = 10.0

    # Housekeeping
    bulk_classify_delay_seconds: float = 0.5
    trial_expired_title: str = "Período de Teste Expirado"
    trial_expired_message: str = (
        "Seu período de teste expirou. Entre em contato com seu assessor "
        "para continuar usando a plataforma."
    )

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build the URL from postgres_* values (useful for Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
