"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Cross-field rules (page sizes, autocomplete limits)
are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    DATABASE_URL is optional at load time so the app (and its tests) can
    start without Postgres; database dependencies raise
    SqlNotConfiguredException when it is unset.
    """

    # App
    app_name: str = "shop-admin"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (postgresql+asyncpg://...)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # Admin user listing
    admin_users_per_page: int = 15
    autocomplete_default_limit: int = 100
    max_page_size: int = 1000

    # Notifications: sender address for discount emails.
    notification_from_email: str = "support@example.com"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_listing_limits(self) -> "Settings":
        """Validate page size and autocomplete limits.

        - ADMIN_USERS_PER_PAGE and AUTOCOMPLETE_DEFAULT_LIMIT must be positive.
        - AUTOCOMPLETE_DEFAULT_LIMIT must not exceed MAX_PAGE_SIZE.
        """
        if self.admin_users_per_page < 1:
            raise ValueError(
                f"ADMIN_USERS_PER_PAGE must be positive, got {self.admin_users_per_page}"
            )
        if self.autocomplete_default_limit < 1:
            raise ValueError(
                "AUTOCOMPLETE_DEFAULT_LIMIT must be positive, "
                f"got {self.autocomplete_default_limit}"
            )
        if self.autocomplete_default_limit > self.max_page_size:
            raise ValueError(
                "AUTOCOMPLETE_DEFAULT_LIMIT must not exceed MAX_PAGE_SIZE "
                f"({self.autocomplete_default_limit} > {self.max_page_size})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
