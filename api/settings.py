"""
Application settings using pydantic-settings for type-safe configuration.

All environment variables are centralized here with proper typing, validation,
and sensible defaults. Settings are loaded once at startup and cached.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The defaults point at the live BPUT portal; tests and staging
    deployments override the URLs via environment variables or .env.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars not defined here
        case_sensitive=False,  # Allow UPSTREAM_BASE_URL or upstream_base_url
    )

    # === Upstream ===
    upstream_base_url: str = Field(
        default="https://results.bput.ac.in",
        description="Base URL of the results portal",
    )
    template_url: str = Field(
        default="https://raw.githubusercontent.com/Arctixinc/BPUT-CheatCode/api/templates/index.html",
        description="HTML page served at /",
    )
    landing_page_url: str = Field(
        default="https://results.bput.ac.in/",
        description="Portal page whose session dropdown is scraped by /allsession",
    )
    upstream_timeout: float | None = Field(
        default=None,
        description="Timeout in seconds for upstream calls (unset keeps the HTTP client default)",
    )

    # === CORS Configuration ===
    # Note: Use str type for env var parsing, convert to list via property
    allowed_origins_str: str = Field(
        default="*",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    # === Server ===
    host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(default=8000, description="Port uvicorn listens on")

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    @field_validator("upstream_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Upstream paths start with a slash, so the base must not end with one."""
        return v.rstrip("/")

    @field_validator("upstream_timeout", mode="before")
    @classmethod
    def parse_upstream_timeout(cls, v: str | float | None) -> float | None:
        """Treat an empty UPSTREAM_TIMEOUT as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v  # type: ignore[return-value]

    @field_validator("upstream_timeout", mode="after")
    @classmethod
    def validate_upstream_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(f"Invalid UPSTREAM_TIMEOUT: {v}. Must be a positive number of seconds")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    Use this function to access settings throughout the codebase.
    """
    return Settings()
