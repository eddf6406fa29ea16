# =============================================================================
# app/config.py - Taste Engine Settings
# =============================================================================
# Runtime configuration read by pydantic-settings from the process
# environment, falling back to a .env file in the working directory.
#
# Covers:
# - Supabase credentials for the record store
# - Names of the two reference library tables and the usage RPC
# - CORS and environment flags
#
# Usage:
#   from app.config import settings
#   settings.BRAND_REFERENCES_TABLE  # "brand_references"
#
# Bucket thresholds and the coverage gap threshold are constants in
# core/taste/, not settings.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Environment-driven configuration for the Taste Engine API.

    Import the module-level `settings` rather than instantiating this.
    """

    # -------------------------------------------------------------------------
    # Record Store (Supabase)
    # -------------------------------------------------------------------------
    # No defaults: startup fails fast when credentials are missing

    SUPABASE_URL: str = Field(
        ...,
        description="Project URL, e.g. https://<project>.supabase.co"
    )

    SUPABASE_ANON_KEY: str = Field(
        ...,
        description="Public anon key"
    )

    SUPABASE_SERVICE_KEY: str = Field(
        ...,
        description="service_role key used for server-side reads and the usage RPC"
    )

    # -------------------------------------------------------------------------
    # Reference Library Tables
    # -------------------------------------------------------------------------

    BRAND_REFERENCES_TABLE: str = Field(
        default="brand_references",
        description="Table holding curated brand references"
    )

    DELIVERABLE_STYLES_TABLE: str = Field(
        default="deliverable_style_references",
        description="Table holding curated deliverable style references"
    )

    USAGE_INCREMENT_FUNCTION: str = Field(
        default="increment_brand_reference_usage",
        description="Postgres function that increments brand reference usage counts"
    )

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="DEBUG-level logging"
    )

    # Comma-separated, see cors_origins_list
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Origins allowed to call the API in production"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty variables fall back to the defaults above
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Derived Values
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS_ORIGINS split on commas, whitespace trimmed, empties dropped."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """Build Settings once per process."""
    return Settings()


settings = get_settings()
