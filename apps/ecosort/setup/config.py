"""EcoSort Service Configuration.

Externalized through env vars (prefix ECOSORT_) or a .env file.
- Oracle credential → SecretStr (masked in logs), required at startup
- CORS allow-list → comma separated string, parsed by property
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_BODY_BYTES = 5 * 1024 * 1024


class Settings(BaseSettings):
    """EcoSort service settings.

    Construction fails when the Gemini API key is missing or blank, which
    stops the process before any traffic is served.
    """

    # === Service Identity ===
    service_name: str = Field("ecosort-api", description="Service name")
    service_version: str = Field("1.0.0", description="Service version")
    environment: str = Field("dev", description="Environment (dev, staging, prod)")

    # === Server ===
    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(
        3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "ECOSORT_PORT"),
    )

    # === Oracle (Gemini) ===
    gemini_api_key: SecretStr = Field(
        ...,
        validation_alias=AliasChoices("GEMINI_API_KEY", "ECOSORT_GEMINI_API_KEY"),
        description="Google Gemini API key",
    )
    gemini_model: str = Field("gemini-flash-latest", description="Gemini model name")
    oracle_temperature: float = Field(0.2, ge=0.0, le=2.0)
    oracle_max_output_tokens: int = Field(1024, ge=64, le=8192)
    oracle_timeout_seconds: float = Field(30.0, gt=0, le=300)
    oracle_max_retries: int = Field(
        0,
        ge=0,
        le=5,
        description="Retries on oracle unavailability (0 disables)",
    )
    oracle_retry_backoff: float = Field(1.5, ge=1.0, le=10.0)

    # === CORS ===
    allowed_origins_str: str = Field(
        "",
        validation_alias=AliasChoices("ALLOWED_ORIGINS", "ECOSORT_ALLOWED_ORIGINS"),
        description="Allowed browser origins (comma separated)",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse the CORS allow-list."""
        return [o.strip() for o in self.allowed_origins_str.split(",") if o.strip()]

    # === Rate limiting ===
    rate_limit_per_minute: int = Field(12, ge=1, le=10_000)
    rate_limit_window_seconds: int = Field(60, ge=1, le=3600)
    rate_limit_backend: Literal["memory", "redis"] = Field("memory")
    redis_url: str = Field("redis://localhost:6379/0", description="Redis URL (redis backend)")
    trust_forwarded_for: bool = Field(
        False,
        description="Key rate limits on the first X-Forwarded-For hop (behind a proxy)",
    )

    # === Payload ===
    max_body_bytes: int = Field(DEFAULT_MAX_BODY_BYTES, ge=1024)
    normalize_uploads: bool = Field(True, description="Re-encode uploaded images")

    # === Logging ===
    log_level: str = Field("INFO")
    log_format: Literal["json", "text"] = Field("json")

    model_config = SettingsConfigDict(
        env_prefix="ECOSORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("gemini_api_key")
    @classmethod
    def _require_credential(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("GEMINI_API_KEY must not be blank")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()
