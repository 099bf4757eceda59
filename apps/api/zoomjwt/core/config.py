"""Runtime configuration for the token service."""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..services.tokens import MAX_ACCESS_TOKEN_VALIDITY_MINUTES, MIN_TOKEN_VALIDITY_MINUTES


class Settings(BaseSettings):
    """Credentials and default validity windows.

    Only the HTTP surface reads these; the token builders take everything as arguments.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_env: str = Field(default="development")
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = Field(default="INFO")

    zoom_sdk_key: str = Field(default="")
    zoom_sdk_secret: str = Field(default="")
    zoom_api_key: str = Field(default="")
    zoom_api_secret: str = Field(default="")

    access_token_validity_minutes: int = Field(default=120, ge=1, le=MAX_ACCESS_TOKEN_VALIDITY_MINUTES)
    token_validity_minutes: int | None = Field(default=None, ge=MIN_TOKEN_VALIDITY_MINUTES)
    api_token_validity_minutes: int = Field(default=120, ge=MIN_TOKEN_VALIDITY_MINUTES)

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Allow comma-separated env values for CORS origins."""

        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @model_validator(mode="after")
    def _check_token_fallback(self) -> Settings:
        """tokenExp falls back to the access validity, so that must meet the tokenExp minimum too."""

        if self.token_validity_minutes is None and self.access_token_validity_minutes < MIN_TOKEN_VALIDITY_MINUTES:
            raise ValueError(
                f"access_token_validity_minutes must be at least {MIN_TOKEN_VALIDITY_MINUTES} "
                "when token_validity_minutes is unset"
            )
        return self

    def sdk_configured(self) -> bool:
        return bool(self.zoom_sdk_key.strip() and self.zoom_sdk_secret.strip())

    def api_configured(self) -> bool:
        return bool(self.zoom_api_key.strip() and self.zoom_api_secret.strip())


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


settings = get_settings()
