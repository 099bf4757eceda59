"""Data contracts for token endpoints."""
from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ..services.tokens import MAX_ACCESS_TOKEN_VALIDITY_MINUTES, MIN_TOKEN_VALIDITY_MINUTES


class SdkTokenRequest(BaseModel):
    access_token_validity_minutes: int | None = Field(
        default=None,
        ge=1,
        le=MAX_ACCESS_TOKEN_VALIDITY_MINUTES,
        description="Minutes until the access token (exp) expires",
    )
    token_validity_minutes: int | None = Field(
        default=None,
        ge=MIN_TOKEN_VALIDITY_MINUTES,
        description="Minutes until tokenExp; defaults to the access token validity",
    )

    @model_validator(mode="after")
    def _check_token_fallback(self) -> SdkTokenRequest:
        """An access validity that tokenExp falls back to must meet the tokenExp minimum."""

        access = self.access_token_validity_minutes
        if self.token_validity_minutes is None and access is not None and access < MIN_TOKEN_VALIDITY_MINUTES:
            raise ValueError(
                f"access_token_validity_minutes below {MIN_TOKEN_VALIDITY_MINUTES} "
                "requires an explicit token_validity_minutes"
            )
        return self


class ApiTokenRequest(BaseModel):
    token_validity_minutes: int | None = Field(
        default=None,
        ge=MIN_TOKEN_VALIDITY_MINUTES,
        description="Minutes until tokenExp",
    )


class TokenResponse(BaseModel):
    token: str = Field(..., description="Signed HS256 JWT")
    expires_in: int = Field(..., ge=1, description="Seconds until tokenExp")
