"""Token issuance for HTTP clients.

Resolves credentials and default validity windows from settings so the app
secret never leaves the server, then delegates to the token builders.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.config import settings
from . import tokens

logger = logging.getLogger(__name__)


class CredentialsNotConfiguredError(RuntimeError):
    """Raised when the key/secret pair for a token kind is missing."""


@dataclass(slots=True)
class IssuedToken:
    token: str
    expires_in: int


def _require(configured: bool, kind: str) -> None:
    if not configured:
        logger.warning("Zoom %s credentials missing; refusing to issue token.", kind)
        raise CredentialsNotConfiguredError(f"Zoom {kind} credentials are not configured")


async def issue_sdk_token(
    access_token_validity_minutes: int | None = None,
    token_validity_minutes: int | None = None,
) -> IssuedToken:
    """Issue a Client SDK token signed with the configured SDK secret."""

    _require(settings.sdk_configured(), "SDK")

    access_minutes = access_token_validity_minutes or settings.access_token_validity_minutes
    token_minutes = token_validity_minutes or settings.token_validity_minutes
    if token_minutes is None or token_minutes <= 0:
        token_minutes = access_minutes

    token = tokens.create_client_sdk_token(
        settings.zoom_sdk_key,
        settings.zoom_sdk_secret,
        access_token_validity_minutes=access_minutes,
        token_validity_minutes=token_minutes,
    )
    return IssuedToken(token=token, expires_in=token_minutes * 60)


async def issue_api_token(token_validity_minutes: int | None = None) -> IssuedToken:
    """Issue a REST API token signed with the configured API secret."""

    _require(settings.api_configured(), "API")

    minutes = token_validity_minutes or settings.api_token_validity_minutes
    token = tokens.create_api_token(
        settings.zoom_api_key,
        settings.zoom_api_secret,
        token_validity_minutes=minutes,
    )
    return IssuedToken(token=token, expires_in=minutes * 60)
