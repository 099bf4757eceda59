"""Signed JWTs for the Zoom Client SDK and REST API.

Tokens are plain HS256 JWTs: a fixed header, an ordered claim set and an
HMAC-SHA256 signature keyed with the UTF-8 bytes of the app secret. Durations
are passed through unchecked; the documented platform limits below are
enforced by Zoom, not here.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

import jwt

ALGORITHM = "HS256"

DEFAULT_VALIDITY_MINUTES = 120
# Client SDK access token ceiling (48 hours).
MAX_ACCESS_TOKEN_VALIDITY_MINUTES = 2880
MIN_TOKEN_VALIDITY_MINUTES = 30

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def _timestamp(moment: datetime) -> int:
    """Whole Unix seconds, truncated."""
    return int(moment.timestamp())


def create_token(secret: str, payload: Mapping[str, Any]) -> str:
    """Sign ``payload`` with ``secret`` and return the compact JWT.

    Only call this directly when hand-crafting a claim set; the SDK and API
    helpers build the payload Zoom expects. Claim order is preserved.
    """

    key = secret.encode("utf-8")
    return jwt.encode(dict(payload), key, algorithm=ALGORITHM)


def create_client_sdk_token(
    sdk_key: str,
    sdk_secret: str,
    access_token_validity_minutes: int = DEFAULT_VALIDITY_MINUTES,
    token_validity_minutes: int | None = None,
) -> str:
    """Create a JWT for initialising the Zoom Client SDK.

    ``access_token_validity_minutes`` drives the ``exp`` claim (Zoom allows at
    most 48 hours). ``token_validity_minutes`` drives ``tokenExp``; when it is
    omitted or not positive it falls back to the access token validity.
    """

    now = utc_now()
    if token_validity_minutes is None or token_validity_minutes <= 0:
        token_validity_minutes = access_token_validity_minutes

    issued_at = _timestamp(now)
    access_exp = _timestamp(now + timedelta(minutes=access_token_validity_minutes))
    token_exp = _timestamp(now + timedelta(minutes=token_validity_minutes))
    logger.debug("Signing SDK token for %s iat=%s exp=%s tokenExp=%s", sdk_key, issued_at, access_exp, token_exp)

    return create_token(
        sdk_secret,
        {
            "appKey": sdk_key,
            "iat": issued_at,
            "exp": access_exp,
            "tokenExp": token_exp,
        },
    )


def create_api_token(
    api_key: str,
    api_secret: str,
    token_validity_minutes: int = DEFAULT_VALIDITY_MINUTES,
) -> str:
    """Create a JWT for the Zoom REST API (minimum validity 30 minutes, not enforced)."""

    now = utc_now()
    issued_at = _timestamp(now)
    token_exp = _timestamp(now + timedelta(minutes=token_validity_minutes))
    logger.debug("Signing API token for %s iat=%s tokenExp=%s", api_key, issued_at, token_exp)

    return create_token(
        api_secret,
        {
            "appKey": api_key,
            "iat": issued_at,
            "tokenExp": token_exp,
        },
    )
