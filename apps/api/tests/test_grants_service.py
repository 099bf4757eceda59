"""Tests for settings-driven token issuance."""
from __future__ import annotations

import jwt
import pytest

from zoomjwt.services import grants

SDK_SECRET = "sdk-secret-with-plenty-of-entropy-0123456789"
API_SECRET = "api-secret-with-plenty-of-entropy-0123456789"


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(grants.settings, "zoom_sdk_key", "sdk-key", raising=False)
    monkeypatch.setattr(grants.settings, "zoom_sdk_secret", SDK_SECRET, raising=False)
    monkeypatch.setattr(grants.settings, "zoom_api_key", "api-key", raising=False)
    monkeypatch.setattr(grants.settings, "zoom_api_secret", API_SECRET, raising=False)
    monkeypatch.setattr(grants.settings, "access_token_validity_minutes", 120, raising=False)
    monkeypatch.setattr(grants.settings, "token_validity_minutes", None, raising=False)
    monkeypatch.setattr(grants.settings, "api_token_validity_minutes", 120, raising=False)
    return grants.settings


@pytest.mark.asyncio
async def test_issue_sdk_token_uses_settings_defaults(configured) -> None:
    issued = await grants.issue_sdk_token()

    claims = jwt.decode(issued.token, SDK_SECRET, algorithms=["HS256"])
    assert claims["appKey"] == "sdk-key"
    assert claims["exp"] - claims["iat"] == 120 * 60
    assert claims["tokenExp"] == claims["exp"]
    assert issued.expires_in == 120 * 60


@pytest.mark.asyncio
async def test_issue_sdk_token_honours_configured_token_validity(configured, monkeypatch) -> None:
    monkeypatch.setattr(configured, "token_validity_minutes", 45, raising=False)

    issued = await grants.issue_sdk_token(access_token_validity_minutes=60)

    claims = jwt.decode(issued.token, SDK_SECRET, algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == 60 * 60
    assert claims["tokenExp"] - claims["iat"] == 45 * 60
    assert issued.expires_in == 45 * 60


@pytest.mark.asyncio
async def test_issue_api_token_overrides_default(configured) -> None:
    issued = await grants.issue_api_token(30)

    claims = jwt.decode(issued.token, API_SECRET, algorithms=["HS256"])
    assert set(claims) == {"appKey", "iat", "tokenExp"}
    assert claims["tokenExp"] - claims["iat"] == 30 * 60
    assert issued.expires_in == 1800


@pytest.mark.asyncio
async def test_missing_credentials_raise(configured, monkeypatch) -> None:
    monkeypatch.setattr(configured, "zoom_api_secret", "", raising=False)

    with pytest.raises(grants.CredentialsNotConfiguredError):
        await grants.issue_api_token()
