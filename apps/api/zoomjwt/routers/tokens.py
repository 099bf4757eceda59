"""Zoom token issuance endpoints."""
from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from ..schemas.tokens import ApiTokenRequest, SdkTokenRequest, TokenResponse
from ..services import grants as grants_service

router = APIRouter()


@router.post("/sdk", response_model=TokenResponse)
async def create_sdk_token(payload: SdkTokenRequest | None = None) -> TokenResponse:
    """Return a Client SDK JWT signed with the server's SDK secret."""

    payload = payload or SdkTokenRequest()
    try:
        issued = await grants_service.issue_sdk_token(
            payload.access_token_validity_minutes,
            payload.token_validity_minutes,
        )
    except grants_service.CredentialsNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return TokenResponse(token=issued.token, expires_in=issued.expires_in)


@router.post("/api", response_model=TokenResponse)
async def create_api_token(payload: ApiTokenRequest | None = None) -> TokenResponse:
    """Return a REST API JWT signed with the server's API secret."""

    payload = payload or ApiTokenRequest()
    try:
        issued = await grants_service.issue_api_token(payload.token_validity_minutes)
    except grants_service.CredentialsNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return TokenResponse(token=issued.token, expires_in=issued.expires_in)
