"""Signed JWTs for the Zoom Client SDK and REST API."""

from .services.tokens import create_api_token, create_client_sdk_token, create_token

__all__ = ["create_client_sdk_token", "create_api_token", "create_token"]
