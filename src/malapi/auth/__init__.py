"""Credentials and OAuth2 helpers."""

from malapi.auth.credentials import Credentials
from malapi.auth.oauth import (
    AuthorizationRequest,
    OAuthClient,
    OAuthToken,
    RedirectResponse,
)
from malapi.auth.settings import Settings, load_settings

__all__ = [
    "AuthorizationRequest",
    "Credentials",
    "OAuthClient",
    "OAuthToken",
    "RedirectResponse",
    "Settings",
    "load_settings",
]
