"""Expose constructed client wrappers."""

from .google_auth import GoogleOAuthClient, OAuthTokenExchangeError, TokenExchanger

__all__ = [
    "GoogleOAuthClient",
    "OAuthTokenExchangeError",
    "TokenExchanger",
]
