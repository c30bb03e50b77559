"""
Factory functions to provide shared clients as FastAPI dependencies.
"""

from functools import lru_cache

from oauth_relay.clients import GoogleOAuthClient, TokenExchanger
from oauth_relay.core.config import get_settings


@lru_cache()
def get_google_oauth_client() -> TokenExchanger:
    """Create a singleton Google OAuth client."""
    return GoogleOAuthClient(get_settings())


__all__ = ["get_google_oauth_client"]
