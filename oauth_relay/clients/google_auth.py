"""
Google OAuth utilities.

These helpers build the consent URL and redeem authorization codes. The
exchange is a single attempt with no client-side timeout; the invocation
host's deadline bounds it.
"""

from __future__ import annotations

import logging
from typing import Protocol
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from oauth_relay.core.config import ProviderSettings
from oauth_relay.core.errors import OAuthRelayError
from oauth_relay.models.oauth import TokenResult

logger = logging.getLogger(__name__)


class OAuthTokenExchangeError(OAuthRelayError):
    """Raised when the token endpoint cannot be reached or returns an error."""


class TokenExchanger(Protocol):
    """What the router needs from a provider client."""

    def build_authorization_url(self, state: str) -> str: ...

    async def exchange(self, code: str) -> TokenResult: ...


class GoogleOAuthClient:
    """Build Google authorization URLs and exchange authorization codes."""

    AUTH_PARAMS = {
        "prompt": "select_account",
        "access_type": "online",
        "response_type": "code",
        "include_granted_scopes": "true",
    }

    def __init__(
        self,
        settings: ProviderSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    def build_authorization_url(self, state: str) -> str:
        """Construct the Google OAuth consent URL."""
        params = {
            "client_id": self._settings.client_id,
            "redirect_uri": self._settings.redirect_url,
            "scope": " ".join(self._settings.scopes),
            "state": state,
            **self.AUTH_PARAMS,
        }
        return f"{self._settings.endpoint.auth_url}?{urlencode(params)}"

    async def exchange(self, code: str) -> TokenResult:
        """Exchange an authorization code for an access token."""
        payload = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self._settings.redirect_url,
            "client_id": self._settings.client_id,
            "client_secret": self._settings.client_secret,
        }
        token_url = self._settings.endpoint.token_url

        try:
            async with httpx.AsyncClient(timeout=None, transport=self._transport) as client:
                response = await client.post(
                    token_url,
                    data=payload,
                    headers={"Accept": "application/json"},
                )
        except httpx.HTTPError as exc:
            raise OAuthTokenExchangeError(
                f"token endpoint request failed: {exc!r}"
            ) from exc

        if not response.is_success:
            logger.warning(
                "Token endpoint rejected authorization code",
                extra={"status_code": response.status_code},
            )
            raise OAuthTokenExchangeError(
                f"oauth2: cannot fetch token: {response.status_code} "
                f"{response.reason_phrase}\nResponse: {response.text}"
            )

        try:
            token_payload = response.json()
        except ValueError as exc:
            raise OAuthTokenExchangeError(
                f"oauth2: cannot parse token response: {exc}"
            ) from exc

        try:
            return TokenResult.model_validate(token_payload)
        except ValidationError as exc:
            problems = "; ".join(
                "{}: {}".format(".".join(map(str, error["loc"])) or "response", error["msg"])
                for error in exc.errors()
            )
            raise OAuthTokenExchangeError(
                f"oauth2: invalid token response: {problems}"
            ) from exc


__all__ = [
    "GoogleOAuthClient",
    "OAuthTokenExchangeError",
    "TokenExchanger",
]
