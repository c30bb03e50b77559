"""
Request router shared by the Lambda entrypoint and the local ASGI app.

Every request is classified by exact path and handled to completion. Errors
never escape ``handle_request``; they are rendered as JSON error responses.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from oauth_relay.clients.google_auth import OAuthTokenExchangeError, TokenExchanger
from oauth_relay.core.errors import (
    MissingParameterError,
    OAuthRelayError,
    RouteNotFoundError,
    StateDecodingError,
    StateEncodingError,
)
from oauth_relay.models.gateway import (
    GatewayRequest,
    GatewayResponse,
    error_response,
    redirect_response,
)
from oauth_relay.services.state_codec import decode_state, encode_state

logger = logging.getLogger(__name__)

AUTH_PATH = "/auth"
CALLBACK_PATH = "/callback"


async def handle_request(
    request: GatewayRequest, oauth_client: TokenExchanger
) -> GatewayResponse:
    """Route ``request`` and convert any relay error into a response."""
    try:
        if request.path == AUTH_PATH:
            return start_oauth_flow(request, oauth_client)
        if request.path == CALLBACK_PATH:
            return await complete_oauth_flow(request, oauth_client)
        raise RouteNotFoundError(request.path)
    except OAuthRelayError as exc:
        if exc.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error("OAuth relay failed on %s: %s", request.path, exc)
        else:
            logger.warning("Rejected request to %s: %s", request.path, exc)
        return error_response(exc.status_code, str(exc))


def start_oauth_flow(
    request: GatewayRequest, oauth_client: TokenExchanger
) -> GatewayResponse:
    """Redirect the browser to the consent screen, carrying ``redirect_url``."""
    redirect_url = request.param("redirect_url")
    if not redirect_url:
        raise MissingParameterError("redirect_url")

    try:
        state = encode_state(redirect_url)
    except StateEncodingError as exc:
        raise StateEncodingError(f"failed to generate state: {exc}") from exc

    return redirect_response(oauth_client.build_authorization_url(state))


async def complete_oauth_flow(
    request: GatewayRequest, oauth_client: TokenExchanger
) -> GatewayResponse:
    """
    Redeem the authorization code and send the browser on with the token.

    ``state`` is checked and decoded before ``code`` is looked at. The token
    goes in the URL fragment so it never reaches server logs.
    """
    state = request.param("state")
    if not state:
        raise MissingParameterError("state")

    try:
        redirect_url = decode_state(state)
    except StateDecodingError as exc:
        raise StateDecodingError(f"invalid state parameter: {exc}") from exc

    code = request.param("code")
    if not code:
        raise MissingParameterError("code")

    try:
        token = await oauth_client.exchange(code)
    except OAuthTokenExchangeError as exc:
        raise OAuthTokenExchangeError(f"failed to exchange token: {exc}") from exc

    logger.info("Exchanged authorization code; redirecting to caller")
    return redirect_response(f"{redirect_url}#access_token={token.access_token}")


__all__ = [
    "AUTH_PATH",
    "CALLBACK_PATH",
    "complete_oauth_flow",
    "handle_request",
    "start_oauth_flow",
]
