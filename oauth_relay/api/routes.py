"""
FastAPI routes that expose the relay for local development.

Every request, whatever its method, is funnelled into the same router the
Lambda entrypoint uses, so status codes, headers and bodies match the deployed
behaviour.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from oauth_relay.api.router import handle_request
from oauth_relay.clients import TokenExchanger
from oauth_relay.dependencies import get_google_oauth_client
from oauth_relay.models.gateway import GatewayRequest

RELAYED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter()


@router.api_route("/{path:path}", methods=RELAYED_METHODS, include_in_schema=False)
async def relay(
    request: Request,
    path: str,
    oauth_client: Annotated[TokenExchanger, Depends(get_google_oauth_client)],
) -> Response:
    """Translate the ASGI request into a gateway request and render the result."""
    gateway_request = GatewayRequest(path=f"/{path}", query=dict(request.query_params))
    result = await handle_request(gateway_request, oauth_client)
    return Response(
        content=result.get("body", ""),
        status_code=result["statusCode"],
        headers=result.get("headers"),
    )


__all__ = ["RELAYED_METHODS", "router"]
