"""
AWS Lambda entrypoint for API Gateway proxy requests.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from oauth_relay.api.router import handle_request
from oauth_relay.clients import GoogleOAuthClient, TokenExchanger
from oauth_relay.core.config import get_app_settings, load_provider_settings
from oauth_relay.core.errors import ConfigurationError
from oauth_relay.core.logging import configure_logging
from oauth_relay.models.gateway import GatewayRequest, GatewayResponse

logger = logging.getLogger(__name__)


def _bootstrap() -> Dict[str, Any]:
    """Initialize shared singletons for the Lambda runtime."""
    configure_logging(get_app_settings().log_level)
    try:
        settings = load_provider_settings()
    except ConfigurationError:
        logger.critical("Refusing to start without OAuth provider configuration")
        raise
    return {"oauth_client": GoogleOAuthClient(settings)}


BOOTSTRAP = _bootstrap()


def lambda_handler(event: Dict[str, Any], context: Any) -> GatewayResponse:
    """
    AWS Lambda handler invoked by API Gateway.

    Each invocation is independent; the only shared object is the provider
    client built during the init phase.
    """
    request = GatewayRequest.from_api_gateway_event(event)
    oauth_client: TokenExchanger = BOOTSTRAP["oauth_client"]
    return asyncio.run(handle_request(request, oauth_client))


__all__ = ["lambda_handler"]
