"""Request, response and OAuth payload models."""

from .gateway import GatewayRequest, GatewayResponse, error_response, redirect_response
from .oauth import StatePayload, TokenResult

__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "StatePayload",
    "TokenResult",
    "error_response",
    "redirect_response",
]
