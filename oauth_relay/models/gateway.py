"""
Request and response records exchanged with the invocation host.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Dict, Mapping, Optional, TypedDict


class _GatewayResponseBase(TypedDict):
    statusCode: int


class GatewayResponse(_GatewayResponseBase, total=False):
    """Response shape understood by API Gateway proxy integrations."""

    headers: Dict[str, str]
    body: str


@dataclass(frozen=True)
class GatewayRequest:
    """The parts of an inbound request the router looks at."""

    path: str
    query: Mapping[str, str] = field(default_factory=dict)

    def param(self, name: str) -> str:
        """Return a query parameter, treating absent and empty alike."""
        return self.query.get(name) or ""

    @classmethod
    def from_api_gateway_event(cls, event: Mapping[str, Any]) -> "GatewayRequest":
        """Build a request from a REST (v1) or HTTP (v2) API Gateway event."""
        path = event.get("path") or event.get("rawPath") or ""
        query = event.get("queryStringParameters") or {}
        return cls(path=path, query=dict(query))


def redirect_response(location: str) -> GatewayResponse:
    return {"statusCode": int(HTTPStatus.FOUND), "headers": {"Location": location}}


def error_response(status_code: int, message: str) -> GatewayResponse:
    """Render an error as a JSON body with a single ``error`` key."""
    return {
        "statusCode": int(status_code),
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"error": message}),
    }


__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "error_response",
    "redirect_response",
]
