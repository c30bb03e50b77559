"""
Error types raised while relaying the OAuth flow.

Request-time errors carry the HTTP status they map to so the router can render
them without a lookup table.
"""

from __future__ import annotations

from http import HTTPStatus


class ConfigurationError(Exception):
    """Raised at startup when required provider configuration is missing."""


class OAuthRelayError(Exception):
    """Base class for errors converted into JSON error responses."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR


class MissingParameterError(OAuthRelayError):
    """Raised when a required query parameter is absent or empty."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} parameter is required")
        self.name = name


class StateEncodingError(OAuthRelayError):
    """Raised when the state payload cannot be serialized."""


class StateDecodingError(OAuthRelayError):
    """Raised when a state value is not a payload this service produced."""

    status_code = HTTPStatus.BAD_REQUEST


class RouteNotFoundError(OAuthRelayError):
    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__("not found")
        self.path = path


__all__ = [
    "ConfigurationError",
    "MissingParameterError",
    "OAuthRelayError",
    "RouteNotFoundError",
    "StateDecodingError",
    "StateEncodingError",
]
