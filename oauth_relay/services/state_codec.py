"""
Encode and decode the opaque OAuth ``state`` value.

The state is compact JSON wrapped in URL-safe base64. It is not signed; the
provider hands it back unmodified and nothing is stored server side.
"""

from __future__ import annotations

import base64
import binascii
import re

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from oauth_relay.core.errors import StateDecodingError, StateEncodingError
from oauth_relay.models.oauth import StatePayload

_URLSAFE_B64 = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def encode_state(redirect_url: str) -> str:
    """Serialize ``redirect_url`` into a base64url state value."""
    try:
        serialized = StatePayload(redirect_url=redirect_url).model_dump_json()
        raw = serialized.encode("utf-8")
    except (ValidationError, PydanticSerializationError, UnicodeEncodeError) as exc:
        raise StateEncodingError(str(exc)) from exc
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode_state(state: str) -> str:
    """
    Recover the ``redirect_url`` carried by a state value.

    Padding is optional. Anything that is not base64url, not a JSON object, or
    lacks a string ``redirect_url`` raises ``StateDecodingError``. An empty
    ``redirect_url`` is returned as-is.
    """
    raw = _b64decode(state)
    try:
        payload = StatePayload.model_validate_json(raw)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"] if exc.errors() else str(exc)
        raise StateDecodingError(f"malformed state payload: {reason}") from exc
    return payload.redirect_url


def _b64decode(state: str) -> bytes:
    if not _URLSAFE_B64.fullmatch(state):
        raise StateDecodingError("illegal base64 data: unexpected character")
    stripped = state.rstrip("=")
    if len(stripped) % 4 == 1:
        raise StateDecodingError("illegal base64 data: invalid length")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as exc:
        raise StateDecodingError(f"illegal base64 data: {exc}") from exc


__all__ = ["decode_state", "encode_state"]
