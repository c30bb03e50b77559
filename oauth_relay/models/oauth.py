"""
Domain models for the OAuth state round trip and token exchange.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class StatePayload(BaseModel):
    """Payload carried through the provider as the OAuth ``state`` value."""

    redirect_url: StrictStr = Field(
        ..., description="Where the browser is sent once the flow completes."
    )


class TokenResult(BaseModel):
    """
    Token endpoint response.

    Only ``access_token`` is relied upon; the remaining fields are kept as the
    provider sent them so an unusual type never fails the exchange.
    """

    model_config = ConfigDict(extra="allow")

    access_token: StrictStr = Field(..., min_length=1)
    token_type: Any = None
    expires_in: Any = None
    refresh_token: Any = None
    id_token: Any = None
    scope: Any = None


__all__ = ["StatePayload", "TokenResult"]
