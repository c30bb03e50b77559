"""Service layer exports."""

from .state_codec import decode_state, encode_state

__all__ = ["decode_state", "encode_state"]
