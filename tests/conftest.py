"""Pytest configuration shared across the suite."""

from __future__ import annotations

import pytest

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

from oauth_relay.models.oauth import TokenResult


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


class DummyOAuthClient:
    """Records calls and returns canned results instead of calling Google."""

    def __init__(self, access_token: str = "abc123", error: Exception | None = None) -> None:
        self.access_token = access_token
        self.error = error
        self.states: list[str] = []
        self.codes: list[str] = []

    def build_authorization_url(self, state: str) -> str:
        self.states.append(state)
        return f"https://oauth.example.com/auth?state={state}"

    async def exchange(self, code: str) -> TokenResult:
        self.codes.append(code)
        if self.error is not None:
            raise self.error
        return TokenResult(access_token=self.access_token)


@pytest.fixture()
def dummy_client_factory() -> type[DummyOAuthClient]:
    return DummyOAuthClient


@pytest.fixture()
def dummy_client() -> DummyOAuthClient:
    return DummyOAuthClient()
