"""
FastAPI application entrypoint for running the relay locally.
"""

from __future__ import annotations

from fastapi import FastAPI

from oauth_relay import __version__
from oauth_relay.api.routes import router as relay_router
from oauth_relay.core.config import get_app_settings, get_settings
from oauth_relay.core.logging import configure_logging


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    configure_logging(get_app_settings().log_level)
    # Fail before serving anything if provider credentials are absent.
    get_settings()

    app = FastAPI(
        title="Google OAuth Redirect Relay",
        version=__version__,
        description="Redirects browsers through Google sign-in and back with a token.",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(relay_router)
    return app


__all__ = ["create_app"]
