"""
Application configuration models and helpers.

Centralizes settings management so both the Lambda entrypoint and the local
ASGI app share a consistent configuration surface.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from oauth_relay.core.errors import ConfigurationError

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"


class ProviderEndpoint(BaseModel):
    """Authorization and token endpoints of the identity provider."""

    model_config = ConfigDict(frozen=True)

    auth_url: str = GOOGLE_AUTH_URL
    token_url: str = GOOGLE_TOKEN_URL


class ProviderSettings(BaseSettings):
    """Credentials and scopes used to talk to the identity provider."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    client_id: str = Field(..., alias="OAUTH_CLIENT_ID")
    client_secret: str = Field(..., alias="OAUTH_CLIENT_SECRET")
    redirect_url: str = Field(..., alias="OAUTH_REDIRECT_URL")
    scopes: Annotated[tuple[str, ...], NoDecode] = Field(
        ("openid", "profile", "email"),
        alias="OAUTH_SCOPES",
    )
    endpoint: ProviderEndpoint = Field(default_factory=ProviderEndpoint)

    @field_validator("client_id", "client_secret", "redirect_url")
    @classmethod
    def _require_value(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("scopes", mode="before")
    @classmethod
    def _split_scopes(
        cls, value: str | tuple[str, ...] | list[str]
    ) -> tuple[str, ...]:
        """Support providing scopes as a comma-separated string."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(value)
        return tuple(scope.strip() for scope in value.split(",") if scope.strip())


class AppSettings(BaseSettings):
    """Process-level settings that are not provider specific."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    environment: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="APP_LOG_LEVEL")


class DotenvProviderSettings(ProviderSettings):
    """Provider settings read from a ``.env`` file alone, ignoring the process environment."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, dotenv_settings)


def load_provider_settings(
    settings_cls: type[ProviderSettings] = ProviderSettings, **overrides: object
) -> ProviderSettings:
    """
    Build provider settings from the environment.

    Raises ``ConfigurationError`` naming every missing or empty variable.
    """
    try:
        return settings_cls(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        names = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        raise ConfigurationError(
            "Missing or empty environment variables: " + ", ".join(names)
        ) from exc


@lru_cache()
def get_settings() -> ProviderSettings:
    """Return a cached provider settings object."""
    return load_provider_settings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached process-level settings."""
    return AppSettings()  # type: ignore[call-arg]


__all__ = [
    "AppSettings",
    "DotenvProviderSettings",
    "GOOGLE_AUTH_URL",
    "GOOGLE_TOKEN_URL",
    "ProviderEndpoint",
    "ProviderSettings",
    "get_app_settings",
    "get_settings",
    "load_provider_settings",
]
