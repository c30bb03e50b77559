"""Stateless relay for the Google OAuth2 authorization code redirect flow."""

__version__ = "0.1.0"
