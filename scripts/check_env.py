"""Verify that a ``.env`` file holds usable OAuth relay configuration.

Only the file is consulted; ``OAUTH_*`` variables exported in the calling
shell do not mask a broken file. Run it before deploying::

    python -m scripts.check_env --env-file .env
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from oauth_relay.core.config import DotenvProviderSettings, load_provider_settings
from oauth_relay.core.errors import ConfigurationError

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_RUNTIME_ERROR = 5


def _validate_settings(env_file: Path) -> None:
    """Ensure provider settings can be loaded from ``env_file`` alone."""
    load_provider_settings(DotenvProviderSettings, _env_file=str(env_file))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate OAuth relay settings stored in a .env file."
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        type=Path,
        help="Path to the environment file (default: .env in the repo root).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    env_file: Path = args.env_file

    if not env_file.exists():
        print(f"Environment file {env_file} does not exist.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        _validate_settings(env_file)
    except ConfigurationError as exc:
        print(f"Settings validation failed. {exc}", file=sys.stderr)
        if isinstance(exc.__cause__, ValidationError):
            print(exc.__cause__.json(indent=2), file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    print(f"{env_file}: OAuth relay settings OK.")
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
