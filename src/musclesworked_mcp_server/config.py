"""
Configuration for the musclesworked MCP server.

The API key is resolved once at startup, from the ``--api-key`` flag or the
``MUSCLESWORKED_API_KEY`` environment variable (optionally via a .env file).
The resulting ``Config`` is immutable and is passed to the API client.
"""

import argparse
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://musclesworked.com"
DEFAULT_TIMEOUT = 30.0

API_KEY_ENV = "MUSCLESWORKED_API_KEY"
API_URL_ENV = "MUSCLESWORKED_API_URL"
TIMEOUT_ENV = "MUSCLESWORKED_TIMEOUT"

MISSING_API_KEY_MESSAGE = (
    "Error: API key required.\n\n"
    "Provide it via --api-key or MUSCLESWORKED_API_KEY env var:\n"
    "  musclesworked-mcp --api-key mw_live_...\n"
    "  MUSCLESWORKED_API_KEY=mw_live_... musclesworked-mcp\n\n"
    "Get your API key at https://musclesworked.com/dashboard"
)


class ConfigError(Exception):
    """Raised when the server cannot be configured at startup."""


@dataclass(frozen=True)
class Config:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        return f"Config(api_key='***', base_url={self.base_url!r}, timeout={self.timeout!r})"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="musclesworked-mcp",
        description="MCP server for the musclesworked.com API.",
    )
    parser.add_argument("--api-key", dest="api_key", nargs="?", const=None, default=None, help="musclesworked.com API key")
    return parser


def load_config(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """
    Build the server configuration from command-line arguments and the environment.

    Args:
        argv: Command-line arguments, without the program name. Defaults to sys.argv[1:].
        environ: Environment mapping. Defaults to os.environ after loading a .env file.

    Returns:
        Config: The resolved configuration.

    Raises:
        ConfigError: If no API key is available or the timeout is not a number.
    """
    if environ is None:
        _ = load_dotenv()
        environ = os.environ

    args, _unknown = _build_parser().parse_known_args(argv)

    api_key = args.api_key or environ.get(API_KEY_ENV)
    if not api_key:
        raise ConfigError(MISSING_API_KEY_MESSAGE)
    if not api_key.isascii():
        raise ConfigError("Error: the API key must contain only ASCII characters.")

    base_url = environ.get(API_URL_ENV) or DEFAULT_BASE_URL

    raw_timeout = environ.get(TIMEOUT_ENV)
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError as e:
        raise ConfigError(f"Error: {TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}") from e
    if timeout <= 0:
        raise ConfigError(f"Error: {TIMEOUT_ENV} must be greater than zero, got {raw_timeout!r}")

    return Config(api_key=api_key, base_url=base_url, timeout=timeout)
