"""Application settings and configuration."""

import os
from pathlib import Path

from filebox.config.models import VALID_LOG_LEVELS, ServerConfig
from filebox.errors import ConfigurationError

# Subdirectory of the working directory that holds served files
ROOT_DIRNAME = "files"

# Default settings
DEFAULT_HOST = os.getenv("FILEBOX_HOST", "0.0.0.0")
DEFAULT_PORT = 8383
DEFAULT_LOG_LEVEL = os.getenv("FILEBOX_LOG_LEVEL", "INFO")

# Connection keep-alive
IDLE_TIMEOUT_SECONDS = 60


def default_trusted_root() -> Path:
    """Return ``<working directory>/files``.

    Raises:
        ConfigurationError: If the working directory cannot be determined
    """
    try:
        working = Path.cwd()
    except OSError as e:
        raise ConfigurationError(f"cannot determine working directory: {e}") from e
    return working / ROOT_DIRNAME


def default_port() -> int:
    """Return the port from $PORT, or DEFAULT_PORT when unset or empty.

    Raises:
        ConfigurationError: If $PORT is not an integer
    """
    value = os.getenv("PORT")
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"PORT is not a number: {value!r}") from e


def get_default_server_config(trusted_root: Path | None = None) -> ServerConfig:
    """Get default server configuration."""
    return ServerConfig(
        host=DEFAULT_HOST,
        port=default_port(),
        trusted_root=trusted_root or default_trusted_root(),
        log_level=DEFAULT_LOG_LEVEL,
        idle_timeout=IDLE_TIMEOUT_SECONDS,
    )


__all__ = [
    "VALID_LOG_LEVELS",
    "ROOT_DIRNAME",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_LOG_LEVEL",
    "IDLE_TIMEOUT_SECONDS",
    "default_port",
    "default_trusted_root",
    "get_default_server_config",
]
