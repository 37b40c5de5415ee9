"""Configuration loader for the course server."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from .constants import (
    DEFAULT_CONTENT_PATH,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    ENV_CONFIG_FILE,
    ENV_PREFIX,
)
from .utils.errors import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    """HTTP server configuration."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass
class ContentConfig:
    """Course content configuration."""

    path: str = DEFAULT_CONTENT_PATH  # Content root, base for all descriptor paths


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL


@dataclass
class Config:
    """Main configuration container."""

    server: ServerConfig = field(default_factory=ServerConfig)
    content: ContentConfig = field(default_factory=ContentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_port(value) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid port: {value!r}") from None
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"Port out of range: {port}")
    return port


def _parse_level(value) -> str:
    level = str(value).upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"Invalid log level: {value!r}")
    return level


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from an optional YAML file and environment variables.

    Environment variables (COURSE_HOST, COURSE_PORT, COURSE_PATH,
    COURSE_LOG_LEVEL) take precedence over the YAML file.

    Args:
        config_path: YAML config file; falls back to COURSE_CONFIG if unset

    Returns:
        Config object

    Raises:
        FileNotFoundError: If a named config file does not exist
        ConfigurationError: If a value is invalid
    """
    # Load environment variables
    load_dotenv()

    config_path = config_path or os.getenv(ENV_CONFIG_FILE)
    data = {}
    if config_path:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must be a mapping: {config_path}")

    server_data = data.get("server") or {}
    content_data = data.get("content") or {}
    logging_data = data.get("logging") or {}

    return Config(
        server=ServerConfig(
            host=os.getenv(f"{ENV_PREFIX}HOST", server_data.get("host", DEFAULT_HOST)),
            port=_parse_port(
                os.getenv(f"{ENV_PREFIX}PORT", server_data.get("port", DEFAULT_PORT))
            ),
        ),
        content=ContentConfig(
            path=os.getenv(
                f"{ENV_PREFIX}PATH", content_data.get("path", DEFAULT_CONTENT_PATH)
            ),
        ),
        logging=LoggingConfig(
            level=_parse_level(
                os.getenv(f"{ENV_PREFIX}LOG_LEVEL", logging_data.get("level", DEFAULT_LOG_LEVEL))
            ),
        ),
    )


def validate_content_root(config: Config) -> Path:
    """Check that the configured content root is an existing directory.

    Returns:
        The resolved content root

    Raises:
        ConfigurationError: If the directory does not exist
    """
    root = Path(config.content.path)
    if not root.is_dir():
        raise ConfigurationError(f"Content root not found: {config.content.path}")
    return root.resolve()
