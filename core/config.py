"""
Server Configuration for the Markdown formatter.

Provides a single source of truth for the settings read from the environment:
logging, MCP transport, credential storage and list styling.
"""

import logging
import os

logger = logging.getLogger(__name__)

APP_NAME = "Docs Markdown Formatter"
DEFAULT_CREDENTIALS_DIR = "~/.config/docs-markdown-formatter/credentials"
DEFAULT_BULLET_PRESET = "BULLET_DISC_CIRCLE_SQUARE"

SUPPORTED_TRANSPORTS = ("stdio", "streamable-http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ServerConfig:
    """
    Centralized configuration management.

    Values are read once from environment variables when the instance is created.
    """

    def __init__(self):
        self.log_level = os.getenv("MDCONVERT_LOG_LEVEL", "INFO").upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"MDCONVERT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'")

        self.transport = os.getenv("MDCONVERT_TRANSPORT", "stdio").lower()
        if self.transport not in SUPPORTED_TRANSPORTS:
            raise ValueError(
                f"MDCONVERT_TRANSPORT must be one of {', '.join(SUPPORTED_TRANSPORTS)}, got '{self.transport}'"
            )

        # HTTP bind settings (only used with streamable-http)
        self.host = os.getenv("MDCONVERT_HOST", "127.0.0.1")
        port = os.getenv("MDCONVERT_PORT", "9876")
        try:
            self.port = int(port)
        except ValueError as e:
            raise ValueError(f"MDCONVERT_PORT must be an integer, got '{port}'") from e

        self.credentials_dir = os.path.expanduser(os.getenv("GOOGLE_MCP_CREDENTIALS_DIR", DEFAULT_CREDENTIALS_DIR))
        self.bullet_preset = os.getenv("MDCONVERT_BULLET_PRESET", DEFAULT_BULLET_PRESET)

    def is_http_transport(self) -> bool:
        """Check whether the server should listen on HTTP instead of stdio."""
        return self.transport == "streamable-http"

    def get_config_summary(self) -> str:
        """
        Get a summary of the current configuration for logging.

        Returns:
            A single-line configuration summary.
        """
        bind = f"{self.host}:{self.port}" if self.is_http_transport() else "-"
        return (
            f"transport={self.transport}, bind={bind}, log_level={self.log_level}, "
            f"credentials_dir={self.credentials_dir}, bullet_preset={self.bullet_preset}"
        )


_config: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig()
        logger.debug(f"Loaded configuration: {_config.get_config_summary()}")
    return _config


def reload_config() -> ServerConfig:
    """Re-read the environment and replace the global configuration (for testing)."""
    global _config
    _config = None
    return get_config()
