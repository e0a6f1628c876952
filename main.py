"""Entry point: configure logging, register tools and run the MCP server."""

import logging
import sys

from core.config import get_config
from core.server import server

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Log to stderr so stdio transport output stays clean."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def main() -> None:
    config = get_config()
    configure_logging(config.log_level)

    # Importing the tool modules registers their tools with the server
    import gdocs  # noqa: F401

    logger.info(f"Starting server: {config.get_config_summary()}")
    if config.is_http_transport():
        server.run(transport="streamable-http", host=config.host, port=config.port)
    else:
        server.run(transport="stdio")


if __name__ == "__main__":
    main()
