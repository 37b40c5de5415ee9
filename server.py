#!/usr/bin/env python3
"""Main entry point for the course server."""

import logging
import sys

import uvicorn

from courseserver.api import create_app
from courseserver.config import load_config
from courseserver.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def main() -> None:
    """Main entry point."""
    # Load configuration
    try:
        config = load_config()
    except (FileNotFoundError, ConfigurationError) as e:
        configure_logging("INFO")
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    configure_logging(config.logging.level)
    logger.info("Starting course server...")

    try:
        app = create_app(config)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    # Assembly runs in the app lifespan; uvicorn aborts startup if it fails
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
