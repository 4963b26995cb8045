"""Logging setup for the tools directory service."""

import logging
import sys

logger = logging.getLogger("tools_directory")


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the application.

    Called once at startup from the server lifespan.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
        stream=sys.stdout,
    )
    # Silence noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
