"""Logging configuration for the application."""

import logging
import sys

from users_gateway.settings import get_settings


def setup_logging() -> None:
    """Configure application-wide logging.

    Level comes from settings.log_level. Output goes to stdout.
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
