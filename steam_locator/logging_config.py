"""Logging configuration for steam-locator.

Logs go to stderr through rich so that command output on stdout stays
clean for scripts.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Args:
        debug: If True, log at DEBUG level instead of WARNING

    Returns:
        The steam_locator logger
    """
    logger = logging.getLogger("steam_locator")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    # Clear any existing handlers
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=debug,
        log_time_format="%H:%M:%S",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)

    return logger
