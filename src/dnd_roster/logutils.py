"""
Logging setup for dnd-roster.

Every module logs to a child of the ``dnd-roster`` logger. The entry point
attaches a rich console handler so warnings and errors reach the player.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("dnd-roster")


def configure_logging(level: int | str = logging.INFO, console: Console | None = None) -> RichHandler:
    """Attach a single RichHandler to the package logger.

    Calling this again replaces the handler installed by a previous call.

    Args:
        level: Minimum level shown on the terminal.
        console: Console to render into. Defaults to a stderr console.

    Returns:
        The installed handler.
    """
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler
