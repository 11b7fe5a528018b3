"""
Tests for console logging setup.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from dnd_roster.logutils import configure_logging, logger


def test_single_handler_after_repeated_setup() -> None:
    configure_logging("INFO", Console(record=True))
    configure_logging("DEBUG", Console(record=True))

    handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_child_records_reach_console() -> None:
    console = Console(record=True, width=120)
    configure_logging("WARNING", console)

    logging.getLogger("dnd-roster.storage").error("❌ Error saving characters: disk full")
    logging.getLogger("dnd-roster.storage").info("hidden")

    output = console.export_text()
    assert "Error saving characters: disk full" in output
    assert "hidden" not in output
