"""
dnd-roster
A small terminal tool for keeping a roster of D&D characters in a JSON file.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from .config import Settings, load_settings
from .logutils import configure_logging
from .prompts import ConsolePrompter, PromptAborted, Prompter
from .render import show_characters
from .roster import Roster, create_character, parse_position
from .shutdown import ShutdownHandler, TerminationRequested
from .storage import RosterStorage

logger = logging.getLogger("dnd-roster")

MENU_TITLE = "What would you like to do?"
MENU_OPTIONS = [
    ("Create a new character", "create"),
    ("View all characters", "view"),
    ("Delete a character", "delete"),
    ("Exit", "exit"),
]
DELETE_TITLE = "Enter the number of the character to delete (or 0 to cancel)"


def create_action(roster: Roster, prompter: Prompter, console: Console) -> None:
    character, created = create_character(prompter)
    if created:
        roster.add(character)
        console.print("Character added successfully!")
    else:
        console.print("Character creation cancelled.")


def view_action(roster: Roster, prompter: Prompter, console: Console) -> None:
    show_characters(console, roster.characters)


def delete_action(roster: Roster, prompter: Prompter, console: Console) -> None:
    characters = roster.characters
    if not characters:
        console.print("No characters to delete.")
        roster.flush()
        return

    show_characters(console, characters)
    try:
        position = parse_position(prompter.text(DELETE_TITLE))
    except PromptAborted as e:
        logger.debug(f"Delete input closed: {e}")
        position = None
    roster.remove(position)


ACTIONS = {
    "create": create_action,
    "view": view_action,
    "delete": delete_action,
}


def run(roster: Roster, prompter: Prompter, console: Console) -> int:
    """Run the menu loop until the player exits.

    Returns:
        Process exit status.
    """
    while True:
        try:
            action = prompter.select(MENU_TITLE, MENU_OPTIONS)
        except PromptAborted as e:
            logger.debug(f"Menu input closed: {e}")
            action = "exit"

        if action == "exit":
            console.print("Saving characters and exiting. Goodbye!")
            roster.flush()
            return 0

        ACTIONS[action](roster, prompter, console)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="dnd-roster",
        description="Create, view and delete D&D characters stored in a JSON file",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help="Snapshot file to load and save (default: $DND_ROSTER_DATA_FILE or characters.json)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum level of notices to show (default: $DND_ROSTER_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def start(settings: Settings, prompter: Prompter | None = None, console: Console | None = None) -> int:
    """Load the roster, install the interrupt handler and run the loop."""
    console = console or Console()
    prompter = prompter or ConsolePrompter(console)

    roster = Roster.load(RosterStorage(settings.data_file))
    handler = ShutdownHandler(roster, console)
    try:
        handler.install()
        return run(roster, prompter, console)
    except TerminationRequested:
        return handler.terminate()
    finally:
        try:
            handler.uninstall()
        except TerminationRequested:
            # Signal landed after the loop ended but before handlers were restored.
            handler.terminate()
            handler.uninstall()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for dnd-roster."""
    args = parse_args(argv)
    settings = load_settings(data_file=args.data_file, log_level=args.log_level)
    console = Console()
    configure_logging(settings.log_level, console)
    logger.debug(f"📂 Data file: {settings.data_file}")
    sys.exit(start(settings, console=console))


if __name__ == "__main__":
    main()
