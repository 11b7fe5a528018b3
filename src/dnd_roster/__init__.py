"""
dnd-roster - create, view and delete D&D characters kept in a local JSON file.
"""

from .models import Character, CLASSES, RACES
from .roster import Roster, create_character, delete_character, list_characters
from .storage import RosterStorage

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("dnd-roster")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "Character",
    "CLASSES",
    "RACES",
    "Roster",
    "RosterStorage",
    "create_character",
    "delete_character",
    "list_characters",
]
