"""
Roster operations: create, list and delete characters.

The free functions are pure list operations. ``Roster`` owns the live list
for a session and pairs every mutation with a save under one lock, so a
shutdown flush always sees the state left by the last finished operation.
"""

from __future__ import annotations

import logging
import threading
from typing import Mapping

from .models import (
    ABILITY_FIELDS,
    CLASSES,
    LIST_FIELDS,
    NUMERIC_FIELDS,
    RACES,
    Character,
    coerce_int,
    parse_int,
)
from .prompts import PromptAborted, Prompter
from .storage import RosterStorage

logger = logging.getLogger("dnd-roster.roster")

# Form order and titles for single-value fields
FORM_FIELDS: list[tuple[str, str]] = [
    ("name", "Name"),
    ("race", "Race"),
    ("character_class", "Class"),
    ("level", "Level"),
    ("background", "Background"),
    ("alignment", "Alignment"),
    ("experience", "Experience Points"),
    ("hit_points", "Hit Points"),
    ("armor_class", "Armor Class"),
    ("initiative", "Initiative"),
    ("speed", "Speed"),
    *[(ability, ability.capitalize()) for ability in ABILITY_FIELDS],
]

SELECT_OPTIONS: dict[str, list[str]] = {
    "race": RACES,
    "character_class": CLASSES,
}

LIST_PROMPTS: dict[str, tuple[str, str]] = {
    "proficiencies": ("Adding Proficiencies:", "Enter a proficiency (or leave blank to finish)"),
    "languages": ("Adding Languages:", "Enter a language (or leave blank to finish)"),
    "equipment": ("Adding Equipment:", "Enter an equipment item (or leave blank to finish)"),
}

CONFIRM_TITLE = "Do you want to add this character?"


def build_character(values: Mapping[str, str | list[str]]) -> Character:
    """Assemble a Character from raw form values.

    Numeric fields are coerced with ``coerce_int``. Text fields are trimmed
    and default to empty strings; missing list fields are empty lists.
    """
    fields: dict[str, object] = {}
    for field, _title in FORM_FIELDS:
        raw = values.get(field, "")
        if field in NUMERIC_FIELDS:
            fields[field] = coerce_int(raw, field)
        else:
            fields[field] = (raw or "").strip()
    for field in LIST_FIELDS:
        fields[field] = list(values.get(field) or [])
    return Character(**fields)


def collect_entries(prompter: Prompter, title: str) -> list[str]:
    """Ask for entries one at a time until a blank one is given."""
    entries: list[str] = []
    while True:
        entry = prompter.text(title).strip()
        if not entry:
            return entries
        entries.append(entry)
        logger.info(f"➕ Added: {entry}")


def create_character(prompter: Prompter) -> tuple[Character, bool]:
    """Run the creation form.

    Returns:
        The new character and True when the player confirms, otherwise a
        blank discarded Character and False. Nothing is appended here.
    """
    values: dict[str, str | list[str]] = {}
    try:
        for field, title in FORM_FIELDS:
            if field in SELECT_OPTIONS:
                options = [(option, option) for option in SELECT_OPTIONS[field]]
                values[field] = prompter.select(title, options)
            else:
                values[field] = prompter.text(title)
    except PromptAborted as e:
        logger.error(f"❌ Error during character creation: {e}")
        return Character(), False

    character = build_character(values)

    try:
        for field in LIST_FIELDS:
            heading, title = LIST_PROMPTS[field]
            logger.info(heading)
            getattr(character, field).extend(collect_entries(prompter, title))
        accepted = prompter.confirm(CONFIRM_TITLE)
    except PromptAborted as e:
        logger.error(f"❌ Error during character creation: {e}")
        return Character(), False

    if not accepted:
        return Character(), False
    return character, True


def parse_position(raw: str) -> int | None:
    """Parse a typed roster position; None when it is not a number."""
    return parse_int(raw)


def delete_character(characters: list[Character], position: int | None) -> list[Character]:
    """Remove the character at a 1-based position.

    Position 0 cancels. Anything outside ``0..len(characters)`` (or None, for
    unparseable input) is rejected. The input list is never modified; a new
    list is returned when a character is removed.
    """
    if position is None or position < 0 or position > len(characters):
        logger.warning("⚠️ Invalid input. No character deleted.")
        return characters

    if position == 0:
        logger.info("Deletion cancelled.")
        return characters

    deleted = characters[position - 1]
    remaining = characters[:position - 1] + characters[position:]
    logger.info(f"🗑️ Character '{deleted.name}' has been deleted.")
    return remaining


def list_characters(characters: list[Character]) -> list[Character]:
    """Return the roster for display. Callers handle the empty case."""
    return list(characters)


class Roster:
    """The session's character list, paired with its snapshot file.

    Every mutation saves the full list before releasing the lock. The list
    reference is swapped in one step, so readers holding the lock never see a
    half-applied change.
    """

    def __init__(self, storage: RosterStorage, characters: list[Character] | None = None) -> None:
        self.storage = storage
        self._characters: list[Character] = list(characters or [])
        self._lock = threading.RLock()

    @classmethod
    def load(cls, storage: RosterStorage) -> Roster:
        """Start a session from whatever the snapshot file holds."""
        return cls(storage, storage.load())

    def __len__(self) -> int:
        with self._lock:
            return len(self._characters)

    @property
    def characters(self) -> list[Character]:
        """A snapshot of the roster in display order."""
        with self._lock:
            return list_characters(self._characters)

    def add(self, character: Character) -> bool:
        """Append a character and save. Returns whether the save succeeded."""
        with self._lock:
            self._characters = [*self._characters, character]
            logger.info(f"➕ Adding character '{character.name}' to the roster.")
            return self.storage.save(self._characters)

    def remove(self, position: int | None) -> Character | None:
        """Delete by 1-based position and save.

        The roster is saved even when nothing was removed.

        Returns:
            The removed character, or None for cancel or invalid input.
        """
        with self._lock:
            before = self._characters
            self._characters = delete_character(before, position)
            self.storage.save(self._characters)
            if self._characters is before:
                return None
            return before[position - 1]

    def flush(self) -> bool:
        """Save the roster as it stands."""
        with self._lock:
            return self.storage.save(self._characters)
