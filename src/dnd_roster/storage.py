"""
Storage layer for the character roster.
Handles persistence of the whole roster to a single JSON snapshot file.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .models import Character

logger = logging.getLogger("dnd-roster.storage")

DEFAULT_DATA_FILE = "characters.json"

_roster_adapter = TypeAdapter(list[Character])


class StorageError(Exception):
    """Raised when the snapshot file cannot be read, parsed or written."""
    pass


class RosterStorage:
    """Loads and saves the full character roster.

    Every save rewrites the entire file. There is no temp file and no backup,
    so a failed write can leave the snapshot truncated until the next save.
    """

    def __init__(self, data_file: str | Path = DEFAULT_DATA_FILE):
        self.data_file = Path(data_file)
        logger.debug(f"📂 Initializing RosterStorage with data_file: {self.data_file}")

    def load(self) -> list[Character]:
        """Read the roster from disk.

        A missing file is an empty roster. A file that cannot be parsed is
        reported and also treated as empty; it stays on disk untouched until
        the next save overwrites it.
        """
        logger.debug(f"📂 Attempting to load characters from {self.data_file}...")
        if not self.data_file.exists():
            logger.debug("❌ Snapshot file does not exist. Starting with an empty roster.")
            return []

        try:
            characters = self._read()
        except StorageError as e:
            logger.error(f"❌ Error loading characters: {e}")
            return []

        logger.info(f"✅ Successfully loaded {len(characters)} characters.")
        return characters

    def save(self, characters: list[Character]) -> bool:
        """Overwrite the snapshot file with the full roster.

        Returns:
            True if the file was written, False if the failure was reported
            instead. The caller's in-memory roster is never rolled back.
        """
        logger.debug(f"💾 Saving {len(characters)} characters to {self.data_file}...")
        try:
            self._write(characters)
        except StorageError as e:
            logger.error(f"❌ Error saving characters: {e}")
            return False

        logger.debug("✅ Characters saved successfully.")
        return True

    def _read(self) -> list[Character]:
        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if data is None:
                return []
            # Strict: "5", 5.0 and true are not integers in the snapshot format.
            return _roster_adapter.validate_python(data, strict=True)
        except (OSError, ValueError, ValidationError) as e:
            raise StorageError(str(e)) from e

    def _write(self, characters: list[Character]) -> None:
        try:
            payload = json.dumps(
                [character.to_json_dict() for character in characters],
                indent=2,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as e:
            raise StorageError(f"could not serialize roster: {e}") from e

        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.data_file, 'w', encoding='utf-8') as f:
                f.write(payload)
        except OSError as e:
            raise StorageError(f"could not write {self.data_file}: {e}") from e
