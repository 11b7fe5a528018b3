"""
Data models for the character roster.
"""

import logging
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger("dnd-roster.models")


# Options offered by the creation form. The model itself accepts any string.
RACES = ["Human", "Elf", "Dwarf", "Halfling", "Orc"]
CLASSES = ["Fighter", "Wizard", "Rogue", "Cleric", "Monk"]

ABILITY_FIELDS = [
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
]

COMBAT_FIELDS = [
    "experience",
    "hit_points",
    "armor_class",
    "initiative",
    "speed",
]

NUMERIC_FIELDS = ["level", *COMBAT_FIELDS, *ABILITY_FIELDS]

LIST_FIELDS = ["proficiencies", "languages", "equipment"]

# ASCII decimal digits only, no underscores
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str | None) -> int | None:
    """Parse decimal text, ignoring surrounding whitespace; None when malformed."""
    text = (raw or "").strip()
    if not _INT_PATTERN.fullmatch(text):
        return None
    return int(text)


def coerce_int(raw: str | None, field: str) -> int:
    """Parse a numeric form value, falling back to 0.

    Malformed input never blocks character creation; the player is told
    which field was reset instead.
    """
    value = parse_int(raw)
    if value is None:
        logger.warning(f"⚠️ Invalid input for {field}: {raw!r}. Using default value 0.")
        return 0
    return value


class Character(BaseModel):
    """A single character sheet.

    Fields are snake_case in Python and camelCase in the snapshot file. The
    record has no id; its position in the roster is its only identity.
    """
    model_config = ConfigDict(populate_by_name=True)

    # Basic Info
    name: str = ""
    race: str = ""
    character_class: str = Field(default="", alias="class")
    level: int = 0
    background: str = ""

    # Ability Scores
    strength: int = 0
    dexterity: int = 0
    constitution: int = 0
    intelligence: int = 0
    wisdom: int = 0
    charisma: int = 0

    # Additional Info
    alignment: str = ""
    experience: int = 0
    hit_points: int = Field(default=0, alias="hitPoints")
    armor_class: int = Field(default=0, alias="armorClass")
    initiative: int = 0
    speed: int = 0
    proficiencies: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    equipment: list[str] = Field(default_factory=list)

    @field_validator("proficiencies", "languages", "equipment", mode="before")
    @classmethod
    def _null_list_to_empty(cls, value):
        # Older snapshots write empty lists as null.
        return [] if value is None else value

    def to_json_dict(self) -> dict:
        """Serialize with the snapshot file's field names, every field present."""
        return self.model_dump(mode="json", by_alias=True)
