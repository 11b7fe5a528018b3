"""
Pytest configuration and fixtures for dnd-roster tests.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing dnd_roster
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dnd_roster.models import Character  # noqa: E402
from dnd_roster.storage import RosterStorage  # noqa: E402


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging so caplog sees package records."""
    package_logger = logging.getLogger("dnd-roster")
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Snapshot file location inside a temporary directory."""
    return tmp_path / "characters.json"


@pytest.fixture
def storage(data_file: Path) -> RosterStorage:
    return RosterStorage(data_file)


@pytest.fixture
def aria() -> Character:
    return Character(
        name="Aria",
        race="Elf",
        character_class="Wizard",
        level=3,
        background="Sage",
        alignment="Neutral Good",
        strength=8,
        dexterity=14,
        constitution=12,
        intelligence=17,
        wisdom=13,
        charisma=10,
        experience=900,
        hit_points=17,
        armor_class=12,
        initiative=2,
        speed=30,
        proficiencies=["Arcana", "History"],
        languages=["Common", "Elvish", "Draconic"],
        equipment=["Quarterstaff", "Spellbook"],
    )


@pytest.fixture
def borin() -> Character:
    return Character(
        name="Borin",
        race="Dwarf",
        character_class="Fighter",
        level=2,
        strength=16,
        constitution=15,
        hit_points=22,
        armor_class=18,
        speed=25,
        languages=["Common", "Dwarvish"],
    )
