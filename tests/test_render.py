"""
Tests for character sheet rendering.
"""

from rich.console import Console

from dnd_roster.models import Character
from dnd_roster.render import show_characters


def rendered(characters: list[Character]) -> str:
    console = Console(record=True, width=120)
    show_characters(console, characters)
    return console.export_text()


def test_empty_roster_notice() -> None:
    assert rendered([]).strip() == "No characters found."


def test_sheet_contents(aria: Character) -> None:
    text = rendered([aria])

    assert "Character 1: Aria" in text
    assert "Wizard" in text
    assert "Neutral Good" in text
    assert "INT  17" in text
    assert "HP   17" in text
    assert "Arcana, History" in text
    assert "Common, Elvish, Draconic" in text
    assert "Quarterstaff, Spellbook" in text


def test_positions_follow_roster_order(aria: Character, borin: Character) -> None:
    text = rendered([borin, aria])

    assert text.index("Character 1: Borin") < text.index("Character 2: Aria")


def test_empty_lists_render(borin: Character) -> None:
    text = rendered([borin])

    assert "Proficiencies:" in text
    assert "Equipment:" in text
