"""Terminal rendering of character sheets."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Character

TITLE_STYLE = "bold #FAFAFA on #7D56F4"
LABEL_STYLE = "#FAFAFA on #181818"
VALUE_STYLE = "#181818 on #FFFFFF"


def _row(*pairs: tuple[str, str]) -> Text:
    """Label/value blocks laid out on one line."""
    line = Text()
    for label, value in pairs:
        line.append(f" {label} ", style=LABEL_STYLE)
        line.append(f" {value} ", style=VALUE_STYLE)
    return line


def _stat_grid(character: Character) -> Table:
    grid = Table.grid(padding=(0, 1))
    grid.add_row(_row(
        ("STR", f"{character.strength:2d}"),
        ("DEX", f"{character.dexterity:2d}"),
        ("CON", f"{character.constitution:2d}"),
    ))
    grid.add_row(_row(
        ("INT", f"{character.intelligence:2d}"),
        ("WIS", f"{character.wisdom:2d}"),
        ("CHA", f"{character.charisma:2d}"),
    ))
    return grid


def character_card(position: int, character: Character) -> Panel:
    """Build the sheet for one character, titled with its 1-based position."""
    body = Group(
        _row(("Race", character.race), ("Class", character.character_class), ("Level", str(character.level))),
        _row(("Background", character.background), ("Alignment", character.alignment)),
        _stat_grid(character),
        _row(
            ("HP", f"{character.hit_points:3d}"),
            ("Armor Class", f"{character.armor_class:2d}"),
            ("Initiative", f"{character.initiative:2d}"),
            ("Speed", f"{character.speed:2d}"),
        ),
        _row(("Proficiencies:", ", ".join(character.proficiencies))),
        _row(("Languages:", ", ".join(character.languages))),
        _row(("Equipment:", ", ".join(character.equipment))),
    )
    title = Text(f" Character {position}: {character.name} ", style=TITLE_STYLE)
    return Panel(body, title=title, title_align="left", expand=False)


def show_characters(console: Console, characters: list[Character]) -> None:
    """Print every character in roster order, or a notice when there are none."""
    if not characters:
        console.print("No characters found.")
        return

    for position, character in enumerate(characters, start=1):
        console.print(character_card(position, character))
        console.print()
