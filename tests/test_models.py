"""
Unit tests for the Character model and numeric coercion.
"""

import logging

import pytest

from dnd_roster.models import (
    CLASSES,
    LIST_FIELDS,
    NUMERIC_FIELDS,
    RACES,
    Character,
    coerce_int,
)


class TestCharacterDefaults:
    """Every field has a value even when nothing was entered."""

    def test_blank_character(self) -> None:
        character = Character()

        assert character.name == ""
        assert character.race == ""
        assert character.character_class == ""
        assert character.background == ""
        assert character.alignment == ""
        for field in NUMERIC_FIELDS:
            assert getattr(character, field) == 0
        for field in LIST_FIELDS:
            assert getattr(character, field) == []

    def test_list_defaults_are_not_shared(self) -> None:
        first = Character()
        second = Character()
        first.languages.append("Common")

        assert second.languages == []

    def test_ability_scores_have_no_range(self) -> None:
        character = Character(strength=-4, dexterity=0, charisma=10_000)

        assert character.strength == -4
        assert character.dexterity == 0
        assert character.charisma == 10_000


class TestSerialization:
    """The snapshot file uses camelCase field names."""

    def test_json_keys(self, aria: Character) -> None:
        data = aria.to_json_dict()

        assert list(data) == [
            "name", "race", "class", "level", "background",
            "strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma",
            "alignment", "experience", "hitPoints", "armorClass", "initiative", "speed",
            "proficiencies", "languages", "equipment",
        ]
        assert data["class"] == "Wizard"
        assert data["hitPoints"] == 17
        assert data["armorClass"] == 12

    def test_empty_lists_are_serialized(self) -> None:
        data = Character(name="Nobody").to_json_dict()

        assert data["proficiencies"] == []
        assert data["languages"] == []
        assert data["equipment"] == []

    def test_accepts_aliases_and_field_names(self) -> None:
        by_alias = Character.model_validate({"class": "Rogue", "hitPoints": 9, "armorClass": 14})
        by_name = Character(character_class="Rogue", hit_points=9, armor_class=14)

        assert by_alias == by_name

    def test_null_lists_load_as_empty(self) -> None:
        character = Character.model_validate({"name": "Old", "proficiencies": None, "languages": None, "equipment": None})

        assert character.proficiencies == []
        assert character.languages == []
        assert character.equipment == []

    def test_missing_fields_use_defaults(self) -> None:
        character = Character.model_validate({"name": "Partial"})

        assert character.level == 0
        assert character.alignment == ""


class TestCoerceInt:
    """Malformed numbers become 0 with a notice."""

    @pytest.mark.parametrize("raw, expected", [
        ("12", 12),
        (" 7 ", 7),
        ("+4", 4),
        ("-3", -3),
        ("0", 0),
    ])
    def test_valid_numbers(self, raw: str, expected: int) -> None:
        assert coerce_int(raw, "level") == expected

    @pytest.mark.parametrize("raw", ["", "abc", "3.5", "ten", None, "1_000", "\u0663", "\uff15", "1e3"])
    def test_invalid_numbers_become_zero(self, raw, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert coerce_int(raw, "strength") == 0

        assert "Invalid input for strength" in caplog.text


class TestOptions:
    def test_races_and_classes(self) -> None:
        assert RACES == ["Human", "Elf", "Dwarf", "Halfling", "Orc"]
        assert CLASSES == ["Fighter", "Wizard", "Rogue", "Cleric", "Monk"]

    def test_model_accepts_unlisted_race(self) -> None:
        assert Character(race="Tiefling").race == "Tiefling"
