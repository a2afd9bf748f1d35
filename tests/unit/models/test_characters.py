"""Tests for character models."""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from console_rpg.core.exceptions import InvalidOperationError, ValidationError
from console_rpg.models import (
    AbilityType,
    CharacterKind,
    Equipment,
    Item,
    MagicAbility,
    Monster,
    Player,
    character_adapter,
)


class TestCharacterCreation:
    """Tests for building players and monsters."""

    def test_player_defaults(self) -> None:
        player = Player(name="Aria")

        assert isinstance(player.id, UUID)
        assert player.kind == CharacterKind.PLAYER
        assert player.health == 10
        assert player.experience == 0
        assert player.equipment is None
        assert player.abilities == []
        assert player.room_id is None

    def test_monster_kind(self, goblin: Monster) -> None:
        assert goblin.kind == CharacterKind.MONSTER
        assert goblin.monster_type == "Goblin"

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            Player(name="")

    def test_negative_experience_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            Player(name="Aria", experience=-5)

    def test_negative_health_allowed(self) -> None:
        """Health below zero is a valid defeated state."""
        player = Player(name="Aria", health=-3)
        assert player.is_defeated is True

    def test_id_is_immutable(self, aria: Player) -> None:
        with pytest.raises(PydanticValidationError):
            aria.id = uuid4()

    def test_discriminated_deserialisation(self) -> None:
        """The kind tag picks the right class when loading raw data."""
        monster = character_adapter.validate_python(
            {"kind": "monster", "name": "Orc", "health": 12, "monster_type": "Orc"}
        )
        player = character_adapter.validate_python({"kind": "player", "name": "Aria"})

        assert isinstance(monster, Monster)
        assert isinstance(player, Player)


class TestCharacterMutators:
    """Tests for health, experience and name mutators."""

    def test_adjust_health(self, aria: Player) -> None:
        assert aria.adjust_health(-4) == 6
        assert aria.adjust_health(2) == 8
        assert aria.health == 8

    def test_apply_damage_goes_negative(self, goblin: Monster) -> None:
        assert goblin.apply_damage(8) == -3
        assert goblin.is_defeated is True

    def test_apply_damage_clamped(self, goblin: Monster) -> None:
        assert goblin.apply_damage(8, clamp_at_zero=True) == 0

    def test_negative_damage_rejected(self, goblin: Monster) -> None:
        with pytest.raises(ValidationError):
            goblin.apply_damage(-1)
        assert goblin.health == 5

    def test_add_experience(self, aria: Player) -> None:
        assert aria.add_experience(20) == 50
        assert aria.add_experience(-50) == 0

    def test_experience_below_zero_rejected(self, aria: Player) -> None:
        with pytest.raises(InvalidOperationError):
            aria.add_experience(-31)
        assert aria.experience == 30

    def test_rename(self, aria: Player) -> None:
        aria.rename("  Aria the Bold ")
        assert aria.name == "Aria the Bold"

    def test_rename_blank_rejected(self, aria: Player) -> None:
        with pytest.raises(ValidationError):
            aria.rename("   ")
        assert aria.name == "Aria"


class TestAbilitySet:
    """Tests for ability set membership."""

    def test_add_ability(self, aria: Player, firebolt: MagicAbility) -> None:
        assert aria.add_ability(firebolt) is True
        assert aria.has_ability(firebolt)
        assert aria.has_ability(firebolt.id)

    def test_add_ability_idempotent(self, bram: Player, firebolt: MagicAbility) -> None:
        """Adding an ability already held leaves the set size unchanged."""
        before = len(bram.abilities)

        assert bram.add_ability(firebolt) is False
        assert len(bram.abilities) == before

    def test_membership_by_id(self, bram: Player, firebolt: MagicAbility) -> None:
        """A copy with the same id counts as the same ability."""
        copy = firebolt.model_copy(update={"description": "changed"})
        assert bram.has_ability(copy)
        assert bram.add_ability(copy) is False

    def test_same_name_different_id_is_distinct(self, bram: Player) -> None:
        other = MagicAbility(name="Firebolt", damage=8)
        assert not bram.has_ability(other)
        assert bram.add_ability(other) is True
        assert len(bram.abilities) == 2

    def test_duplicates_dropped_on_construction(self, firebolt: MagicAbility) -> None:
        other = MagicAbility(name="Ice Shard", damage=4)

        bram = Player(name="Bram", abilities=[firebolt, other, firebolt])

        assert [ability.id for ability in bram.abilities] == [firebolt.id, other.id]

    def test_duplicates_dropped_on_assignment(self, bram: Player, firebolt: MagicAbility) -> None:
        copy = firebolt.model_copy(update={"description": "changed"})

        bram.abilities = [firebolt, copy, firebolt]

        assert len(bram.abilities) == 1
        assert bram.abilities[0].description == firebolt.description

    def test_duplicates_dropped_when_loading(self, firebolt: MagicAbility) -> None:
        data = {"kind": "player", "name": "Bram", "abilities": [firebolt.model_dump()] * 2}

        bram = character_adapter.validate_python(data)

        assert len(bram.abilities) == 1

    def test_remove_ability(self, bram: Player, firebolt: MagicAbility) -> None:
        assert bram.remove_ability(firebolt.id) is True
        assert bram.remove_ability(firebolt.id) is False
        assert bram.abilities == []

    def test_has_ability_type(self, bram: Player) -> None:
        assert bram.has_ability_type(AbilityType.MAGIC)
        assert bram.has_ability_type("MagicAbility")
        assert not bram.has_ability_type(AbilityType.SHOVE)


class TestDisplay:
    """Tests for display helpers."""

    def test_weapon_name_unarmed(self, aria: Player) -> None:
        assert aria.weapon_name is None

    def test_weapon_name_armor_only(self, leather_armor: Item) -> None:
        player = Player(name="Tank", equipment=Equipment(armor=leather_armor))
        assert player.weapon_name is None

    def test_weapon_name(self, knight: Player) -> None:
        assert knight.weapon_name == "Sword"

    def test_summary(self, knight: Player, goblin: Monster) -> None:
        assert knight.summary() == "Knight - Health: 60, Experience: 200, Weapon: Sword"
        goblin.apply_damage(5)
        assert goblin.summary().endswith("[DEFEATED]")
