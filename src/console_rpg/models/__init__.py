"""Pydantic V2 schemas for the console RPG world model.

Submodules:
    enums: Enumeration types (AbilityType, Direction, FilterAttribute, etc.)
    abilities: Ability variants (Shove, Magic, Phys) as a tagged union
    equipment: Items and the weapon/armor bundle
    characters: Player and Monster
    rooms: Rooms and their exits

Example:
    >>> from console_rpg.models import MagicAbility, Player
    >>> firebolt = MagicAbility(name="Firebolt", damage=8)
    >>> bram = Player(name="Bram", health=20, abilities=[firebolt])
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from console_rpg.models.enums import (
    AbilityType,
    CharacterKind,
    Direction,
    FilterAttribute,
    ItemType,
)

# =============================================================================
# Abilities
# =============================================================================
from console_rpg.models.abilities import (
    Ability,
    BaseAbility,
    MagicAbility,
    PhysAbility,
    ShoveAbility,
    ability_adapter,
)

# =============================================================================
# Equipment
# =============================================================================
from console_rpg.models.equipment import Equipment, Item

# =============================================================================
# Characters & Rooms
# =============================================================================
from console_rpg.models.characters import (
    AnyCharacter,
    Character,
    Monster,
    Player,
    character_adapter,
)
from console_rpg.models.rooms import Room


__all__ = [
    # === Enumerations ===
    "AbilityType",
    "CharacterKind",
    "Direction",
    "FilterAttribute",
    "ItemType",
    # === Abilities ===
    "Ability",
    "BaseAbility",
    "ShoveAbility",
    "MagicAbility",
    "PhysAbility",
    "ability_adapter",
    # === Equipment ===
    "Item",
    "Equipment",
    # === Characters ===
    "Character",
    "Player",
    "Monster",
    "AnyCharacter",
    "character_adapter",
    # === Rooms ===
    "Room",
]
