"""Enumeration types for the console RPG world model.

These enums tag ability variants, character kinds, item slots, exit
directions and the attributes the query engine can filter on.
"""

from __future__ import annotations

from enum import StrEnum


class AbilityType(StrEnum):
    """Ability variant tag.

    The values double as the type names players type when filtering
    characters by ability type.
    """

    SHOVE = "ShoveAbility"
    MAGIC = "MagicAbility"
    PHYS = "PhysAbility"


class CharacterKind(StrEnum):
    """Discriminator for the character variants."""

    PLAYER = "player"
    MONSTER = "monster"


class ItemType(StrEnum):
    """Equipment slot an item fits into."""

    WEAPON = "weapon"
    ARMOR = "armor"


class Direction(StrEnum):
    """Compass directions a room exit can point in."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def opposite(self) -> Direction:
        """Get the direction pointing back the way you came.

        Returns:
            The reverse direction (e.g. SOUTH for NORTH).
        """
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


class FilterAttribute(StrEnum):
    """Attributes characters in a room can be filtered by."""

    NAME = "name"
    MIN_HEALTH = "health"
    MIN_EXPERIENCE = "experience"
    EQUIPMENT_NAME = "equipment_name"
    ABILITY_TYPE = "ability_type"


__all__ = [
    "AbilityType",
    "CharacterKind",
    "ItemType",
    "Direction",
    "FilterAttribute",
]
