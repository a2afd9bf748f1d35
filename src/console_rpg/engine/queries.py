"""Attribute-filtered character queries.

The room filter takes a :class:`Criterion` (built directly, or parsed from
the attribute/value strings a console prompt produced) and returns the
matching characters in room-scan order. Zero matches is an ordinary empty
list, never an error.

Name policy:
    The room filter compares whole names, casefolded unless
    ``QuerySettings.name_case_sensitive`` is set. The population-wide
    :meth:`QueryEngine.search_characters_by_name` is a case-insensitive
    substring search.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator

from console_rpg.core.config import QuerySettings, get_settings
from console_rpg.core.exceptions import InvalidOperationError, NotFoundError, ValidationError
from console_rpg.core.logging import get_logger
from console_rpg.engine.world import World
from console_rpg.models.characters import Character, Monster, Player
from console_rpg.models.enums import AbilityType, FilterAttribute
from console_rpg.models.rooms import Room


logger = get_logger(__name__)


# =============================================================================
# Criteria
# =============================================================================


class Criterion(BaseModel):
    """One attribute filter.

    Attributes:
        attribute: Which attribute to filter on.
        value: Name for name/equipment filters, threshold for health and
            experience, variant tag for ability type.
    """

    model_config = ConfigDict(frozen=True)

    attribute: FilterAttribute
    value: str | int

    @model_validator(mode="after")
    def validate_value(self) -> Self:
        """Ensure the value fits the attribute.

        Raises:
            ValidationError: If a threshold is not an integer, a name is
                blank, or an ability tag is unknown.
        """
        if self.attribute in (FilterAttribute.MIN_HEALTH, FilterAttribute.MIN_EXPERIENCE):
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise ValidationError(
                    f"{self.attribute.value} threshold must be a whole number",
                    field_name="value",
                    invalid_value=self.value,
                )
        elif not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(
                f"{self.attribute.value} filter needs a non-empty text value",
                field_name="value",
                invalid_value=self.value,
            )
        elif self.attribute == FilterAttribute.ABILITY_TYPE and self.value not in set(AbilityType):
            raise ValidationError(
                f"Unknown ability type: {self.value}",
                field_name="value",
                invalid_value=self.value,
            )
        return self

    @classmethod
    def by_name(cls, name: str) -> Criterion:
        return cls(attribute=FilterAttribute.NAME, value=name)

    @classmethod
    def min_health(cls, threshold: int) -> Criterion:
        return cls(attribute=FilterAttribute.MIN_HEALTH, value=threshold)

    @classmethod
    def min_experience(cls, threshold: int) -> Criterion:
        return cls(attribute=FilterAttribute.MIN_EXPERIENCE, value=threshold)

    @classmethod
    def equipment_name(cls, item_name: str) -> Criterion:
        return cls(attribute=FilterAttribute.EQUIPMENT_NAME, value=item_name)

    @classmethod
    def ability_type(cls, ability_type: AbilityType | str) -> Criterion:
        return cls(attribute=FilterAttribute.ABILITY_TYPE, value=str(ability_type))


_ATTRIBUTE_ALIASES: dict[str, FilterAttribute] = {
    "name": FilterAttribute.NAME,
    "health": FilterAttribute.MIN_HEALTH,
    "min_health": FilterAttribute.MIN_HEALTH,
    "experience": FilterAttribute.MIN_EXPERIENCE,
    "min_experience": FilterAttribute.MIN_EXPERIENCE,
    "equipment": FilterAttribute.EQUIPMENT_NAME,
    "equipment_name": FilterAttribute.EQUIPMENT_NAME,
    "ability": FilterAttribute.ABILITY_TYPE,
    "ability_type": FilterAttribute.ABILITY_TYPE,
}


def _parse_ability_type(value: str) -> AbilityType:
    wanted = value.strip().casefold()
    for ability_type in AbilityType:
        # Accept "MagicAbility", "magic" and "MAGIC" alike
        if wanted in (ability_type.value.casefold(), ability_type.name.casefold()):
            return ability_type
    raise ValidationError(
        f"Unknown ability type: {value}",
        field_name="value",
        invalid_value=value,
    )


def _parse_threshold(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValidationError(
            f"'{value}' is not a whole number",
            field_name="value",
            invalid_value=value,
        ) from exc


def parse_criterion(attribute: str, value: str) -> Criterion:
    """Build a criterion from raw prompt input.

    Args:
        attribute: Attribute name as typed ("Name", "health",
            "Equipment Name", "ability type", ...).
        value: The value typed for it.

    Returns:
        The parsed Criterion.

    Raises:
        InvalidOperationError: If the attribute is not one the engine filters on.
        ValidationError: If the value does not fit the attribute.
    """
    key = "_".join(attribute.strip().lower().replace("-", " ").split())
    filter_attribute = _ATTRIBUTE_ALIASES.get(key)
    if filter_attribute is None:
        raise InvalidOperationError(
            f"Invalid option entered: {attribute}",
            operation="filter_characters_in_room",
            details={"attribute": attribute},
        )

    if filter_attribute in (FilterAttribute.MIN_HEALTH, FilterAttribute.MIN_EXPERIENCE):
        return Criterion(attribute=filter_attribute, value=_parse_threshold(value))
    if filter_attribute == FilterAttribute.ABILITY_TYPE:
        return Criterion(attribute=filter_attribute, value=_parse_ability_type(value).value)
    return Criterion(attribute=filter_attribute, value=value.strip())


# =============================================================================
# Report rows
# =============================================================================


@dataclass(frozen=True)
class RoomOccupancy:
    """A room together with the characters currently in it."""

    room: Room
    characters: list[Player | Monster] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.characters


@dataclass(frozen=True)
class EquipmentLocation:
    """Where an equipped item currently is.

    Attributes:
        item_name: Name of the equipped item.
        character: Character carrying it.
        room: Room the character is in, or None when unlocated.
    """

    item_name: str
    character: Player | Monster
    room: Room | None


# =============================================================================
# Query Engine
# =============================================================================


class QueryEngine:
    """Read-only queries over a World.

    Attributes:
        world: The entity graph to query.
        settings: Query settings (name case policy).
    """

    def __init__(self, world: World, settings: QuerySettings | None = None) -> None:
        self.world = world
        self.settings = settings or get_settings().query
        self._predicates: dict[FilterAttribute, Callable[[Character, str | int], bool]] = {
            FilterAttribute.NAME: self._match_name,
            FilterAttribute.MIN_HEALTH: lambda c, threshold: c.health >= threshold,
            FilterAttribute.MIN_EXPERIENCE: lambda c, threshold: c.experience >= threshold,
            FilterAttribute.EQUIPMENT_NAME: self._match_equipment,
            FilterAttribute.ABILITY_TYPE: lambda c, tag: c.has_ability_type(tag),
        }

    def _match_name(self, character: Character, name: str | int) -> bool:
        if self.settings.name_case_sensitive:
            return character.name == name
        return character.name.casefold() == str(name).casefold()

    def _match_equipment(self, character: Character, item_name: str | int) -> bool:
        if character.equipment is None:
            return False
        return character.equipment.holds(str(item_name), case_sensitive=self.settings.name_case_sensitive)

    def filter_characters_in_room(self, room_id: UUID, criterion: Criterion) -> list[Player | Monster]:
        """Characters in a room matching one attribute criterion.

        Args:
            room_id: Room to scan.
            criterion: The filter to apply.

        Returns:
            Matching characters in room-scan order; empty when none match.

        Raises:
            NotFoundError: If the room does not exist.
            InvalidOperationError: If the criterion is not recognised.
        """
        if not isinstance(criterion, Criterion):
            raise InvalidOperationError(
                f"Unrecognised filter criterion: {criterion!r}",
                operation="filter_characters_in_room",
            )
        predicate = self._predicates[criterion.attribute]

        occupants = self.world.characters_in(room_id)
        matches = [c for c in occupants if predicate(c, criterion.value)]

        logger.info(
            "Characters filtered",
            room_id=str(room_id),
            attribute=criterion.attribute.value,
            value=criterion.value,
            scanned=len(occupants),
            matches=len(matches),
        )
        return matches

    def search_characters_by_name(self, fragment: str) -> list[Player | Monster]:
        """Case-insensitive substring search over every character."""
        wanted = fragment.strip().casefold()
        matches = [c for c in self.world.characters.values() if wanted in c.name.casefold()]
        logger.info("Characters searched by name", fragment=fragment, matches=len(matches))
        return matches

    def list_rooms_with_characters(self) -> list[RoomOccupancy]:
        """Every room with its occupants, empty rooms included."""
        return [
            RoomOccupancy(room=room, characters=self.world.characters_in(room.id))
            for room in self.world.rooms.values()
        ]

    def find_equipment_location(self, item_name: str) -> list[EquipmentLocation]:
        """Find who carries an item and where they are.

        Returns:
            One entry per character with the item equipped; empty when the
            item exists but nobody has it equipped.

        Raises:
            NotFoundError: If no registered item has that name.
        """
        case_sensitive = self.settings.name_case_sensitive

        locations: list[EquipmentLocation] = []
        for character in self.world.characters.values():
            if character.equipment is None or not character.equipment.holds(
                item_name, case_sensitive=case_sensitive
            ):
                continue
            room = self.world.rooms.get(character.room_id) if character.room_id else None
            locations.append(EquipmentLocation(item_name=item_name, character=character, room=room))

        if not locations and not self.world.find_items_by_name(item_name, case_sensitive=case_sensitive):
            raise NotFoundError(f"Item '{item_name}' not found.", entity_type="item", entity_id=item_name)

        logger.info("Equipment located", item=item_name, holders=len(locations))
        return locations


__all__ = [
    "Criterion",
    "parse_criterion",
    "RoomOccupancy",
    "EquipmentLocation",
    "QueryEngine",
]
