"""The in-memory world: entity registry, room graph and occupant index.

The World owns every room, character, ability and item a session works
with. Rooms hold the ordered index of occupant ids and characters hold a
back-reference to their room; :meth:`World.relocate` is the single place
both sides change, and it validates everything before touching either.

Example:
    >>> world = World()
    >>> hall = world.add_room(Room(name="Hall"))
    >>> aria = world.add_character(Player(name="Aria"), room_id=hall.id)
    >>> [c.name for c in world.players_in(hall.id)]
    ['Aria']
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from console_rpg.core.exceptions import InvalidOperationError, NotFoundError
from console_rpg.core.logging import get_logger
from console_rpg.models.abilities import Ability
from console_rpg.models.characters import AnyCharacter, Character, Monster, Player
from console_rpg.models.enums import Direction
from console_rpg.models.equipment import Item
from console_rpg.models.rooms import Room


logger = get_logger(__name__)

NO_EXIT = "no exit"


def _direction(value: Direction | str) -> Direction:
    try:
        return Direction(str(value).strip().lower())
    except ValueError as exc:
        raise InvalidOperationError(
            f"Unknown direction: {value}",
            operation="exit_lookup",
            details={"direction": str(value)},
        ) from exc


class World(BaseModel):
    """The complete entity graph for one session.

    Entities are registered by the persistence layer; the world never
    deletes them.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    rooms: dict[UUID, Room] = Field(default_factory=dict)
    characters: dict[UUID, AnyCharacter] = Field(default_factory=dict)
    abilities: dict[UUID, Ability] = Field(default_factory=dict)
    items: dict[UUID, Item] = Field(default_factory=dict)

    # =========================================================================
    # Registration
    # =========================================================================

    def add_room(self, room: Room) -> Room:
        """Register a room."""
        self._ensure_unregistered(self.rooms, room.id, "room")
        self.rooms[room.id] = room
        return room

    def add_character(self, character: Player | Monster, *, room_id: UUID | None = None) -> Player | Monster:
        """Register a character, optionally placing it in a room.

        Abilities and equipped items the character already carries are
        registered too, so they can be looked up by id and name later.

        Raises:
            NotFoundError: If ``room_id`` is given but unknown. The character
                is not registered in that case.
        """
        self._ensure_unregistered(self.characters, character.id, "character")
        if room_id is not None:
            self.get_room(room_id)

        self.characters[character.id] = character
        for ability in character.abilities:
            self.abilities.setdefault(ability.id, ability)
        if character.equipment is not None:
            for item in character.equipment.items():
                self.items.setdefault(item.id, item)

        if room_id is not None:
            self.relocate(character.id, room_id)
        return character

    def add_ability(self, ability: Ability) -> Ability:
        """Register an ability."""
        self._ensure_unregistered(self.abilities, ability.id, "ability")
        self.abilities[ability.id] = ability
        return ability

    def add_item(self, item: Item) -> Item:
        """Register an item."""
        self._ensure_unregistered(self.items, item.id, "item")
        self.items[item.id] = item
        return item

    @staticmethod
    def _ensure_unregistered(registry: dict[UUID, object], entity_id: UUID, entity_type: str) -> None:
        if entity_id in registry:
            raise InvalidOperationError(
                f"A {entity_type} with id {entity_id} is already registered",
                operation=f"add_{entity_type}",
                details={"entity_id": str(entity_id)},
            )

    # =========================================================================
    # Lookups
    # =========================================================================

    def get_room(self, room_id: UUID) -> Room:
        """Get a room by id.

        Raises:
            NotFoundError: If no such room exists.
        """
        room = self.rooms.get(room_id)
        if room is None:
            raise NotFoundError(f"Room with ID {room_id} not found.", entity_type="room", entity_id=room_id)
        return room

    def get_character(self, character_id: UUID) -> Player | Monster:
        """Get a player or monster by id.

        Raises:
            NotFoundError: If no such character exists.
        """
        character = self.characters.get(character_id)
        if character is None:
            raise NotFoundError(
                f"Character with ID {character_id} not found.",
                entity_type="character",
                entity_id=character_id,
            )
        return character

    def get_player(self, player_id: UUID) -> Player:
        character = self.characters.get(player_id)
        if not isinstance(character, Player):
            raise NotFoundError(f"Player with ID {player_id} not found.", entity_type="player", entity_id=player_id)
        return character

    def get_monster(self, monster_id: UUID) -> Monster:
        character = self.characters.get(monster_id)
        if not isinstance(character, Monster):
            raise NotFoundError(f"Monster with ID {monster_id} not found.", entity_type="monster", entity_id=monster_id)
        return character

    def get_ability(self, ability_id: UUID) -> Ability:
        ability = self.abilities.get(ability_id)
        if ability is None:
            raise NotFoundError(f"Ability with ID {ability_id} not found.", entity_type="ability", entity_id=ability_id)
        return ability

    def get_item(self, item_id: UUID) -> Item:
        item = self.items.get(item_id)
        if item is None:
            raise NotFoundError(f"Item with ID {item_id} not found.", entity_type="item", entity_id=item_id)
        return item

    def find_items_by_name(self, name: str, *, case_sensitive: bool = False) -> list[Item]:
        """Get every registered item carrying the given name."""
        if case_sensitive:
            return [item for item in self.items.values() if item.name == name]
        wanted = name.casefold()
        return [item for item in self.items.values() if item.name.casefold() == wanted]

    @property
    def players(self) -> list[Player]:
        """All registered players, in registration order."""
        return [c for c in self.characters.values() if isinstance(c, Player)]

    @property
    def monsters(self) -> list[Monster]:
        """All registered monsters, in registration order."""
        return [c for c in self.characters.values() if isinstance(c, Monster)]

    # =========================================================================
    # Placement
    # =========================================================================

    def relocate(self, character_id: UUID, room_id: UUID | None) -> Character:
        """Move a character to another room, or out of every room with None.

        Both the old room's occupant index, the new room's occupant index and
        the character's back-reference are updated together.

        Raises:
            NotFoundError: If the character or destination room is unknown.
                Nothing is changed.
        """
        character = self.get_character(character_id)
        destination = self.get_room(room_id) if room_id is not None else None

        previous_id = character.room_id
        if previous_id == room_id:
            return character

        if previous_id is not None and previous_id in self.rooms:
            self.rooms[previous_id]._release(character.id)
        if destination is not None:
            destination._admit(character.id)
        character._set_room(room_id)

        logger.debug(
            "Character relocated",
            character=character.name,
            from_room=str(previous_id) if previous_id else None,
            to_room=str(room_id) if room_id else None,
        )
        return character

    def characters_in(self, room_id: UUID) -> list[Player | Monster]:
        """All characters in a room, in arrival order."""
        room = self.get_room(room_id)
        return [self.characters[cid] for cid in room.occupant_ids if cid in self.characters]

    def players_in(self, room_id: UUID) -> list[Player]:
        return [c for c in self.characters_in(room_id) if isinstance(c, Player)]

    def monsters_in(self, room_id: UUID) -> list[Monster]:
        return [c for c in self.characters_in(room_id) if isinstance(c, Monster)]

    def first_monster_in(self, room_id: UUID) -> Monster | None:
        """The monster that arrived in the room first, if any."""
        monsters = self.monsters_in(room_id)
        return monsters[0] if monsters else None

    # =========================================================================
    # Room graph
    # =========================================================================

    def connect(
        self,
        room_id: UUID,
        direction: Direction | str,
        target_id: UUID,
        *,
        bidirectional: bool = False,
    ) -> None:
        """Point an exit of one room at another.

        Self-loops and cycles are allowed. With ``bidirectional`` the target
        room gets the opposite exit back.

        Raises:
            NotFoundError: If either room is unknown.
        """
        heading = _direction(direction)
        room = self.get_room(room_id)
        target = self.get_room(target_id)

        room.set_exit(heading, target.id)
        if bidirectional:
            target.set_exit(heading.opposite, room.id)

    def disconnect(
        self,
        room_id: UUID,
        direction: Direction | str,
        *,
        bidirectional: bool = False,
    ) -> Room | None:
        """Remove an exit.

        Returns:
            The room the exit used to lead to, if any.
        """
        heading = _direction(direction)
        room = self.get_room(room_id)
        previous = self.exit(room_id, heading)

        room.set_exit(heading, None)
        if bidirectional and previous is not None and previous.exit_id(heading.opposite) == room.id:
            previous.set_exit(heading.opposite, None)
        return previous

    def exit(self, room_id: UUID, direction: Direction | str) -> Room | None:
        """The room an exit leads to, or None when there is no exit."""
        target_id = self.get_room(room_id).exit_id(_direction(direction))
        if target_id is None:
            return None
        return self.rooms.get(target_id)

    def exits(self, room_id: UUID) -> dict[Direction, Room | None]:
        """Every direction mapped to its neighbour (None for no exit)."""
        return {direction: self.exit(room_id, direction) for direction in Direction}

    def describe_exits(self, room_id: UUID) -> dict[Direction, str]:
        """Every direction mapped to its neighbour's name, or "no exit"."""
        return {
            direction: neighbour.name if neighbour is not None else NO_EXIT
            for direction, neighbour in self.exits(room_id).items()
        }

    # =========================================================================
    # Ability grants
    # =========================================================================

    def grant_ability(self, character_id: UUID, ability_id: UUID) -> bool:
        """Give a registered ability to a registered character.

        Returns:
            True if the ability was added, False if it was already held.

        Raises:
            NotFoundError: If the character or ability is unknown.
        """
        character = self.get_character(character_id)
        ability = self.get_ability(ability_id)
        added = character.add_ability(ability)
        if added:
            logger.info("Ability granted", character=character.name, ability=ability.name)
        return added


__all__ = [
    "NO_EXIT",
    "World",
]
