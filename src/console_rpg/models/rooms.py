"""Room model.

Exits are stored as room ids rather than nested rooms, so the graph can hold
cycles and self-loops and still serialise. The occupant index is ordered by
arrival and is only written by the World during relocation.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from console_rpg.models.enums import Direction


class Room(BaseModel):
    """A node in the directed exit graph."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    id: UUID = Field(default_factory=uuid4, frozen=True, description="Unique room ID")
    name: str = Field(min_length=1, description="Display name")
    description: str = Field(default="", description="What the room looks like")

    # Exits (ids of neighbouring rooms)
    north_id: UUID | None = Field(default=None, description="Room reached by going north")
    south_id: UUID | None = Field(default=None, description="Room reached by going south")
    east_id: UUID | None = Field(default=None, description="Room reached by going east")
    west_id: UUID | None = Field(default=None, description="Room reached by going west")

    _occupant_ids: list[UUID] = PrivateAttr(default_factory=list)

    @property
    def occupant_ids(self) -> tuple[UUID, ...]:
        """Ids of the characters in the room, in arrival order."""
        return tuple(self._occupant_ids)

    def exit_id(self, direction: Direction | str) -> UUID | None:
        """Get the id of the room an exit leads to."""
        return getattr(self, f"{Direction(direction).value}_id")

    def set_exit(self, direction: Direction | str, room_id: UUID | None) -> None:
        """Point an exit at another room id, or clear it with None."""
        setattr(self, f"{Direction(direction).value}_id", room_id)

    def has_occupant(self, character_id: UUID) -> bool:
        return character_id in self._occupant_ids

    def _admit(self, character_id: UUID) -> None:
        if character_id not in self._occupant_ids:
            self._occupant_ids.append(character_id)

    def _release(self, character_id: UUID) -> None:
        if character_id in self._occupant_ids:
            self._occupant_ids.remove(character_id)


__all__ = ["Room"]
