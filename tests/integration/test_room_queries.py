"""Integration tests for room queries driven by prompt-style input."""

from __future__ import annotations

import pytest

from console_rpg.core.exceptions import InvalidOperationError
from console_rpg.engine import QueryEngine, World, parse_criterion
from console_rpg.models import Monster, Player, Room


@pytest.fixture
def crowded_room() -> tuple[World, Room]:
    """A room holding five characters of varying health."""
    world = World()
    room = world.add_room(Room(name="Tavern"))
    for name, health in (("Ann", 70), ("Bob", 20), ("Cat", 50), ("Dan", 49), ("Eve", 90)):
        world.add_character(Player(name=name, health=health), room_id=room.id)
    world.add_character(Monster(name="Ogre", health=80), room_id=room.id)
    return world, room


class TestRoomQueries:
    """Filter a room from raw attribute/value strings."""

    def test_min_health_subset_in_scan_order(self, crowded_room: tuple[World, Room]) -> None:
        world, room = crowded_room

        matches = QueryEngine(world).filter_characters_in_room(room.id, parse_criterion("Health", "50"))

        assert [c.name for c in matches] == ["Ann", "Cat", "Eve", "Ogre"]

    def test_no_matches(self, crowded_room: tuple[World, Room]) -> None:
        world, room = crowded_room
        matches = QueryEngine(world).filter_characters_in_room(room.id, parse_criterion("health", "500"))
        assert matches == []

    def test_name_lookup(self, crowded_room: tuple[World, Room]) -> None:
        world, room = crowded_room
        matches = QueryEngine(world).filter_characters_in_room(room.id, parse_criterion("name", "ogre"))
        assert [c.name for c in matches] == ["Ogre"]

    def test_bad_option(self) -> None:
        with pytest.raises(InvalidOperationError):
            parse_criterion("mana", "10")

    def test_moved_character_leaves_results(self, crowded_room: tuple[World, Room]) -> None:
        world, room = crowded_room
        cellar = world.add_room(Room(name="Cellar"))
        eve = next(c for c in world.characters.values() if c.name == "Eve")
        engine = QueryEngine(world)
        criterion = parse_criterion("health", "50")

        world.relocate(eve.id, cellar.id)

        assert [c.name for c in engine.filter_characters_in_room(room.id, criterion)] == ["Ann", "Cat", "Ogre"]
        assert engine.filter_characters_in_room(cellar.id, criterion) == [eve]

    def test_occupancy_report(self, crowded_room: tuple[World, Room]) -> None:
        world, _ = crowded_room
        rows = QueryEngine(world).list_rooms_with_characters()
        assert [(row.room.name, len(row.characters)) for row in rows] == [("Tavern", 6)]
