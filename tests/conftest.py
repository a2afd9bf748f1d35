"""Pytest configuration and shared fixtures.

This module provides common fixtures for the console RPG test suite: a
small world with one room, a few characters, abilities and equipment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from console_rpg.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "CONSOLE_RPG_DEBUG": "true",
        "CONSOLE_RPG_LOG_LEVEL": "DEBUG",
        "CONSOLE_RPG_COMBAT_UNARMED_DAMAGE": "2",
        "CONSOLE_RPG_QUERY_NAME_CASE_SENSITIVE": "true",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def firebolt() -> Any:
    """A magic ability dealing 8 damage."""
    from console_rpg.models import MagicAbility

    return MagicAbility(name="Firebolt", description="A mote of fire", damage=8)


@pytest.fixture
def shove() -> Any:
    """A shove ability dealing 3 damage and pushing 10 feet."""
    from console_rpg.models import ShoveAbility

    return ShoveAbility(name="Shove", description="Push the target away", damage=3, distance=10)


@pytest.fixture
def power_strike() -> Any:
    """A physical ability dealing 5 damage."""
    from console_rpg.models import PhysAbility

    return PhysAbility(name="Power Strike", damage=5)


@pytest.fixture
def sword() -> Any:
    """A weapon with attack 6."""
    from console_rpg.models import Item, ItemType

    return Item(name="Sword", item_type=ItemType.WEAPON, attack=6, value=15, weight=3.0)


@pytest.fixture
def leather_armor() -> Any:
    """A piece of armor with defense 2."""
    from console_rpg.models import Item, ItemType

    return Item(name="Leather Armor", item_type=ItemType.ARMOR, defense=2, value=10, weight=10.0)


@pytest.fixture
def aria() -> Any:
    """Unarmed player with 10 health."""
    from console_rpg.models import Player

    return Player(name="Aria", health=10, experience=30)


@pytest.fixture
def goblin() -> Any:
    """Monster with 5 health."""
    from console_rpg.models import Monster

    return Monster(name="Goblin", health=5, monster_type="Goblin")


@pytest.fixture
def bram(firebolt: Any) -> Any:
    """Player holding Firebolt but not Shove."""
    from console_rpg.models import Player

    return Player(name="Bram", health=20, experience=120, abilities=[firebolt])


@pytest.fixture
def knight(sword: Any, leather_armor: Any, power_strike: Any) -> Any:
    """Fully equipped player with a physical ability."""
    from console_rpg.models import Equipment, Player

    return Player(
        name="Knight",
        health=60,
        experience=200,
        equipment=Equipment(weapon=sword, armor=leather_armor),
        abilities=[power_strike],
    )


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def world() -> Any:
    """An empty World."""
    from console_rpg.engine import World

    return World()


@pytest.fixture
def room_a(world: Any) -> Any:
    """Room A: registered, no exits."""
    from console_rpg.models import Room

    return world.add_room(Room(name="Room A", description="A bare stone chamber"))


@pytest.fixture
def populated_world(world: Any, room_a: Any, aria: Any, goblin: Any, bram: Any, knight: Any) -> Any:
    """World with Aria, Goblin, Bram and Knight in Room A, in that order."""
    for character in (aria, goblin, bram, knight):
        world.add_character(character, room_id=room_a.id)
    return world


@pytest.fixture
def resolver() -> Any:
    """CombatResolver with default settings."""
    from console_rpg.engine import CombatResolver

    return CombatResolver()


@pytest.fixture
def query_engine(populated_world: Any) -> Any:
    """QueryEngine over the populated world."""
    from console_rpg.engine import QueryEngine

    return QueryEngine(populated_world)
