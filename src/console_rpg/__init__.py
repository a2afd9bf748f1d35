"""Console RPG - world model, combat and query core.

Characters (players and monsters) live in rooms joined by compass exits,
carry optional equipment and hold abilities. This package resolves attacks
and ability use, keeps room placement consistent, and answers attribute
queries; menus, persistence and rendering are left to the caller.

Example:
    >>> from console_rpg import CombatResolver, Monster, Player, Room, World
    >>>
    >>> world = World()
    >>> cellar = world.add_room(Room(name="Cellar"))
    >>> aria = world.add_character(Player(name="Aria", health=10), room_id=cellar.id)
    >>> goblin = world.add_character(Monster(name="Goblin", health=5), room_id=cellar.id)
    >>>
    >>> result = CombatResolver().attack(aria, goblin)
    >>> result.remaining_health
    4

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 entity schemas.
    engine: Ability dispatch, combat, world graph and queries.
"""

from __future__ import annotations

# Core
from console_rpg.core.config import Settings, get_settings
from console_rpg.core.exceptions import (
    ConsoleRpgError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)
from console_rpg.core.logging import configure_logging, get_logger

# Models
from console_rpg.models import (
    AbilityType,
    Direction,
    Equipment,
    FilterAttribute,
    Item,
    ItemType,
    MagicAbility,
    Monster,
    PhysAbility,
    Player,
    Room,
    ShoveAbility,
)

# Engine
from console_rpg.engine import (
    AbilityResult,
    AttackResult,
    CombatResolver,
    Criterion,
    QueryEngine,
    World,
    activate,
    parse_criterion,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "ConsoleRpgError",
    "NotFoundError",
    "InvalidOperationError",
    "ValidationError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "AbilityType",
    "Direction",
    "FilterAttribute",
    "ItemType",
    "Item",
    "Equipment",
    "ShoveAbility",
    "MagicAbility",
    "PhysAbility",
    "Player",
    "Monster",
    "Room",
    # Engine
    "AbilityResult",
    "AttackResult",
    "CombatResolver",
    "Criterion",
    "QueryEngine",
    "World",
    "activate",
    "parse_criterion",
]
