"""Game engine module for the console RPG world core.

Submodules:
    abilities: Ability activation (tag-switched damage and narrative)
    combat: Attack and ability-use resolution
    world: Entity registry, room graph and occupant index
    queries: Attribute-filtered character queries and reports

Example:
    >>> from console_rpg.engine import CombatResolver, QueryEngine, World, Criterion
    >>> world = World()
    >>> resolver = CombatResolver()
    >>> result = resolver.attack(aria, goblin)
    >>> QueryEngine(world).filter_characters_in_room(room.id, Criterion.min_health(10))
"""

from __future__ import annotations

# =============================================================================
# Ability Dispatch
# =============================================================================
from console_rpg.engine.abilities import AbilityResult, ability_damage, activate

# =============================================================================
# Combat
# =============================================================================
from console_rpg.engine.combat import AttackResult, CombatResolver

# =============================================================================
# World & Room Graph
# =============================================================================
from console_rpg.engine.world import NO_EXIT, World

# =============================================================================
# Queries
# =============================================================================
from console_rpg.engine.queries import (
    Criterion,
    EquipmentLocation,
    QueryEngine,
    RoomOccupancy,
    parse_criterion,
)


__all__ = [
    # Abilities
    "AbilityResult",
    "ability_damage",
    "activate",
    # Combat
    "AttackResult",
    "CombatResolver",
    # World
    "NO_EXIT",
    "World",
    # Queries
    "Criterion",
    "EquipmentLocation",
    "QueryEngine",
    "RoomOccupancy",
    "parse_criterion",
]
