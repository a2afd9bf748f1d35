"""Ability variants.

Abilities form a tagged union discriminated by ``ability_type``. Variant
behaviour lives in a single dispatch function
(:func:`console_rpg.engine.abilities.activate`); these models only carry data.
"""

from __future__ import annotations

from typing import Annotated, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from console_rpg.models.enums import AbilityType


class BaseAbility(BaseModel):
    """Fields shared by every ability variant."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    id: UUID = Field(default_factory=uuid4, frozen=True, description="Unique ability ID")
    name: str = Field(min_length=1, description="Display name (e.g. 'Firebolt')")
    description: str = Field(default="", description="Flavour text")
    damage: int = Field(default=0, ge=0, description="Health removed from the target")


class ShoveAbility(BaseAbility):
    """Pushes the target back.

    ``distance`` is reported in the narrative only; rooms have no positional
    model, so it is never checked against range.
    """

    ability_type: Literal[AbilityType.SHOVE] = AbilityType.SHOVE
    distance: int = Field(default=0, ge=0, description="How far the target is pushed, in feet")


class MagicAbility(BaseAbility):
    """A spell that damages the target."""

    ability_type: Literal[AbilityType.MAGIC] = AbilityType.MAGIC


class PhysAbility(BaseAbility):
    """A physical technique that damages the target."""

    ability_type: Literal[AbilityType.PHYS] = AbilityType.PHYS


Ability = Annotated[
    ShoveAbility | MagicAbility | PhysAbility,
    Field(discriminator="ability_type"),
]

ability_adapter: TypeAdapter[ShoveAbility | MagicAbility | PhysAbility] = TypeAdapter(Ability)


__all__ = [
    "BaseAbility",
    "ShoveAbility",
    "MagicAbility",
    "PhysAbility",
    "Ability",
    "ability_adapter",
]
