"""Ability activation.

One function switches on the ability's variant tag, computes the damage,
applies it to the target and produces the narrative line the console shows.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from console_rpg.core.exceptions import InvalidOperationError
from console_rpg.core.logging import get_logger
from console_rpg.models.abilities import BaseAbility
from console_rpg.models.characters import Character
from console_rpg.models.enums import AbilityType


logger = get_logger(__name__)


class AbilityResult(BaseModel):
    """Outcome of activating an ability against a target."""

    model_config = ConfigDict(frozen=True)

    ability_id: UUID
    ability_type: AbilityType
    user_id: UUID
    target_id: UUID
    damage: int = Field(ge=0)
    remaining_health: int
    narrative: str
    target_name: str

    @property
    def message(self) -> str:
        """Remaining-health line shown after the narrative."""
        return f"{self.target_name} has {self.remaining_health} health remaining."


def ability_damage(ability: BaseAbility) -> int:
    """Damage an ability deals when activated."""
    return ability.damage


def activate(
    ability: BaseAbility,
    user: Character,
    target: Character,
    *,
    clamp_at_zero: bool = False,
) -> AbilityResult:
    """Activate an ability held by ``user`` against ``target``.

    Args:
        ability: The ability to use.
        user: Character using the ability. Must hold it.
        target: Character receiving the damage.
        clamp_at_zero: Floor the target's health at zero.

    Returns:
        AbilityResult with damage dealt and the target's new health.

    Raises:
        InvalidOperationError: If the user does not hold the ability or the
            ability tag is not a known variant. Nothing is mutated.
    """
    if not user.has_ability(ability):
        logger.warning(
            "Ability not held",
            user=user.name,
            ability=ability.name,
        )
        raise InvalidOperationError(
            f"{user.name} does not have the ability {ability.name}!",
            operation="use_ability",
            character_id=user.id,
            details={"ability_id": str(ability.id)},
        )

    ability_type = getattr(ability, "ability_type", None)
    damage = ability_damage(ability)

    if ability_type == AbilityType.MAGIC:
        narrative = f"{user.name} targets {target.name}, dealing {damage} damage!"
    elif ability_type == AbilityType.PHYS:
        narrative = f"{user.name} attacks {target.name}, dealing {damage} damage!"
    elif ability_type == AbilityType.SHOVE:
        narrative = (
            f"{user.name} shoves {target.name} back {ability.distance} feet, "
            f"dealing {damage} damage!"
        )
    else:
        raise InvalidOperationError(
            f"Unknown ability type: {ability_type}",
            operation="use_ability",
            character_id=user.id,
            details={"ability_id": str(ability.id)},
        )

    remaining = target.apply_damage(damage, clamp_at_zero=clamp_at_zero)

    logger.info(
        "Ability activated",
        user=user.name,
        target=target.name,
        ability=ability.name,
        ability_type=str(ability_type),
        damage=damage,
        remaining_health=remaining,
    )

    return AbilityResult(
        ability_id=ability.id,
        ability_type=ability_type,
        user_id=user.id,
        target_id=target.id,
        damage=damage,
        remaining_health=remaining,
        narrative=narrative,
        target_name=target.name,
    )


__all__ = [
    "AbilityResult",
    "ability_damage",
    "activate",
]
