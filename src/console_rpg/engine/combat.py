"""Combat resolution.

Attacks are deterministic: a character without a weapon hits for the
configured unarmed damage, a character with one hits for the weapon's
attack value.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from console_rpg.core.config import CombatSettings, get_settings
from console_rpg.core.logging import get_logger
from console_rpg.engine.abilities import AbilityResult, activate
from console_rpg.models.abilities import BaseAbility
from console_rpg.models.characters import Character


logger = get_logger(__name__)


class AttackResult(BaseModel):
    """Outcome of a basic attack.

    Attributes:
        attacker_id: Character who attacked.
        target_id: Character who was hit.
        damage: Health removed from the target.
        weapon_name: Weapon used, or None for a bare-handed attack.
        remaining_health: Target health after the attack.
        narrative: Description of the blow.
        target_name: Target display name at the time of the attack.
    """

    model_config = ConfigDict(frozen=True)

    attacker_id: UUID
    target_id: UUID
    damage: int = Field(ge=0)
    weapon_name: str | None = None
    remaining_health: int
    narrative: str
    target_name: str

    @property
    def message(self) -> str:
        """Remaining-health line shown after every attack."""
        return f"{self.target_name} has {self.remaining_health} health remaining."


class CombatResolver:
    """Resolves attacks and ability use between characters.

    Attributes:
        settings: Combat settings (unarmed damage, health floor).
    """

    def __init__(self, settings: CombatSettings | None = None) -> None:
        """Initialize the resolver.

        Args:
            settings: Combat settings; defaults to the application settings.
        """
        self.settings = settings or get_settings().combat

    def attack(self, attacker: Character, target: Character) -> AttackResult:
        """Attack ``target`` with whatever ``attacker`` is wielding.

        Args:
            attacker: Character making the attack.
            target: Character receiving the damage.

        Returns:
            AttackResult including the target's post-attack health.
        """
        weapon_name = attacker.weapon_name
        if weapon_name is None:
            damage = self.settings.unarmed_damage
            narrative = (
                f"{attacker.name} attacks {target.name} with their fist "
                f"dealing {damage} damage!"
            )
        else:
            damage = attacker.equipment.weapon.attack  # type: ignore[union-attr]
            narrative = (
                f"{attacker.name} attacks {target.name} with a {weapon_name} "
                f"dealing {damage} damage!"
            )

        remaining = target.apply_damage(damage, clamp_at_zero=self.settings.clamp_health_at_zero)

        logger.info(
            "Attack resolved",
            attacker=attacker.name,
            target=target.name,
            weapon=weapon_name,
            damage=damage,
            remaining_health=remaining,
        )

        return AttackResult(
            attacker_id=attacker.id,
            target_id=target.id,
            damage=damage,
            weapon_name=weapon_name,
            remaining_health=remaining,
            narrative=narrative,
            target_name=target.name,
        )

    def use_ability(
        self,
        attacker: Character,
        ability: BaseAbility,
        target: Character,
    ) -> AbilityResult:
        """Use one of ``attacker``'s abilities on ``target``.

        Raises:
            InvalidOperationError: If the attacker does not hold the ability.
        """
        return activate(
            ability,
            attacker,
            target,
            clamp_at_zero=self.settings.clamp_health_at_zero,
        )


__all__ = [
    "AttackResult",
    "CombatResolver",
]
