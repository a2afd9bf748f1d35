"""Character models: players and monsters.

A character has health, experience, an optional equipment bundle, a set of
abilities and an optional room placement. Placement is read-only here; the
:class:`~console_rpg.engine.world.World` is the only writer, so the room's
occupant index and the character's back-reference never drift apart.
"""

from __future__ import annotations

from typing import Annotated, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter, computed_field, field_validator

from console_rpg.core.exceptions import InvalidOperationError, ValidationError
from console_rpg.models.abilities import Ability, BaseAbility
from console_rpg.models.enums import AbilityType, CharacterKind
from console_rpg.models.equipment import Equipment


class Character(BaseModel):
    """Base model for anything that has health and can act in combat."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",  # Ignore computed fields when deserializing
    )

    # Identity
    id: UUID = Field(default_factory=uuid4, frozen=True, description="Unique character ID")
    name: str = Field(min_length=1, description="Display name")

    # Vitals
    health: int = Field(default=10, description="Current health, <= 0 means defeated")
    experience: int = Field(default=0, ge=0, description="Experience points")

    # Loadout
    equipment: Equipment | None = Field(default=None, description="Equipped weapon/armor")
    abilities: list[Ability] = Field(default_factory=list, description="Abilities held")

    _room_id: UUID | None = PrivateAttr(default=None)

    @field_validator("abilities")
    @classmethod
    def drop_duplicate_abilities(cls, abilities: list[Ability]) -> list[Ability]:
        """Keep the first occurrence of each ability id."""
        seen: set[UUID] = set()
        unique: list[Ability] = []
        for ability in abilities:
            if ability.id not in seen:
                seen.add(ability.id)
                unique.append(ability)
        return unique

    @property
    def room_id(self) -> UUID | None:
        """Room the character is standing in, or None when unlocated."""
        return self._room_id

    @computed_field(description="Whether health has dropped to zero or below")
    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def rename(self, name: str) -> None:
        """Change the display name.

        Raises:
            ValidationError: If the new name is blank.
        """
        if not name or not name.strip():
            raise ValidationError("Character name cannot be blank", field_name="name")
        self.name = name.strip()

    def adjust_health(self, delta: int) -> int:
        """Add ``delta`` to health (negative for damage) and return the new value."""
        self.health = self.health + delta
        return self.health

    def apply_damage(self, amount: int, *, clamp_at_zero: bool = False) -> int:
        """Remove health.

        Args:
            amount: Damage to apply, must not be negative.
            clamp_at_zero: Floor the result at zero instead of letting it go negative.

        Returns:
            Health after the damage.

        Raises:
            ValidationError: If ``amount`` is negative.
        """
        if amount < 0:
            raise ValidationError(
                "Damage cannot be negative",
                field_name="amount",
                invalid_value=amount,
            )
        new_health = self.health - amount
        if clamp_at_zero:
            new_health = max(new_health, 0)
        self.health = new_health
        return self.health

    def add_experience(self, amount: int) -> int:
        """Add (or with a negative amount, remove) experience.

        Returns:
            Experience after the change.

        Raises:
            InvalidOperationError: If the result would be negative.
        """
        new_total = self.experience + amount
        if new_total < 0:
            raise InvalidOperationError(
                f"{self.name} only has {self.experience} experience",
                operation="add_experience",
                character_id=self.id,
                details={"amount": amount},
            )
        self.experience = new_total
        return self.experience

    # -------------------------------------------------------------------------
    # Ability set
    # -------------------------------------------------------------------------

    def has_ability(self, ability: BaseAbility | UUID) -> bool:
        """Check membership in the ability set by ability id."""
        ability_id = ability if isinstance(ability, UUID) else ability.id
        return any(held.id == ability_id for held in self.abilities)

    def add_ability(self, ability: BaseAbility) -> bool:
        """Add an ability; adding one already held is a no-op.

        Returns:
            True if the ability was added, False if it was already held.
        """
        if self.has_ability(ability):
            return False
        self.abilities.append(ability)
        return True

    def remove_ability(self, ability: BaseAbility | UUID) -> bool:
        """Drop an ability from the set.

        Returns:
            True if an ability was removed.
        """
        ability_id = ability if isinstance(ability, UUID) else ability.id
        for index, held in enumerate(self.abilities):
            if held.id == ability_id:
                del self.abilities[index]
                return True
        return False

    def has_ability_type(self, ability_type: AbilityType | str) -> bool:
        """Check whether any held ability carries the given variant tag."""
        return any(held.ability_type == ability_type for held in self.abilities)

    # -------------------------------------------------------------------------
    # Display helpers
    # -------------------------------------------------------------------------

    @property
    def weapon_name(self) -> str | None:
        """Name of the wielded weapon, or None when fighting bare-handed."""
        if self.equipment is None or self.equipment.weapon is None:
            return None
        return self.equipment.weapon.name

    def summary(self) -> str:
        """One-line status for listings."""
        status = " [DEFEATED]" if self.is_defeated else ""
        weapon = f", Weapon: {self.weapon_name}" if self.weapon_name else ""
        return f"{self.name} - Health: {self.health}, Experience: {self.experience}{weapon}{status}"

    def _set_room(self, room_id: UUID | None) -> None:
        # Only World.relocate calls this, alongside the room index update.
        self._room_id = room_id


class Player(Character):
    """A player-controlled character."""

    kind: Literal[CharacterKind.PLAYER] = CharacterKind.PLAYER


class Monster(Character):
    """A hostile creature."""

    kind: Literal[CharacterKind.MONSTER] = CharacterKind.MONSTER
    monster_type: str = Field(default="Monster", description="Creature category (e.g. 'Goblin')")


AnyCharacter = Annotated[Player | Monster, Field(discriminator="kind")]

character_adapter: TypeAdapter[Player | Monster] = TypeAdapter(AnyCharacter)


__all__ = [
    "Character",
    "Player",
    "Monster",
    "AnyCharacter",
    "character_adapter",
]
