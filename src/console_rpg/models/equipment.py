"""Items and the equipment bundle a character carries."""

from __future__ import annotations

from collections.abc import Iterator
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from console_rpg.core.exceptions import ValidationError
from console_rpg.models.enums import ItemType


class Item(BaseModel):
    """A weapon or piece of armor."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    id: UUID = Field(default_factory=uuid4, frozen=True, description="Unique item ID")
    name: str = Field(min_length=1, description="Display name")
    item_type: ItemType = Field(description="Slot the item fits into")
    attack: int = Field(default=0, ge=0, description="Damage dealt when wielded")
    defense: int = Field(default=0, ge=0, description="Protection when worn")
    value: int = Field(default=0, ge=0, description="Trade value in gold")
    weight: float = Field(default=0.0, ge=0.0, description="Weight in pounds")


class Equipment(BaseModel):
    """A character's equipped weapon and armor.

    Both slots are independently optional. A bundle with no weapon still
    counts as unarmed for combat purposes.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    id: UUID = Field(default_factory=uuid4, frozen=True, description="Unique equipment ID")
    weapon: Item | None = Field(default=None, description="Wielded weapon")
    armor: Item | None = Field(default=None, description="Worn armor")

    @field_validator("weapon")
    @classmethod
    def validate_weapon(cls, weapon: Item | None) -> Item | None:
        """Reject anything but a weapon in the weapon slot.

        Raises:
            ValidationError: If the item is armor. The slot keeps its old item.
        """
        if weapon is not None and weapon.item_type != ItemType.WEAPON:
            raise ValidationError(
                f"{weapon.name} cannot be wielded as a weapon",
                field_name="weapon",
                invalid_value=weapon.item_type.value,
            )
        return weapon

    @field_validator("armor")
    @classmethod
    def validate_armor(cls, armor: Item | None) -> Item | None:
        if armor is not None and armor.item_type != ItemType.ARMOR:
            raise ValidationError(
                f"{armor.name} cannot be worn as armor",
                field_name="armor",
                invalid_value=armor.item_type.value,
            )
        return armor

    def equip(self, item: Item) -> Item | None:
        """Place an item into its slot.

        Args:
            item: Weapon or armor to equip.

        Returns:
            The item previously in that slot, if any.
        """
        if item.item_type == ItemType.WEAPON:
            previous, self.weapon = self.weapon, item
        else:
            previous, self.armor = self.armor, item
        return previous

    def items(self) -> Iterator[Item]:
        """Iterate over the equipped items, weapon first."""
        if self.weapon is not None:
            yield self.weapon
        if self.armor is not None:
            yield self.armor

    def holds(self, item_name: str, *, case_sensitive: bool = False) -> bool:
        """Check whether an item with the given name is equipped."""
        if case_sensitive:
            return any(item.name == item_name for item in self.items())
        wanted = item_name.casefold()
        return any(item.name.casefold() == wanted for item in self.items())


__all__ = [
    "Item",
    "Equipment",
]
