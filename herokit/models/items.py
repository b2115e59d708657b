"""Item and weapon models."""

from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from herokit.config import WEAPON_ID_MAX

if TYPE_CHECKING:
    from herokit.dice import DiceRoller


class ItemType(str, Enum):
    """Broad item categories."""

    WEAPON = "weapon"
    CONTAINER = "container"
    CONSUMABLE = "consumable"
    ARMOR = "armor"


class ItemRarity(str, Enum):
    """Item rarity tiers."""

    RARE = "rare"
    LEGENDARY = "legendary"
    EXOTIC = "exotic"


class WeaponType(str, Enum):
    """Core weapon types."""

    MACE = "mace"
    BOW = "bow"
    ROD = "rod"
    CLAW = "claw"
    DAGGERS = "daggers"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return WEAPON_DESCRIPTIONS[self]

    @property
    def candidate_names(self) -> tuple[str, ...]:
        """Names a randomly dropped weapon of this type can roll."""
        return WEAPON_NAMES.get(self, ())


# Starter weapon every new character receives
STARTER_WEAPON_TYPE = WeaponType.BOW

WEAPON_DESCRIPTIONS: dict[WeaponType, str] = {
    WeaponType.BOW: (
        "A standard primary bow that all players start with. "
        "Hits with this weapon deal bonus true damage and have a chance to freeze."
    ),
    WeaponType.MACE: (
        "A one handed heavy weapon that requires strength. "
        "Hits with this weapon have a chance to burn the enemy."
    ),
    WeaponType.CLAW: "A powerful lethal weapon that bleeds enemies every 3 successful hits.",
    WeaponType.ROD: "A high velocity, ranged, magical weapon that can stun enemies on hit.",
    WeaponType.DAGGERS: "Slash through enemies quickly. Rapid kills have a chance to poison enemies.",
}

# Tables must stay disjoint so a name identifies its type
WEAPON_NAMES: dict[WeaponType, tuple[str, ...]] = {
    WeaponType.MACE: ("Threaded Needle", "Jotunn's Vigor", "Hydras"),
    WeaponType.BOW: ("Scream", "Sorrowbane", "Death's Whisper"),
    WeaponType.ROD: ("Underlight Angler", "Bancrofts", "Arondight", "Hope"),
    WeaponType.CLAW: ("Thunderlord", "Thorns", "Divine Ruin"),
    WeaponType.DAGGERS: ("Katana", "Wind Demon", "Serrated Edge", "Soul Eater"),
}


class Weapon(BaseModel):
    """A rolled weapon."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    weapon_type: WeaponType = Field(default=STARTER_WEAPON_TYPE, description="Weapon type")
    rarity: ItemRarity = Field(description="Rolled rarity")
    name: str = Field(description="Rolled name from the weapon type's table")
    weapon_id: int = Field(ge=0, le=WEAPON_ID_MAX, description="Random weapon identifier")

    @model_validator(mode="after")
    def check_name_matches_type(self) -> "Weapon":
        """Reject names that do not belong to the weapon type's table."""
        if self.name not in self.weapon_type.candidate_names:
            raise ValueError(
                f"{self.name!r} is not a known {self.weapon_type.display_name} name"
            )
        return self

    @computed_field
    @property
    def item_type(self) -> ItemType:
        return ItemType.WEAPON

    @property
    def description(self) -> str:
        return self.weapon_type.description

    @classmethod
    def create(
        cls,
        weapon_type: WeaponType = STARTER_WEAPON_TYPE,
        rng: Optional["DiceRoller"] = None,
    ) -> "Weapon":
        """Roll a new weapon of the given type."""
        from herokit.engine.weapon_forge import forge_weapon

        return forge_weapon(weapon_type, rng=rng)

    def __str__(self) -> str:
        return f"Weapon(name: {self.name}, id: {self.weapon_id}, type: {self.weapon_type.display_name})"
