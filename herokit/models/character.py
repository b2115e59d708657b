"""Character model."""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from herokit.dice import DiceRoller
from herokit.models.inventory import Inventory
from herokit.models.items import STARTER_WEAPON_TYPE, Weapon
from herokit.models.stats import Resistance, Stats
from herokit.models.vitality import Vitality

logger = logging.getLogger(__name__.split(".")[-1])


class CharacterClass(str, Enum):
    """Core character classes."""

    WARRIOR = "warrior"
    WARLOCK = "warlock"
    VAMPIRE = "vampire"
    ASSASSIN = "assassin"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class BuiltinCharacter(str, Enum):
    """Named characters that ship with the game."""

    TYR = "tyr"
    YEMOJA = "yemoja"
    VAMP = "vamp"
    SUSANOO = "susanoo"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def character_class(self) -> CharacterClass:
        return BUILTIN_CLASSES[self]

    @property
    def description(self) -> str:
        """Small lore text about the character's background."""
        return BUILTIN_LORE[self]


BUILTIN_CLASSES: dict[BuiltinCharacter, CharacterClass] = {
    BuiltinCharacter.TYR: CharacterClass.WARRIOR,
    BuiltinCharacter.YEMOJA: CharacterClass.WARLOCK,
    BuiltinCharacter.VAMP: CharacterClass.VAMPIRE,
    BuiltinCharacter.SUSANOO: CharacterClass.ASSASSIN,
}

BUILTIN_LORE: dict[BuiltinCharacter, str] = {
    BuiltinCharacter.TYR: (
        "The most glittering of gods, Tyr, who, like the Vanir, is gifted with "
        "the gift of foresight, and topped off with a stylish headdress."
    ),
    BuiltinCharacter.YEMOJA: (
        "Mother of origins, guardian of passages, generator of new life in "
        "flood waters, birth waters and baptism."
    ),
    BuiltinCharacter.VAMP: (
        "Lie in wait inside the walls to hunt the strays. "
        "Disorient your foes' senses before taking their life."
    ),
    BuiltinCharacter.SUSANOO: (
        "I will create a worldly paradise in this land. A place of peace and "
        "prosperity. An ideal country for those who live in suffering."
    ),
}


class Character(BaseModel):
    """A playable character.

    Owns its own Vitality and Inventory; stats are inert data.
    """

    model_config = ConfigDict(validate_assignment=True)

    character_class: CharacterClass = Field(default=CharacterClass.WARRIOR, description="Character class")
    vitality: Vitality = Field(default_factory=Vitality, description="Health bar")
    inventory: Inventory = Field(default_factory=Inventory, description="Weapon inventory")
    stats: Stats = Field(default_factory=Stats, description="Stat block")
    resistance: Resistance = Field(default_factory=Resistance, description="Damage resistances")
    builtin: Optional[BuiltinCharacter] = Field(default=None, description="Builtin character this was built from")

    @classmethod
    def create_default(
        cls, character_class: CharacterClass, rng: Optional[DiceRoller] = None
    ) -> "Character":
        """
        Create a fresh character at full health with one starter weapon.

        Args:
            character_class: Class of the new character
            rng: Roller for the starter weapon, default roller when None

        Returns:
            New Character
        """
        inventory = Inventory.create()
        inventory.add_weapon(Weapon.create(STARTER_WEAPON_TYPE, rng=rng))
        # TODO: per-class starting stats, e.g. more movement speed for Vampire and attack speed for Assassin
        character = cls.build(character_class, Vitality.create(), inventory, Stats())
        logger.debug(f"Created {character} with {inventory.list_weapons()[0]}")
        return character

    @classmethod
    def build(
        cls,
        character_class: CharacterClass,
        vitality: Vitality,
        inventory: Inventory,
        stats: Stats,
        resistance: Optional[Resistance] = None,
        builtin: Optional[BuiltinCharacter] = None,
    ) -> "Character":
        """Aggregate already built components into a character."""
        return cls(
            character_class=character_class,
            vitality=vitality,
            inventory=inventory,
            stats=stats,
            resistance=resistance or Resistance(),
            builtin=builtin,
        )

    @property
    def is_builtin(self) -> bool:
        return self.builtin is not None

    @property
    def name(self) -> str:
        if self.builtin is not None:
            return self.builtin.display_name
        return self.character_class.display_name

    def __str__(self) -> str:
        return f"{self.name}(class: {self.character_class.display_name}, health: {self.vitality.current})"
