"""herokit: characters, health bars, inventories and rolled weapons."""

from herokit.dice import DiceRoller, get_default_roller
from herokit.engine import Regenerator, RegenConfig, create_builtin, forge_weapon, roster
from herokit.exceptions import (
    AlreadyAliveError,
    ConfigurationError,
    DeadError,
    HerokitError,
    InvalidHealthError,
    InventoryFullError,
    UnderflowError,
)
from herokit.models import (
    BuiltinCharacter,
    Character,
    CharacterClass,
    Inventory,
    ItemRarity,
    ItemType,
    Resistance,
    Stats,
    Vitality,
    Weapon,
    WeaponType,
)

__all__ = [
    "DiceRoller",
    "get_default_roller",
    "Regenerator",
    "RegenConfig",
    "create_builtin",
    "forge_weapon",
    "roster",
    "HerokitError",
    "DeadError",
    "AlreadyAliveError",
    "UnderflowError",
    "InventoryFullError",
    "ConfigurationError",
    "InvalidHealthError",
    "BuiltinCharacter",
    "Character",
    "CharacterClass",
    "Inventory",
    "ItemRarity",
    "ItemType",
    "Resistance",
    "Stats",
    "Vitality",
    "Weapon",
    "WeaponType",
]
