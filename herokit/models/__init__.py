"""Data models module for herokit."""

# Items and Weapons
from herokit.models.items import (
    STARTER_WEAPON_TYPE,
    WEAPON_NAMES,
    ItemRarity,
    ItemType,
    Weapon,
    WeaponType,
)

# Stats
from herokit.models.stats import Resistance, Stats

# Health
from herokit.models.vitality import Vitality

# Inventory
from herokit.models.inventory import Inventory

# Character
from herokit.models.character import BuiltinCharacter, Character, CharacterClass

__all__ = [
    # Items and Weapons
    "ItemType",
    "ItemRarity",
    "WeaponType",
    "Weapon",
    "WEAPON_NAMES",
    "STARTER_WEAPON_TYPE",
    # Stats
    "Stats",
    "Resistance",
    # Health
    "Vitality",
    # Inventory
    "Inventory",
    # Character
    "CharacterClass",
    "BuiltinCharacter",
    "Character",
]
