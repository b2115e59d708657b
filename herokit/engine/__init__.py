"""Game engine package."""

from herokit.engine.regeneration import RegenConfig, RegenHandle, Regenerator
from herokit.engine.roster import create_builtin, roster
from herokit.engine.weapon_forge import forge_weapon, roll_name, roll_rarity

__all__ = [
    "RegenConfig",
    "RegenHandle",
    "Regenerator",
    "create_builtin",
    "roster",
    "forge_weapon",
    "roll_name",
    "roll_rarity",
]
