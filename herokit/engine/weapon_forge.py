"""Random weapon generation."""

import logging
from typing import Optional

from herokit.config import WEAPON_ID_MAX
from herokit.dice import DiceRoller, resolve
from herokit.exceptions import ConfigurationError
from herokit.helpers.debug import log_call
from herokit.models.items import STARTER_WEAPON_TYPE, ItemRarity, Weapon, WeaponType

logger = logging.getLogger(__name__.split(".")[-1])


def roll_name(weapon_type: WeaponType, rng: Optional[DiceRoller] = None) -> str:
    """
    Pick a random name for a weapon type.

    Args:
        weapon_type: Type whose name table is used
        rng: Roller, default roller when None

    Returns:
        A name from the type's table

    Raises:
        ConfigurationError: If the type has no names
    """
    names = weapon_type.candidate_names
    if not names:
        raise ConfigurationError(f"No weapon names configured for {weapon_type.display_name}")
    return resolve(rng).choose(names)


def roll_rarity(rng: Optional[DiceRoller] = None) -> ItemRarity:
    """Pick a rarity uniformly."""
    return resolve(rng).choose_member(ItemRarity)


@log_call
def forge_weapon(
    weapon_type: WeaponType = STARTER_WEAPON_TYPE, rng: Optional[DiceRoller] = None
) -> Weapon:
    """
    Roll a new weapon.

    Name, rarity and id are drawn from the same roller, so a seeded roller
    always forges the same weapon.

    Args:
        weapon_type: Type of weapon to forge
        rng: Roller, default roller when None

    Returns:
        New Weapon
    """
    roller = resolve(rng)
    name = roll_name(weapon_type, roller)
    rarity = roll_rarity(roller)
    weapon_id = roller.between(0, WEAPON_ID_MAX)
    weapon = Weapon(weapon_type=weapon_type, rarity=rarity, name=name, weapon_id=weapon_id)
    logger.debug(f"Forged {weapon} ({rarity.value})")
    return weapon
