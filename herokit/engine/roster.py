"""Builtin character roster."""

from typing import Optional

from herokit.dice import DiceRoller
from herokit.helpers.debug import log_call
from herokit.models.character import BuiltinCharacter, Character


@log_call
def create_builtin(builtin: BuiltinCharacter, rng: Optional[DiceRoller] = None) -> Character:
    """
    Create a builtin character at full health with a starter weapon.

    Args:
        builtin: Which builtin to create
        rng: Roller for the starter weapon, default roller when None

    Returns:
        Character tagged with ``builtin``
    """
    base = Character.create_default(builtin.character_class, rng=rng)
    return Character.build(
        base.character_class,
        base.vitality,
        base.inventory,
        base.stats,
        resistance=base.resistance,
        builtin=builtin,
    )


def roster(rng: Optional[DiceRoller] = None) -> dict[BuiltinCharacter, Character]:
    """Create one of every builtin character."""
    return {builtin: create_builtin(builtin, rng=rng) for builtin in BuiltinCharacter}
