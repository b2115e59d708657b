"""Random source shared by health rolls and weapon generation."""

import random
from enum import Enum
from typing import Optional, Sequence, TypeVar

from herokit.config import DEFAULT_RANDOM_SEED

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class DiceRoller:
    """Seedable wrapper around ``random.Random``.

    Every operation that needs randomness accepts an optional roller so tests
    can pass a seeded one; otherwise the process-wide default is used.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize roller.

        Args:
            seed: Seed for the underlying generator, None for OS entropy
        """
        self.seed = seed
        self._random = random.Random(seed)

    def between(self, low: int, high: int) -> int:
        """
        Roll an integer uniformly in the inclusive range [low, high].

        Args:
            low: Lowest possible result
            high: Highest possible result

        Returns:
            The rolled integer
        """
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._random.randint(low, high)

    def choose(self, options: Sequence[T]) -> T:
        """Pick one element uniformly."""
        if not options:
            raise ValueError("Cannot choose from an empty sequence")
        return self._random.choice(options)

    def choose_member(self, enum_type: type[E]) -> E:
        """Pick one member of an enum uniformly."""
        return self.choose(list(enum_type))

    def reseed(self, seed: Optional[int]) -> None:
        """Reset the generator with a new seed."""
        self.seed = seed
        self._random.seed(seed)


_default_roller = DiceRoller(DEFAULT_RANDOM_SEED)


def get_default_roller() -> DiceRoller:
    """Get the process-wide roller."""
    return _default_roller


def resolve(rng: Optional[DiceRoller]) -> DiceRoller:
    """Return ``rng`` or the default roller when it is None."""
    return rng if rng is not None else _default_roller
