"""Health bar model."""

import functools
import logging
import threading
import time
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from herokit.config import DEFAULT_REGEN_STEP_DELAY, MAX_HEALTH
from herokit.dice import DiceRoller, resolve
from herokit.exceptions import AlreadyAliveError, DeadError, InvalidHealthError, UnderflowError

logger = logging.getLogger(__name__.split(".")[-1])


@functools.total_ordering
class Vitality(BaseModel):
    """Health bar for anything that can live.

    Two states: alive while ``current > 0`` and dead at ``current == 0``.
    Damage can kill, heals are rejected while dead and ``revive`` is the only
    way back.
    """

    model_config = ConfigDict(validate_assignment=True)

    current: int = Field(default=MAX_HEALTH, ge=0, le=MAX_HEALTH, description="Current health points")

    @classmethod
    def create(cls, start: Optional[int] = None) -> "Vitality":
        """
        Create a health bar.

        Args:
            start: Starting health, full health when None

        Returns:
            New Vitality

        Raises:
            InvalidHealthError: If start is outside [0, MAX_HEALTH]
        """
        if start is None:
            return cls()
        if not 0 <= start <= MAX_HEALTH:
            raise InvalidHealthError(f"Starting health must be between 0 and {MAX_HEALTH}, got {start}")
        return cls(current=start)

    def is_dead(self) -> bool:
        """Whether this health bar is at zero."""
        return self.current == 0

    def is_full(self) -> bool:
        """Whether this health bar is at max health."""
        return self.current >= MAX_HEALTH

    def damage(self, amount: int) -> int:
        """
        Drip this health.

        Args:
            amount: Points to remove

        Returns:
            Health after the damage

        Raises:
            InvalidHealthError: If amount is negative
            UnderflowError: If amount is larger than the current health
        """
        if amount < 0:
            raise InvalidHealthError(f"Damage must not be negative, got {amount}")
        if amount > self.current:
            logger.warning(f"Rejected damage {amount} on {self}")
            raise UnderflowError(amount, self.current)
        if amount == 0:
            return self.current

        self.current -= amount
        if self.is_dead():
            logger.info("Health dropped to zero")
        return self.current

    def damage_random(self, rng: Optional[DiceRoller] = None) -> int:
        """Drip a random amount in [0, current // 2]."""
        amount = resolve(rng).between(0, self.current // 2)
        logger.debug(f"Rolled damage {amount} against {self}")
        return self.damage(amount)

    def heal(self, amount: int) -> int:
        """
        Increment this health, clamped to MAX_HEALTH.

        Args:
            amount: Points to add

        Returns:
            Health after healing

        Raises:
            DeadError: If dead
            InvalidHealthError: If amount is negative
        """
        if self.is_dead():
            raise DeadError("heal")
        if amount < 0:
            raise InvalidHealthError(f"Heal must not be negative, got {amount}")

        self.current = min(self.current + amount, MAX_HEALTH)
        return self.current

    def heal_random(self, rng: Optional[DiceRoller] = None) -> int:
        """Heal a random amount in [1, max(1, current // 2)]."""
        if self.is_dead():
            raise DeadError("heal")
        amount = resolve(rng).between(1, max(1, self.current // 2))
        logger.debug(f"Rolled heal {amount} for {self}")
        return self.heal(amount)

    def kill(self) -> None:
        """Set health to zero."""
        if not self.is_dead():
            logger.info(f"Killing {self}")
        self.current = 0

    def revive(self) -> None:
        """
        Bring a dead health bar back to MAX_HEALTH.

        Raises:
            AlreadyAliveError: If not dead
        """
        if not self.is_dead():
            raise AlreadyAliveError(self.current)
        self.current = MAX_HEALTH
        logger.info("Revived to full health")

    def regenerate_to_full(
        self,
        step_delay: Optional[float] = None,
        sleep: Optional[Callable[[float], None]] = None,
        cancel: Optional[threading.Event] = None,
    ) -> int:
        """
        Block while adding 1 health per step until full.

        Args:
            step_delay: Seconds to wait before every step, config default when None
            sleep: Delay function, ``time.sleep`` when None
            cancel: Stops the loop before the next step once set

        Returns:
            Health when the loop stopped

        Raises:
            DeadError: If dead, or killed while regenerating
        """
        if self.is_dead():
            raise DeadError("regenerate")

        delay = DEFAULT_REGEN_STEP_DELAY if step_delay is None else step_delay
        sleep = sleep or time.sleep

        start = self.current
        while not self.is_full():
            if cancel is not None and cancel.is_set():
                logger.info(f"Regeneration cancelled at {self.current} (started at {start})")
                return self.current
            sleep(delay)
            # Only revive() may leave the dead state
            if self.is_dead():
                logger.info(f"Killed while regenerating (started at {start})")
                raise DeadError("regenerate")
            self.current += 1

        logger.info(f"Regenerated from {start} to {self.current}")
        return self.current

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vitality):
            return NotImplemented
        return self.current < other.current

    def __str__(self) -> str:
        return f"Health(hp: {self.current})"
