"""Weapon inventory model."""

import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator

from herokit.config import INVENTORY_CAPACITY
from herokit.exceptions import InventoryFullError
from herokit.models.items import Weapon

logger = logging.getLogger(__name__.split(".")[-1])


class Inventory(BaseModel):
    """Append-only weapon storage with a fixed capacity."""

    model_config = ConfigDict(validate_assignment=True)

    weapons: tuple[Weapon, ...] = Field(default=(), description="Owned weapons in insertion order")
    capacity: int = Field(default=INVENTORY_CAPACITY, ge=0, frozen=True, description="Maximum number of weapons")

    @model_validator(mode="after")
    def check_capacity(self) -> "Inventory":
        """Reject inventories built with more weapons than they can hold."""
        if len(self.weapons) > self.capacity:
            raise ValueError(f"{len(self.weapons)} weapons exceed capacity {self.capacity}")
        return self

    @classmethod
    def create(cls) -> "Inventory":
        """Create an empty inventory."""
        return cls()

    def is_full(self) -> bool:
        return len(self.weapons) >= self.capacity

    def is_empty(self) -> bool:
        return not self.weapons

    def add_weapon(self, weapon: Weapon) -> None:
        """
        Append a weapon to the inventory.

        Args:
            weapon: Weapon to store

        Raises:
            InventoryFullError: If the inventory is at capacity
        """
        if self.is_full():
            logger.warning(f"Inventory full ({self.capacity}), rejecting {weapon}")
            raise InventoryFullError(self.capacity)
        self.weapons = (*self.weapons, weapon)

    def list_weapons(self) -> tuple[Weapon, ...]:
        """Stored weapons in insertion order."""
        return self.weapons

    def __len__(self) -> int:
        return len(self.weapons)
