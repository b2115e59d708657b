"""Error types raised by herokit components."""


class HerokitError(Exception):
    """Base class for every herokit error."""


class DeadError(HerokitError):
    """Health was mutated while at zero."""

    def __init__(self, action: str = "change health") -> None:
        super().__init__(f"Cannot {action} when dead.")
        self.action = action


class AlreadyAliveError(HerokitError):
    """Revive was requested for a living health bar."""

    def __init__(self, current: int) -> None:
        super().__init__(f"Character is already alive! (hp: {current})")
        self.current = current


class UnderflowError(HerokitError):
    """Damage larger than the remaining health."""

    def __init__(self, amount: int, current: int) -> None:
        super().__init__(f"Damage {amount} exceeds current health {current}")
        self.amount = amount
        self.current = current


class InventoryFullError(HerokitError):
    """Inventory has no room left."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Inventory is full (capacity {capacity})")
        self.capacity = capacity


class ConfigurationError(HerokitError):
    """Static game tables are missing or empty."""


class InvalidHealthError(HerokitError, ValueError):
    """Health value or amount outside the allowed range."""
