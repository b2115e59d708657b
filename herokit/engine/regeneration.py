"""Background health regeneration."""

import logging
import threading
import time
from typing import Callable, Optional

from pydantic import BaseModel, Field

from herokit.config import DEFAULT_REGEN_JOIN_TIMEOUT, DEFAULT_REGEN_STEP_DELAY
from herokit.exceptions import DeadError
from herokit.models.vitality import Vitality

logger = logging.getLogger(__name__.split(".")[-1])


class RegenConfig(BaseModel):
    """Regeneration timing configuration."""

    step_delay: float = Field(
        default=DEFAULT_REGEN_STEP_DELAY, ge=0.0, description="Seconds between +1 health steps"
    )
    join_timeout: float = Field(
        default=DEFAULT_REGEN_JOIN_TIMEOUT, gt=0.0, description="Default seconds to wait for a run to finish"
    )


class RegenHandle:
    """A regeneration running on a worker thread."""

    def __init__(self, thread: threading.Thread, cancel_event: threading.Event, join_timeout: float) -> None:
        self._thread = thread
        self._cancel_event = cancel_event
        self._join_timeout = join_timeout
        self.error: Optional[BaseException] = None

    @property
    def done(self) -> bool:
        return not self._thread.is_alive()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def cancel(self) -> None:
        """Stop the loop before its next step."""
        self._cancel_event.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for the run to stop.

        Args:
            timeout: Seconds to wait, config join timeout when None

        Returns:
            True if the run has stopped
        """
        self._thread.join(self._join_timeout if timeout is None else timeout)
        return self.done


class Regenerator:
    """Runs Vitality regeneration synchronously or on a worker thread."""

    def __init__(
        self,
        config: Optional[RegenConfig] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        """
        Initialize regenerator.

        Args:
            config: Timing configuration, defaults when None
            sleep: Delay function, ``time.sleep`` when None
        """
        self._config = config or RegenConfig()
        self._sleep = sleep or time.sleep

    @property
    def config(self) -> RegenConfig:
        """Get current config."""
        return self._config

    def update_config(self, new_config: RegenConfig) -> None:
        """Update configuration for subsequent runs."""
        self._config = new_config

    def run(self, vitality: Vitality) -> int:
        """Regenerate to full health, blocking the caller."""
        return vitality.regenerate_to_full(step_delay=self._config.step_delay, sleep=self._sleep)

    def start(self, vitality: Vitality) -> RegenHandle:
        """
        Regenerate to full health on a daemon thread.

        The caller must not mutate ``vitality`` until the handle is done.

        Args:
            vitality: Health bar to regenerate

        Returns:
            Handle to cancel or wait for the run

        Raises:
            DeadError: If the health bar is dead
        """
        if vitality.is_dead():
            raise DeadError("regenerate")

        cancel_event = threading.Event()
        handle: RegenHandle

        def _worker() -> None:
            try:
                vitality.regenerate_to_full(
                    step_delay=self._config.step_delay, sleep=self._sleep, cancel=cancel_event
                )
            except Exception as e:
                logger.error(f"Regeneration failed: {e}", exc_info=True)
                handle.error = e

        thread = threading.Thread(target=_worker, name="herokit-regen", daemon=True)
        handle = RegenHandle(thread, cancel_event, self._config.join_timeout)
        logger.info(f"Starting background regeneration from {vitality}")
        thread.start()
        return handle
