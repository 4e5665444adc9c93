"""Timer-driven auto-play for the Kruskal stepper.

The stepper only exposes the ``auto_playing`` flag; this driver owns the
timing. Each scheduled fire waits the configured delay, advances once, and
re-arms only while the flag is still set. The stepper clears the flag on
reaching completion, which ends the chain.
"""

from collections.abc import Callable
import logging
import time

from kruskal_stepper.algorithm.stepper import KruskalStepper, StepRecord

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 1500


class AutoPlayer:
    """Self-rescheduling driver that calls ``advance()`` at a fixed delay."""

    def __init__(
        self,
        stepper: KruskalStepper,
        delay_ms: int = DEFAULT_DELAY_MS,
        sleep: Callable[[float], None] = time.sleep,
        on_step: Callable[[StepRecord], None] | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            stepper: Engine to drive
            delay_ms: Delay before each scheduled advance, in milliseconds
            sleep: Function used to wait, takes seconds (injected in tests)
            on_step: Callback invoked with each StepRecord after it is applied
        """
        self.stepper = stepper
        self.delay_ms = delay_ms
        self._sleep = sleep
        self._on_step = on_step

    @property
    def armed(self) -> bool:
        return self.stepper.auto_playing

    def toggle(self) -> bool:
        """Arm or disarm future scheduling. Does not advance."""
        return self.stepper.toggle_auto_play()

    def start(self) -> None:
        self.stepper.set_auto_playing(True)

    def pause(self) -> None:
        self.stepper.set_auto_playing(False)

    def tick(self) -> StepRecord | None:
        """Handle one scheduled fire.

        Returns:
            The StepRecord if the driver was armed, None otherwise
        """
        if not self.armed:
            return None
        record = self.stepper.advance()
        if self._on_step is not None:
            self._on_step(record)
        return record

    def play(self, max_steps: int | None = None) -> list[StepRecord]:
        """Run the scheduling chain until the flag is cleared.

        Args:
            max_steps: Optional cap on the number of fires; the flag is
                cleared when the cap is hit

        Returns:
            StepRecords produced by the chain, in order
        """
        records: list[StepRecord] = []
        while self.armed:
            if max_steps is not None and len(records) >= max_steps:
                logger.warning("Auto-play stopped after reaching max_steps=%d", max_steps)
                self.pause()
                break
            self._sleep(self.delay_ms / 1000)
            record = self.tick()
            if record is None:
                # disarmed while waiting
                break
            records.append(record)
        logger.debug("Auto-play chain ended after %d steps", len(records))
        return records
