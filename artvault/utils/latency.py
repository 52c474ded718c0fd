"""Fixed-delay simulated network acknowledgment."""
import asyncio
import contextlib
from typing import Callable, Optional
from artvault.config import settings
from artvault.utils.log import log, warn


class SimulatedAcknowledgment:
    """
    Defers a terminal UI update behind a fixed delay.

    While pending, the owning control is disabled and further starts are
    refused. Completion always re-enables the control; `cancel()` is the
    dispose hook and skips the terminal callback.
    """

    def __init__(self, on_complete: Callable[[], None], delay: Optional[float] = None, name: str = "ack"):
        """
        Args:
            on_complete: Terminal UI update to run after the delay
            delay: Delay in seconds (defaults to settings.simulated_delay)
            name: Label used in console traces
        """
        self.on_complete = on_complete
        self.delay = settings.simulated_delay if delay is None else delay
        self.name = name
        self._pending = False
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def control_disabled(self) -> bool:
        """The submit control stays disabled while an acknowledgment is pending."""
        return self._pending

    def start(self) -> bool:
        """
        Begin the delayed acknowledgment.

        Without a running event loop the acknowledgment completes immediately.

        Returns:
            False if one is already pending, True otherwise
        """
        if self._pending:
            log("ACK", f"{self.name} already pending; start refused")
            return False

        self._pending = True
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._finish()
            return True

        self._task = loop.create_task(self._run())
        return True

    async def _run(self):
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            # a task replaced by cancel() + start() must not clear the new one
            if self._task is asyncio.current_task():
                self._pending = False
            raise
        self._finish()

    def _finish(self):
        try:
            self.on_complete()
        except Exception as e:
            warn("ACK", f"{self.name} completion failed: {e}")
        finally:
            self._pending = False
            log("ACK", f"{self.name} completed")

    def cancel(self):
        """Dispose of a pending acknowledgment without running its callback."""
        task = self._task
        # a task left behind by a closed loop can no longer be cancelled
        if task is not None and not task.done() and not task.get_loop().is_closed():
            task.cancel()
        self._task = None
        self._pending = False

    async def wait(self):
        """Wait for the pending acknowledgment, if any, to finish."""
        if self._task is None:
            return
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
