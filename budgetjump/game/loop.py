"""Mini README: Periodic tick source for a running game view.

Structure:
    * TickLoop - asyncio task calling a tick callback at a fixed interval.

The loop keeps running while the game is paused or over; the engine simply
ignores those ticks, so resuming needs no re-initialisation. ``stop``
cancels the task and waits for it, so no tick fires after it returns.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class TickLoop:
    """Drive ``tick_fn`` every ``interval_seconds`` on the running event loop."""

    def __init__(self, tick_fn: Callable[[], object], *, interval_seconds: float = 0.016) -> None:
        if interval_seconds <= 0:
            raise ValueError("Tick interval must be positive")
        self._tick_fn = tick_fn
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None
        self.ticks_fired = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the loop on the running event loop; idempotent."""

        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        LOGGER.debug("Tick loop started at %.3fs intervals", self.interval_seconds)

    async def stop(self) -> None:
        """Cancel the loop and wait until it has finished."""

        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception:  # noqa: BLE001
            # Already logged by _run when the tick failed.
            pass
        LOGGER.debug("Tick loop stopped after %s ticks", self.ticks_fired)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self._tick_fn()
            except Exception:
                # Fail fast rather than keep ticking a corrupted simulation.
                LOGGER.exception("Tick callback failed; stopping tick loop")
                raise
            self.ticks_fired += 1
