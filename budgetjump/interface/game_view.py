"""Mini README: Lifetime owner of a running game.

Structure:
    * GameViewClosedError - raised when a command arrives with no open view.
    * GameView - builds the engine and tick loop on open, stops ticking on close.

Opening the view starts the periodic tick source; closing it cancels the
source deterministically, whatever state the game is in. Score reports run
in a worker thread via ``asyncio.to_thread`` so a slow ledger write never
holds up the event loop that drives ticks and requests. ``close`` waits for
reports still in flight.
"""

from __future__ import annotations

import asyncio
import random
from typing import Callable, Optional, Set

from ..game import ConfigurationError, GameEngine, GameTuning, ScoreReporter, ScoreSink, TickLoop
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class GameViewClosedError(RuntimeError):
    """Raised when the game view is used before ``open`` or after ``close``."""


class GameView:
    """Tie one engine and its tick loop to the lifetime of a view."""

    def __init__(
        self,
        *,
        tuning: GameTuning,
        ledger: Optional[ScoreSink] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.tuning = tuning
        self.ledger = ledger
        self.seed = seed
        self._engine: Optional[GameEngine] = None
        self._loop: Optional[TickLoop] = None
        self._event_loop: Optional[asyncio.AbstractEventLoop] = None
        self._deliveries: Set[asyncio.Task] = set()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def ticking(self) -> bool:
        """Whether the tick source is alive; False once a tick has failed."""

        return self._loop is not None and self._loop.running

    @property
    def engine(self) -> GameEngine:
        if self._engine is None:
            raise GameViewClosedError("The game view is not open")
        return self._engine

    @property
    def tick_loop(self) -> Optional[TickLoop]:
        return self._loop

    def open(self) -> GameEngine:
        """Create the engine and start ticking; reuse an already open view."""

        if self._engine is not None:
            return self._engine
        problems = self.tuning.problems()
        if problems:
            raise ConfigurationError(problems)

        self._event_loop = asyncio.get_running_loop()
        reporter = ScoreReporter(self.ledger, scheduler=self._deliver_in_thread)
        engine = GameEngine(self.tuning, rng=random.Random(self.seed), reporter=reporter)
        tick_loop = TickLoop(engine.tick, interval_seconds=self.tuning.tick_interval_seconds)
        tick_loop.start()
        self._engine, self._loop = engine, tick_loop
        LOGGER.info("Game view opened")
        return engine

    async def close(self) -> None:
        """Stop ticking and drop the engine; safe to call when already closed."""

        tick_loop, self._loop = self._loop, None
        self._engine = None
        if tick_loop is not None:
            await tick_loop.stop()
            LOGGER.info("Game view closed")
        await self.flush_reports()

    async def flush_reports(self) -> None:
        """Wait until every score report handed to a worker thread has finished."""

        if self._deliveries:
            await asyncio.gather(*list(self._deliveries), return_exceptions=True)

    def _deliver_in_thread(self, job: Callable[[], None]) -> asyncio.Task:
        event_loop = self._event_loop or asyncio.get_running_loop()
        task = event_loop.create_task(asyncio.to_thread(job))
        self._deliveries.add(task)
        task.add_done_callback(self._delivery_finished)
        return task

    def _delivery_finished(self, task: asyncio.Task) -> None:
        self._deliveries.discard(task)
        if task.cancelled():
            LOGGER.warning("Score delivery cancelled before it reached the ledger")
            return
        error = task.exception()
        if error is not None:
            LOGGER.error("Score delivery thread failed", exc_info=error)
