"""Mini README: Delivery of final scores to the finance ledger.

Structure:
    * ScoreSink - protocol implemented by the ledger (``record_game_score``).
    * ScoreReporter - fire-and-forget, best-effort reporting of ``ScoreReport``.

The engine calls ``report`` while transitioning to game over. Delivery runs
through an injectable scheduler so an event-loop host can defer the ledger
write until the current tick has finished. Ledger failures are logged and
swallowed; the game-over summary is shown regardless.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from .state import ScoreReport
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Job = Callable[[], None]
Scheduler = Callable[[Job], object]


class ScoreSink(Protocol):
    """Collaborator that persists game results."""

    def record_game_score(self, final_score: int) -> object:
        ...


def _run_inline(job: Job) -> None:
    job()


class ScoreReporter:
    """Forward final scores to a ``ScoreSink`` without ever raising."""

    def __init__(self, sink: Optional[ScoreSink] = None, scheduler: Optional[Scheduler] = None) -> None:
        self.sink = sink
        self.scheduler: Scheduler = scheduler or _run_inline
        self.reports_sent = 0

    def report(self, report: ScoreReport) -> None:
        """Schedule delivery of ``report``; failures never reach the caller."""

        if self.sink is None:
            LOGGER.info("No ledger attached; final score %s not recorded", report.final_score)
            return
        try:
            self.scheduler(lambda: self._deliver(report))
        except Exception:  # noqa: BLE001
            LOGGER.exception("Could not schedule score report %s", report)

    def _deliver(self, report: ScoreReport) -> None:
        try:
            self.sink.record_game_score(report.final_score)
        except Exception:  # noqa: BLE001
            LOGGER.exception("Ledger failed to record final score %s", report.final_score)
            return
        self.reports_sent += 1
        LOGGER.info("Recorded final score %s in the ledger", report.final_score)
