"""Mini README: Tests for the asyncio tick source and the game view lifetime.

Structure:
    * test_tick_loop_stops_deterministically - no tick fires after ``stop`` returns.
    * test_tick_loop_stops_after_callback_failure - a failing tick ends the loop.
    * test_tick_loop_rejects_non_positive_interval - bad intervals are refused.
    * test_game_view_ticks_only_while_open - opening starts ticking, closing stops it.
    * test_game_view_refuses_invalid_tuning - configuration errors block opening.
    * test_slow_ledger_does_not_stall_event_loop - score writes run off the loop thread.
    * test_game_view_reports_dead_tick_source - a failing tick clears ``ticking``.

The event loop is driven with ``asyncio.run`` so no async test plugin is needed.
"""

from __future__ import annotations

import asyncio
import time
from typing import List

import pytest

from budgetjump.finance import GameLedger
from budgetjump.game import ConfigurationError, GameEngine, GameState, GameTuning, TickLoop
from budgetjump.interface import GameView, GameViewClosedError


def test_tick_loop_stops_deterministically() -> None:
    calls: List[int] = []

    async def scenario() -> int:
        loop = TickLoop(lambda: calls.append(1), interval_seconds=0.001)
        loop.start()
        loop.start()
        await asyncio.sleep(0.05)
        assert loop.running
        await loop.stop()
        fired = len(calls)
        await asyncio.sleep(0.02)
        assert not loop.running
        return fired

    fired = asyncio.run(scenario())

    assert fired > 0
    assert len(calls) == fired


def test_tick_loop_stops_after_callback_failure() -> None:
    def broken() -> None:
        raise RuntimeError("corrupted state")

    async def scenario() -> bool:
        loop = TickLoop(broken, interval_seconds=0.001)
        loop.start()
        await asyncio.sleep(0.05)
        still_running = loop.running
        await loop.stop()
        return still_running

    assert asyncio.run(scenario()) is False


def test_tick_loop_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        TickLoop(lambda: None, interval_seconds=0)


def test_game_view_ticks_only_while_open() -> None:
    """Ticks advance the running game until the view is closed."""

    view = GameView(tuning=GameTuning(tick_interval_seconds=0.001), ledger=GameLedger(), seed=4)

    async def scenario() -> None:
        engine = view.open()
        assert view.open() is engine
        engine.start_game()
        await asyncio.sleep(0.05)
        await view.close()
        ticks = engine.snapshot().ticks
        assert ticks > 0
        await asyncio.sleep(0.02)
        assert engine.snapshot().ticks == ticks
        assert engine.state in (GameState.PLAYING, GameState.GAME_OVER)

    asyncio.run(scenario())

    assert not view.is_open
    assert view.tick_loop is None
    with pytest.raises(GameViewClosedError):
        view.engine


def test_game_view_refuses_invalid_tuning() -> None:
    view = GameView(tuning=GameTuning(tick_interval_seconds=0.0))

    async def scenario() -> None:
        view.open()

    with pytest.raises(ConfigurationError):
        asyncio.run(scenario())
    assert not view.is_open


class SlowLedger:
    """Score sink whose write blocks like a slow disk."""

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self.scores: List[int] = []

    def record_game_score(self, final_score: int) -> None:
        time.sleep(self.delay)
        self.scores.append(final_score)


def test_slow_ledger_does_not_stall_event_loop() -> None:
    """A blocking ledger write must not delay ticks or other coroutines."""

    ledger = SlowLedger(delay=0.3)
    view = GameView(tuning=GameTuning(tick_interval_seconds=0.001), ledger=ledger, seed=2)

    async def scenario() -> float:
        clock = asyncio.get_running_loop().time
        engine = view.open()
        engine.start_game()
        worst_stall = 0.0
        deadline = clock() + 5.0
        while not ledger.scores and clock() < deadline:
            before = clock()
            await asyncio.sleep(0.005)
            worst_stall = max(worst_stall, clock() - before - 0.005)
        assert engine.state is GameState.GAME_OVER
        await view.close()
        return worst_stall

    worst_stall = asyncio.run(scenario())

    assert ledger.scores == [0]
    assert worst_stall < 0.1


def test_game_view_reports_dead_tick_source(monkeypatch) -> None:
    def broken_tick(self: GameEngine) -> None:
        raise RuntimeError("corrupted state")

    monkeypatch.setattr(GameEngine, "tick", broken_tick)
    view = GameView(tuning=GameTuning(tick_interval_seconds=0.001), seed=1)

    async def scenario() -> None:
        view.open()
        assert view.ticking
        await asyncio.sleep(0.05)
        assert view.is_open
        assert not view.ticking
        await view.close()

    asyncio.run(scenario())

    assert not view.ticking
