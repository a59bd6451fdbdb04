"""Mini README: The Budget Jump state machine and fixed-step simulation.

Structure:
    * GameEngine - owns the ``GameState`` and the ``RunSession``, applies
      input events, and advances the world one tick at a time.

States:
    READY     - waiting for the player; a jump starts the game.
    PLAYING   - ticks update physics, scrolling, spawning, and collisions.
    PAUSED    - ticks are ignored; a jump resumes.
    GAME_OVER - the final score has been reported; play again via READY.

Per-tick order while PLAYING: physics, scrolling (with removal and
scoring), spawning, collision, speed ramp. ``tick`` has no wall-clock
dependency, so tests drive the engine with synthetic ticks and a seeded
random source. Input events apply immediately rather than on the next tick.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, FrozenSet, List, Optional, Tuple

from .collision import CollisionDetector
from .exceptions import ConfigurationError, InvalidTransitionError
from .obstacles import ObstacleGenerator, RandomSource
from .physics import PhysicsIntegrator
from .reporter import ScoreReporter
from .scroller import WorldScroller
from .state import GameOverSummary, GameSnapshot, GameState, Obstacle, RunSession, ScoreReport
from .tuning import GameTuning
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

GameOverListener = Callable[[GameOverSummary], None]


class GameEngine:
    """Deterministic simulation object behind the game view."""

    VALID_TRANSITIONS: FrozenSet[Tuple[GameState, GameState]] = frozenset(
        {
            (GameState.READY, GameState.PLAYING),
            (GameState.PLAYING, GameState.PAUSED),
            (GameState.PAUSED, GameState.PLAYING),
            (GameState.PLAYING, GameState.READY),
            (GameState.PAUSED, GameState.READY),
            (GameState.PLAYING, GameState.GAME_OVER),
            (GameState.GAME_OVER, GameState.READY),
        }
    )

    def __init__(
        self,
        tuning: Optional[GameTuning] = None,
        *,
        rng: Optional[RandomSource] = None,
        reporter: Optional[ScoreReporter] = None,
    ) -> None:
        self.tuning = tuning or GameTuning()
        self.physics = PhysicsIntegrator(self.tuning)
        self.scroller = WorldScroller(self.tuning)
        self.generator = ObstacleGenerator(self.tuning, rng)
        self.collisions = CollisionDetector(self.tuning)
        self.reporter = reporter or ScoreReporter()

        self._state = GameState.READY
        self._session = RunSession(game_speed=self.tuning.base_speed)
        self._summary: Optional[GameOverSummary] = None
        self._listeners: List[GameOverListener] = []

        self.configuration_problems = self.tuning.problems()
        if self.configuration_problems:
            LOGGER.error(
                "Game tuning is invalid, the game cannot start: %s",
                "; ".join(self.configuration_problems),
            )

    # ------------------------------------------------------------------ state

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def session(self) -> RunSession:
        return self._session

    @property
    def summary(self) -> Optional[GameOverSummary]:
        """Summary of the last finished run while in GAME_OVER."""

        return self._summary

    def add_game_over_listener(self, listener: GameOverListener) -> None:
        self._listeners.append(listener)

    def _transition(self, target: GameState) -> None:
        if (self._state, target) not in self.VALID_TRANSITIONS:
            raise InvalidTransitionError(
                f"Cannot move from {self._state.value} to {target.value}"
            )
        LOGGER.info("Game state %s -> %s", self._state.value, target.value)
        self._state = target

    def _hard_reset(self) -> None:
        self._session.reset(self.tuning.base_speed)
        self._summary = None

    def snapshot(self) -> GameSnapshot:
        """Copy the current state for the presentation layer."""

        session = self._session
        player = session.player
        return GameSnapshot(
            state=self._state,
            score=session.score,
            game_speed=session.game_speed,
            background_offset=session.background_offset,
            vertical_position=player.vertical_position,
            vertical_velocity=player.vertical_velocity,
            is_jumping=player.is_jumping,
            obstacles=tuple(replace(obstacle) for obstacle in session.obstacles),
            ticks=session.ticks,
            summary=self._summary,
        )

    # ---------------------------------------------------------------- inputs

    def start_game(self) -> GameSnapshot:
        """Begin a fresh run from READY; a no-op in any other state."""

        if self._state is not GameState.READY:
            LOGGER.debug("Ignoring start while %s", self._state.value)
            return self.snapshot()
        if self.configuration_problems:
            raise ConfigurationError(self.configuration_problems)
        self._hard_reset()
        self.generator.spawn(self._session.obstacles)
        self._transition(GameState.PLAYING)
        return self.snapshot()

    def pause_game(self) -> GameSnapshot:
        if self._state is GameState.PLAYING:
            self._transition(GameState.PAUSED)
        return self.snapshot()

    def resume_game(self) -> GameSnapshot:
        if self._state is GameState.PAUSED:
            self._transition(GameState.PLAYING)
        return self.snapshot()

    def stop_game(self) -> GameSnapshot:
        """Abandon the current run without reporting its score."""

        if self._state in (GameState.PLAYING, GameState.PAUSED):
            self._transition(GameState.READY)
            self._hard_reset()
        return self.snapshot()

    def reset_game(self) -> GameSnapshot:
        """Return to READY from any state, discarding the run."""

        if self._state is not GameState.READY:
            self._transition(GameState.READY)
        self._hard_reset()
        return self.snapshot()

    def play_again(self) -> GameSnapshot:
        self.reset_game()
        return self.start_game()

    def jump(self) -> GameSnapshot:
        """Handle a tap: jump while playing, start when ready, resume when paused."""

        if self._state is GameState.PLAYING:
            self.physics.jump(self._session.player)
        elif self._state is GameState.READY:
            return self.start_game()
        elif self._state is GameState.PAUSED:
            return self.resume_game()
        else:
            LOGGER.debug("Ignoring jump after game over")
        return self.snapshot()

    # ------------------------------------------------------------ simulation

    def tick(self) -> GameSnapshot:
        """Advance one fixed step; ignored unless PLAYING."""

        if self._state is not GameState.PLAYING:
            return self.snapshot()

        session = self._session
        self.physics.integrate(session.player)
        self.scroller.scroll(session)
        self.generator.spawn_if_needed(session.obstacles)
        session.ticks += 1

        hit = self.collisions.first_collision(session.player, session.obstacles)
        if hit is not None:
            self._game_over(hit)
            return self.snapshot()

        self.scroller.ramp_speed(session)
        return self.snapshot()

    def advance(self, ticks: int) -> GameSnapshot:
        """Run up to ``ticks`` steps, stopping early once play ends."""

        snapshot = self.snapshot()
        for _ in range(ticks):
            if self._state is not GameState.PLAYING:
                break
            snapshot = self.tick()
        return snapshot

    def _game_over(self, obstacle: Obstacle) -> None:
        self._transition(GameState.GAME_OVER)
        summary = GameOverSummary(score=self._session.score)
        self._summary = summary
        LOGGER.info(
            "Wallet hit %s (%s) after %s ticks; final score %s",
            obstacle.obstacle_id,
            obstacle.kind.value,
            self._session.ticks,
            summary.score,
        )
        self.reporter.report(ScoreReport(final_score=summary.score))
        for listener in list(self._listeners):
            try:
                listener(summary)
            except Exception:  # noqa: BLE001
                LOGGER.exception("Game over listener %r failed", listener)
