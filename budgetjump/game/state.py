"""Mini README: Data model for a Budget Jump run.

Structure:
    * GameState - lifecycle of the game (ready, playing, paused, game over).
    * PlayerBody - vertical position and velocity of the wallet.
    * ObstacleKind / Obstacle - the expenses the wallet jumps over.
    * RunSession - mutable per-run data owned by the engine.
    * ScoreReport / GameOverSummary - values produced when a run ends.
    * GameSnapshot - read-only copy handed to the presentation layer.

Only the engine mutates ``RunSession`` and ``PlayerBody``. Views receive a
``GameSnapshot`` each frame and never touch the live session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class GameState(str, Enum):
    """Lifecycle states of the mini-game."""

    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class ObstacleKind(str, Enum):
    """Expense obstacles with their fixed icon and colour."""

    CUP = "cup"
    BAG = "bag"
    CONTROLLER = "controller"
    CAR = "car"

    @property
    def icon(self) -> str:
        return _OBSTACLE_APPEARANCE[self][0]

    @property
    def color(self) -> str:
        return _OBSTACLE_APPEARANCE[self][1]


_OBSTACLE_APPEARANCE: Dict[ObstacleKind, Tuple[str, str]] = {
    ObstacleKind.CUP: ("cup.and.saucer.fill", "orange"),
    ObstacleKind.BAG: ("bag.fill", "purple"),
    ObstacleKind.CONTROLLER: ("gamecontroller.fill", "blue"),
    ObstacleKind.CAR: ("car.fill", "red"),
}


@dataclass(slots=True)
class PlayerBody:
    """The wallet's single vertical degree of freedom."""

    vertical_position: float = 0.0
    vertical_velocity: float = 0.0
    is_jumping: bool = False

    def reset(self) -> None:
        self.vertical_position = 0.0
        self.vertical_velocity = 0.0
        self.is_jumping = False


@dataclass(slots=True)
class Obstacle:
    """An expense scrolling towards the player."""

    obstacle_id: str
    horizontal_position: float
    kind: ObstacleKind

    def as_dict(self) -> Dict[str, object]:
        return {
            "obstacle_id": self.obstacle_id,
            "horizontal_position": self.horizontal_position,
            "kind": self.kind.value,
            "icon": self.kind.icon,
            "color": self.kind.color,
        }


@dataclass(slots=True)
class RunSession:
    """Everything that changes while a run is in progress."""

    game_speed: float
    score: int = 0
    obstacles: List[Obstacle] = field(default_factory=list)
    background_offset: float = 0.0
    player: PlayerBody = field(default_factory=PlayerBody)
    ticks: int = 0

    def reset(self, base_speed: float) -> None:
        """Return the session to its pre-run values."""

        self.game_speed = base_speed
        self.score = 0
        self.obstacles.clear()
        self.background_offset = 0.0
        self.player.reset()
        self.ticks = 0


@dataclass(frozen=True, slots=True)
class ScoreReport:
    """Payload sent to the finance ledger when a run ends."""

    final_score: int


@dataclass(frozen=True, slots=True)
class GameOverSummary:
    """Summary shown to the player at game over."""

    score: int

    @property
    def session_badge_estimate(self) -> int:
        """Badges shown for this run only; the ledger keeps its own count."""

        return self.score // 10

    def as_dict(self) -> Dict[str, int]:
        return {"score": self.score, "session_badge_estimate": self.session_badge_estimate}


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Immutable view of the engine for one rendered frame."""

    state: GameState
    score: int
    game_speed: float
    background_offset: float
    vertical_position: float
    vertical_velocity: float
    is_jumping: bool
    obstacles: Tuple[Obstacle, ...]
    ticks: int
    summary: Optional[GameOverSummary] = None

    @property
    def session_badge_estimate(self) -> int:
        return self.score // 10

    def as_dict(self) -> Dict[str, object]:
        """Export the snapshot with JSON-serialisable values."""

        return {
            "state": self.state.value,
            "score": self.score,
            "session_badge_estimate": self.session_badge_estimate,
            "game_speed": self.game_speed,
            "background_offset": self.background_offset,
            "player": {
                "vertical_position": self.vertical_position,
                "vertical_velocity": self.vertical_velocity,
                "is_jumping": self.is_jumping,
            },
            "obstacles": [obstacle.as_dict() for obstacle in self.obstacles],
            "ticks": self.ticks,
            "summary": self.summary.as_dict() if self.summary else None,
        }
