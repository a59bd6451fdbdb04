"""Mini README: The Budget Jump simulation.

The package is split by responsibility: ``physics`` for vertical motion,
``obstacles`` for spawning, ``scroller`` for horizontal movement and
scoring, ``collision`` for hitboxes, ``reporter`` for ledger delivery, and
``engine`` for the state machine tying them together. ``loop`` provides the
asyncio tick source used by interactive hosts.
"""

from .engine import GameEngine
from .exceptions import ConfigurationError, GameError, InvalidTransitionError
from .loop import TickLoop
from .reporter import ScoreReporter, ScoreSink
from .state import (
    GameOverSummary,
    GameSnapshot,
    GameState,
    Obstacle,
    ObstacleKind,
    PlayerBody,
    RunSession,
    ScoreReport,
)
from .tuning import GameTuning

__all__ = [
    "ConfigurationError",
    "GameEngine",
    "GameError",
    "GameOverSummary",
    "GameSnapshot",
    "GameState",
    "GameTuning",
    "InvalidTransitionError",
    "Obstacle",
    "ObstacleKind",
    "PlayerBody",
    "RunSession",
    "ScoreReport",
    "ScoreReporter",
    "ScoreSink",
    "TickLoop",
]
