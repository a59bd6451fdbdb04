"""Mini README: Exceptions raised by the Budget Jump simulation.

Structure:
    * GameError - base class for simulation errors.
    * ConfigurationError - tuning constants are malformed; the run cannot start.
    * InvalidTransitionError - a state change outside the transition table.

Ignored inputs (a tick outside Playing, a jump while airborne) are gameplay
rules, not errors, and never raise.
"""

from __future__ import annotations

from typing import Sequence


class GameError(Exception):
    """Base class for Budget Jump simulation errors."""


class ConfigurationError(GameError):
    """Raised when tuning constants make the game unplayable."""

    def __init__(self, problems: Sequence[str]) -> None:
        self.problems = list(problems)
        super().__init__("Invalid game tuning: " + "; ".join(self.problems))


class InvalidTransitionError(GameError):
    """Raised when the engine is asked for a transition it does not allow."""
