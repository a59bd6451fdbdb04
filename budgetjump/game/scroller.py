"""Mini README: Horizontal world scrolling and scoring.

Structure:
    * WorldScroller - moves the background and obstacles left at the current
      speed, removes obstacles that have passed the player, and ramps speed.

Scoring is per obstacle passed, not per tick. Translation is uniform, so the
obstacle list keeps its spawn order, which is also ascending position order.
"""

from __future__ import annotations

from .state import RunSession
from .tuning import GameTuning
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class WorldScroller:
    """Translate the world and collect obstacles that left the field."""

    def __init__(self, tuning: GameTuning) -> None:
        self.tuning = tuning

    def scroll(self, session: RunSession) -> int:
        """Move everything left by ``game_speed``; return obstacles passed."""

        speed = session.game_speed
        session.background_offset -= speed
        if session.background_offset <= self.tuning.background_wrap:
            session.background_offset = 0.0

        for obstacle in session.obstacles:
            obstacle.horizontal_position -= speed

        threshold = self.tuning.removal_threshold
        remaining = [o for o in session.obstacles if o.horizontal_position >= threshold]
        passed = len(session.obstacles) - len(remaining)
        if passed:
            session.obstacles[:] = remaining
            session.score += passed
            LOGGER.debug("Passed %s obstacle(s); score is now %s", passed, session.score)
        return passed

    def ramp_speed(self, session: RunSession) -> None:
        # No upper bound on speed.
        session.game_speed += self.tuning.speed_increment
