"""Mini README: Vertical physics for the wallet.

Structure:
    * PhysicsIntegrator - applies gravity each tick and the jump impulse on input.

Ground sits at ``0`` and airborne positions are negative, so gravity is a
positive acceleration pulling the wallet back towards the ground.
"""

from __future__ import annotations

from .state import PlayerBody
from .tuning import GameTuning
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class PhysicsIntegrator:
    """Integrate the wallet's vertical motion one tick at a time."""

    def __init__(self, tuning: GameTuning) -> None:
        self.tuning = tuning

    def integrate(self, body: PlayerBody) -> None:
        """Advance one tick: accelerate, move, then clamp to the ground."""

        body.vertical_velocity += self.tuning.gravity
        body.vertical_position += body.vertical_velocity
        if body.vertical_position >= 0:
            if body.is_jumping:
                LOGGER.debug("Wallet landed")
            body.vertical_position = 0.0
            body.vertical_velocity = 0.0
            body.is_jumping = False

    def can_jump(self, body: PlayerBody) -> bool:
        return body.vertical_position >= -self.tuning.ground_tolerance

    def jump(self, body: PlayerBody) -> bool:
        """Apply the jump impulse when grounded; return whether it took effect."""

        if not self.can_jump(body):
            LOGGER.debug("Ignoring jump while airborne at %.2f", body.vertical_position)
            return False
        body.vertical_velocity = self.tuning.jump_impulse
        body.is_jumping = True
        return True
