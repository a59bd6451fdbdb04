"""Mini README: A simple scripted player for headless runs.

Structure:
    * AutoPilot - jumps when the nearest obstacle ahead enters a lead window.

Used by the ``simulate`` CLI command to produce repeatable demo runs. With
the default tuning a jump taken when the obstacle centre is 36 units ahead of
the wallet clears it at the speeds reached in the first minutes of play.
"""

from __future__ import annotations

from typing import Optional

from .engine import GameEngine
from .state import GameSnapshot, GameState, Obstacle


class AutoPilot:
    """Decide each tick whether the wallet should jump."""

    def __init__(self, lead_distance: float = 36.0) -> None:
        self.lead_distance = lead_distance

    def nearest_ahead(self, snapshot: GameSnapshot, player_slot: float) -> Optional[Obstacle]:
        for obstacle in snapshot.obstacles:
            if obstacle.horizontal_position > player_slot:
                return obstacle
        return None

    def step(self, engine: GameEngine) -> bool:
        """Jump if an obstacle is inside the lead window; return whether it did."""

        snapshot = engine.snapshot()
        if snapshot.state is not GameState.PLAYING or snapshot.is_jumping:
            return False
        obstacle = self.nearest_ahead(snapshot, engine.tuning.player_slot)
        if obstacle is None:
            return False
        if obstacle.horizontal_position - engine.tuning.player_slot <= self.lead_distance:
            engine.jump()
            return True
        return False
