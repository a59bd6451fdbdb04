"""Mini README: Axis-aligned collision checks between the wallet and obstacles.

Structure:
    * Hitbox - axis-aligned rectangle built from a centre and a size.
    * CollisionDetector - builds shrunk hitboxes and scans for the first hit.

Hitboxes are ``hitbox_scale`` times the nominal sprite size so near misses
feel fair. Rectangles that only touch along an edge do not collide.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .state import Obstacle, PlayerBody
from .tuning import GameTuning


@dataclass(frozen=True, slots=True)
class Hitbox:
    """Axis-aligned rectangle in field coordinates."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def centred(cls, centre_x: float, centre_y: float, width: float, height: float) -> "Hitbox":
        half_w = width / 2
        half_h = height / 2
        return cls(
            left=centre_x - half_w,
            top=centre_y - half_h,
            right=centre_x + half_w,
            bottom=centre_y + half_h,
        )

    def intersects(self, other: "Hitbox") -> bool:
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


class CollisionDetector:
    """Test the wallet against every active obstacle."""

    def __init__(self, tuning: GameTuning) -> None:
        self.tuning = tuning

    def player_hitbox(self, body: PlayerBody) -> Hitbox:
        size = self.tuning.player_size * self.tuning.hitbox_scale
        return Hitbox.centred(self.tuning.player_slot, body.vertical_position, size, size)

    def obstacle_hitbox(self, obstacle: Obstacle) -> Hitbox:
        return Hitbox.centred(
            obstacle.horizontal_position,
            0.0,
            self.tuning.obstacle_width * self.tuning.hitbox_scale,
            self.tuning.obstacle_height * self.tuning.hitbox_scale,
        )

    def first_collision(self, body: PlayerBody, obstacles: Iterable[Obstacle]) -> Optional[Obstacle]:
        """Return the first obstacle overlapping the wallet, if any."""

        player = self.player_hitbox(body)
        for obstacle in obstacles:
            if player.intersects(self.obstacle_hitbox(obstacle)):
                return obstacle
        return None
