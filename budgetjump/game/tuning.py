"""Mini README: Tunable constants for the Budget Jump simulation.

Structure:
    * GameTuning - frozen dataclass of every gameplay constant plus derived
      spawn and removal coordinates.

Coordinates follow the screen convention of the game view: the player stands
on the ground baseline at vertical position ``0`` and negative values are
airborne. Horizontal positions are measured from the left edge of the field.
All rates are per tick, so the simulation is frame based rather than time
based. The defaults clear the tallest obstacle with a full jump arc at base
speed; they are tuned values, not derived ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True, slots=True)
class GameTuning:
    """Gameplay constants shared by every simulation component."""

    gravity: float = 0.6
    jump_impulse: float = -12.0
    ground_tolerance: float = 5.0
    base_speed: float = 1.8
    speed_increment: float = 0.002
    field_width: float = 400.0
    min_obstacle_distance: float = 180.0
    max_obstacle_distance: float = 280.0
    obstacle_width: float = 20.0
    obstacle_height: float = 25.0
    player_size: float = 40.0
    player_slot: float = 80.0
    hitbox_scale: float = 0.8
    background_wrap: float = -400.0
    tick_interval_seconds: float = 0.016

    @property
    def spawn_edge(self) -> float:
        """Horizontal coordinate just beyond the visible field."""

        return self.field_width + self.obstacle_width

    @property
    def initial_spawn_position(self) -> float:
        return self.spawn_edge

    @property
    def removal_threshold(self) -> float:
        """Obstacles left of this coordinate have passed the player."""

        return -self.obstacle_width / 2

    def problems(self) -> List[str]:
        """Describe every malformed constant; an empty list means playable."""

        issues: List[str] = []
        positive = {
            "gravity": self.gravity,
            "base_speed": self.base_speed,
            "speed_increment": self.speed_increment,
            "field_width": self.field_width,
            "min_obstacle_distance": self.min_obstacle_distance,
            "max_obstacle_distance": self.max_obstacle_distance,
            "obstacle_width": self.obstacle_width,
            "obstacle_height": self.obstacle_height,
            "player_size": self.player_size,
            "tick_interval_seconds": self.tick_interval_seconds,
        }
        for name, value in positive.items():
            if value <= 0:
                issues.append(f"{name} must be positive (got {value})")
        if self.jump_impulse >= 0:
            issues.append(f"jump_impulse must be negative (got {self.jump_impulse})")
        if self.ground_tolerance < 0:
            issues.append(f"ground_tolerance must not be negative (got {self.ground_tolerance})")
        if self.min_obstacle_distance > self.max_obstacle_distance:
            issues.append(
                "min_obstacle_distance must not exceed max_obstacle_distance "
                f"({self.min_obstacle_distance} > {self.max_obstacle_distance})"
            )
        if not 0 < self.hitbox_scale <= 1:
            issues.append(f"hitbox_scale must be within (0, 1] (got {self.hitbox_scale})")
        if self.background_wrap >= 0:
            issues.append(f"background_wrap must be negative (got {self.background_wrap})")
        if self.player_slot < 0:
            issues.append(f"player_slot must not be negative (got {self.player_slot})")
        return issues
