"""Mini README: Procedural obstacle spawning.

Structure:
    * RandomSource - protocol for the injected random generator.
    * ObstacleGenerator - decides when to spawn and where to place obstacles.

Each new obstacle gets a uniformly random kind and sits a uniformly random
distance within ``[min_obstacle_distance, max_obstacle_distance]`` after
the previous one, never closer than the spawn edge. Passing a seeded
``random.Random`` makes spawn sequences reproducible in tests.
"""

from __future__ import annotations

import random
from typing import List, Optional, Protocol, Sequence, TypeVar

from .state import Obstacle, ObstacleKind
from .tuning import GameTuning
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of ``random.Random`` used for spawning."""

    def choice(self, seq: Sequence[T]) -> T:
        ...

    def uniform(self, a: float, b: float) -> float:
        ...


class ObstacleGenerator:
    """Create obstacles with randomised kind and bounded spacing."""

    KINDS: Sequence[ObstacleKind] = tuple(ObstacleKind)

    def __init__(self, tuning: GameTuning, rng: Optional[RandomSource] = None) -> None:
        self.tuning = tuning
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self._sequence = 0

    def _next_id(self) -> str:
        self._sequence += 1
        return f"obs_{self._sequence:04d}"

    def should_spawn(self, obstacles: Sequence[Obstacle]) -> bool:
        """Spawn when the field is empty or the last obstacle has moved far enough in."""

        if not obstacles:
            return True
        threshold = self.tuning.field_width - self.tuning.min_obstacle_distance
        return obstacles[-1].horizontal_position < threshold

    def spawn(self, obstacles: List[Obstacle]) -> Obstacle:
        """Append a new obstacle after the last one and return it."""

        kind = self.rng.choice(self.KINDS)
        spacing = self.rng.uniform(
            self.tuning.min_obstacle_distance, self.tuning.max_obstacle_distance
        )
        if obstacles:
            position = max(
                obstacles[-1].horizontal_position + spacing, self.tuning.spawn_edge
            )
        else:
            position = self.tuning.initial_spawn_position
        obstacle = Obstacle(obstacle_id=self._next_id(), horizontal_position=position, kind=kind)
        obstacles.append(obstacle)
        LOGGER.debug(
            "Spawned %s (%s) at %.2f", obstacle.obstacle_id, kind.value, position
        )
        return obstacle

    def spawn_if_needed(self, obstacles: List[Obstacle]) -> Optional[Obstacle]:
        if self.should_spawn(obstacles):
            return self.spawn(obstacles)
        return None
