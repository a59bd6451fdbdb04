"""Mini README: Tests for world scrolling and collision checks.

Structure:
    * test_scroll_moves_obstacles_and_scores_passed_ones - removal and scoring.
    * test_background_offset_wraps - the cosmetic offset resets past the wrap point.
    * test_speed_ramp_adds_increment - speed grows by the fixed increment.
    * test_hitboxes_touching_edges_do_not_collide - edge contact is not a hit.
    * test_grounded_wallet_hits_obstacle_in_slot - overlap at the player slot.
    * test_high_wallet_clears_obstacle - a raised wallet misses the obstacle.
"""

from __future__ import annotations

import pytest

from budgetjump.game import GameTuning, Obstacle, ObstacleKind, PlayerBody, RunSession
from budgetjump.game.collision import CollisionDetector, Hitbox
from budgetjump.game.scroller import WorldScroller


def _obstacle(identifier: str, position: float) -> Obstacle:
    return Obstacle(obstacle_id=identifier, horizontal_position=position, kind=ObstacleKind.BAG)


def test_scroll_moves_obstacles_and_scores_passed_ones() -> None:
    """Obstacles beyond half a width behind the origin are removed and scored."""

    scroller = WorldScroller(GameTuning())
    session = RunSession(
        game_speed=2.0,
        obstacles=[_obstacle("a", -8.5), _obstacle("b", -7.0), _obstacle("c", 300.0)],
    )

    passed = scroller.scroll(session)

    assert passed == 1
    assert session.score == 1
    assert [o.obstacle_id for o in session.obstacles] == ["b", "c"]
    assert session.obstacles[0].horizontal_position == pytest.approx(-9.0)
    assert session.obstacles[1].horizontal_position == pytest.approx(298.0)


def test_background_offset_wraps() -> None:
    scroller = WorldScroller(GameTuning(background_wrap=-400.0))
    session = RunSession(game_speed=2.0, background_offset=-397.0)

    scroller.scroll(session)
    assert session.background_offset == pytest.approx(-399.0)
    scroller.scroll(session)
    assert session.background_offset == 0.0


def test_speed_ramp_adds_increment() -> None:
    scroller = WorldScroller(GameTuning(speed_increment=0.002))
    session = RunSession(game_speed=1.8)

    scroller.ramp_speed(session)

    assert session.game_speed == pytest.approx(1.802)


def test_hitboxes_touching_edges_do_not_collide() -> None:
    left = Hitbox.centred(0.0, 0.0, 10.0, 10.0)
    touching = Hitbox.centred(10.0, 0.0, 10.0, 10.0)
    overlapping = Hitbox.centred(9.0, 0.0, 10.0, 10.0)

    assert not left.intersects(touching)
    assert left.intersects(overlapping)
    assert overlapping.intersects(left)


def test_grounded_wallet_hits_obstacle_in_slot() -> None:
    tuning = GameTuning()
    detector = CollisionDetector(tuning)
    obstacles = [_obstacle("far", 300.0), _obstacle("near", tuning.player_slot)]

    hit = detector.first_collision(PlayerBody(), obstacles)

    assert hit is not None
    assert hit.obstacle_id == "near"


def test_high_wallet_clears_obstacle() -> None:
    """Hitboxes are shrunk, so a wallet 30 units up clears a grounded obstacle."""

    tuning = GameTuning()
    detector = CollisionDetector(tuning)
    body = PlayerBody(vertical_position=-30.0, is_jumping=True)

    assert detector.first_collision(body, [_obstacle("near", tuning.player_slot)]) is None
    assert detector.player_hitbox(body).bottom == pytest.approx(-14.0)
