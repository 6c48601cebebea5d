"""Tests for the anchor-in-box collision predicate."""

import pytest

from world.entity import make_player, make_obstacle
from world.world_collision import is_collided, collides_with_any


def _player(x=10, y=10):
    return make_player(x, y, (5, 5))


class TestIsCollided:
    def test_anchor_inside_box(self):
        assert is_collided(_player(), make_obstacle(12, 12, 8, 8))

    def test_anchor_past_right_edge(self):
        # 16 > 10 + 5
        assert not is_collided(_player(), make_obstacle(16, 10, 8, 8))

    @pytest.mark.parametrize(
        "anchor", [(10, 10), (15, 10), (10, 15), (15, 15)]
    )
    def test_box_is_closed(self, anchor):
        assert is_collided(_player(), make_obstacle(*anchor, 5, 5))

    @pytest.mark.parametrize("anchor", [(9, 10), (10, 9), (16, 12), (12, 16)])
    def test_just_outside(self, anchor):
        assert not is_collided(_player(), make_obstacle(*anchor, 5, 5))

    def test_argument_order_matters(self):
        big = make_obstacle(0, 0, 100, 100)
        player = _player(50, 50)
        assert is_collided(big, player)
        assert not is_collided(player, big)


class TestCollidesWithAny:
    def test_empty(self):
        assert not collides_with_any(_player(), [])

    def test_player_anchor_inside_obstacle(self):
        obstacles = [make_obstacle(300, 300, 10, 10), make_obstacle(5, 5, 10, 10)]
        assert collides_with_any(_player(), obstacles)

    def test_obstacle_anchor_inside_player_only_is_not_a_hit(self):
        # The obstacle's corner sits inside the player box, but the player's
        # anchor is outside the obstacle, which is what the world checks.
        assert not collides_with_any(_player(), [make_obstacle(12, 12, 20, 20)])

    def test_accepts_any_iterable(self):
        gen = (make_obstacle(x, 10, 5, 5) for x in (100, 8))
        assert collides_with_any(_player(), gen)
