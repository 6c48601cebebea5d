"""Tests for clamped player movement and unclamped obstacle drift."""

import pytest

from world.position import Position, Coverage


class TestClampedMovement:
    """left/right/up/down never leave [0, bound]."""

    @pytest.mark.parametrize(
        "move, start, expected",
        [
            ("left", (10, 10), (9, 10)),
            ("right", (10, 10), (11, 10)),
            ("up", (10, 10), (10, 9)),
            ("down", (10, 10), (10, 11)),
        ],
    )
    def test_single_step(self, move, start, expected):
        pos = Position(*start)
        getattr(pos, move)()
        assert (pos.x, pos.y) == expected

    def test_left_at_zero_is_noop(self):
        pos = Position(0, 7)
        pos.left()
        assert (pos.x, pos.y) == (0, 7)

    def test_up_at_zero_is_noop(self):
        pos = Position(7, 0)
        pos.up()
        assert (pos.x, pos.y) == (7, 0)

    def test_right_stops_at_bound(self):
        pos = Position(479, 3)
        pos.right(480)
        pos.right(480)
        assert pos.x == 480

    def test_down_stops_at_bound(self):
        pos = Position(3, 479)
        pos.down(480)
        pos.down(480)
        assert pos.y == 480

    def test_default_bounds_come_from_config(self):
        from config import WIDTH, HEIGHT

        pos = Position(WIDTH, HEIGHT)
        pos.right()
        pos.down()
        assert (pos.x, pos.y) == (WIDTH, HEIGHT)

    @pytest.mark.parametrize("move", ["left", "right", "up", "down"])
    def test_walk_never_leaves_small_field(self, move):
        bound = 3
        for x in range(bound + 1):
            for y in range(bound + 1):
                pos = Position(x, y)
                for _ in range(bound + 2):
                    if move in ("right", "down"):
                        getattr(pos, move)(bound)
                    else:
                        getattr(pos, move)()
                    assert 0 <= pos.x <= bound
                    assert 0 <= pos.y <= bound


class TestUnsafeLeft:
    @pytest.mark.parametrize("x", [5, 1, 0, -1, -40])
    def test_always_decrements_by_one(self, x):
        pos = Position(x, 12)
        pos.unsafe_left()
        assert pos.x == x - 1
        assert pos.y == 12


class TestCoverage:
    def test_fields(self):
        cov = Coverage(5, 31)
        assert cov.width == 5
        assert cov.height == 31

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Coverage(-1, 5)

    def test_copy_is_independent(self):
        pos = Position(4, 4)
        other = pos.copy()
        other.left()
        assert pos.x == 4
