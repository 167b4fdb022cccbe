import pytest
from puri_platformer.components import Hitbox
from puri_platformer.systems.collision import check_hit, first_hit
from puri_platformer.world import StaticObstacle


FLOOR = Hitbox(width=200, height=5)
FLOOR_POS = (0.0, -16.0)
PLAYER = Hitbox(width=18, height=32)


@pytest.mark.parametrize("y, expected", [
    (0.0, True),
    (2.4, True),
    (2.5, False),     # bottom edge touches the floor top exactly
    (-34.4, True),
    (-34.5, False),   # top edge touches the floor bottom exactly
    (50.0, False),
])
def test_vertical_overlap(y, expected):
    assert check_hit(PLAYER, (0.0, y), FLOOR, FLOOR_POS) is expected


@pytest.mark.parametrize("x, expected", [
    (108.9, True),
    (109.0, False),
    (-109.0, False),
])
def test_horizontal_overlap(x, expected):
    assert check_hit(PLAYER, (x, -16.0), FLOOR, FLOOR_POS) is expected


def test_check_hit_is_symmetric():
    assert check_hit(FLOOR, FLOOR_POS, PLAYER, (0.0, 0.0))
    assert not check_hit(FLOOR, FLOOR_POS, PLAYER, (0.0, 2.5))


def test_zero_size_box_never_overlaps_edge():
    point = Hitbox(width=0, height=0)
    assert not check_hit(point, (100.0, -16.0), FLOOR, FLOOR_POS)
    assert check_hit(point, (0.0, -16.0), FLOOR, FLOOR_POS)


def test_first_hit_returns_first_in_order():
    a = StaticObstacle(0, 0, 10, 10, name="a")
    b = StaticObstacle(0, 0, 20, 20, name="b")
    far = StaticObstacle(500, 0, 10, 10, name="far")

    assert first_hit(PLAYER, (0.0, 0.0), [far, a, b]) is a
    assert first_hit(PLAYER, (0.0, 0.0), [far]) is None
    assert first_hit(PLAYER, (0.0, 0.0), []) is None
