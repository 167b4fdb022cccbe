import pytest
from puri_platformer.components import VerticalState
from puri_platformer.systems import FallSystem


def test_free_fall(make_world):
    world, player = make_world(FallSystem(), x=4.0, y=100.0)
    world.update(0.1)

    assert player.transform.y == pytest.approx(90.2)
    assert player.transform.x == 4.0
    assert player.motion.state == VerticalState.FALLING


def test_blocked_step_is_discarded(make_world):
    # 3.0 - 9.8 would put the feet inside the floor
    world, player = make_world(FallSystem(), y=3.0)
    player.motion.state = VerticalState.FALLING
    world.update(0.1)

    assert player.transform.y == 3.0
    assert player.motion.state == VerticalState.GROUNDED


def test_rests_above_surface_without_snapping(make_world):
    world, player = make_world(FallSystem(), y=100.0)
    for _ in range(20):
        world.update(0.1)

    # Stops at the last position whose next step would overlap,
    # somewhere in the step-sized band above the floor top
    assert 2.5 <= player.transform.y < 2.5 + 9.8
    assert player.motion.state == VerticalState.GROUNDED


def test_spawn_inside_floor_is_grounded(make_world):
    world, player = make_world(FallSystem())
    world.update(1 / 60)

    assert player.transform.y == 0.0
    assert player.motion.state == VerticalState.GROUNDED


def test_no_obstacles_falls_forever(make_world):
    world, player = make_world(FallSystem(), platforms=[])
    for _ in range(10):
        world.update(0.1)

    assert player.transform.y == pytest.approx(-98.0)


def test_skipped_while_ascending(make_world):
    world, player = make_world(FallSystem(), y=50.0)
    player.motion.begin_ascent(10.0)
    world.update(0.1)

    assert player.transform.y == 50.0
    assert player.motion.is_ascending


def test_zero_dt_keeps_state(make_world):
    world, player = make_world(FallSystem(), y=100.0)
    world.update(0.0)

    assert player.transform.y == 100.0
    assert player.motion.state == VerticalState.GROUNDED


def test_missing_player_is_setup_error():
    from puri_platformer.world import PlatformerWorld

    world = PlatformerWorld()
    world.add_system(FallSystem())
    with pytest.raises(RuntimeError):
        world.update(0.1)
