import pytest
from puri_platformer.systems import AnimationSystem, AnimationEvent


def test_long_tick_skips_frames_and_wraps(make_world):
    world, player = make_world(AnimationSystem(), platforms=[])
    looped = []
    world.event_bus.subscribe(AnimationEvent.ANIMATION_LOOPED, lambda e: looped.append(e["entity"]))

    player.frame_timer.frame_index = 5
    world.update(0.45)

    # floor(0.45 / 0.2) = 2 frames: (5 + 2) % 6 = 1
    assert player.frame_timer.frame_index == 1
    assert player.frame_timer.elapsed == pytest.approx(0.05)
    assert looped == [player]


def test_remainder_carries_over(make_world):
    world, player = make_world(AnimationSystem(), platforms=[])

    world.update(0.15)
    assert player.frame_timer.frame_index == 0
    assert player.frame_timer.elapsed == pytest.approx(0.15)

    world.update(0.15)
    assert player.frame_timer.frame_index == 1
    assert player.frame_timer.elapsed == pytest.approx(0.1)


def test_full_cycle_returns_to_first_frame(make_world):
    world, player = make_world(AnimationSystem(), platforms=[])
    world.update(1.25)

    # 6 frames at 0.2s is a 1.2s loop
    assert player.frame_timer.frame_index == 0
    assert player.frame_timer.elapsed == pytest.approx(0.05)


def test_frame_index_stays_in_range(make_world):
    world, player = make_world(AnimationSystem(), platforms=[])
    for dt in (0.07, 0.33, 2.9, 0.0, 0.21, 5.0):
        world.update(dt)
        assert 0 <= player.frame_timer.frame_index < player.animation.frame_count
        assert player.frame_timer.elapsed >= 0.0


def test_zero_dt_changes_nothing(make_world):
    world, player = make_world(AnimationSystem(), platforms=[])
    world.update(0.0)

    assert player.frame_timer.frame_index == 0
    assert player.frame_timer.elapsed == 0.0
