import pytest
from puri_engine.graphics.animation import (
    AnimationId,
    AnimationDescriptor,
    AnimationRegistry,
    SpriteSheet,
    build_default_registry,
)


def test_descriptor_frame_duration():
    descriptor = AnimationDescriptor(frame_count=6, fps=5)
    assert descriptor.frame_duration == pytest.approx(0.2)


@pytest.mark.parametrize("frame_count, fps", [(0, 5), (6, 0), (6, -1)])
def test_descriptor_rejects_empty_animation(frame_count, fps):
    with pytest.raises(ValueError):
        AnimationDescriptor(frame_count=frame_count, fps=fps)


def test_sheet_frame_rect():
    sheet = SpriteSheet("hero.png", frame_width=32, frame_height=16, columns=3, rows=2)

    assert sheet.frame_total == 6
    assert sheet.frame_rect(0) == (0, 0, 32, 16)
    assert sheet.frame_rect(2) == (64, 0, 32, 16)
    assert sheet.frame_rect(4) == (32, 16, 32, 16)

    with pytest.raises(IndexError):
        sheet.frame_rect(6)


def test_default_registry_has_player_idle(registry):
    sheet, descriptor = registry.get(AnimationId.PLAYER_IDLE)

    assert sheet.path == "puri.png"
    assert (sheet.frame_width, sheet.frame_height) == (32, 32)
    assert descriptor.frame_count == 6
    assert descriptor.fps == 5
    assert AnimationId.PLAYER_IDLE in registry
    assert len(registry) == 1


def test_unknown_animation_raises():
    registry = AnimationRegistry()
    with pytest.raises(KeyError, match="PlayerIdle"):
        registry.get(AnimationId.PLAYER_IDLE)


def test_register_twice_raises():
    registry = build_default_registry()
    with pytest.raises(ValueError):
        registry.register(
            AnimationId.PLAYER_IDLE,
            SpriteSheet("other.png", 32, 32, 6),
            AnimationDescriptor(6, 5),
        )


def test_register_sheet_too_small_raises():
    registry = AnimationRegistry()
    with pytest.raises(ValueError):
        registry.register(
            AnimationId.PLAYER_IDLE,
            SpriteSheet("puri.png", 32, 32, columns=4),
            AnimationDescriptor(frame_count=6, fps=5),
        )
