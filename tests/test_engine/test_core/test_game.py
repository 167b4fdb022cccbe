import pytest
from puri_engine.core.actions import Action
from puri_engine.core.game import Game, GameConfig
from puri_engine.core.scene import Scene


class RecordingScene(Scene):
    def __init__(self, game):
        super().__init__(game)
        self.ticks = []
        self.frames = []

    def update(self, dt):
        self.ticks.append(dt)

    def render(self, alpha):
        self.frames.append(alpha)


@pytest.fixture
def game(mock_pygame):
    return Game(GameConfig(fixed_timestep=0.25, max_frame_skip=5))


@pytest.fixture
def scene(game):
    scene = RecordingScene(game)
    game.set_scene(scene)
    return scene


@pytest.mark.parametrize("kwargs", [{"fixed_timestep": 0}, {"fixed_timestep": -0.1}, {"scale": 0}])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_fixed_timestep_accumulates(game, scene):
    alpha = game.advance(0.625)

    assert scene.ticks == [0.25, 0.25]
    assert alpha == 0.5

    # The remainder carries into the next frame
    game.advance(0.125)
    assert scene.ticks == [0.25, 0.25, 0.25]


def test_frame_skip_cap(mock_pygame):
    game = Game(GameConfig(fixed_timestep=0.25, max_frame_skip=2))
    scene = RecordingScene(game)
    game.set_scene(scene)

    alpha = game.advance(2.0)

    assert len(scene.ticks) == 2
    assert alpha == 0.0


def test_variable_timestep(mock_pygame):
    game = Game(GameConfig(fixed_timestep=None))
    scene = RecordingScene(game)
    game.set_scene(scene)

    assert game.advance(0.03) == 1.0
    assert scene.ticks == [0.03]


def test_pause_stops_scene_updates(game, scene):
    game.input._state.actions_pressed.add(Action.PAUSE)
    game.advance(0.25)

    assert game.paused
    assert scene.ticks == []

    game.input._state.actions_pressed.discard(Action.PAUSE)
    game.advance(0.25)
    assert scene.ticks == []

    game.input._state.actions_pressed.add(Action.PAUSE)
    game.advance(0.25)
    assert not game.paused
    assert scene.ticks == [0.25]


def test_debug_toggle(game, scene):
    assert not game.debug_mode
    game.input._state.actions_pressed.add(Action.DEBUG_TOGGLE)
    game.advance(0.25)
    assert game.debug_mode


def test_quit_action_skips_update(game, scene):
    game._running = True
    game.input._state.actions_pressed.add(Action.QUIT)
    game.advance(0.25)

    assert not game._running
    assert scene.ticks == []


def test_run_without_scene_raises(game):
    with pytest.raises(RuntimeError):
        game.run()


def test_set_scene_exits_previous(game, scene):
    other = RecordingScene(game)
    game.set_scene(other)

    assert not scene.is_active
    assert other.is_active


def test_gameplay_press_during_pause_survives_resume(game, scene):
    seen = []
    scene.update = lambda dt: seen.append(game.input.is_action_just_pressed(Action.JUMP))

    game.input._state.actions_pressed.add(Action.PAUSE)
    game.advance(0.25)
    game.input._state.actions_pressed.discard(Action.PAUSE)

    # Jump goes down while paused
    game.input._state.actions_pressed.add(Action.JUMP)
    game.advance(0.25)

    game.input._state.actions_pressed.add(Action.PAUSE)
    game.advance(0.25)  # resume tick
    game.advance(0.25)

    assert not game.paused
    assert seen == [False, True]
