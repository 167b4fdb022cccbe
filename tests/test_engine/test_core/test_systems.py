import pytest
from puri_engine.core.system import System
from puri_engine.core.entity import Entity
from puri_engine.core.component import Component


class Position(Component):
    x: float = 0.0


class Velocity(Component):
    vx: float = 0.0


class MovementSystem(System):
    required_components = [Position, Velocity]

    def process_entity(self, entity, dt):
        pos = entity.get(Position)
        vel = entity.get(Velocity)
        pos.x += vel.vx * dt


class Recorder(System):
    def __init__(self, label, log, priority):
        super().__init__()
        self.label = label
        self.log = log
        self.priority = priority

    def update(self, dt):
        self.log.append(self.label)

    def process_entity(self, entity, dt):
        pass


def test_system_processing(world):
    e1 = Entity()
    e1.add(Position(x=0))
    e1.add(Velocity(vx=10))
    world.add_entity(e1)

    # Missing Velocity: not processed
    e2 = Entity()
    e2.add(Position(x=0))
    world.add_entity(e2)

    world.add_system(MovementSystem())
    world.update(1.0)

    assert e1.get(Position).x == 10.0
    assert e2.get(Position).x == 0.0


def test_inactive_entity_skipped(world):
    e = Entity()
    e.add(Position(x=0))
    e.add(Velocity(vx=10))
    e.active = False
    world.add_entity(e)

    world.add_system(MovementSystem())
    world.update(1.0)

    assert e.get(Position).x == 0.0


def test_disabled_system_skipped(world):
    e = Entity()
    e.add(Position(x=0))
    e.add(Velocity(vx=10))
    world.add_entity(e)

    system = MovementSystem()
    system.enabled = False
    world.add_system(system)
    world.update(1.0)

    assert e.get(Position).x == 0.0


def test_systems_run_by_priority(world):
    log = []
    world.add_system(Recorder("low", log, priority=1))
    world.add_system(Recorder("high", log, priority=9))
    world.add_system(Recorder("mid", log, priority=5))
    world.add_system(Recorder("mid-later", log, priority=5))

    world.update(0.0)

    assert log == ["high", "mid", "mid-later", "low"]


def test_system_add_remove(world):
    system = MovementSystem()

    world.add_system(system)
    assert system.world is world
    assert world.get_system(MovementSystem) is system

    world.remove_system(system)
    assert world.get_system(MovementSystem) is None
    with pytest.raises(RuntimeError):
        _ = system.world
