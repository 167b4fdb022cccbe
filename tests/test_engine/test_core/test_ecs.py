import pytest
from pydantic import ValidationError
from puri_engine.core.entity import Entity
from puri_engine.core.component import Component
from puri_engine.core.events import EngineEvent


class Position(Component):
    x: float = 0.0
    y: float = 0.0


class Velocity(Component):
    vx: float = 0.0


def test_entity_creation():
    e = Entity()
    assert e.id > 0
    assert e.active is True
    assert e.name == f"Entity_{e.id}"


def test_add_get_component():
    e = Entity()
    p = Position(x=10, y=20)
    e.add(p)

    retrieved = e.get(Position)
    assert retrieved is p
    assert retrieved.entity_id == e.id


def test_add_duplicate_component_raises():
    e = Entity()
    e.add(Position())
    with pytest.raises(ValueError):
        e.add(Position())


def test_get_missing_component_raises():
    e = Entity()
    with pytest.raises(KeyError):
        e.get(Position)
    assert e.try_get(Position) is None


def test_remove_component():
    e = Entity()
    e.add(Position())
    removed = e.remove(Position)

    assert not e.has(Position)
    assert removed.entity_id is None
    assert e.remove(Position) is None


def test_component_validation():
    with pytest.raises(ValidationError):
        Position(x={"invalid": "type"})

    with pytest.raises(ValidationError):
        Position(z=1.0)  # extra fields are forbidden


def test_world_entity_management(world):
    e = Entity()
    e.add(Position())
    world.add_entity(e)

    assert world.entity_count == 1
    assert list(world.get_entities_with(Position)) == [e]
    assert list(world.get_entities_with(Velocity)) == []
    assert list(world.get_entities_with(Position, Velocity)) == []


def test_world_rejects_same_entity_twice(world):
    e = Entity()
    world.add_entity(e)
    with pytest.raises(ValueError):
        world.add_entity(e)


def test_world_indexes_components_added_later(world):
    e = world.add_entity(Entity())
    e.add(Velocity())
    assert list(world.get_entities_with(Velocity)) == [e]

    e.remove(Velocity)
    assert list(world.get_entities_with(Velocity)) == []


def test_world_tag_query(world):
    e = Entity()
    e.add_tag("solid")
    world.add_entity(e)
    other = world.add_entity(Entity())
    other.add_tag("solid")

    assert list(world.get_entities_with_tag("solid")) == [e, other]


def test_world_cleanup(world):
    destroyed = []
    world.event_bus.subscribe(EngineEvent.ENTITY_DESTROYED, lambda ev: destroyed.append(ev["entity"]))

    e = Entity()
    e.add(Position())
    world.add_entity(e)
    world.destroy_entity(e)

    assert world.entity_count == 1  # removal is deferred to the end of the tick
    world.update(0.1)

    assert world.entity_count == 0
    assert e.world is None
    assert destroyed == [e]
    assert list(world.get_entities_with(Position)) == []
