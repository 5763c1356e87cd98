"""Tests for entity lifecycle, component storage and queries."""

from dataclasses import dataclass

import pytest
from playa.types import DeadEntityError
from playa.world import World


@dataclass
class Position:
    x: float
    y: float


@dataclass
class Health:
    value: int


def test_spawn_returns_sequential_ids():
    world = World()
    assert world.spawn() == 0
    assert world.spawn() == 1
    assert world.entities() == frozenset({0, 1})


def test_despawn_removes_entity_and_components():
    world = World()
    eid = world.spawn()
    world.attach(eid, Position(1.0, 2.0))
    world.despawn(eid)
    assert not world.alive(eid)
    assert list(world.query(Position)) == []


def test_attach_and_get():
    world = World()
    eid = world.spawn()
    pos = Position(3.0, 4.0)
    world.attach(eid, pos)
    assert world.get(eid, Position) is pos
    assert world.has(eid, Position)


def test_attach_replaces_existing_component():
    world = World()
    eid = world.spawn()
    world.attach(eid, Health(10))
    world.attach(eid, Health(3))
    assert world.get(eid, Health).value == 3


def test_attach_to_dead_entity_raises():
    world = World()
    eid = world.spawn()
    world.despawn(eid)
    with pytest.raises(DeadEntityError, match="dead entity"):
        world.attach(eid, Health(1))


def test_get_missing_component_raises_key_error():
    world = World()
    eid = world.spawn()
    with pytest.raises(KeyError, match="has no Health component"):
        world.get(eid, Health)


def test_get_dead_entity_raises():
    world = World()
    eid = world.spawn()
    world.despawn(eid)
    with pytest.raises(DeadEntityError) as exc_info:
        world.get(eid, Health)
    assert exc_info.value.entity_id == eid


def test_detach():
    world = World()
    eid = world.spawn()
    world.attach(eid, Health(5))
    world.detach(eid, Health)
    assert not world.has(eid, Health)
    world.detach(eid, Health)  # no-op


def test_has_on_dead_entity_is_false():
    world = World()
    eid = world.spawn()
    world.attach(eid, Health(5))
    world.despawn(eid)
    assert world.has(eid, Health) is False


def test_query_requires_all_types():
    world = World()
    a = world.spawn()
    b = world.spawn()
    world.attach(a, Position(0, 0))
    world.attach(a, Health(1))
    world.attach(b, Position(1, 1))

    results = list(world.query(Position, Health))
    assert len(results) == 1
    eid, (pos, health) = results[0]
    assert eid == a
    assert health.value == 1


def test_query_without_types_yields_nothing():
    world = World()
    world.spawn()
    assert list(world.query()) == []


def test_query_unknown_type_yields_nothing():
    world = World()
    world.spawn()
    assert list(world.query(Health)) == []


def test_query_tolerates_despawn_during_iteration():
    world = World()
    ids = [world.spawn() for _ in range(3)]
    for eid in ids:
        world.attach(eid, Health(eid))

    seen = []
    for eid, (health,) in world.query(Health):
        seen.append(eid)
        if eid == ids[0]:
            world.despawn(ids[1])
    assert seen == [ids[0], ids[2]]
