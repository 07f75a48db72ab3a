import math

import pytest

from reincarnated_ball.vector import Transform, Vec2
from reincarnated_ball.world import Gamepad, GamepadButton, Time, World


def test_spawn_and_get_components():
    world = World()
    eid = world.spawn(Transform(Vec2(3.0, 4.0)), life=2, tag="x")
    entity = world.get(eid)
    assert entity.components == {"life": 2, "tag": "x"}
    assert entity.transform.translation == Vec2(3.0, 4.0)
    assert eid in world


def test_spawn_ids_are_unique_and_ordered():
    world = World()
    ids = [world.spawn() for _ in range(4)]
    assert len(set(ids)) == 4
    assert [e.id for e in world.entities()] == ids


def test_children_of_in_spawn_order():
    world = World()
    parent = world.spawn()
    first = world.spawn(parent=parent)
    second = world.spawn(parent=parent)
    assert [c.id for c in world.children_of(parent)] == [first, second]
    assert world.get(first).parent == parent


def test_despawn_removes_descendants():
    world = World()
    root = world.spawn()
    child = world.spawn(parent=root)
    grandchild = world.spawn(parent=child)
    other = world.spawn()
    world.despawn(root)
    assert root not in world and child not in world and grandchild not in world
    assert [e.id for e in world.entities()] == [other]


def test_despawn_child_detaches_from_parent():
    world = World()
    root = world.spawn()
    child = world.spawn(parent=root)
    world.despawn(child)
    assert world.children_of(root) == []


def test_missing_entities_raise_key_error():
    world = World()
    with pytest.raises(KeyError):
        world.get(7)
    with pytest.raises(KeyError):
        world.despawn(7)
    with pytest.raises(KeyError):
        world.spawn(parent=7)


def test_global_translation_adds_parent_offsets():
    world = World()
    parent = world.spawn(Transform(Vec2(10.0, 20.0)))
    child = world.spawn(Transform(Vec2(1.0, 2.0)), parent=parent)
    assert world.global_translation(child) == Vec2(11.0, 22.0)
    assert world.global_translation(parent) == Vec2(10.0, 20.0)


def test_global_translation_applies_parent_rotation():
    world = World()
    parent = world.spawn(Transform(rotation=math.pi / 2))
    child = world.spawn(Transform(Vec2(1.0, 0.0)), parent=parent)
    pos = world.global_translation(child)
    assert pos.x == pytest.approx(0.0, abs=1e-9)
    assert pos.y == pytest.approx(1.0)


def test_gamepad_edges():
    pad = Gamepad()
    pad.press(GamepadButton.EAST)
    assert pad.pressed(GamepadButton.EAST)
    assert pad.just_pressed(GamepadButton.EAST)
    pad.advance()
    assert pad.pressed(GamepadButton.EAST)
    assert not pad.just_pressed(GamepadButton.EAST)
    pad.press(GamepadButton.EAST)
    assert not pad.just_pressed(GamepadButton.EAST)
    pad.release(GamepadButton.EAST)
    assert pad.just_released(GamepadButton.EAST)
    assert not pad.pressed(GamepadButton.EAST)
    pad.advance()
    assert not pad.just_released(GamepadButton.EAST)


def test_release_of_unheld_button_is_not_an_edge():
    pad = Gamepad()
    pad.release(GamepadButton.START)
    assert not pad.just_released(GamepadButton.START)


def test_time_advance_accumulates():
    time = Time()
    time.advance(0.25)
    time.advance(0.5)
    assert time.delta == 0.5
    assert time.elapsed == pytest.approx(0.75)


def test_time_rejects_negative_delta():
    with pytest.raises(ValueError):
        Time().advance(-0.1)