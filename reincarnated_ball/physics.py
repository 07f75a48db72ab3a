"""Circle physics: movement with drag, collisions and screen boundaries.

Entities take part through the ``physic`` (:class:`PhysicObject`) and
``collider`` (:class:`CircleCollider`) components.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .vector import Vec2, screen_size
from .world import Entity, World

SPEED_SQUARED_TO_ZERO = 1.0
RESTITUTION = 1.0


@dataclass
class PhysicConfig:
    """The rectangle that objects bounce inside."""

    boundary_min: Vec2 = field(default_factory=Vec2)
    boundary_max: Vec2 = field(default_factory=Vec2)

    @classmethod
    def screen_boundary(cls) -> PhysicConfig:
        return cls(Vec2(), screen_size())


@dataclass(frozen=True)
class CircleCollider:
    radius: int

    def center(self, translation: Vec2) -> Vec2:
        """Center of the circle whose top-left corner sits at ``translation``."""
        return translation + Vec2(float(self.radius), float(self.radius))


@dataclass
class PhysicObject:
    enable: bool = True
    mass: float = 1.0
    impulse: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    drag: float = 0.5


@dataclass(frozen=True)
class Collision:
    entity1: int
    entity2: int

    def self_and_other(self, target: int) -> tuple[int, int] | None:
        """The pair ordered with ``target`` first, or None if it is not involved."""
        if target == self.entity1:
            return self.entity1, self.entity2
        if target == self.entity2:
            return self.entity2, self.entity1
        return None


def _bodies(world: World) -> Iterator[Entity]:
    return (e for e in world.entities() if "physic" in e.components)


def _colliders(world: World) -> Iterator[tuple[Entity, PhysicObject, CircleCollider]]:
    for entity in _bodies(world):
        collider = entity.components.get("collider")
        if collider is not None:
            yield entity, entity.components["physic"], collider


def move_physic_objects(world: World, delta: float) -> None:
    """Apply impulses and drag, then move every enabled object."""
    for entity in _bodies(world):
        obj: PhysicObject = entity.components["physic"]
        if not obj.enable:
            continue
        obj.velocity = obj.velocity + obj.impulse / obj.mass - (obj.velocity * obj.drag) * delta
        transform = entity.transform
        transform.translation = transform.translation + obj.velocity * delta
        if obj.velocity.length_squared() < SPEED_SQUARED_TO_ZERO:
            obj.velocity = Vec2()
        obj.impulse = Vec2()


def detect_collision(world: World) -> list[Collision]:
    """Every overlapping pair of enabled colliders, the later-spawned one first."""
    colliders = [
        (entity.id, obj, collider, collider.center(world.global_translation(entity.id)))
        for entity, obj, collider in _colliders(world)
    ]
    collisions = []
    for index, (entity_id, obj, collider, center) in enumerate(colliders):
        if not obj.enable:
            continue
        for other_id, other_obj, other_collider, other_center in colliders[:index]:
            if not other_obj.enable:
                continue
            reach = float(collider.radius + other_collider.radius)
            if center.distance_squared(other_center) < reach * reach:
                collisions.append(Collision(entity_id, other_id))
    return collisions


def bounce(physic_object: PhysicObject, normal: Vec2) -> None:
    """Add the impulse that reflects the velocity off a surface with ``normal``."""
    along_normal = physic_object.velocity.dot(normal)
    if along_normal >= 0:
        return
    physic_object.impulse = physic_object.impulse + normal * (
        -2.0 * along_normal * physic_object.mass
    )


def keep_object_in_boundary(world: World, config: PhysicConfig) -> None:
    left, top = config.boundary_min.x, config.boundary_min.y
    right, bottom = config.boundary_max.x, config.boundary_max.y
    for entity, obj, collider in _colliders(world):
        if not obj.enable:
            continue
        position = collider.center(world.global_translation(entity.id))
        radius = float(collider.radius)
        if position.y - radius < top:
            bounce(obj, Vec2(0.0, 1.0))
        elif position.y + radius > bottom:
            bounce(obj, Vec2(0.0, -1.0))
        if position.x - radius < left:
            bounce(obj, Vec2(1.0, 0.0))
        elif position.x + radius > right:
            bounce(obj, Vec2(-1.0, 0.0))


def handle_collision(world: World, collision: Collision, target: int) -> None:
    """Resolve a collision with an elastic impulse; only acts for the first entity."""
    if target == collision.entity2:
        return
    first = world.get(collision.entity1)
    second = world.get(collision.entity2)
    po1: PhysicObject = first.components["physic"]
    po2: PhysicObject = second.components["physic"]

    t1 = world.global_translation(first.id)
    t2 = world.global_translation(second.id)
    normal = (t2 - t1).normalize()
    along_normal = normal.dot(po2.velocity - po1.velocity)
    if along_normal > 0:
        return

    m1 = 1.0 / po1.mass
    m2 = 1.0 / po2.mass
    j = -(1.0 + RESTITUTION) * along_normal / (m1 + m2)
    impulse = normal * j
    po1.impulse = po1.impulse - impulse * m1
    po2.impulse = po2.impulse + impulse * m2