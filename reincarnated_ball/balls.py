"""Player and enemy balls, their stats and their life cycle.

A ball is a root entity with ``team``, ``life``, ``physic``, ``collider`` and
``level`` components and one child entity carrying its ``sprite``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

from .physics import CircleCollider, Collision, PhysicObject
from .vector import Transform, Vec2
from .world import Entity, World

PLAYER_RADIUS = 8
SPLIT_DISTANCE = 9.0


class PlayerBall(Enum):
    BOY = "boy"
    PRINCESS = "princess"
    DOG = "dog"


class EnemyBall(Enum):
    GREEN_BLOB = "green_blob"
    RED_BLOB = "red_blob"
    SNAKE = "snake"
    GHOST = "ghost"
    TREE = "tree"

    def size(self) -> int:
        return 16 if self is EnemyBall.TREE else 8

    def mass(self) -> float:
        if self is EnemyBall.TREE:
            return 10000.0
        if self is EnemyBall.SNAKE:
            return 0.6
        return 1.0

    def life(self) -> int:
        return {EnemyBall.TREE: 255, EnemyBall.GHOST: 6, EnemyBall.SNAKE: 2}.get(self, 1)

    def physic_object(self) -> PhysicObject:
        return PhysicObject(mass=self.mass())


@dataclass(frozen=True)
class Team:
    ball: PlayerBall | EnemyBall

    def is_friend(self) -> bool:
        return isinstance(self.ball, PlayerBall) or self.ball is EnemyBall.TREE

    def is_enemy(self) -> bool:
        return not self.is_friend()


def _spawn_sprite_child(world: World, parent: int, sprite: str) -> None:
    world.spawn(Transform(), parent, sprite=sprite, affine=True)


def spawn_player_ball(
    world: World, ball: PlayerBall, position: Vec2, physic_enabled: bool
) -> int:
    entity_id = world.spawn(
        Transform(position),
        physic=PhysicObject(enable=physic_enabled),
        team=Team(ball),
        life=1,
        collider=CircleCollider(PLAYER_RADIUS),
        level=True,
    )
    _spawn_sprite_child(world, entity_id, ball.value)
    return entity_id


def spawn_enemy_ball(world: World, ball: EnemyBall, position: Vec2) -> int:
    entity_id = world.spawn(
        Transform(position),
        team=Team(ball),
        life=ball.life(),
        collider=CircleCollider(ball.size()),
        physic=ball.physic_object(),
        level=True,
    )
    _spawn_sprite_child(world, entity_id, ball.value)
    return entity_id


def _ball(world: World, entity_id: int) -> Entity | None:
    if entity_id not in world:
        return None
    entity = world.get(entity_id)
    if "team" in entity.components and "life" in entity.components:
        return entity
    return None


def reduce_life(world: World, collision: Collision, target: int) -> None:
    """A friendly ball hitting an enemy-team ball takes one life from it."""
    pair = collision.self_and_other(target)
    if pair is None:
        return
    self_id, other_id = pair

    own = _ball(world, self_id)
    if own is None or own.components["team"].is_enemy():
        return

    other = _ball(world, other_id)
    if other is None or not isinstance(other.components["team"].ball, EnemyBall):
        return

    if other.components["life"] > 0:
        other.components["life"] -= 1


def rotate_balls(world: World) -> None:
    """Spin moving balls in the direction they travel."""
    for entity in world.entities():
        obj = entity.components.get("physic")
        if obj is None or "team" not in entity.components:
            continue
        speed_squared = obj.velocity.length_squared()
        if speed_squared > 5.0:
            side = 1.0 if obj.velocity.x >= 0 else -1.0
            entity.transform.rotate_z(side * min(max(speed_squared / 10000.0, 0.01), 0.025))


def _split_red_blob(world: World, impulse: Vec2, base: Vec2) -> None:
    length = impulse.length()
    direction = impulse.normalize()
    normal = Vec2(direction.y, -direction.x)
    for offset in (direction + normal, direction - normal):
        entity_id = spawn_enemy_ball(world, EnemyBall.GREEN_BLOB, base + offset * SPLIT_DISTANCE)
        world.get(entity_id).components["physic"] = dataclasses.replace(
            EnemyBall.GREEN_BLOB.physic_object(), impulse=offset * length
        )


def despawn_dead(world: World) -> None:
    """Remove balls with no life left; a red blob splits into two green blobs."""
    required = {"life", "team", "physic"}
    dead = [
        e for e in world.entities() if required <= e.components.keys() and e.components["life"] == 0
    ]
    for entity in dead:
        if entity.id not in world:
            continue
        base = world.global_translation(entity.id)
        impulse = entity.components["physic"].impulse
        world.despawn(entity.id)
        if entity.components["team"] == Team(EnemyBall.RED_BLOB):
            _split_red_blob(world, impulse, base)