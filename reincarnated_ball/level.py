"""Level definitions and the spawning of a level's entities.

Everything spawned for a level carries the ``level`` component so it can be
cleared in one sweep.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .balls import EnemyBall, PlayerBall, spawn_enemy_ball, spawn_player_ball
from .vector import Transform, Vec2
from .world import World


class PlayerDirection(Enum):
    """Side of the arena the player controller shoots from."""

    BOTTOM = 0.0
    TOP = 0.5
    LEFT = -0.25
    RIGHT = 0.25

    @property
    def rotation(self) -> float:
        """Starting rotation of the player controller."""
        return self.value


@dataclass(frozen=True)
class LevelData:
    title: str
    player_balls: tuple[PlayerBall, ...]
    enemy_balls: tuple[tuple[EnemyBall, Vec2], ...]
    start_pos: Vec2
    angle_width: float
    player_direction: PlayerDirection


_TRIO = (PlayerBall.BOY, PlayerBall.DOG, PlayerBall.PRINCESS)

LEVELS: tuple[LevelData, ...] = (
    LevelData(
        title="It is on the side ",
        player_balls=_TRIO,
        enemy_balls=(
            (EnemyBall.GREEN_BLOB, Vec2(40.0, 120.0)),
            (EnemyBall.TREE, Vec2(112.0, 75.0)),
        ),
        start_pos=Vec2(104.0, 24.0),
        angle_width=90.0,
        player_direction=PlayerDirection.TOP,
    ),
    LevelData(
        title="Hold the button! ",
        player_balls=_TRIO,
        enemy_balls=((EnemyBall.SNAKE, Vec2(200.0, 40.0)),),
        start_pos=Vec2(8.0, 70.0),
        angle_width=90.0,
        player_direction=PlayerDirection.LEFT,
    ),
    LevelData(
        title="Shoot the snake ",
        player_balls=_TRIO,
        enemy_balls=(
            (EnemyBall.SNAKE, Vec2(112.0, 120.0)),
            (EnemyBall.TREE, Vec2(112.0, 75.0)),
        ),
        start_pos=Vec2(104.0, 24.0),
        angle_width=90.0,
        player_direction=PlayerDirection.TOP,
    ),
    LevelData(
        title="The BOSS ",
        player_balls=(
            PlayerBall.BOY,
            PlayerBall.DOG,
            PlayerBall.BOY,
            PlayerBall.DOG,
            PlayerBall.PRINCESS,
        ),
        enemy_balls=(
            (EnemyBall.TREE, Vec2(70.0, 75.0)),
            (EnemyBall.GHOST, Vec2(120.0, 130.0)),
            (EnemyBall.GREEN_BLOB, Vec2(110.0, 110.0)),
            (EnemyBall.SNAKE, Vec2(130.0, 110.0)),
        ),
        start_pos=Vec2(104.0, 24.0),
        angle_width=90.0,
        player_direction=PlayerDirection.TOP,
    ),
)


@dataclass
class CurrentLevel:
    level_index: int | None = None
    player_entity: int | None = None
    player_ball_selected: int | None = None

    def data(self) -> LevelData | None:
        """The level being played, or None when the index names no level."""
        if self.level_index is None or not 0 <= self.level_index < len(LEVELS):
            return None
        return LEVELS[self.level_index]


def triangle(
    ball: EnemyBall, depth: int, start: Vec2, half_side_step: Vec2, layer_step: Vec2
) -> list[tuple[EnemyBall, Vec2]]:
    """Balls laid out in a triangle of ``depth`` rows, one more ball per row."""
    placed = []
    row_start = start
    for row in range(depth):
        pos = row_start
        for _ in range(row + 1):
            placed.append((ball, pos))
            pos = pos - half_side_step * 2.0
        row_start = row_start + half_side_step + layer_step
    return placed


# (sprite, position, (rows, cols, x_size, y_size))
_BACKGROUND = (
    ("wall_top_left", Vec2(0.0, 16.0), (1, 1, 64, 64)),
    ("wall_top_right", Vec2(224.0, 16.0), (1, 1, 64, 64)),
    ("wall_top", Vec2(16.0, 16.0), (1, 13, 16, 64)),
    ("wall_left", Vec2(0.0, 32.0), (7, 1, 64, 16)),
    ("wall_right", Vec2(224.0, 32.0), (7, 1, 64, 16)),
    ("wall_bottom_left", Vec2(0.0, 144.0), (1, 1, 64, 64)),
    ("wall_bottom_right", Vec2(224.0, 144.0), (1, 1, 64, 64)),
    ("wall_bottom", Vec2(16.0, 144.0), (1, 13, 16, 64)),
    ("floor", Vec2(0.0, 0.0), (3, 4, 64, 64)),
)


class LevelSpawner:
    """Spawns the entities of a level into a world and records the player's ones."""

    def __init__(self, world: World, current_level: CurrentLevel) -> None:
        self.world = world
        self.current_level = current_level

    def spawn_enemies_ball(self, level_data: LevelData) -> list[int]:
        return [
            spawn_enemy_ball(self.world, ball, pos) for ball, pos in level_data.enemy_balls
        ]

    def spawn_player_ball(
        self, level_data: LevelData, player_ball_index: int, target_spawn_position: Vec2
    ) -> int | None:
        """Spawn the indexed player ball, held still, and select it; None if out of range."""
        if not 0 <= player_ball_index < len(level_data.player_balls):
            return None
        ball = level_data.player_balls[player_ball_index]
        entity_id = spawn_player_ball(self.world, ball, target_spawn_position, False)
        self.current_level.player_ball_selected = entity_id
        return entity_id

    def spawn_player_controller(self, level_data: LevelData) -> int:
        entity_id = self.world.spawn(
            Transform(level_data.start_pos, level_data.player_direction.rotation),
            level=True,
        )
        self.world.spawn(Transform(), entity_id, sprite="character_controller", affine=True)
        self.current_level.player_entity = entity_id
        return entity_id

    def spawn_background(self) -> int:
        root = self.world.spawn(Transform(), level=True)
        for sprite, position, repeated in _BACKGROUND:
            self.world.spawn(Transform(position), root, sprite=sprite, repeated=repeated)
        return root

    def spawn_initial(self, level_data: LevelData) -> None:
        self.spawn_player_controller(level_data)
        self.spawn_background()
        self.spawn_enemies_ball(level_data)