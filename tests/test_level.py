import pytest

from reincarnated_ball.balls import EnemyBall, Team
from reincarnated_ball.level import (
    LEVELS,
    CurrentLevel,
    LevelSpawner,
    PlayerDirection,
    triangle,
)
from reincarnated_ball.vector import Vec2
from reincarnated_ball.world import World


def test_level_titles():
    titles = [CurrentLevel(index).data().title for index in range(4)]
    assert titles == [
        "It is on the side ",
        "Hold the button! ",
        "Shoot the snake ",
        "The BOSS ",
    ]


def test_boss_level_has_five_player_balls():
    spawner = _spawner()
    boss = CurrentLevel(3).data()
    last = spawner.spawn_player_ball(boss, 4, Vec2())
    assert spawner.world.get(last).components["team"] == Team(boss.player_balls[4])
    assert spawner.spawn_player_ball(boss, 5, Vec2()) is None
    assert CurrentLevel(1).data().player_direction is PlayerDirection.LEFT


def test_current_level_data():
    assert CurrentLevel(0).data() is LEVELS[0]
    assert CurrentLevel(len(LEVELS)).data() is None
    assert CurrentLevel().data() is None


@pytest.mark.parametrize("depth", [0, 1, 2, 4])
def test_triangle_count(depth):
    placed = triangle(EnemyBall.GREEN_BLOB, depth, Vec2(), Vec2(1.0, 0.0), Vec2(0.0, 1.0))
    assert len(placed) == depth * (depth + 1) // 2
    assert all(ball is EnemyBall.GREEN_BLOB for ball, _ in placed)


def test_triangle_rows():
    start, half, layer = Vec2(10.0, 10.0), Vec2(1.0, 0.0), Vec2(0.0, 2.0)
    placed = [pos for _, pos in triangle(EnemyBall.SNAKE, 2, start, half, layer)]
    row_start = start + half + layer
    assert placed == [start, row_start, row_start - half * 2.0]


def _spawner():
    return LevelSpawner(World(), CurrentLevel())


def test_spawn_initial_creates_level_entities():
    spawner = _spawner()
    level = LEVELS[0]
    spawner.spawn_initial(level)
    world = spawner.world
    enemies = [e for e in world.entities() if "team" in e.components]
    assert [e.components["team"] for e in enemies] == [Team(b) for b, _ in level.enemy_balls]
    assert [e.transform.translation for e in enemies] == [p for _, p in level.enemy_balls]
    assert all(e.components.get("level") for e in world.entities() if e.parent is None)


def test_spawn_player_controller_uses_start_and_direction():
    spawner = _spawner()
    level = LEVELS[1]
    controller = spawner.spawn_player_controller(level)
    entity = spawner.world.get(controller)
    assert spawner.current_level.player_entity == controller
    assert entity.transform.translation == level.start_pos
    assert entity.transform.rotation == PlayerDirection.LEFT.rotation
    assert [c.components["sprite"] for c in spawner.world.children_of(controller)] == [
        "character_controller"
    ]


def test_spawn_background_children():
    spawner = _spawner()
    root = spawner.spawn_background()
    sprites = [c.components["sprite"] for c in spawner.world.children_of(root)]
    assert len(sprites) == 9
    assert "floor" in sprites


def test_spawn_player_ball_selects_disabled_ball():
    spawner = _spawner()
    position = Vec2(5.0, 6.0)
    ball_id = spawner.spawn_player_ball(LEVELS[0], 1, position)
    entity = spawner.world.get(ball_id)
    assert spawner.current_level.player_ball_selected == ball_id
    assert entity.components["team"] == Team(LEVELS[0].player_balls[1])
    assert entity.components["physic"].enable is False
    assert entity.transform.translation == position


def test_spawn_player_ball_out_of_range():
    spawner = _spawner()
    assert spawner.spawn_player_ball(LEVELS[0], len(LEVELS[0].player_balls), Vec2()) is None
    assert spawner.current_level.player_ball_selected is None
    assert len(spawner.world) == 0