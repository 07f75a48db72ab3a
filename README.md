# reincarnated-ball

*I was reincarnated as a ball* is a small arcade game about aiming and firing
balls at enemies. This package runs the whole game as a headless simulation,
one frame at a time. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running from the command line

```
reincarnated-ball [--frames N] [--delta SECONDS] [--level INDEX]
```

- `--frames`: the number of frames to play. The default is 600.
- `--delta`: the length of each frame in seconds. The default is 1/60.
- `--level`: skip the splash screen and menu and start in the game at this
  level index. The first level is 0.

When the frames have run, the command prints the name of the game state it ended
in, for example `MAIN_MENU` or `IN_GAME`. A negative value for any option is
rejected.

The command presses no buttons. Without `--level`, the game plays the splash
screen and then waits in the main menu. With `--level`, it sets up that level
and waits for a throw. A level index past the last level goes straight to the
credits.

## Driving the game from Python

```python
from reincarnated_ball.game import Game
from reincarnated_ball.world import GamepadButton

game = Game()
game.run(frames=600, delta=1 / 60)

pad = game.ctx.gamepad
pad.press(GamepadButton.EAST)
game.step(1 / 60)
pad.release(GamepadButton.EAST)
game.step(1 / 60)
print(game.ctx.state.current)
```

`Game.step(delta)` moves the game forward by one frame. Each frame it:

1. applies any pending state change;
2. runs the fixed 1/64 s physics steps;
3. runs the current screen;
4. resolves collisions and wall bounces;
5. advances the fade.

A frame is capped at 0.25 s. `Game.run(frames, delta)` calls `step` repeatedly
and returns the final `GameState`.

To start directly in a level, create `Game(GameState.IN_GAME, WantedLevel(index, 0))`.
`GameState` is in `reincarnated_ball.context` and `WantedLevel` is in
`reincarnated_ball.in_game`.

## Playing a level

You control a launcher at one edge of the arena. Every level gives you a fixed
list of balls (boy, dog, princess). Each new ball appears on the launcher one
second after the previous throw.

- The d-pad turns the launcher. Which buttons turn it depends on the side the
  launcher sits on. The longer you hold a button, the faster the launcher
  turns.
- Hold `EAST` to charge the throw. It reaches full power after one second.
  Release `EAST` to fire.

Every hit by one of your balls takes one life from the enemy it strikes. Green
blobs, red blobs, snakes and ghosts count as enemies. A red blob splits into two
green blobs when it is knocked out. Trees are heavy obstacles and do not count
as enemies.

You win the level when no enemies are left. You lose when every ball has been
fired, everything has stopped moving, and enemies remain. A win moves you to the
next level and a loss restarts the same one. After the last level the credits
roll.

## Modules

- `vector`: `Vec2`, `Transform`, and the 240 x 160 screen geometry.
- `world`: entities with components in a parent/child tree (`World`), plus
  `Gamepad`, `GamepadButton` and `Time`.
- `physics`: `PhysicObject`, `CircleCollider`, `PhysicConfig`, and the
  movement, collision and boundary functions.
- `balls`: `PlayerBall`, `EnemyBall` and `Team`, with spawning, life loss and
  removal.
- `level`: the `LEVELS` table, `LevelData`, `CurrentLevel`, `LevelSpawner` and
  `triangle`.
- `text`: `Text` labels and the five-slot `TextRenderers` pool. Adding a sixth
  label raises `TextSlotsFullError`.
- `sound`: `SoundManager`, `Mixer`, `SoundChannel` and `SoundList`.
- `fade`: `FadeTransition` and `FadeExternalData`, the four-panel screen fade.
- `context`: `GameState`, `StateMachine` and `GameContext`.
- `splash`, `main_menu`, `in_game`, `in_game_control`, `credit`: the screens,
  and the aiming and throwing maths.
- `game`: `Game` and the `main` command.

## What it does not do

Nothing is drawn and nothing is heard. Sprites are names stored on entities.
Text is held in renderer slots. Sounds are names the mixer tracks in its
channels. There is no window, keyboard or controller input. Buttons reach the
game only through the `Gamepad` object.