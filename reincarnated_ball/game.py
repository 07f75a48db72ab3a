"""The whole game: state handlers, the frame loop and the command that runs it."""

from __future__ import annotations

import argparse
from typing import Protocol

from .balls import despawn_dead, reduce_life, rotate_balls
from .context import GameContext, GameState, StateMachine
from .credit import Credit
from .in_game import InGame, WantedLevel
from .main_menu import MainMenu
from .physics import (
    PhysicConfig,
    detect_collision,
    handle_collision,
    keep_object_in_boundary,
    move_physic_objects,
)
from .splash import SplashScreen, game_init_update
from .vector import SCREEN_HEIGHT, SCREEN_WIDTH, Vec2
from .world import Time

FIXED_TIMESTEP = 1.0 / 64.0
MAX_DELTA = 0.25
WALL_THICKNESS = 16.0
HUD_HEIGHT = 32.0


class _StateHandler(Protocol):
    def enter(self, ctx: GameContext) -> None: ...

    def exit(self, ctx: GameContext) -> None: ...


def arena_boundary() -> PhysicConfig:
    """The playing field inside the walls."""
    return PhysicConfig(
        Vec2(WALL_THICKNESS, HUD_HEIGHT),
        Vec2(SCREEN_WIDTH - WALL_THICKNESS, SCREEN_HEIGHT - WALL_THICKNESS),
    )


class Game:
    """Runs every system of the game, frame by frame."""

    def __init__(
        self,
        initial_state: GameState = GameState.GAME_INIT,
        wanted_level: WantedLevel | None = None,
    ) -> None:
        self.ctx = GameContext(
            state=StateMachine(initial_state),
            physic_config=arena_boundary(),
            wanted_level=wanted_level if wanted_level is not None else WantedLevel(),
        )
        self.splash = SplashScreen()
        self.main_menu = MainMenu()
        self.in_game = InGame()
        self.credit = Credit()
        self._handlers: dict[GameState, _StateHandler] = {
            GameState.SPLASH_SCREEN: self.splash,
            GameState.MAIN_MENU: self.main_menu,
            GameState.IN_GAME: self.in_game,
            GameState.CREDIT: self.credit,
        }
        self._fixed_time = Time()
        self._accumulator = 0.0
        self._text_slots: dict[int, int] = {}

        self.ctx.fade_transition.spawn_entities(self.ctx.world)
        handler = self._handlers.get(initial_state)
        if handler is not None:
            handler.enter(self.ctx)

    def _apply_state_change(self) -> None:
        change = self.ctx.state.apply()
        if change is None:
            return
        exited, entered = change
        if (handler := self._handlers.get(exited)) is not None:
            handler.exit(self.ctx)
        if (handler := self._handlers.get(entered)) is not None:
            handler.enter(self.ctx)

    def _fixed_update(self, delta: float) -> None:
        ctx = self.ctx
        self._accumulator += delta
        frame_time = ctx.time
        ctx.time = self._fixed_time
        try:
            while self._accumulator >= FIXED_TIMESTEP:
                self._accumulator -= FIXED_TIMESTEP
                self._fixed_time.advance(FIXED_TIMESTEP)
                if ctx.state.current is GameState.GAME_INIT:
                    game_init_update(ctx)
                elif ctx.state.current is GameState.SPLASH_SCREEN:
                    self.splash.fixed_update(ctx)
                move_physic_objects(ctx.world, FIXED_TIMESTEP)
        finally:
            ctx.time = frame_time

    def _update(self) -> None:
        state = self.ctx.state.current
        if state is GameState.MAIN_MENU:
            self.main_menu.update(self.ctx)
        elif state is GameState.IN_GAME:
            self.in_game.update(self.ctx)
        elif state is GameState.CREDIT:
            self.credit.update(self.ctx)

    def _post_update(self, delta: float) -> None:
        ctx = self.ctx
        world = ctx.world
        for collision in detect_collision(world):
            for target in (collision.entity1, collision.entity2):
                handle_collision(world, collision, target)
                reduce_life(world, collision, target)
        keep_object_in_boundary(world, ctx.physic_config)
        rotate_balls(world)
        despawn_dead(world)
        ctx.fade_transition.update(world, ctx.fade, delta)

    def _sync_texts(self) -> None:
        """Give every text entity a renderer slot and free the slots of removed ones."""
        texts = self.ctx.texts
        live = {e.id: e for e in self.ctx.world.entities() if "text" in e.components}
        for entity_id in [i for i in self._text_slots if i not in live]:
            texts.remove(self._text_slots.pop(entity_id))
        for entity in live.values():
            text = entity.components["text"]
            slot = self._text_slots.get(entity.id)
            if text.text is None:
                texts.remove(slot)
                self._text_slots.pop(entity.id, None)
                continue
            slot = texts.set(slot, text)
            self._text_slots[entity.id] = slot
            texts.set_visible(slot, entity.components.get("text_visible", True))

    def step(self, delta: float) -> None:
        """Advance the game by one frame lasting ``delta`` seconds."""
        ctx = self.ctx
        ctx.time.advance(min(delta, MAX_DELTA))
        frame_delta = ctx.time.delta
        self._apply_state_change()
        self._fixed_update(frame_delta)
        self._update()
        self._post_update(frame_delta)
        self._sync_texts()
        ctx.gamepad.advance()

    def run(self, frames: int, delta: float) -> GameState:
        """Play ``frames`` frames and return the state the game ends in."""
        for _ in range(frames):
            self.step(delta)
        return self.ctx.state.current


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="reincarnated-ball", description="Run the game without a display."
    )
    parser.add_argument("--frames", type=int, default=600, help="number of frames to play")
    parser.add_argument("--delta", type=float, default=1.0 / 60.0, help="seconds per frame")
    parser.add_argument("--level", type=int, default=None, help="start playing at this level")
    args = parser.parse_args(argv)

    if args.frames < 0:
        parser.error("--frames must not be negative")
    if args.delta < 0:
        parser.error("--delta must not be negative")
    if args.level is not None and args.level < 0:
        parser.error("--level must not be negative")

    if args.level is None:
        game = Game()
    else:
        game = Game(GameState.IN_GAME, WantedLevel(args.level, 0))
    state = game.run(args.frames, args.delta)
    print(state.name)
    return 0