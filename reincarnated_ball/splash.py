"""The boot state and the splash screen shown before the main menu."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .context import GameContext, GameState
from .fade import FadeTransitionType, TransitionSpeed
from .vector import Transform, Vec2

logger = logging.getLogger(__name__)

LOGO_POSITION = Vec2(88.0, 48.0)
MIN_FRAME_DELTA = 0.015625


def game_init_update(ctx: GameContext) -> None:
    """Leave the boot state for the splash screen."""
    ctx.state.set(GameState.SPLASH_SCREEN)


@dataclass
class SplashScreen:
    entity: int | None = None
    is_fading_out: bool = False
    is_changing_to_main_menu: bool = False

    def enter(self, ctx: GameContext) -> None:
        """Show the logo, start the theme and fade the screen in."""
        self.entity = ctx.world.spawn(Transform())
        ctx.world.spawn(
            Transform(LOGO_POSITION), self.entity, sprite="bevy_logo", repeated=(1, 1, 64, 64)
        )
        ctx.sound.change_main_sound(ctx.sound.sound_list.main_menu_sound, 1)
        ctx.fade.request_fade(True, TransitionSpeed.MEDIUM, FadeTransitionType.HORIZONTAL)

    def exit(self, ctx: GameContext) -> None:
        if self.entity is not None:
            ctx.world.despawn(self.entity)

    def fixed_update(self, ctx: GameContext) -> None:
        """Fade out once a frame is long enough, then go to the main menu."""
        if self.is_changing_to_main_menu:
            return

        if self.is_fading_out:
            if ctx.fade.busy:
                return
            ctx.state.set(GameState.MAIN_MENU)
            self.is_changing_to_main_menu = True
        elif ctx.time.delta >= MIN_FRAME_DELTA:
            ctx.fade.request_fade(False, TransitionSpeed.FAST, FadeTransitionType.HORIZONTAL)
            self.is_fading_out = True
            logger.info("Time: %s", ctx.time.delta)