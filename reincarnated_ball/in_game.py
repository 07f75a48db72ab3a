"""The playing state: loading levels, aiming, throwing and judging the result."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass, field

from .context import GameContext, GameState
from .fade import FadeTransitionType, TransitionSpeed
from .in_game_control import (
    ROTATION_ACCEL_TIME,
    ROTATION_MAX_MULTIPLIER,
    ROTATION_SPEED,
    ball_position_on_controller,
    controller_forward,
    impulse_force,
    impulse_ratio,
    remap,
    rotate_controller,
    rotation_controls,
)
from .level import LEVELS, LevelSpawner
from .physics import PhysicObject
from .text import Text, TextAlignment, TextSize
from .vector import Transform, Vec2
from .world import GamepadButton

TITLE_DISPLAY_TIME = 2.5
FINISH_DISPLAY_TIME = 3.0
BALL_SPAWN_DELAY = 1.0
NO_FIRE_YET = -666.666
BEYOND_LAST_LEVEL = sys.maxsize

SUCCESS_TEXT = "Success ! "
FAIL_TEXT = "Fail, No balls left :( "


@dataclass
class WantedLevel:
    """The level to play and a counter that forces a reload when set."""

    level: int | None = None
    reload: int | None = None


@dataclass
class InGameData:
    """Runtime state of the level being played."""

    time_started_pressing_to_rotate: float = 0.0
    player_start_press_to_fire_time: float | None = None
    last_ball_fire_time: float = NO_FIRE_YET
    next_player_ball_to_use: int = 0
    nb_ball_fired: int = 0
    text_success_fail_added_time: float | None = None
    is_success: bool = False
    time_since_level_start: float = 0.0
    stabilized: bool = False
    balls_text: int | None = None
    levels_text: int | None = None


def ball_text(current_ball: int, max_ball: int) -> str | None:
    """The remaining-balls label, for levels of three or five balls."""
    if max_ball in (3, 5) and 0 <= current_ball <= max_ball:
        return f"Balls: {current_ball}/{max_ball} "
    return None


@dataclass
class InGame:
    """The in-game state and its systems."""

    data: InGameData = field(default_factory=InGameData)

    def enter(self, ctx: GameContext) -> None:
        """Create the status label, start the theme and request the first level if none is."""
        if ctx.wanted_level is None:
            ctx.wanted_level = WantedLevel(0, 0)

        balls_text = ctx.world.spawn(Transform(Vec2(-2.0, 4.0)))
        ctx.world.spawn(
            Transform(),
            balls_text,
            text=Text(None, TextAlignment.RIGHT, TextSize.SMALL),
        )
        self.data = InGameData(balls_text=balls_text, levels_text=None)
        ctx.sound.change_main_sound(ctx.sound.sound_list.main_menu_sound, 2)

    def exit(self, ctx: GameContext) -> None:
        world = ctx.world
        for entity_id in self._level_entities(ctx):
            if entity_id in world:
                world.despawn(entity_id)
        for entity_id in (self.data.balls_text, self.data.levels_text):
            if entity_id is not None and entity_id in world:
                world.despawn(entity_id)
        current = ctx.current_level
        current.level_index = None
        current.player_entity = None
        current.player_ball_selected = None

    @staticmethod
    def _level_entities(ctx: GameContext) -> list[int]:
        return [e.id for e in ctx.world.entities() if "level" in e.components]

    @staticmethod
    def _controller(ctx: GameContext) -> Transform | None:
        player = ctx.current_level.player_entity
        if player is None or player not in ctx.world:
            return None
        return ctx.world.get(player).transform

    def load_level(self, ctx: GameContext) -> None:
        """Replace the current level by the wanted one, or go to the credits past the last."""
        if ctx.wanted_level is None:
            ctx.wanted_level = WantedLevel()
        wanted: WantedLevel = ctx.wanted_level
        current = ctx.current_level

        if current.level_index == wanted.level and wanted.reload is None:
            return
        if ctx.fade.busy:
            return

        world = ctx.world
        for entity_id in self._level_entities(ctx):
            if entity_id in world:
                world.despawn(entity_id)
        current.player_ball_selected = None
        current.player_entity = None

        self.data = InGameData(
            time_since_level_start=ctx.time.elapsed,
            balls_text=self.data.balls_text,
            levels_text=self.data.levels_text,
        )

        level_id = wanted.level
        if level_id is not None and 0 <= level_id < len(LEVELS):
            LevelSpawner(world, current).spawn_initial(LEVELS[level_id])
            current.level_index = level_id
            wanted.reload = None
            ctx.fade.request_fade(True, TransitionSpeed.FAST, FadeTransitionType.VERTICAL)
        else:
            current.level_index = None
            ctx.state.set(GameState.CREDIT)

    def check_stabilized(self, ctx: GameContext) -> None:
        """Record whether every physic object has come to rest."""
        self.data.stabilized = all(
            e.components["physic"].velocity == Vec2()
            for e in ctx.world.entities()
            if "physic" in e.components
        )

    def update_text(self, ctx: GameContext) -> None:
        """Show the level title, then the balls left, then the result."""
        data = self.data
        if data.balls_text is None:
            return
        show_title = (ctx.time.elapsed - data.time_since_level_start) < TITLE_DISPLAY_TIME
        finished = data.text_success_fail_added_time is not None
        level = ctx.current_level.data()

        if finished:
            content: str | None = SUCCESS_TEXT if data.is_success else FAIL_TEXT
        elif show_title:
            content = level.title if level is not None else ""
        else:
            total = len(level.player_balls) if level is not None else 1
            content = ball_text(total - data.nb_ball_fired, total)

        alignment = TextAlignment.CENTER if finished or show_title else TextAlignment.RIGHT

        for entity in ctx.world.entities():
            if entity.parent != data.balls_text or "text" not in entity.components:
                continue
            updated = entity.components["text"].update(content)
            if updated is None:
                continue
            entity.components["text"] = dataclasses.replace(updated, alignment=alignment)

    def _place_selected_ball(self, ctx: GameContext, ratio: float) -> None:
        target = ball_position_on_controller(self._controller(ctx), ratio)
        selected = ctx.current_level.player_ball_selected
        if selected is None or selected not in ctx.world:
            return
        ctx.world.get(selected).transform.translation = target

    def player_control(self, ctx: GameContext) -> None:
        """Turn the controller, charge with the east button and throw on release."""
        level = ctx.current_level.data()
        if level is None:
            return
        data = self.data
        elapsed = ctx.time.elapsed

        if data.text_success_fail_added_time is not None:
            self._place_selected_ball(
                ctx, impulse_ratio(elapsed, data.player_start_press_to_fire_time)
            )
            return

        gamepad = ctx.gamepad
        direction = level.player_direction
        controls = rotation_controls(direction)

        if gamepad.just_pressed(controls.left_button) or gamepad.just_pressed(
            controls.right_button
        ):
            data.time_started_pressing_to_rotate = elapsed

        multiplier = remap(
            elapsed - data.time_started_pressing_to_rotate,
            0.0,
            ROTATION_ACCEL_TIME,
            1.0,
            ROTATION_MAX_MULTIPLIER,
        )
        change = ROTATION_SPEED * multiplier * ctx.time.delta

        for button, clockwise in ((controls.left_button, False), (controls.right_button, True)):
            if not gamepad.pressed(button) or ctx.current_level.player_entity is None:
                continue
            controller = self._controller(ctx)
            if controller is None:
                return
            controller.rotation = rotate_controller(
                controller.rotation, direction, change, clockwise
            )

        if gamepad.just_pressed(GamepadButton.EAST):
            data.player_start_press_to_fire_time = elapsed
        elif (
            gamepad.just_released(GamepadButton.EAST)
            and ctx.current_level.player_entity is not None
        ):
            controller = self._controller(ctx)
            if controller is None:
                return
            selected = ctx.current_level.player_ball_selected
            if selected is not None:
                forward = controller_forward(controller.rotation)
                force = impulse_force(elapsed, data.player_start_press_to_fire_time)
                physic: PhysicObject = ctx.world.get(selected).components["physic"]
                physic.impulse = forward * force
                physic.enable = True
                ctx.current_level.player_ball_selected = None
                data.player_start_press_to_fire_time = None
                data.last_ball_fire_time = elapsed
                data.nb_ball_fired += 1

        self._place_selected_ball(
            ctx, impulse_ratio(elapsed, data.player_start_press_to_fire_time)
        )

    def spawn_player_ball(self, ctx: GameContext) -> None:
        """Put the next ball on the controller a moment after the last throw."""
        data = self.data
        if ctx.time.elapsed - data.last_ball_fire_time < BALL_SPAWN_DELAY:
            return
        current = ctx.current_level
        if current.player_ball_selected is not None:
            return
        level = current.data()
        if level is None or data.next_player_ball_to_use >= len(level.player_balls):
            return
        target = ball_position_on_controller(self._controller(ctx), 0.0)
        LevelSpawner(ctx.world, current).spawn_player_ball(
            level, data.next_player_ball_to_use, target
        )
        data.next_player_ball_to_use += 1

    def detect_finish_level(self, ctx: GameContext) -> None:
        """Decide success or failure, then ask for the next level or a retry."""
        data = self.data
        elapsed = ctx.time.elapsed

        if data.text_success_fail_added_time is not None:
            if elapsed - data.text_success_fail_added_time < FINISH_DISPLAY_TIME:
                return
            fade = ctx.fade
            if fade.is_current_transitioning or not fade.is_fading_in or fade.request.request_valid:
                return
            wanted: WantedLevel = ctx.wanted_level
            if data.is_success:
                index = ctx.current_level.level_index
                wanted.level = index + 1 if index is not None else BEYOND_LAST_LEVEL
            else:
                wanted.reload = 0 if wanted.reload is None else wanted.reload + 1
            fade.request_fade(False, TransitionSpeed.MEDIUM, FadeTransitionType.VERTICAL)
            return

        enemies = sum(
            1
            for e in ctx.world.entities()
            if "team" in e.components and e.components["team"].is_enemy()
        )
        if enemies == 0:
            data.text_success_fail_added_time = elapsed
            data.is_success = True
            return

        level = ctx.current_level.data()
        if level is not None and data.stabilized and data.nb_ball_fired == len(level.player_balls):
            data.text_success_fail_added_time = elapsed
            data.is_success = False

    def update(self, ctx: GameContext) -> None:
        self.load_level(ctx)
        self.check_stabilized(ctx)
        self.update_text(ctx)
        self.player_control(ctx)
        self.spawn_player_ball(ctx)
        self.detect_finish_level(ctx)