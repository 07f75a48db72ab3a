"""The main menu: pick between starting the game and the credits."""

from __future__ import annotations

from dataclasses import dataclass

from .context import GameContext, GameState
from .fade import FadeTransitionType, TransitionSpeed
from .text import Text, TextAlignment, TextSize
from .vector import Transform, Vec2, screen_center
from .world import GamepadButton, World

START_GAME = "\ue002Start Game "
TITLE = "\ue002I was reincarnated as a ball "
CREDIT = "Credit "

CURSOR_TILE = 16
CURSOR_VISIBLE_TIME = 0.5
CURSOR_HIDDEN_TIME = 0.2
DEFAULT_REPEAT = (1, 1, 64, 64)


def _spawn_cursor(world: World, position: Vec2, parent: int, middle_size: int) -> int:
    """A selection cursor: two corner pieces around ``middle_size`` centre tiles."""
    owner = world.spawn(Transform(position), parent)
    world.spawn(
        Transform(Vec2(0.0, 0.0)),
        owner,
        sprite="selection_cursor_corner",
        hflip=False,
        visible=True,
        repeated=DEFAULT_REPEAT,
    )
    world.spawn(
        Transform(Vec2(float((middle_size + 1) * CURSOR_TILE), 0.0)),
        owner,
        sprite="selection_cursor_corner",
        hflip=True,
        visible=True,
        repeated=DEFAULT_REPEAT,
    )
    world.spawn(
        Transform(Vec2(float(CURSOR_TILE), 0.0)),
        owner,
        sprite="selection_cursor_center",
        hflip=False,
        visible=True,
        repeated=(1, middle_size, CURSOR_TILE, CURSOR_TILE),
    )
    return owner


@dataclass
class MainMenu:
    """Runtime state of the main menu."""

    is_selected_start_button: bool = True
    should_selected_button_visible: bool = True
    timer: float = 0.0
    request_sent_to_next_state: bool = False
    is_transitioning_out: bool = False
    target_next_state: GameState = GameState.IN_GAME
    main_object_entity: int | None = None
    start_game_cursor_entity: int | None = None
    credit_cursor_entity: int | None = None

    def enter(self, ctx: GameContext) -> None:
        """Build the menu, start its theme and fade the screen in."""
        world = ctx.world
        center = screen_center()
        x = center.x - 50.0
        y = center.y + 25.0

        root = world.spawn(Transform(Vec2(x, y)))
        world.spawn(
            Transform(Vec2(-x, -y + 30.0)),
            root,
            text=Text(TITLE, TextAlignment.CENTER, TextSize.MEDIUM),
        )
        world.spawn(Transform(Vec2(0.0, 0.0)), root, text=Text(START_GAME, size=TextSize.SMALL))
        world.spawn(Transform(Vec2(20.0, 20.0)), root, text=Text(CREDIT, size=TextSize.SMALL))
        world.spawn(
            Transform(Vec2(-x - 16.0, -y - 16.0)),
            root,
            sprite="menu_background",
            repeated=(3, 4, 64, 64),
        )

        self.is_selected_start_button = True
        self.should_selected_button_visible = True
        self.timer = 0.0
        self.request_sent_to_next_state = False
        self.is_transitioning_out = False
        self.target_next_state = GameState.IN_GAME
        self.main_object_entity = root
        self.start_game_cursor_entity = _spawn_cursor(world, Vec2(-7.0, -11.0), root, 5)
        self.credit_cursor_entity = _spawn_cursor(world, Vec2(8.0, 9.0), root, 3)

        ctx.sound.change_main_sound(ctx.sound.sound_list.main_menu_sound, 1)
        ctx.fade.request_fade(True, TransitionSpeed.MEDIUM, FadeTransitionType.VERTICAL)

    def exit(self, ctx: GameContext) -> None:
        if self.main_object_entity is not None and self.main_object_entity in ctx.world:
            ctx.world.despawn(self.main_object_entity)

    def _select(self, ctx: GameContext, start: bool) -> None:
        ctx.sound.play_sound_effect(ctx.sound.sound_list.menu_cursor_change_sound)
        self.is_selected_start_button = start
        self.should_selected_button_visible = True
        self.timer = 0.0

    def input_update(self, ctx: GameContext) -> None:
        """Move the selection with the d-pad and confirm it with the east button."""
        if self.is_transitioning_out or ctx.fade.busy:
            return

        gamepad = ctx.gamepad
        if gamepad.pressed(GamepadButton.DPAD_UP) and not self.is_selected_start_button:
            self._select(ctx, True)
        if gamepad.pressed(GamepadButton.DPAD_DOWN) and self.is_selected_start_button:
            self._select(ctx, False)

        if gamepad.just_pressed(GamepadButton.EAST):
            self.is_transitioning_out = True
            self.target_next_state = (
                GameState.IN_GAME if self.is_selected_start_button else GameState.CREDIT
            )
            ctx.sound.play_sound_effect(ctx.sound.sound_list.menu_cursor_select)
            ctx.fade.request_fade(False, TransitionSpeed.MEDIUM, FadeTransitionType.VERTICAL)

    def _set_cursor_visible(self, world: World, owner: int | None, visible: bool) -> None:
        if owner is None or owner not in world:
            return
        for child in world.children_of(owner):
            if "sprite" in child.components:
                child.components["visible"] = visible

    def cursor_animation_update(self, ctx: GameContext) -> None:
        """Blink the cursor of the selected entry and hide the other one."""
        self.timer += ctx.time.delta
        if self.should_selected_button_visible:
            if self.timer >= CURSOR_VISIBLE_TIME:
                self.should_selected_button_visible = False
                self.timer = 0.0
        elif self.timer >= CURSOR_HIDDEN_TIME:
            self.should_selected_button_visible = True
            self.timer = 0.0

        blink = self.should_selected_button_visible
        self._set_cursor_visible(
            ctx.world, self.credit_cursor_entity, not self.is_selected_start_button and blink
        )
        self._set_cursor_visible(
            ctx.world, self.start_game_cursor_entity, self.is_selected_start_button and blink
        )

    def transition_update(self, ctx: GameContext) -> None:
        """Once the fade-out has finished, switch to the chosen state.

        The wanted level's ``level`` is reset to the first level.
        """
        if not self.is_transitioning_out or self.request_sent_to_next_state:
            return
        if ctx.fade.busy:
            return
        ctx.state.set(self.target_next_state)
        if ctx.wanted_level is not None:
            ctx.wanted_level.level = 0
        self.request_sent_to_next_state = True

    def update(self, ctx: GameContext) -> None:
        self.input_update(ctx)
        self.cursor_animation_update(ctx)
        self.transition_update(ctx)