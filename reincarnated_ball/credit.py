"""The credits: scrolling names, a thank-you note and a prompt to leave."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .context import GameContext, GameState
from .fade import FadeTransitionType, TransitionSpeed
from .text import Text, TextAlignment, TextSize
from .vector import Transform, Vec2, screen_center, screen_size
from .world import GamepadButton, World

CREDIT_LINES = (
    "\ue002R and H ",
    "\ue002CanariPack 8BIT ",
    "\ue002QuinqueFive font  ",
)
THANK_YOU = "\ue002Thank You For Playing "
PRESS_ANY_INPUT = "\ue002Press Any Input "

CREDIT_SCROLL_SPEED = 20.0
THANKS_SCROLL_SPEED = 25.0
CREDIT_END_Y = -50.0
TIME_TO_SPAWN_THANKS = 10.0
EXIT_VISIBLE_TIME = 0.8
EXIT_HIDDEN_TIME = 0.2

QUIT_BUTTONS = (
    GamepadButton.SOUTH,
    GamepadButton.EAST,
    GamepadButton.DPAD_UP,
    GamepadButton.DPAD_DOWN,
    GamepadButton.DPAD_LEFT,
    GamepadButton.DPAD_RIGHT,
    GamepadButton.START,
    GamepadButton.SELECT,
    GamepadButton.LEFT_TRIGGER,
    GamepadButton.RIGHT_TRIGGER,
)


def _spawn_text_list(
    world: World,
    position: Vec2,
    start: float,
    offset: float,
    lines: Sequence[str],
    size: TextSize = TextSize.SMALL,
    alignment: TextAlignment = TextAlignment.CENTER,
) -> int:
    """An owner entity with one text child per line, stacked ``offset`` apart."""
    owner = world.spawn(Transform(position))
    pos = start
    for line in lines:
        world.spawn(Transform(Vec2(0.0, pos)), owner, text=Text(line, alignment, size))
        pos += offset
    return owner


@dataclass
class Credit:
    """Runtime state of the credits screen."""

    is_transitioning_out: bool = False
    request_sent_to_next_state: bool = False
    text_to_quit_added: bool = False
    text_thanks_added: bool = False
    should_exit_button_visible: bool = True
    exit_button_visibility_timer: float = 0.0
    time_since_in_credit: float = 0.0
    credit_text: int | None = None
    thank_you_text: int | None = None
    exit_text_entity: int | None = None
    background: int | None = None

    def enter(self, ctx: GameContext) -> None:
        """Spawn the background and the credit lines, start the theme, fade in."""
        world = ctx.world
        background = world.spawn(Transform(Vec2(-7.0, -13.0)))
        world.spawn(Transform(), background, sprite="credit_background", repeated=(3, 4, 64, 64))

        credit_text = _spawn_text_list(
            world, Vec2(0.0, screen_size().y + 50.0), -30.0, 35.0, CREDIT_LINES
        )

        self.is_transitioning_out = False
        self.request_sent_to_next_state = False
        self.text_to_quit_added = False
        self.text_thanks_added = False
        self.should_exit_button_visible = True
        self.exit_button_visibility_timer = 0.0
        self.time_since_in_credit = 0.0
        self.exit_text_entity = None
        self.background = background
        self.credit_text = credit_text
        self.thank_you_text = None

        ctx.sound.change_main_sound(ctx.sound.sound_list.credit_sound, 1)
        ctx.fade.request_fade(True, TransitionSpeed.MEDIUM, FadeTransitionType.VERTICAL)

    def exit(self, ctx: GameContext) -> None:
        for entity in (
            self.background,
            self.credit_text,
            self.exit_text_entity,
            self.thank_you_text,
        ):
            if entity is not None and entity in ctx.world:
                ctx.world.despawn(entity)

    def input_update(self, ctx: GameContext) -> None:
        """Once the prompt is shown, any button fades out towards the main menu."""
        if self.is_transitioning_out or not self.text_to_quit_added:
            return
        if not any(ctx.gamepad.just_pressed(button) for button in QUIT_BUTTONS):
            return

        ctx.sound.play_sound_effect(ctx.sound.sound_list.menu_cursor_select)
        self.is_transitioning_out = True
        ctx.fade.request_fade(False, TransitionSpeed.FAST, FadeTransitionType.VERTICAL)
        if self.credit_text is not None and self.credit_text in ctx.world:
            ctx.world.despawn(self.credit_text)

    def text_rolling_update(self, ctx: GameContext) -> None:
        """Scroll the texts up and add the thank-you note and the prompt in turn."""
        world = ctx.world
        delta = ctx.time.delta
        self.time_since_in_credit += delta

        center = screen_center()
        only_thanks_left = True
        thanks_reached_target = False

        if self.thank_you_text is not None and self.thank_you_text in world:
            transform = world.get(self.thank_you_text).transform
            target_y = center.y - 20.0
            y = transform.translation.y - THANKS_SCROLL_SPEED * delta
            if y < target_y:
                y = target_y
                thanks_reached_target = True
            transform.translation = Vec2(transform.translation.x, y)

        if self.credit_text is not None and self.credit_text in world:
            transform = world.get(self.credit_text).transform
            if transform.translation.y < CREDIT_END_Y:
                world.despawn(self.credit_text)
            else:
                transform.translation = Vec2(
                    transform.translation.x,
                    transform.translation.y - CREDIT_SCROLL_SPEED * delta,
                )
                only_thanks_left = False

        if self.text_to_quit_added:
            return
        if not self.text_thanks_added and self.time_since_in_credit >= TIME_TO_SPAWN_THANKS:
            self.thank_you_text = _spawn_text_list(
                world, Vec2(0.0, screen_size().y + 10.0), 0.0, 0.0, (THANK_YOU,)
            )
            self.text_thanks_added = True
        elif only_thanks_left and thanks_reached_target:
            self.exit_text_entity = _spawn_text_list(
                world,
                Vec2(0.0, 125.0),
                0.0,
                0.0,
                (PRESS_ANY_INPUT,),
                TextSize.SMALL,
                TextAlignment.RIGHT,
            )
            self.text_to_quit_added = True

    def exit_button_visibility_update(self, ctx: GameContext) -> None:
        """Blink state of the prompt once it exists."""
        if self.exit_text_entity is None:
            return
        self.exit_button_visibility_timer += ctx.time.delta
        if self.should_exit_button_visible:
            if self.exit_button_visibility_timer >= EXIT_VISIBLE_TIME:
                self.should_exit_button_visible = False
                self.exit_button_visibility_timer = 0.0
        elif self.exit_button_visibility_timer >= EXIT_HIDDEN_TIME:
            self.should_exit_button_visible = True
            self.exit_button_visibility_timer = 0.0

    def transition_update(self, ctx: GameContext) -> None:
        """Go back to the main menu once the fade-out has finished."""
        if not self.is_transitioning_out or self.request_sent_to_next_state:
            return
        if ctx.fade.busy:
            return
        ctx.state.set(GameState.MAIN_MENU)
        self.request_sent_to_next_state = True

    def update(self, ctx: GameContext) -> None:
        self.input_update(ctx)
        self.text_rolling_update(ctx)
        self.exit_button_visibility_update(ctx)
        self.transition_update(ctx)