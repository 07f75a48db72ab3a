import pytest

from reincarnated_ball.context import GameContext, GameState
from reincarnated_ball.credit import CREDIT_LINES, PRESS_ANY_INPUT, THANK_YOU, Credit
from reincarnated_ball.fade import FadeTransitionType, TransitionSpeed
from reincarnated_ball.text import TextAlignment
from reincarnated_ball.world import GamepadButton


def _entered():
    ctx = GameContext()
    credit = Credit()
    credit.enter(ctx)
    return ctx, credit


def _child_texts(ctx, owner):
    return [child.components["text"] for child in ctx.world.children_of(owner)]


def _frame(ctx, credit, delta):
    ctx.gamepad.advance()
    ctx.time.advance(delta)
    credit.update(ctx)


def _with_prompt():
    ctx, credit = _entered()
    ctx.fade.request.request_valid = False
    ctx.world.get(credit.credit_text).transform.translation = ctx.world.get(
        credit.credit_text
    ).transform.translation.__class__(0.0, -60.0)
    _frame(ctx, credit, 10.0)
    _frame(ctx, credit, 10.0)
    return ctx, credit


def test_enter_spawns_credit_lines_in_order():
    ctx, credit = _entered()
    texts = _child_texts(ctx, credit.credit_text)
    assert [t.text for t in texts] == list(CREDIT_LINES)
    ys = [c.transform.translation.y for c in ctx.world.children_of(credit.credit_text)]
    assert [b - a for a, b in zip(ys, ys[1:])] == [35.0, 35.0]


def test_enter_requests_fade_and_credit_theme():
    ctx, _ = _entered()
    assert ctx.fade.request.request_valid
    assert ctx.fade.request.is_fade_in
    assert ctx.fade.request.speed is TransitionSpeed.MEDIUM
    assert ctx.fade.request.transition_type is FadeTransitionType.VERTICAL
    assert ctx.sound.current_main_theme == ctx.sound.sound_list.credit_sound


def test_credit_text_scrolls_up():
    ctx, credit = _entered()
    before = ctx.world.get(credit.credit_text).transform.translation.y
    _frame(ctx, credit, 1.0)
    after = ctx.world.get(credit.credit_text).transform.translation.y
    assert before - after == pytest.approx(20.0)


def test_credit_text_removed_past_the_top():
    ctx, credit = _entered()
    transform = ctx.world.get(credit.credit_text).transform
    transform.translation = transform.translation.__class__(0.0, -60.0)
    _frame(ctx, credit, 0.1)
    assert credit.credit_text not in ctx.world


def test_thank_you_appears_after_ten_seconds():
    ctx, credit = _entered()
    _frame(ctx, credit, 5.0)
    assert credit.thank_you_text is None
    _frame(ctx, credit, 5.0)
    assert credit.text_thanks_added
    assert [t.text for t in _child_texts(ctx, credit.thank_you_text)] == [THANK_YOU]


def test_prompt_appears_once_thanks_is_alone_and_placed():
    ctx, credit = _with_prompt()
    assert credit.text_to_quit_added
    texts = _child_texts(ctx, credit.exit_text_entity)
    assert [t.text for t in texts] == [PRESS_ANY_INPUT]
    assert texts[0].alignment is TextAlignment.RIGHT


def test_input_ignored_before_prompt():
    ctx, credit = _entered()
    ctx.gamepad.press(GamepadButton.START)
    credit.input_update(ctx)
    assert credit.is_transitioning_out is False


def test_any_button_after_prompt_fades_out():
    ctx, credit = _with_prompt()
    ctx.gamepad.press(GamepadButton.START)
    credit.input_update(ctx)
    assert credit.is_transitioning_out
    assert ctx.fade.request.request_valid
    assert ctx.fade.request.is_fade_in is False
    assert ctx.fade.request.speed is TransitionSpeed.FAST


def test_transition_goes_to_main_menu_after_fade():
    ctx, credit = _with_prompt()
    ctx.gamepad.press(GamepadButton.SOUTH)
    credit.input_update(ctx)
    credit.transition_update(ctx)
    assert ctx.state.pending is None
    ctx.fade.request.request_valid = False
    credit.transition_update(ctx)
    assert ctx.state.pending is GameState.MAIN_MENU
    assert credit.request_sent_to_next_state


def test_exit_removes_everything():
    ctx, credit = _with_prompt()
    credit.exit(ctx)
    assert len(ctx.world) == 0