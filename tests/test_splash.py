from reincarnated_ball.context import GameContext, GameState
from reincarnated_ball.fade import FadeTransitionType, TransitionSpeed
from reincarnated_ball.splash import SplashScreen, game_init_update
from reincarnated_ball.vector import Vec2


def finish_fade(ctx, limit=1000):
    for _ in range(limit):
        ctx.fade_transition.update(ctx.world, ctx.fade, 0.1)
        if not ctx.fade.busy:
            return
    raise AssertionError("fade never finished")


def test_game_init_moves_to_splash():
    ctx = GameContext()
    game_init_update(ctx)
    assert ctx.state.apply() == (GameState.GAME_INIT, GameState.SPLASH_SCREEN)


def test_enter_spawns_logo_and_requests_fade_in():
    ctx = GameContext()
    splash = SplashScreen()
    splash.enter(ctx)
    (child,) = ctx.world.children_of(splash.entity)
    assert child.components["sprite"] == "bevy_logo"
    assert ctx.world.global_translation(child.id) == Vec2(88.0, 48.0)
    assert ctx.fade.request.request_valid and ctx.fade.request.is_fade_in
    assert ctx.fade.request.speed is TransitionSpeed.MEDIUM
    assert ctx.fade.request.transition_type is FadeTransitionType.HORIZONTAL
    assert ctx.sound.current_main_theme == ctx.sound.sound_list.main_menu_sound


def test_exit_despawns_logo():
    ctx = GameContext()
    splash = SplashScreen()
    splash.enter(ctx)
    splash.exit(ctx)
    assert len(ctx.world) == 0


def test_short_frame_does_not_start_fade_out():
    ctx = GameContext()
    splash = SplashScreen()
    ctx.time.advance(0.01)
    splash.fixed_update(ctx)
    assert not splash.is_fading_out
    assert not ctx.fade.request.request_valid


def test_long_frame_requests_fade_out():
    ctx = GameContext()
    splash = SplashScreen()
    ctx.time.advance(0.015625)
    splash.fixed_update(ctx)
    assert splash.is_fading_out
    assert ctx.fade.request.request_valid and not ctx.fade.request.is_fade_in
    assert ctx.fade.request.speed is TransitionSpeed.FAST
    assert ctx.fade.request.transition_type is FadeTransitionType.HORIZONTAL


def test_goes_to_main_menu_after_fade_out():
    ctx = GameContext()
    splash = SplashScreen()
    ctx.time.advance(0.02)
    splash.fixed_update(ctx)
    splash.fixed_update(ctx)
    assert ctx.state.pending is None

    finish_fade(ctx)
    splash.fixed_update(ctx)
    assert splash.is_changing_to_main_menu
    assert ctx.state.apply() == (GameState.GAME_INIT, GameState.MAIN_MENU)

    splash.fixed_update(ctx)
    assert ctx.state.pending is None