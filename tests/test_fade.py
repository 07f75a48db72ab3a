import pytest

from reincarnated_ball.fade import (
    FadeExternalData,
    FadeTransition,
    FadeTransitionType,
    TransitionSpeed,
)
from reincarnated_ball.vector import Vec2, screen_center, screen_size
from reincarnated_ball.world import World


def run_until_done(fade, world, external, delta=0.1, limit=1000):
    for _ in range(limit):
        fade.update(world, external, delta)
        if not fade.is_transitioning:
            return
    raise AssertionError("fade never finished")


def test_request_fade_sets_request():
    external = FadeExternalData()
    external.request_fade(True, TransitionSpeed.FAST, FadeTransitionType.VERTICAL)
    assert external.request.request_valid
    assert external.request.is_fade_in
    assert external.request.speed is TransitionSpeed.FAST
    assert external.request.transition_type is FadeTransitionType.VERTICAL
    assert external.busy


def test_start_without_request_does_nothing():
    fade = FadeTransition()
    external = FadeExternalData()
    fade.start_request(external)
    assert not fade.is_transitioning
    assert fade.offset == Vec2()


def test_fade_in_vertical_starts_from_center():
    fade = FadeTransition()
    external = FadeExternalData()
    external.request_fade(True, TransitionSpeed.MEDIUM, FadeTransitionType.VERTICAL)
    fade.start_request(external)
    assert fade.offset == screen_center()
    assert fade.is_transitioning
    assert external.is_fading_in
    assert not external.request.request_valid


def test_fade_out_horizontal_start_offset():
    fade = FadeTransition()
    external = FadeExternalData()
    external.request_fade(False, TransitionSpeed.SLOW, FadeTransitionType.HORIZONTAL)
    fade.start_request(external)
    assert fade.offset == Vec2(screen_center().x, 0.0)
    assert not fade.is_fading_in
    assert fade.is_transitioning


def test_fade_in_vertical_finishes_at_zero():
    world = World()
    fade = FadeTransition()
    external = FadeExternalData()
    external.request_fade(True, TransitionSpeed.FAST, FadeTransitionType.VERTICAL)
    fade.update(world, external, 0.1)
    assert external.is_current_transitioning
    run_until_done(fade, world, external)
    assert fade.offset.x == 0.0
    assert not external.is_current_transitioning
    assert not external.busy


def test_fade_out_vertical_finishes_at_center():
    world = World()
    fade = FadeTransition()
    external = FadeExternalData()
    external.request_fade(False, TransitionSpeed.SLOW, FadeTransitionType.VERTICAL)
    run_until_done(fade, world, external)
    assert fade.offset.x == screen_center().x
    assert not external.is_fading_in


def test_fade_out_horizontal_finishes_at_center():
    world = World()
    fade = FadeTransition()
    external = FadeExternalData()
    external.request_fade(False, TransitionSpeed.MEDIUM, FadeTransitionType.HORIZONTAL)
    run_until_done(fade, world, external)
    assert fade.offset.y == screen_center().y


@pytest.mark.parametrize(
    "slower,faster",
    [(TransitionSpeed.SLOW, TransitionSpeed.MEDIUM), (TransitionSpeed.MEDIUM, TransitionSpeed.FAST)],
)
def test_faster_speed_moves_further(slower, faster):
    offsets = []
    for speed in (slower, faster):
        fade = FadeTransition()
        external = FadeExternalData()
        external.request_fade(True, speed, FadeTransitionType.VERTICAL)
        fade.update(World(), external, 0.5)
        offsets.append(fade.offset.x)
    assert offsets[1] < offsets[0]


def test_spawn_entities_at_screen_center():
    world = World()
    fade = FadeTransition()
    roots = fade.spawn_entities(world)
    assert len(roots) == 4
    for root in roots:
        assert world.get(root).transform.translation == screen_center()
        (child,) = world.children_of(root)
        assert child.components["sprite"] == "fade_in_out"
        assert child.components["repeated"] == (2, 2, 56, 16)


def test_update_places_panels_from_offset():
    world = World()
    fade = FadeTransition()
    fade.spawn_entities(world)
    external = FadeExternalData()
    external.request_fade(True, TransitionSpeed.SLOW, FadeTransitionType.HORIZONTAL)
    fade.update(world, external, 0.2)
    translations = {world.get(r).transform.translation for r in fade.entities.values()}
    assert fade.offset in translations
    assert screen_size() - fade.offset in translations


def test_idle_update_clears_transitioning_flag():
    external = FadeExternalData(is_current_transitioning=True)
    FadeTransition().update(World(), external, 0.1)
    assert not external.is_current_transitioning