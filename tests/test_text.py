import pytest

from reincarnated_ball.text import (
    RENDERER_COUNT,
    Text,
    TextAlignment,
    TextRenderers,
    TextSize,
    TextSlotsFullError,
)


def test_text_defaults():
    text = Text("Small")
    assert text.text == "Small"
    assert text.alignment is TextAlignment.LEFT
    assert text.size is TextSize.MEDIUM
    assert Text().text is None


def test_with_content_keeps_other_fields():
    text = Text("a", TextAlignment.RIGHT, TextSize.SMALL)
    new = text.with_content("b")
    assert new == Text("b", TextAlignment.RIGHT, TextSize.SMALL)
    assert text.text == "a"


def test_update_same_content_is_none():
    assert Text("Balls: 1/3 ").update("Balls: 1/3 ") is None
    assert Text().update(None) is None


def test_update_new_content():
    text = Text("Success ! ", TextAlignment.CENTER)
    new = text.update(None)
    assert new == Text(None, TextAlignment.CENTER)


def test_add_fills_lowest_slots_then_raises():
    renderers = TextRenderers()
    slots = [renderers.add(Text(str(i))) for i in range(RENDERER_COUNT)]
    assert slots == list(range(RENDERER_COUNT))
    with pytest.raises(TextSlotsFullError):
        renderers.add(Text("overflow"))


def test_remove_frees_slot_for_reuse():
    renderers = TextRenderers()
    for i in range(3):
        renderers.add(Text(str(i)))
    renderers.remove(1)
    assert renderers[1] is None
    assert renderers.add(Text("again")) == 1
    assert renderers[1] == Text("again")


def test_remove_none_slot_is_harmless():
    renderers = TextRenderers()
    slot = renderers.add(Text("x"))
    renderers.remove(None)
    assert renderers[slot] == Text("x")


def test_set_replaces_or_adds():
    renderers = TextRenderers()
    slot = renderers.set(None, Text("first"))
    assert slot == 0
    assert renderers.set(slot, Text("second")) == slot
    assert renderers[slot] == Text("second")


def test_visible_texts_only_visible_and_present():
    renderers = TextRenderers()
    a = renderers.add(Text("a"))
    b = renderers.add(Text("b"))
    assert list(renderers.visible_texts()) == []
    renderers.set_visible(b, True)
    renderers.set_visible(3, True)
    assert list(renderers.visible_texts()) == [(b, Text("b"))]
    renderers.set_visible(a, True)
    assert [slot for slot, _ in renderers.visible_texts()] == [a, b]
    assert renderers.is_visible(a)