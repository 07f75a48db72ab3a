"""On-screen text labels and the fixed pool of slots that draws them."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

RENDERER_COUNT = 5


class TextAlignment(Enum):
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


class TextSize(Enum):
    SMALL = auto()
    MEDIUM = auto()


@dataclass(frozen=True)
class Text:
    """An immutable label; ``text`` is None when there is nothing to show."""

    text: str | None = None
    alignment: TextAlignment = TextAlignment.LEFT
    size: TextSize = TextSize.MEDIUM

    def with_content(self, content: str | None) -> Text:
        return dataclasses.replace(self, text=content)

    def update(self, content: str | None) -> Text | None:
        """A copy holding ``content``, or None when the content is unchanged."""
        if self.text == content:
            return None
        return self.with_content(content)


class TextSlotsFullError(RuntimeError):
    """Raised when every text slot is already in use."""


class TextRenderers:
    """A fixed number of slots, each holding at most one label and a visibility flag."""

    def __init__(self, capacity: int = RENDERER_COUNT) -> None:
        self._texts: list[Text | None] = [None] * capacity
        self._visible: list[bool] = [False] * capacity

    def __len__(self) -> int:
        return len(self._texts)

    def __getitem__(self, slot: int) -> Text | None:
        return self._texts[slot]

    def add(self, text: Text) -> int:
        """Place ``text`` in the lowest free slot and return that slot."""
        for slot, current in enumerate(self._texts):
            if current is None:
                self._texts[slot] = text
                return slot
        raise TextSlotsFullError(f"Too many text. The limit is {len(self._texts)}.")

    def set(self, slot: int | None, text: Text) -> int:
        """Replace the text in ``slot``, or take a new slot when ``slot`` is None."""
        if slot is None:
            return self.add(text)
        self._texts[slot] = text
        return slot

    def remove(self, slot: int | None) -> None:
        if slot is not None:
            self._texts[slot] = None

    def set_visible(self, slot: int, visible: bool) -> None:
        self._visible[slot] = visible

    def is_visible(self, slot: int) -> bool:
        return self._visible[slot]

    def visible_texts(self) -> Iterator[tuple[int, Text]]:
        """The occupied, visible slots in slot order."""
        for slot, (text, visible) in enumerate(zip(self._texts, self._visible)):
            if visible and text is not None:
                yield slot, text