"""Screen fade transitions made of four sliding panels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .vector import Transform, Vec2, screen_center, screen_size
from .world import World

FADE_SPRITE = "fade_in_out"
FADE_REPEAT = (2, 2, 56, 16)


class _VisualPivot(Enum):
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_RIGHT = auto()
    BOTTOM_LEFT = auto()


_VISUAL_OFFSETS = {
    _VisualPivot.TOP_LEFT: Vec2(0.0, 0.0),
    _VisualPivot.TOP_RIGHT: Vec2(-120.0, 0.0),
    _VisualPivot.BOTTOM_RIGHT: Vec2(-120.0, -80.0),
    _VisualPivot.BOTTOM_LEFT: Vec2(0.0, -80.0),
}


class FadeTransitionType(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()


class TransitionSpeed(Enum):
    """Speed of the panels, in pixels per second."""

    SLOW = 50.0
    MEDIUM = 60.0
    FAST = 70.0


@dataclass
class FadeRequest:
    request_valid: bool = False
    is_fade_in: bool = False
    speed: TransitionSpeed = TransitionSpeed.SLOW
    transition_type: FadeTransitionType = FadeTransitionType.HORIZONTAL


@dataclass
class FadeExternalData:
    """What game states see of the fade: its status and a pending request."""

    is_current_transitioning: bool = False
    is_fading_in: bool = False
    request: FadeRequest = field(default_factory=FadeRequest)

    def request_fade(
        self, is_fade_in: bool, speed: TransitionSpeed, transition_type: FadeTransitionType
    ) -> None:
        self.request = FadeRequest(True, is_fade_in, speed, transition_type)

    @property
    def busy(self) -> bool:
        """True while a fade runs or is waiting to start."""
        return self.is_current_transitioning or self.request.request_valid


@dataclass
class FadeTransition:
    """Runtime state of the fade and the panel entities it moves."""

    is_transitioning: bool = False
    is_fading_in: bool = False
    transition_type: FadeTransitionType = FadeTransitionType.HORIZONTAL
    transition_speed: TransitionSpeed = TransitionSpeed.SLOW
    offset: Vec2 = field(default_factory=Vec2)
    entities: dict[_VisualPivot, int] = field(default_factory=dict)

    def spawn_entities(self, world: World) -> list[int]:
        """Spawn the four panels at the screen center and return their root ids."""
        center = screen_center()
        for pivot, visual_offset in _VISUAL_OFFSETS.items():
            root = world.spawn(Transform(center))
            world.spawn(
                Transform(visual_offset), root, sprite=FADE_SPRITE, repeated=FADE_REPEAT
            )
            self.entities[pivot] = root
        return list(self.entities.values())

    def _set_full_fade_in(self, external: FadeExternalData) -> None:
        self.is_fading_in = False
        self.is_transitioning = False
        self.offset = Vec2()
        external.is_current_transitioning = False
        external.is_fading_in = self.is_fading_in

    def _set_full_fade_out(self, external: FadeExternalData) -> None:
        self.is_fading_in = True
        self.is_transitioning = False
        self.offset = screen_center()
        external.is_current_transitioning = False
        external.is_fading_in = self.is_fading_in

    def start_request(self, external: FadeExternalData) -> None:
        """Begin the transition held in the external request, if one is pending."""
        request = external.request
        if not request.request_valid:
            return

        self.is_fading_in = request.is_fade_in
        external.is_fading_in = self.is_fading_in
        self.transition_type = request.transition_type
        self.transition_speed = request.speed

        center = screen_center()
        vertical = self.transition_type is FadeTransitionType.VERTICAL
        if vertical:
            self.offset = Vec2(self.offset.x, center.y)
        else:
            self.offset = Vec2(center.x, self.offset.y)

        if self.is_fading_in:
            self._set_full_fade_out(external)
        else:
            self._set_full_fade_in(external)
            self.offset = Vec2(0.0, center.y) if vertical else Vec2(center.x, 0.0)

        self.is_transitioning = True
        request.request_valid = False

    def _advance(self, value: float, step: float, limit: float) -> float:
        if self.is_fading_in:
            value -= step
            if value <= 0.0:
                value = 0.0
                self.is_transitioning = False
        else:
            value += step
            if value >= limit:
                value = limit
                self.is_transitioning = False
        return value

    def _place_entities(self, world: World) -> None:
        size = screen_size()
        offset = self.offset
        for pivot, entity_id in self.entities.items():
            transform = world.get(entity_id).transform
            if pivot is _VisualPivot.TOP_LEFT:
                transform.translation = size - offset
            elif pivot is _VisualPivot.TOP_RIGHT:
                transform.translation = Vec2(offset.x, size.y - offset.y)
            elif pivot is _VisualPivot.BOTTOM_RIGHT:
                transform.translation = offset
            else:
                transform.translation = Vec2(size.x - offset.x, offset.y)

    def update(self, world: World, external: FadeExternalData, delta: float) -> None:
        """Start a pending request and move the panels by one frame of ``delta`` seconds."""
        if external.request.request_valid:
            self.start_request(external)

        if not self.is_transitioning:
            external.is_current_transitioning = False
            return

        center = screen_center()
        step = self.transition_speed.value * delta
        if self.transition_type is FadeTransitionType.VERTICAL:
            self.offset = Vec2(self._advance(self.offset.x, step, center.x), self.offset.y)
        else:
            self.offset = Vec2(self.offset.x, self._advance(self.offset.y, step, center.y))

        self._place_entities(world)
        external.is_current_transitioning = self.is_transitioning