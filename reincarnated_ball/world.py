"""Entities in a parent/child hierarchy, gamepad input and the game clock."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from .vector import Transform, Vec2


class GamepadButton(Enum):
    SOUTH = auto()
    EAST = auto()
    NORTH = auto()
    WEST = auto()
    DPAD_UP = auto()
    DPAD_DOWN = auto()
    DPAD_LEFT = auto()
    DPAD_RIGHT = auto()
    START = auto()
    SELECT = auto()
    LEFT_TRIGGER = auto()
    RIGHT_TRIGGER = auto()


class Gamepad:
    """Button state with per-frame press and release edges."""

    def __init__(self) -> None:
        self._held: set[GamepadButton] = set()
        self._just_pressed: set[GamepadButton] = set()
        self._just_released: set[GamepadButton] = set()

    def press(self, button: GamepadButton) -> None:
        if button not in self._held:
            self._held.add(button)
            self._just_pressed.add(button)

    def release(self, button: GamepadButton) -> None:
        if button in self._held:
            self._held.discard(button)
            self._just_released.add(button)

    def pressed(self, button: GamepadButton) -> bool:
        return button in self._held

    def just_pressed(self, button: GamepadButton) -> bool:
        return button in self._just_pressed

    def just_released(self, button: GamepadButton) -> bool:
        return button in self._just_released

    def advance(self) -> None:
        """Start a new frame: clear the press and release edges."""
        self._just_pressed.clear()
        self._just_released.clear()


@dataclass
class Time:
    """Elapsed time and the duration of the last frame, in seconds."""

    elapsed: float = 0.0
    delta: float = 0.0

    def advance(self, delta: float) -> None:
        if delta < 0:
            raise ValueError(f"time cannot go backwards: {delta}")
        self.delta = delta
        self.elapsed += delta


@dataclass
class Entity:
    id: int
    transform: Transform
    parent: int | None = None
    components: dict[str, Any] = field(default_factory=dict)
    children: list[int] = field(default_factory=list)


class World:
    """All live entities, kept in spawn order."""

    def __init__(self) -> None:
        self._entities: dict[int, Entity] = {}
        self._next_id = 0

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def spawn(
        self, transform: Transform | None = None, parent: int | None = None, **kwargs: Any
    ) -> int:
        """Create an entity with the given components and return its id."""
        if parent is not None and parent not in self._entities:
            raise KeyError(parent)
        entity_id = self._next_id
        self._next_id += 1
        self._entities[entity_id] = Entity(
            entity_id,
            transform if transform is not None else Transform(),
            parent,
            dict(kwargs),
        )
        if parent is not None:
            self._entities[parent].children.append(entity_id)
        return entity_id

    def despawn(self, entity_id: int) -> None:
        """Remove an entity together with all its descendants."""
        entity = self._entities.pop(entity_id)
        if entity.parent is not None and entity.parent in self._entities:
            self._entities[entity.parent].children.remove(entity_id)
        pending = list(entity.children)
        while pending:
            child = self._entities.pop(pending.pop(), None)
            if child is not None:
                pending.extend(child.children)

    def get(self, entity_id: int) -> Entity:
        return self._entities[entity_id]

    def entities(self) -> list[Entity]:
        return list(self._entities.values())

    def children_of(self, entity_id: int) -> list[Entity]:
        return [self._entities[child] for child in self.get(entity_id).children]

    def global_translation(self, entity_id: int) -> Vec2:
        """Position of an entity after applying every ancestor's transform."""
        entity = self.get(entity_id)
        position = entity.transform.translation
        parent_id = entity.parent
        while parent_id is not None:
            parent = self._entities[parent_id]
            t = parent.transform
            sx, sy = position.x * t.scale.x, position.y * t.scale.y
            cos, sin = math.cos(t.rotation), math.sin(t.rotation)
            position = t.translation + Vec2(sx * cos - sy * sin, sx * sin + sy * cos)
            parent_id = parent.parent
        return position