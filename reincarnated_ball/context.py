"""Game states and the context that every state's systems work on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from .fade import FadeExternalData, FadeTransition
from .level import CurrentLevel
from .physics import PhysicConfig
from .sound import SoundManager
from .text import TextRenderers
from .world import Gamepad, Time, World


class GameState(Enum):
    GAME_INIT = auto()
    SPLASH_SCREEN = auto()
    MAIN_MENU = auto()
    IN_GAME = auto()
    CREDIT = auto()


@dataclass
class StateMachine:
    """The current state and a change requested for the next frame."""

    current: GameState = GameState.GAME_INIT
    pending: GameState | None = None

    def set(self, state: GameState) -> None:
        self.pending = state

    def apply(self) -> tuple[GameState, GameState] | None:
        """Perform the requested change and return (exited, entered), or None."""
        if self.pending is None:
            return None
        exited, self.current, self.pending = self.current, self.pending, None
        return exited, self.current


@dataclass
class GameContext:
    """Everything the game's systems read and change."""

    world: World = field(default_factory=World)
    time: Time = field(default_factory=Time)
    gamepad: Gamepad = field(default_factory=Gamepad)
    state: StateMachine = field(default_factory=StateMachine)
    fade: FadeExternalData = field(default_factory=FadeExternalData)
    fade_transition: FadeTransition = field(default_factory=FadeTransition)
    sound: SoundManager = field(default_factory=SoundManager)
    texts: TextRenderers = field(default_factory=TextRenderers)
    current_level: CurrentLevel = field(default_factory=CurrentLevel)
    physic_config: PhysicConfig = field(default_factory=PhysicConfig.screen_boundary)
    # The level the in-game state should load; owned by that state.
    wanted_level: Any = None