"""Sound channels, a small mixer and the manager for music and sound effects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

MIXER_CHANNELS = 8
DEFAULT_VOLUME = 0.5


@dataclass(frozen=True)
class SoundList:
    """Names of the sounds the game plays."""

    main_menu_sound: str = "main_menu"
    credit_sound: str = "credit"
    menu_cursor_change_sound: str = "menu_cursor_change"
    menu_cursor_select: str = "menu_cursor_select"


@dataclass
class SoundChannel:
    """One sound being played, with its playback settings."""

    sound: str
    high_priority: bool = False
    volume: float = 1.0
    stereo: bool = False
    looping: bool = False
    playback: int = 1
    stopped: bool = False

    def stop(self) -> None:
        self.stopped = True


@dataclass(frozen=True)
class ChannelId:
    """A slot in the mixer plus the generation of the sound placed there."""

    index: int
    generation: int


class Mixer:
    """A fixed number of channels; high-priority sounds may evict low-priority ones."""

    def __init__(self, capacity: int = MIXER_CHANNELS) -> None:
        self._slots: list[SoundChannel | None] = [None] * capacity
        self._generations: list[int] = [0] * capacity

    def _place(self, index: int, channel: SoundChannel) -> ChannelId:
        self._slots[index] = channel
        self._generations[index] += 1
        return ChannelId(index, self._generations[index])

    def play_sound(self, channel: SoundChannel) -> ChannelId | None:
        """Start ``channel`` and return its id, or None when no slot can take it."""
        for index, current in enumerate(self._slots):
            if current is None or current.stopped:
                return self._place(index, channel)
        if channel.high_priority:
            for index, current in enumerate(self._slots):
                if current is not None and not current.high_priority:
                    current.stop()
                    return self._place(index, channel)
        return None

    def channel(self, channel_id: ChannelId) -> SoundChannel | None:
        """The channel behind ``channel_id``, or None if its slot was reused."""
        if not 0 <= channel_id.index < len(self._slots):
            return None
        if self._generations[channel_id.index] != channel_id.generation:
            return None
        return self._slots[channel_id.index]

    def active_channels(self) -> Iterator[SoundChannel]:
        return (c for c in self._slots if c is not None and not c.stopped)


@dataclass
class SoundManager:
    """Plays one looping main theme at a time and one-shot sound effects."""

    mixer: Mixer = field(default_factory=Mixer)
    sound_list: SoundList = field(default_factory=SoundList)
    enable: bool = True
    main_sound_channel_id: ChannelId | None = None
    current_main_theme: str | None = None

    def change_main_sound(self, target_sound: str, playback: int) -> None:
        """Switch the main theme; does nothing if it is already playing."""
        if not self.enable or self.current_main_theme == target_sound:
            return

        if self.main_sound_channel_id is not None:
            current = self.mixer.channel(self.main_sound_channel_id)
            if current is not None:
                current.stop()

        channel = SoundChannel(
            target_sound,
            high_priority=True,
            volume=DEFAULT_VOLUME,
            stereo=True,
            looping=True,
            playback=playback,
        )
        self.main_sound_channel_id = self.mixer.play_sound(channel)
        self.current_main_theme = target_sound

    def play_sound_effect(self, target_sound: str) -> None:
        if not self.enable:
            return
        self.mixer.play_sound(SoundChannel(target_sound, volume=DEFAULT_VOLUME, stereo=True))