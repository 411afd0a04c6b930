"""Client configuration."""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, List

from gumble.audio import (
    AUDIO_DEFAULT_DATA_BYTES,
    AUDIO_DEFAULT_FRAME_SIZE,
    AUDIO_DEFAULT_INTERVAL,
)
from gumble.listeners import AudioListeners, Detacher, Listeners


@dataclass(eq=False)
class Config:
    """Settings used by a client. One config should not be shared by clients."""

    username: str = ""
    password: str = ""
    tokens: List[str] = field(default_factory=list)
    """Access tokens sent to the server when connecting."""
    audio_interval: timedelta = AUDIO_DEFAULT_INTERVAL
    """Interval between audio packets: 10, 20, 40 or 60 ms."""
    audio_data_bytes: int = AUDIO_DEFAULT_DATA_BYTES
    listeners: Listeners = field(default_factory=Listeners)
    audio_listeners: AudioListeners = field(default_factory=AudioListeners)

    def attach(self, listener: Any) -> Detacher:
        """Attach an event listener."""
        return self.listeners.attach(listener)

    def attach_audio(self, listener: Any) -> Detacher:
        """Attach an audio listener."""
        return self.audio_listeners.attach(listener)

    def audio_frame_size(self) -> int:
        """Return the audio frame size that matches the audio interval."""
        return (self.audio_interval // AUDIO_DEFAULT_INTERVAL) * AUDIO_DEFAULT_FRAME_SIZE