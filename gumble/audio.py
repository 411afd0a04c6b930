"""Audio constants, packets and codec registry."""

import abc
import queue
import threading
from dataclasses import dataclass, field
from datetime import timedelta
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

if TYPE_CHECKING:
    from gumble.user import User
    from gumble.voicetarget import VoiceTarget

AUDIO_SAMPLE_RATE = 48000
"""Sample rate in hertz of incoming and outgoing audio."""

AUDIO_DEFAULT_INTERVAL = timedelta(milliseconds=10)
"""Default interval at which audio packets are sent."""

AUDIO_DEFAULT_FRAME_SIZE = AUDIO_SAMPLE_RATE // 100
"""Number of audio frames sent in a 10ms window."""

AUDIO_MAXIMUM_FRAME_SIZE = AUDIO_SAMPLE_RATE // 1000 * 60
"""Largest audio frame size from another user that is processed."""

AUDIO_DEFAULT_DATA_BYTES = 40
"""Default number of bytes an audio frame can use."""

AUDIO_CHANNELS = 1
"""Number of channels in an audio stream."""

AUDIO_CODEC_ID_OPUS = 4

_CODEC_SLOTS = 8


@dataclass(eq=False)
class AudioPacket:
    """Incoming audio samples and information about them."""

    client: Any = None
    sender: Optional["User"] = None
    target: Optional["VoiceTarget"] = None
    audio_buffer: List[int] = field(default_factory=list)
    """PCM samples, signed 16 bit."""
    has_position: bool = False
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(eq=False)
class AudioStreamEvent:
    """Passed to an audio listener when a user's audio stream starts.

    The listener must keep taking packets from ``packets``.
    """

    client: Any = None
    user: Optional["User"] = None
    packets: "queue.Queue[Optional[AudioPacket]]" = field(default_factory=queue.Queue)


class AudioEncoder(abc.ABC):
    """Encodes chunks of PCM samples."""

    @property
    @abc.abstractmethod
    def id(self) -> int:
        """The codec ID."""

    @abc.abstractmethod
    def encode(self, pcm: Sequence[int], frame_size: int, max_data_bytes: int) -> bytes:
        """Encode PCM samples into at most ``max_data_bytes`` bytes."""

    @abc.abstractmethod
    def reset(self) -> None:
        """Reset the encoder state."""


class AudioDecoder(abc.ABC):
    """Decodes encoded audio into PCM samples."""

    @property
    @abc.abstractmethod
    def id(self) -> int:
        """The codec ID."""

    @abc.abstractmethod
    def decode(self, data: bytes, frame_size: int) -> List[int]:
        """Decode ``data`` into PCM samples."""

    @abc.abstractmethod
    def reset(self) -> None:
        """Reset the decoder state."""


class AudioCodec(abc.ABC):
    """Creates encoders and decoders for one codec."""

    @property
    @abc.abstractmethod
    def id(self) -> int:
        """The codec ID."""

    @abc.abstractmethod
    def new_encoder(self) -> AudioEncoder:
        """Return a new encoder."""

    @abc.abstractmethod
    def new_decoder(self) -> AudioDecoder:
        """Return a new decoder."""


_codecs: List[Optional[AudioCodec]] = [None] * _CODEC_SLOTS
_codecs_lock = threading.Lock()


def _check_id(codec_id: int) -> None:
    if not 0 <= codec_id < _CODEC_SLOTS:
        raise ValueError(f"codec id out of range: {codec_id}")


def register_audio_codec(codec_id: int, codec: Optional[AudioCodec]) -> None:
    """Register ``codec`` under ``codec_id`` (0-7); None unregisters it."""
    _check_id(codec_id)
    with _codecs_lock:
        _codecs[codec_id] = codec


def get_audio_codec(codec_id: int) -> Optional[AudioCodec]:
    """Return the codec registered under ``codec_id``, or None."""
    _check_id(codec_id)
    with _codecs_lock:
        return _codecs[codec_id]