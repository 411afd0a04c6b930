"""Ordered lists of event and audio listeners."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Union


@dataclass(eq=False)
class _Entry:
    listener: Any
    streams: Dict[Any, Any] = field(default_factory=dict)
    """Per-user audio streams handed to an audio listener."""


class Detacher:
    """Handle returned by ``attach``; detaching stops further events."""

    def __init__(self, owner: Union["Listeners", "AudioListeners"], entry: _Entry) -> None:
        self._owner = owner
        self._entry = entry

    def detach(self) -> None:
        """Remove the listener. Detaching more than once has no effect."""
        self._owner._remove(self._entry)


class _EntryStore:
    _entries: List[_Entry]

    def _remove(self, entry: _Entry) -> None:
        if entry in self._entries:
            self._entries.remove(entry)

    def _live_entries(self) -> Iterator[_Entry]:
        # Listeners may detach themselves or others while events are delivered.
        for entry in list(self._entries):
            if entry in self._entries:
                yield entry


class Listeners(_EntryStore):
    """Event listeners, called in the order they were attached."""

    def __init__(self) -> None:
        self._entries = []

    def attach(self, listener: Any) -> Detacher:
        """Add a listener to the end of the list and return its detacher."""
        entry = _Entry(listener)
        self._entries.append(entry)
        return Detacher(self, entry)

    def __iter__(self) -> Iterator[Any]:
        return (entry.listener for entry in list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def dispatch(self, method: str, event: Any) -> None:
        """Call ``listener.<method>(event)`` on every attached listener."""
        for entry in self._live_entries():
            getattr(entry.listener, method)(event)


class AudioListeners(_EntryStore):
    """Audio listeners, told in order when a user's audio stream begins."""

    def __init__(self) -> None:
        self._entries = []

    def attach(self, listener: Any) -> Detacher:
        """Add an audio listener to the end of the list and return its detacher."""
        entry = _Entry(listener)
        self._entries.append(entry)
        return Detacher(self, entry)

    def __iter__(self) -> Iterator[Any]:
        return (entry.listener for entry in list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)