"""Helpers that make working with the client easier."""

from dataclasses import dataclass
from datetime import timedelta
from html.parser import HTMLParser
from typing import Any, Callable, List, Optional, Union

from gumble.textmessage import TextMessage

Handler = Optional[Callable[[Any], None]]


@dataclass
class Listener:
    """Event listener that calls whichever handler functions are set."""

    connect: Handler = None
    disconnect: Handler = None
    text_message: Handler = None
    user_change: Handler = None
    channel_change: Handler = None
    permission_denied: Handler = None
    user_list: Handler = None
    acl: Handler = None
    ban_list: Handler = None
    context_action_change: Handler = None
    server_config: Handler = None

    def on_connect(self, event: Any) -> None:
        if self.connect is not None:
            self.connect(event)

    def on_disconnect(self, event: Any) -> None:
        if self.disconnect is not None:
            self.disconnect(event)

    def on_text_message(self, event: Any) -> None:
        if self.text_message is not None:
            self.text_message(event)

    def on_user_change(self, event: Any) -> None:
        if self.user_change is not None:
            self.user_change(event)

    def on_channel_change(self, event: Any) -> None:
        if self.channel_change is not None:
            self.channel_change(event)

    def on_permission_denied(self, event: Any) -> None:
        if self.permission_denied is not None:
            self.permission_denied(event)

    def on_user_list(self, event: Any) -> None:
        if self.user_list is not None:
            self.user_list(event)

    def on_acl(self, event: Any) -> None:
        if self.acl is not None:
            self.acl(event)

    def on_ban_list(self, event: Any) -> None:
        if self.ban_list is not None:
            self.ban_list(event)

    def on_context_action_change(self, event: Any) -> None:
        if self.context_action_change is not None:
            self.context_action_change(event)

    def on_server_config(self, event: Any) -> None:
        if self.server_config is not None:
            self.server_config(event)


class ListenerFunc:
    """Event listener that passes every event to one function."""

    def __init__(self, func: Callable[[Any], None]) -> None:
        self.func = func

    def on_connect(self, event: Any) -> None:
        self.func(event)

    def on_disconnect(self, event: Any) -> None:
        self.func(event)

    def on_text_message(self, event: Any) -> None:
        self.func(event)

    def on_user_change(self, event: Any) -> None:
        self.func(event)

    def on_channel_change(self, event: Any) -> None:
        self.func(event)

    def on_permission_denied(self, event: Any) -> None:
        self.func(event)

    def on_user_list(self, event: Any) -> None:
        self.func(event)

    def on_acl(self, event: Any) -> None:
        self.func(event)

    def on_ban_list(self, event: Any) -> None:
        self.func(event)

    def on_context_action_change(self, event: Any) -> None:
        self.func(event)

    def on_server_config(self, event: Any) -> None:
        self.func(event)


_BLOCK_TAGS = frozenset(
    """address article aside audio blockquote canvas dd div dl fieldset
    figcaption figure footer form h1 h2 h3 h4 h5 h6 header hgroup hr noscript
    ol output p pre section table tfoot ul video""".split()
)


class _PlainTextParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: List[str] = []
        self.newline = False

    def handle_data(self, data: str) -> None:
        if data:
            self.parts.append(data)
            self.newline = False

    def handle_starttag(self, tag: str, attrs) -> None:
        if tag in _BLOCK_TAGS:
            if not self.newline:
                self.parts.append("\n")
                self.newline = True
        elif tag == "br":
            self.parts.append("\n")
            self.newline = True


def plain_text(message: Union[TextMessage, str]) -> str:
    """Return the message text without HTML tags or entities.

    Block-level elements and line breaks become newlines.
    """
    text = message if isinstance(message, str) else message.message
    parser = _PlainTextParser()
    parser.feed(text)
    parser.close()
    return "".join(parser.parts)


def channel_path(channel) -> List[str]:
    """Return the channel names from the root channel down to ``channel``."""
    names = []
    while channel is not None:
        names.append(channel.name)
        channel = channel.parent
    names.reverse()
    return names


_BITRATE_SAFETY = 5


def auto_bitrate_data_bytes(maximum_bitrate: int, interval: timedelta) -> int:
    """Return the audio data bytes that suit the server's maximum bitrate."""
    packets_per_second = timedelta(seconds=1) // interval
    return maximum_bitrate // (8 * (packets_per_second + _BITRATE_SAFETY)) - 32 - 10


def _auto_bitrate_connect(event: Any) -> None:
    if event.maximum_bitrate is not None:
        config = event.client.config
        config.audio_data_bytes = auto_bitrate_data_bytes(
            event.maximum_bitrate, config.audio_interval
        )


AUTO_BITRATE = Listener(connect=_auto_bitrate_connect)
"""Listener that sets the client's audio data bytes from the server's bitrate."""