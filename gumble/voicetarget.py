"""Whisper targets."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, NamedTuple

if TYPE_CHECKING:
    from gumble.channel import Channel
    from gumble.user import User


class _ChannelTarget(NamedTuple):
    channel: "Channel"
    recursive: bool
    links: bool
    group: str


@dataclass(eq=False)
class VoiceTarget:
    """A set of users and channels the client can whisper to.

    The ID must be in the range 1 to 30.
    """

    id: int
    users: List["User"] = field(default_factory=list)
    channels: List[_ChannelTarget] = field(default_factory=list)

    def clear(self) -> None:
        """Remove all users and channels."""
        self.users = []
        self.channels = []

    def add_user(self, user: "User") -> None:
        """Add a user to the target."""
        self.users.append(user)

    def add_channel(
        self,
        channel: "Channel",
        recursive: bool = False,
        links: bool = False,
        group: str = "",
    ) -> None:
        """Add a channel; with a group, only that ACL group's members are targeted."""
        self.channels.append(_ChannelTarget(channel, recursive, links, group))


VOICE_TARGET_LOOPBACK = VoiceTarget(id=31)
"""A target that makes the server return the audio to the client."""