"""Channels in a server's channel tree."""

from dataclasses import dataclass, field
from typing import Optional

from gumble.user import Users


@dataclass(eq=False)
class Channel:
    """A channel in the server's channel tree."""

    id: int
    name: str = ""
    parent: Optional["Channel"] = None
    """The parent channel; None for the root channel."""
    children: "Channels" = field(default_factory=lambda: Channels())
    """The channels directly underneath this one."""
    links: "Channels" = field(default_factory=lambda: Channels())
    """The channels linked to this one."""
    users: Users = field(default_factory=Users)
    """The users currently in the channel."""
    description: str = ""
    """Empty if there is no description or it still has to be requested."""
    description_hash: Optional[bytes] = None
    """None once the description itself is known."""
    max_users: int = 0
    """Zero means the server's per-channel limit applies."""
    position: int = 0
    temporary: bool = False

    def is_root(self) -> bool:
        """Return True if this is the server's root channel."""
        return self.id == 0

    def find(self, *names: str) -> Optional["Channel"]:
        """Return the channel reached by following ``names`` down from here.

        With no names the channel itself is returned; None is returned if
        any name on the path has no matching child.
        """
        channel: Optional[Channel] = self
        for name in names:
            channel = next(
                (child for child in channel.children.values() if child.name == name),
                None,
            )
            if channel is None:
                return None
        return channel


class Channels(dict):
    """A mapping of channel IDs to channels."""

    def create(self, channel_id: int) -> Channel:
        """Add a new, empty channel with the given ID, replacing any existing one."""
        channel = Channel(id=channel_id)
        self[channel_id] = channel
        return channel

    def find(self, *names: str) -> Optional[Channel]:
        """Return the channel whose path of names from the root matches ``names``.

        Returns None if the collection holds no root channel.
        """
        root = self.get(0)
        if not names or root is None:
            return root
        return root.find(*names)