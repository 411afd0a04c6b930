"""Chat messages."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, NamedTuple, Optional

if TYPE_CHECKING:
    from gumble.channel import Channel
    from gumble.user import User


class Recipients(NamedTuple):
    """The session and channel IDs a message is addressed to."""

    sessions: List[int]
    channel_ids: List[int]
    tree_ids: List[int]


@dataclass(eq=False)
class TextMessage:
    """A chat message received from or sent to the server."""

    sender: Optional["User"] = None
    users: List["User"] = field(default_factory=list)
    channels: List["Channel"] = field(default_factory=list)
    trees: List["Channel"] = field(default_factory=list)
    """Channels that receive the message along with all their sub-channels."""
    message: str = ""

    def recipients(self) -> Recipients:
        """Return the IDs of the users, channels and trees addressed."""
        return Recipients(
            sessions=[user.session for user in self.users],
            channel_ids=[channel.id for channel in self.channels],
            tree_ids=[channel.id for channel in self.trees],
        )