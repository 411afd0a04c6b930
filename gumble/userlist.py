"""Registered users of a server."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Tuple

from gumble.acl import ACLUser

if TYPE_CHECKING:
    from gumble.channel import Channel


@dataclass(eq=False)
class RegisteredUser:
    """A user registered on the server."""

    user_id: int
    name: str = ""
    last_seen: Optional[datetime] = None
    last_channel: Optional["Channel"] = None
    _changed: bool = field(default=False, init=False, repr=False)
    _deregister: bool = field(default=False, init=False, repr=False)

    def set_name(self, name: str) -> None:
        """Rename the user; the change is sent with the user list."""
        self.name = name
        self._changed = True

    def deregister(self) -> None:
        """Mark the user for removal from the server."""
        self._deregister = True

    def register(self) -> None:
        """Undo a previous deregister()."""
        self._deregister = False

    def acl_user(self) -> ACLUser:
        """Return an ACLUser for this registered user."""
        return ACLUser(user_id=self.user_id, name=self.name)


class RegisteredUsers(list):
    """A list of registered users.

    Changes take effect only once the list is sent back to the server.
    """

    def pending_changes(self) -> List[Tuple[int, Optional[str]]]:
        """Return (user_id, name) for each changed user.

        The name is None for users that are to be deregistered.
        """
        return [
            (user.user_id, None if user._deregister else user.name)
            for user in self
            if user._deregister or user._changed
        ]