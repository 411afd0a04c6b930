"""Channel access control lists."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from gumble.permission import Permission

if TYPE_CHECKING:
    from gumble.channel import Channel

ACL_GROUP_EVERYONE = "all"
ACL_GROUP_AUTHENTICATED = "auth"
ACL_GROUP_INSIDE_CHANNEL = "in"
ACL_GROUP_OUTSIDE_CHANNEL = "out"


@dataclass(eq=False)
class ACLUser:
    """A registered user who is, or can be, part of an ACL group or rule."""

    user_id: int
    name: str = ""


@dataclass(eq=False)
class ACLGroup:
    """A named group of registered users that rules can refer to."""

    name: str
    inherited: bool = False
    """Is the group inherited from the parent channel's ACL?"""
    inherit_users: bool = False
    """Are members inherited from the parent channel's ACL?"""
    inheritable: bool = False
    """Can child channels inherit the group?"""
    users_add: Dict[int, ACLUser] = field(default_factory=dict)
    users_remove: Dict[int, ACLUser] = field(default_factory=dict)
    users_inherited: Dict[int, ACLUser] = field(default_factory=dict)

    def contains(self, user_id: int) -> bool:
        """Return True if the user is added or inherited and not removed."""
        member = user_id in self.users_add or user_id in self.users_inherited
        return member and user_id not in self.users_remove


@dataclass(eq=False)
class ACLRule:
    """Permissions granted and denied to an ACL user or group."""

    applies_current: bool = False
    applies_children: bool = False
    inherited: bool = False
    granted: Permission = Permission.NONE
    denied: Permission = Permission.NONE
    user: Optional[ACLUser] = None
    group: Optional[ACLGroup] = None


@dataclass(eq=False)
class ACL:
    """The groups and rules attached to a channel."""

    channel: Optional["Channel"] = None
    groups: List[ACLGroup] = field(default_factory=list)
    rules: List[ACLRule] = field(default_factory=list)
    inherits: bool = False
    """Does the ACL inherit the parent channel's ACLs?"""