"""Events passed to client event listeners."""

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import TYPE_CHECKING, Any, List, Optional

from gumble.acl import ACL
from gumble.bans import BanList
from gumble.contextaction import ContextAction
from gumble.permission import Permission
from gumble.textmessage import TextMessage
from gumble.userlist import RegisteredUsers
from gumble.version import Version

if TYPE_CHECKING:
    from gumble.channel import Channel
    from gumble.user import User


class DisconnectType(IntEnum):
    """Why a client disconnected from a server."""

    ERROR = 1
    KICKED = 2
    BANNED = 3
    USER = 4

    def has(self, other: "DisconnectType") -> bool:
        """Return True if every bit of ``other`` is set in this value."""
        return self & other == other


class UserChangeType(IntFlag):
    """A bitmask of what changed for a user."""

    NONE = 0
    CONNECTED = 1 << 0
    DISCONNECTED = 1 << 1
    KICKED = 1 << 2
    BANNED = 1 << 3
    REGISTERED = 1 << 4
    UNREGISTERED = 1 << 5
    NAME = 1 << 6
    CHANNEL = 1 << 7
    COMMENT = 1 << 8
    AUDIO = 1 << 9
    TEXTURE = 1 << 10
    PRIORITY_SPEAKER = 1 << 11
    RECORDING = 1 << 12
    STATS = 1 << 13

    def has(self, other: "UserChangeType") -> bool:
        """Return True if every bit of ``other`` is set in this mask."""
        return self & other == other


class ChannelChangeType(IntFlag):
    """A bitmask of what changed for a channel."""

    NONE = 0
    CREATED = 1 << 0
    REMOVED = 1 << 1
    MOVED = 1 << 2
    NAME = 1 << 3
    LINKS = 1 << 4
    DESCRIPTION = 1 << 5
    POSITION = 1 << 6
    PERMISSION = 1 << 7
    MAX_USERS = 1 << 8

    def has(self, other: "ChannelChangeType") -> bool:
        """Return True if every bit of ``other`` is set in this mask."""
        return self & other == other


class PermissionDeniedType(IntEnum):
    """Why the client was denied permission to perform an action."""

    OTHER = 0
    PERMISSION = 1
    SUPER_USER = 2
    INVALID_CHANNEL_NAME = 3
    TEXT_TOO_LONG = 4
    TEMPORARY_CHANNEL = 6
    MISSING_CERTIFICATE = 7
    INVALID_USER_NAME = 8
    CHANNEL_FULL = 9
    NESTING_LIMIT = 10
    CHANNEL_COUNT_LIMIT = 11

    def has(self, other: "PermissionDeniedType") -> bool:
        """Return True if every bit of ``other`` is set in this value."""
        return self & other == other


class ContextActionChangeType(IntEnum):
    """How a context action changed."""

    ADD = 0
    REMOVE = 1


@dataclass(eq=False)
class ConnectEvent:
    client: Any = None
    welcome_message: Optional[str] = None
    maximum_bitrate: Optional[int] = None


@dataclass(eq=False)
class DisconnectEvent:
    client: Any = None
    type: DisconnectType = DisconnectType.ERROR
    string: str = ""


@dataclass(eq=False)
class TextMessageEvent(TextMessage):
    client: Any = None


@dataclass(eq=False)
class UserChangeEvent:
    client: Any = None
    type: UserChangeType = UserChangeType.NONE
    user: Optional["User"] = None
    actor: Optional["User"] = None
    string: str = ""


@dataclass(eq=False)
class ChannelChangeEvent:
    client: Any = None
    type: ChannelChangeType = ChannelChangeType.NONE
    channel: Optional["Channel"] = None


@dataclass(eq=False)
class PermissionDeniedEvent:
    client: Any = None
    type: PermissionDeniedType = PermissionDeniedType.OTHER
    channel: Optional["Channel"] = None
    user: Optional["User"] = None
    permission: Permission = Permission.NONE
    string: str = ""


@dataclass(eq=False)
class UserListEvent:
    client: Any = None
    user_list: RegisteredUsers = field(default_factory=RegisteredUsers)


@dataclass(eq=False)
class ACLEvent:
    client: Any = None
    acl: Optional[ACL] = None


@dataclass(eq=False)
class BanListEvent:
    client: Any = None
    ban_list: BanList = field(default_factory=BanList)


@dataclass(eq=False)
class ContextActionChangeEvent:
    client: Any = None
    type: ContextActionChangeType = ContextActionChangeType.ADD
    context_action: Optional[ContextAction] = None


@dataclass(eq=False)
class ServerConfigEvent:
    client: Any = None

    maximum_bitrate: Optional[int] = None
    welcome_message: Optional[str] = None
    allow_html: Optional[bool] = None
    maximum_message_length: Optional[int] = None
    maximum_image_message_length: Optional[int] = None
    maximum_users: Optional[int] = None

    codec_alpha: Optional[int] = None
    codec_beta: Optional[int] = None
    codec_prefer_alpha: Optional[bool] = None
    codec_opus: Optional[bool] = None

    suggest_version: Optional[Version] = None
    suggest_positional: Optional[bool] = None
    suggest_push_to_talk: Optional[bool] = None


__all__: List[str] = [
    "DisconnectType",
    "UserChangeType",
    "ChannelChangeType",
    "PermissionDeniedType",
    "ContextActionChangeType",
    "ConnectEvent",
    "DisconnectEvent",
    "TextMessageEvent",
    "UserChangeEvent",
    "ChannelChangeEvent",
    "PermissionDeniedEvent",
    "UserListEvent",
    "ACLEvent",
    "BanListEvent",
    "ContextActionChangeEvent",
    "ServerConfigEvent",
]