"""Channel permission bits."""

from enum import IntFlag


class Permission(IntFlag):
    """A bitmask of permissions given to a user."""

    NONE = 0

    # Permissions that can be applied in any channel.
    WRITE = 1 << 0
    TRAVERSE = 1 << 1
    ENTER = 1 << 2
    SPEAK = 1 << 3
    MUTE_DEAFEN = 1 << 4
    MOVE = 1 << 5
    MAKE_CHANNEL = 1 << 6
    LINK_CHANNEL = 1 << 7
    WHISPER = 1 << 8
    TEXT_MESSAGE = 1 << 9
    MAKE_TEMPORARY_CHANNEL = 1 << 10

    # Permissions that can only be applied in the root channel.
    KICK = 0x10000 << 0
    BAN = 0x10000 << 1
    REGISTER = 0x10000 << 2
    REGISTER_SELF = 0x10000 << 3

    def has(self, other: "Permission") -> bool:
        """Return True if every bit of ``other`` is set in this mask."""
        return self & other == other