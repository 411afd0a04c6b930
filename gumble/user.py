"""Users connected to a server and their statistics."""

import ipaddress
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, List, Optional, Union

from gumble.version import Version

if TYPE_CHECKING:
    from gumble.channel import Channel

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass
class UserStatsUDP:
    """Counts of UDP packets sent to or from the server."""

    good: int = 0
    late: int = 0
    lost: int = 0
    resync: int = 0


@dataclass(eq=False)
class UserStats:
    """Additional information about a user."""

    user: Optional["User"] = None
    from_client: UserStatsUDP = field(default_factory=UserStatsUDP)
    from_server: UserStatsUDP = field(default_factory=UserStatsUDP)

    udp_packets: int = 0
    udp_ping_average: float = 0.0
    udp_ping_variance: float = 0.0

    tcp_packets: int = 0
    tcp_ping_average: float = 0.0
    tcp_ping_variance: float = 0.0

    version: Version = field(default_factory=Version)
    connected: Optional[datetime] = None
    """When the user connected to the server."""
    idle: timedelta = field(default_factory=timedelta)
    bandwidth: int = 0
    certificates: List[bytes] = field(default_factory=list)
    """The user's certificate chain, DER encoded."""
    strong_certificate: bool = False
    celt_versions: List[int] = field(default_factory=list)
    opus: bool = False
    ip: Optional[IPAddress] = None


@dataclass(eq=False)
class User:
    """A user currently connected to the server."""

    session: int
    user_id: int = 0
    """Not meaningful unless the user is registered."""
    name: str = ""
    channel: Optional["Channel"] = None

    muted: bool = False
    deafened: bool = False
    suppressed: bool = False
    self_muted: bool = False
    self_deafened: bool = False
    priority_speaker: bool = False
    recording: bool = False

    comment: str = ""
    """Empty if there is no comment or it still has to be requested."""
    comment_hash: Optional[bytes] = None
    hash: str = ""
    """The hash of the user's certificate (may be empty)."""
    texture: Optional[bytes] = None
    texture_hash: Optional[bytes] = None

    stats: Optional[UserStats] = None
    """None until the stats have been requested."""

    def is_registered(self) -> bool:
        """Return True if the user is registered and so has a valid user ID."""
        return self.user_id > 0


class Users(dict):
    """A mapping of session IDs to users."""

    def create(self, session: int) -> User:
        """Add a new user with the given session, replacing any existing one."""
        user = User(session=session)
        self[session] = user
        return user

    def find(self, name: str) -> Optional[User]:
        """Return the user with the given name, or None if there is none."""
        return next((user for user in self.values() if user.name == name), None)