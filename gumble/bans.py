"""Server ban list."""

import ipaddress
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(eq=False)
class Ban:
    """An entry in the server ban list.

    Changes take effect only once the ban list is sent back to the server.
    """

    address: Optional[IPAddress] = None
    mask: Optional[int] = None
    """The prefix length the ban applies to."""
    name: str = ""
    hash: str = ""
    """The certificate hash of the banned user."""
    reason: str = ""
    start: Optional[datetime] = None
    duration: timedelta = field(default_factory=timedelta)
    _unbanned: bool = field(default=False, init=False, repr=False)

    @property
    def unbanned(self) -> bool:
        """True if the entry is to be removed from the server."""
        return self._unbanned

    def unban(self) -> None:
        """Mark the entry for removal from the server."""
        self._unbanned = True

    def ban(self) -> None:
        """Undo a previous unban()."""
        self._unbanned = False


class BanList(list):
    """A list of ban entries."""

    def add(
        self,
        address: Union[str, IPAddress],
        mask: Optional[int] = None,
        reason: str = "",
        duration: timedelta = timedelta(),
    ) -> Ban:
        """Append and return a new ban entry."""
        ban = Ban(
            address=ipaddress.ip_address(address),
            mask=mask,
            reason=reason,
            duration=duration,
        )
        self.append(ban)
        return ban

    def active(self) -> List[Ban]:
        """Return the entries that have not been unbanned."""
        return [ban for ban in self if not ban.unbanned]