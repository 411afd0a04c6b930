"""Mumble client and server versions."""

from dataclasses import dataclass


@dataclass
class Version:
    """A Mumble client or server version.

    ``version`` packs the semantic version into one integer: the major
    version in bits 16-31, the minor in bits 8-15 and the patch in bits 0-7.
    """

    version: int = 0
    release: str = ""
    os: str = ""
    os_version: str = ""

    def semantic_version(self) -> tuple[int, int, int]:
        """Return the (major, minor, patch) components."""
        major = (self.version >> 16) & 0xFFFF
        minor = (self.version >> 8) & 0xFF
        patch = self.version & 0xFF
        return major, minor, patch