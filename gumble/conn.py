"""Framed control-protocol connection."""

import socket
import struct
import threading
from enum import IntEnum
from typing import Optional, Tuple

from gumble.varint import encode

DEFAULT_PORT = 64738
"""The default port on which Mumble servers listen."""

_HEADER = struct.Struct(">HI")
_POSITION = struct.Struct("<fff")
_FINAL_FLAG = 0x2000


class PacketType(IntEnum):
    """Control protocol message types."""

    VERSION = 0
    UDP_TUNNEL = 1
    AUTHENTICATE = 2
    PING = 3
    REJECT = 4
    SERVER_SYNC = 5
    CHANNEL_REMOVE = 6
    CHANNEL_STATE = 7
    USER_REMOVE = 8
    USER_STATE = 9
    BAN_LIST = 10
    TEXT_MESSAGE = 11
    PERMISSION_DENIED = 12
    ACL = 13
    QUERY_USERS = 14
    CRYPT_SETUP = 15
    CONTEXT_ACTION_MODIFY = 16
    CONTEXT_ACTION = 17
    USER_LIST = 18
    VOICE_TARGET = 19
    PERMISSION_QUERY = 20
    CODEC_VERSION = 21
    USER_STATS = 22
    REQUEST_BLOB = 23
    SERVER_CONFIG = 24
    SUGGEST_CONFIG = 25


class PacketTooLargeError(ValueError):
    """Raised when an incoming packet exceeds the allowed size."""


class Conn:
    """A control protocol connection over a stream socket."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock
        self.timeout = 20.0
        self.maximum_packet_bytes = 10 * 1024 * 1024
        self._write_lock = threading.Lock()

    def __enter__(self) -> "Conn":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def read_packet(self) -> Tuple[int, bytes]:
        """Read one packet and return its type and payload.

        Only one thread should read from a connection.
        """
        self.sock.settimeout(self.timeout)
        ptype, length = _HEADER.unpack(self._read_exact(_HEADER.size))
        if length > self.maximum_packet_bytes:
            raise PacketTooLargeError("packet larger than maximum allowed size")
        return ptype, self._read_exact(length)

    def write_packet(self, ptype: int, data: bytes) -> None:
        """Write a packet of the given type."""
        frame = _HEADER.pack(ptype, len(data)) + bytes(data)
        with self._write_lock:
            self.sock.sendall(frame)

    def write_audio(
        self,
        format: int,
        target: int,
        sequence: int,
        final: bool,
        data: bytes,
        position: Optional[Tuple[float, float, float]] = None,
    ) -> None:
        """Write a tunnelled audio packet, optionally with an (x, y, z) position."""
        length = len(data)
        if final:
            length |= _FINAL_FLAG
        header = bytes([((format << 5) | target) & 0xFF]) + encode(sequence) + encode(length)
        payload = header + bytes(data)
        if position is not None:
            payload += _POSITION.pack(*position)
        self.write_packet(PacketType.UDP_TUNNEL, payload)

    def close(self) -> None:
        """Close the underlying socket."""
        self.sock.close()

    def _read_exact(self, size: int) -> bytes:
        buffer = bytearray()
        while len(buffer) < size:
            chunk = self.sock.recv(size - len(buffer))
            if not chunk:
                raise EOFError("connection closed")
            buffer += chunk
        return bytes(buffer)