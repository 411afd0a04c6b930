"""UDP ping of a Mumble server."""

import os
import socket
import struct
import threading
import time
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from gumble.version import Version

_REPLY = struct.Struct(">I8sIII")


@dataclass(frozen=True)
class PingResponse:
    """Information about a server that answered a UDP ping."""

    address: Tuple[str, int]
    ping: float
    """Round-trip time in seconds."""
    version: Version
    connected_users: int
    maximum_users: int
    maximum_bitrate: int


def _parse_address(address: Union[str, Tuple[str, int]]) -> Tuple[str, int]:
    if not isinstance(address, str):
        host, port = address
        return host, int(port)
    if address.startswith("["):
        host, _, rest = address[1:].partition("]")
        if not rest.startswith(":"):
            raise ValueError(f"missing port in address {address!r}")
        return host, int(rest[1:])
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {address!r}")
    return host, int(port)


def ping(address: Union[str, Tuple[str, int]], interval: float, timeout: float) -> PingResponse:
    """Send a UDP ping to ``address`` ("host:port") and wait for the answer.

    If ``interval`` is positive, the ping is resent every ``interval``
    seconds. Raises TimeoutError if no valid answer arrives within
    ``timeout`` seconds.
    """
    if timeout < 0:
        raise ValueError("timeout must be positive")
    deadline = time.monotonic() + timeout
    host, port = _parse_address(address)
    family, socktype, proto, _, sockaddr = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)[0]

    with socket.socket(family, socktype, proto) as sock:
        sock.connect(sockaddr)
        sent: Dict[bytes, float] = {}
        sent_lock = threading.Lock()

        def send() -> None:
            ident = os.urandom(8)
            with sent_lock:
                sent[ident] = time.monotonic()
            try:
                sock.send(bytes(4) + ident)
            except OSError:
                pass

        stop = threading.Event()
        retransmitter = None
        if interval > 0:

            def retransmit() -> None:
                while not stop.wait(interval):
                    send()

            retransmitter = threading.Thread(target=retransmit, daemon=True)
            retransmitter.start()

        try:
            send()
            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("ping timed out")
                sock.settimeout(remaining)
                incoming = sock.recv(1024)
                if len(incoming) < _REPLY.size:
                    continue
                version, ident, users, maximum_users, bitrate = _REPLY.unpack_from(incoming)
                with sent_lock:
                    sent_at = sent.get(ident)
                if sent_at is None:
                    continue
                return PingResponse(
                    address=sock.getpeername()[:2],
                    ping=time.monotonic() - sent_at,
                    version=Version(version),
                    connected_users=users,
                    maximum_users=maximum_users,
                    maximum_bitrate=bitrate,
                )
        finally:
            stop.set()
            if retransmitter is not None:
                retransmitter.join()