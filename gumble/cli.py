"""Command that pings a Mumble server and prints what it reports."""

import argparse
import json
import re
import sys
from typing import List, Optional, Tuple

from gumble.conn import DEFAULT_PORT
from gumble.ping import ping

_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_PIECE = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Parse a duration such as "1.5s", "300ms" or "1m30s" into seconds."""
    body = text
    sign = 1.0
    if body and body[0] in "+-":
        if body[0] == "-":
            sign = -1.0
        body = body[1:]
    if body == "0":
        return 0.0
    if not body:
        raise ValueError(f"invalid duration {text!r}")
    total = 0.0
    pos = 0
    while pos < len(body):
        match = _PIECE.match(body, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()
    return sign * total


def _split_host_port(text: str) -> Tuple[str, str]:
    if text.startswith("["):
        end = text.find("]")
        if end < 0 or not text[end + 1 :].startswith(":"):
            raise ValueError(f"invalid address {text!r}")
        return text[1:end], text[end + 2 :]
    host, sep, port = text.rpartition(":")
    if not sep or ":" in host:
        raise ValueError(f"invalid address {text!r}")
    return host, port


def _join_host_port(host: str, port) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _format_fraction(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    digits = str(fraction).zfill(len(str(unit)) - 1).rstrip("0")
    return f"{whole}.{digits}"


def _format_duration(seconds: float) -> str:
    nanos = round(seconds * 1e9)
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)
    if nanos < 1_000:
        return f"{sign}{nanos}ns"
    if nanos < 1_000_000:
        return f"{sign}{_format_fraction(nanos, 1_000)}µs"
    if nanos < 1_000_000_000:
        return f"{sign}{_format_fraction(nanos, 1_000_000)}ms"
    hours, rest = divmod(nanos, 3_600_000_000_000)
    minutes, rest = divmod(rest, 60_000_000_000)
    text = _format_fraction(rest, 1_000_000_000) + "s"
    if hours or minutes:
        text = f"{minutes}m" + text
    if hours:
        text = f"{hours}h" + text
    return sign + text


def main(argv: Optional[List[str]] = None) -> int:
    """Run the ping command and return its exit status."""
    parser = argparse.ArgumentParser(
        prog="mumble-ping", usage="%(prog)s [flags] <destination>"
    )
    parser.add_argument(
        "-interval", "--interval", type=parse_duration, default=1.0,
        help="ping packet retransmission interval",
    )
    parser.add_argument(
        "-timeout", "--timeout", type=parse_duration, default=5.0,
        help="ping timeout until failure",
    )
    parser.add_argument(
        "-json", "--json", action="store_true", dest="json_output",
        help="output success response as JSON",
    )
    parser.add_argument("destination", nargs="*")
    args = parser.parse_args(argv)
    if len(args.destination) != 1:
        parser.print_help(sys.stderr)
        return 1

    server = args.destination[0]
    try:
        host, port = _split_host_port(server)
    except ValueError:
        host, port = server, str(DEFAULT_PORT)

    try:
        response = ping(_join_host_port(host, port), args.interval, args.timeout)
    except (OSError, ValueError) as err:
        print(f"{parser.prog}: {err}", file=sys.stderr)
        return 1

    major, minor, patch = response.version.semantic_version()
    address = _join_host_port(*response.address)
    version = f"{major}.{minor}.{patch}"
    if not args.json_output:
        print(f"Address:         {address}")
        print(f"Ping:            {_format_duration(response.ping)}")
        print(f"Version:         {version}")
        print(f"Connected Users: {response.connected_users}")
        print(f"Maximum Users:   {response.maximum_users}")
        print(f"Maximum Bitrate: {response.maximum_bitrate}")
    else:
        output = {
            "address": address,
            "ping": response.ping * 1000,
            "version": version,
            "connected_users": response.connected_users,
            "maximum_users": response.maximum_users,
            "maximum_bitrate": response.maximum_bitrate,
        }
        print(json.dumps(output, sort_keys=True, separators=(",", ":")))
    return 0