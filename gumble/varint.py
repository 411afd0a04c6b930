"""Variable-length integer encoding used in voice packets."""

import struct

MAX_VARINT_LEN = 10
"""The maximum number of bytes an encoded varint can take."""

_INT32_MAX = 2**31 - 1
_INT64_MAX = 2**63 - 1


def encode(value: int) -> bytes:
    """Encode ``value`` in the varint format.

    Raises ValueError if the value cannot be represented.
    """
    # 111111xx: byte-inverted negative two bit number (~xx)
    if -4 <= value <= -1:
        return bytes([0xFC | (~value & 0xFF)])
    # 111110__ + varint: negative recursive varint
    if value < 0:
        return b"\xf8" + encode(-value)
    # 0xxxxxxx: 7-bit positive number
    if value <= 0x7F:
        return bytes([value])
    # 10xxxxxx + 1 byte: 14-bit positive number
    if value <= 0x3FFF:
        return bytes([((value >> 8) & 0x3F) | 0x80, value & 0xFF])
    # 110xxxxx + 2 bytes: 21-bit positive number
    if value <= 0x1FFFFF:
        return bytes([((value >> 16) & 0x1F) | 0xC0, (value >> 8) & 0xFF, value & 0xFF])
    # 1110xxxx + 3 bytes: 28-bit positive number
    if value <= 0xFFFFFFF:
        return bytes(
            [
                ((value >> 24) & 0x0F) | 0xE0,
                (value >> 16) & 0xFF,
                (value >> 8) & 0xFF,
                value & 0xFF,
            ]
        )
    # 111100__ + int: 32-bit positive number
    if value <= _INT32_MAX:
        return b"\xf0" + struct.pack(">I", value)
    # 111101__ + long: 64-bit number
    if value <= _INT64_MAX:
        return b"\xf4" + struct.pack(">Q", value)
    raise ValueError(f"varint out of range: {value}")


def decode(data) -> tuple[int, int]:
    """Decode the first varint in ``data``.

    Returns the value and the number of bytes it used. Raises ValueError if
    the data is empty, truncated or malformed.
    """
    if len(data) == 0:
        raise ValueError("empty varint")
    first = data[0]
    size = len(data)
    if first & 0x80 == 0:
        return first, 1
    if first & 0xC0 == 0x80 and size >= 2:
        return (first & 0x3F) << 8 | data[1], 2
    if first & 0xE0 == 0xC0 and size >= 3:
        return (first & 0x1F) << 16 | data[1] << 8 | data[2], 3
    if first & 0xF0 == 0xE0 and size >= 4:
        return (first & 0x0F) << 24 | data[1] << 16 | data[2] << 8 | data[3], 4
    if first & 0xFC == 0xF0 and size >= 5:
        return struct.unpack_from(">I", bytes(data[1:5]))[0], 5
    if first & 0xFC == 0xF4 and size >= 9:
        return struct.unpack_from(">q", bytes(data[1:9]))[0], 9
    if first & 0xFC == 0xF8:
        value, used = decode(data[1:])
        return -value, used + 1
    if first & 0xFC == 0xFC:
        return ~(first & 0x03), 1
    raise ValueError("truncated or malformed varint")