"""Hex-octet IPv4 decoder for /proc/net/route address columns.

The kernel prints each address as the 32-bit value in host (little-endian)
order, so ``0101A8C0`` reads as octets 01 01 A8 C0 and decodes to 192.168.1.1.
"""

import re
from ipaddress import IPv4Address

from procroute.core.errors import RouteBadInputError, RouteError

_HEX_CHUNK = re.compile(r"[0-9A-Fa-f]{1,2}")


def _parse_octet(chunk: str) -> int:
    # int(x, 16) also accepts signs, whitespace, underscores and non-ASCII digits
    if not _HEX_CHUNK.fullmatch(chunk):
        raise ValueError(f"invalid literal for int() with base 16: {chunk!r}")
    return int(chunk, 16)


def parse_ip(field: str) -> IPv4Address:
    """Decode an 8-hex-digit, byte-reversed field into an IPv4 address.

    Every 2-character chunk is parsed before the chunk count is checked, so a
    bad hex character is reported as a parse error even when the field also
    has the wrong length.

    Args:
        field: Hex field from the Destination or Gateway column

    Returns:
        Decoded IPv4Address

    Raises:
        RouteParseError: A chunk is not valid hex
        RouteBadInputError: The field does not yield exactly 4 octets
    """
    octets = []
    for start in range(0, len(field), 2):
        try:
            octets.append(_parse_octet(field[start:start + 2]))
        except ValueError as e:
            raise RouteError.wrap(e) from e

    if len(octets) != 4:
        raise RouteBadInputError(
            f"expected 4 octets in address field {field!r}, got {len(octets)}"
        )

    return IPv4Address(bytes(reversed(octets)))
