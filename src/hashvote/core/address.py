"""Client identity helpers.

Clients are identified by their IPv4 address, stored as an unsigned 32-bit
integer in network byte order.
"""

from __future__ import annotations

import ipaddress

from hashvote.core.errors import InvalidInputError

IPV4_MAX = 0xFFFFFFFF


def parse_ipv4(value: str) -> int:
    """Convert a dotted IPv4 address to its 32-bit integer value.

    IPv4-mapped IPv6 addresses (``::ffff:a.b.c.d``) are unwrapped first.

    Args:
        value: Address string as reported by the transport.

    Returns:
        Unsigned integer in ``[0, 2**32 - 1]``.

    Raises:
        InvalidInputError: If the value is not an IPv4 address.
    """
    try:
        address = ipaddress.ip_address((value or "").strip())
    except ValueError as err:
        raise InvalidInputError(f"Not an IPv4 address: {value!r}") from err

    if isinstance(address, ipaddress.IPv6Address):
        mapped = address.ipv4_mapped
        if mapped is None:
            raise InvalidInputError(f"Only IPv4 addresses are supported: {value!r}")
        address = mapped

    return int(address)


def format_ipv4(address: int) -> str:
    """Return the dotted form of a 32-bit address."""
    if not 0 <= address <= IPV4_MAX:
        raise InvalidInputError(f"Address out of IPv4 range: {address}")
    return str(ipaddress.IPv4Address(address))
