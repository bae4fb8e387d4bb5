"""
Address ordering, stepping, ranges and classification.
"""

import logging
from typing import Iterator

from netaddr import IPAddress, IPNetwork, iprange_to_cidrs

from ipnav.exceptions import InvalidRange, OutOfRange
from ipnav.ip.codec import (
    MAX_ADDRESS,
    IPv4Address,
    coerce_address,
)

logger = logging.getLogger(__name__)


# RFC 1918 - Address Allocation for Private Internets
PRIVATE_RANGES_V4 = [
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.0.0/16",
]


_PRIVATE_NETWORKS = [IPNetwork(r) for r in PRIVATE_RANGES_V4]


class AddressRange:
    """Inclusive, ascending range of addresses.

    Addresses are produced on demand, so even the full 0.0.0.0 to
    255.255.255.255 range costs constant memory. Every iteration starts
    again from the first address.
    """

    def __init__(self, start: IPv4Address, end: IPv4Address):
        if start > end:
            raise InvalidRange(
                f"Start IP ({start}) must be less than or equal to end IP ({end})",
                (str(start), str(end)),
            )
        self.start = start
        self.end = end
        self._values = range(start.value, end.value + 1)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[IPv4Address]:
        for value in self._values:
            yield IPv4Address(value)

    def __getitem__(self, index: int) -> IPv4Address:
        if isinstance(index, slice):
            raise TypeError("AddressRange indices must be integers, not slices")
        return IPv4Address(self._values[index])

    def __contains__(self, address: object) -> bool:
        return isinstance(address, IPv4Address) and address.value in self._values

    def __repr__(self) -> str:
        return f"AddressRange('{self.start}', '{self.end}')"


def compare(a: IPv4Address | str, b: IPv4Address | str) -> int:
    """Compare two addresses numerically, returning -1, 0 or 1."""
    a_value = coerce_address(a).value
    b_value = coerce_address(b).value
    return (a_value > b_value) - (a_value < b_value)


def next_address(address: IPv4Address | str) -> IPv4Address:
    """The address one above ``address``.

    Raises:
        OutOfRange: at 255.255.255.255; addresses never wrap around.
    """
    current = coerce_address(address)
    if current.value == MAX_ADDRESS:
        raise OutOfRange(f"No address after {current}", str(current))
    return IPv4Address(current.value + 1)


def previous_address(address: IPv4Address | str) -> IPv4Address:
    """The address one below ``address``.

    Raises:
        OutOfRange: at 0.0.0.0; addresses never wrap around.
    """
    current = coerce_address(address)
    if current.value == 0:
        raise OutOfRange(f"No address before {current}", str(current))
    return IPv4Address(current.value - 1)


def address_range(start: IPv4Address | str, end: IPv4Address | str) -> AddressRange:
    """All addresses from start to end inclusive, in increasing order.

    Raises:
        InvalidRange: if start is greater than end.
    """
    return AddressRange(coerce_address(start), coerce_address(end))


def range_to_cidrs(start: IPv4Address | str, end: IPv4Address | str) -> list[str]:
    """Minimal list of CIDR blocks exactly covering an inclusive range."""
    span = address_range(start, end)
    return [str(net) for net in iprange_to_cidrs(str(span.start), str(span.end))]


def private_block(address: IPv4Address | str) -> str | None:
    """The RFC 1918 block containing the address, or None if it is public."""
    ip = IPAddress(coerce_address(address).value, 4)
    for network in _PRIVATE_NETWORKS:
        if ip in network:
            return str(network.cidr)
    return None


def is_private(address: IPv4Address | str) -> bool:
    """Check if an IP address is in private/RFC1918 space."""
    return private_block(address) is not None


def is_public(address: IPv4Address | str) -> bool:
    """Check if an IP address is outside private/RFC1918 space.

    Loopback, link-local and multicast addresses count as public.
    """
    return private_block(address) is None


def special_purpose(address: IPv4Address | str) -> list[str]:
    """Informational labels for special-purpose addresses.

    These never change the public/private classification.
    """
    ip = IPAddress(coerce_address(address).value, 4)
    labels = []
    if ip.is_loopback():
        labels.append("loopback")
    if ip.is_link_local():
        labels.append("link-local")
    if ip.is_multicast():
        labels.append("multicast")
    if ip.is_reserved():
        labels.append("reserved")
    return labels
