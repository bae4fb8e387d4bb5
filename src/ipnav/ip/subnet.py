"""
Subnet calculations.
"""

import logging
from dataclasses import dataclass

from ipnav.ip.codec import (
    ADDRESS_BITS,
    MAX_ADDRESS,
    IPv4Address,
    SubnetMask,
    cidr_to_mask,
    coerce_address,
    coerce_mask,
    parse_cidr,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubnetInfo:
    """Information about a subnet."""
    address: IPv4Address
    subnet_mask: SubnetMask
    network_address: IPv4Address
    broadcast_address: IPv4Address
    first_usable_host: IPv4Address
    last_usable_host: IPv4Address
    total_hosts: int
    usable_hosts: int

    @property
    def prefix_length(self) -> int:
        return self.subnet_mask.prefix_length

    @property
    def host_mask(self) -> IPv4Address:
        return self.subnet_mask.host_mask

    @property
    def cidr(self) -> str:
        return f"{self.network_address}/{self.prefix_length}"


class SubnetCalculator:
    """Calculator for subnet operations."""

    @staticmethod
    def network_address(address: IPv4Address, mask: SubnetMask) -> IPv4Address:
        return IPv4Address(address.value & mask.value)

    @staticmethod
    def broadcast_address(address: IPv4Address, mask: SubnetMask) -> IPv4Address:
        network = address.value & mask.value
        return IPv4Address(network | (~mask.value & MAX_ADDRESS))

    @staticmethod
    def calculate(address: IPv4Address, mask: SubnetMask) -> SubnetInfo:
        """Calculate subnet information for an address and mask."""
        network = SubnetCalculator.network_address(address, mask)
        broadcast = SubnetCalculator.broadcast_address(address, mask)
        prefix = mask.prefix_length
        total_hosts = 1 << (ADDRESS_BITS - prefix)

        # /32 is a single host; /31 is a point-to-point link with no
        # reserved network or broadcast address (RFC 3021)
        if prefix == 32:
            first_host = last_host = address
            usable_hosts = 1
        elif prefix == 31:
            first_host, last_host = network, broadcast
            usable_hosts = 2
        else:
            first_host = IPv4Address(network.value + 1)
            last_host = IPv4Address(broadcast.value - 1)
            usable_hosts = total_hosts - 2

        logger.debug("Calculated %s/%d: %d usable hosts", network, prefix, usable_hosts)

        return SubnetInfo(
            address=address,
            subnet_mask=mask,
            network_address=network,
            broadcast_address=broadcast,
            first_usable_host=first_host,
            last_usable_host=last_host,
            total_hosts=total_hosts,
            usable_hosts=usable_hosts,
        )

    @staticmethod
    def contains(address: IPv4Address, network: IPv4Address, mask: SubnetMask) -> bool:
        """Check whether two addresses fall in the same network block under mask."""
        return address.value & mask.value == network.value & mask.value


def network_address(
    address: IPv4Address | str, mask: SubnetMask | IPv4Address | str
) -> IPv4Address:
    """Network address: the address with all host bits cleared."""
    return SubnetCalculator.network_address(coerce_address(address), coerce_mask(mask))


def broadcast_address(
    address: IPv4Address | str, mask: SubnetMask | IPv4Address | str
) -> IPv4Address:
    """Broadcast address: the network address with all host bits set."""
    return SubnetCalculator.broadcast_address(coerce_address(address), coerce_mask(mask))


def subnet_info(
    address: IPv4Address | str, mask: SubnetMask | IPv4Address | str
) -> SubnetInfo:
    """Calculate subnet information from an address and a subnet mask."""
    return SubnetCalculator.calculate(coerce_address(address), coerce_mask(mask))


def calculate_subnet(cidr: str) -> SubnetInfo:
    """Calculate subnet information from CIDR notation."""
    address, prefix = parse_cidr(cidr)
    return SubnetCalculator.calculate(address, cidr_to_mask(prefix))


def is_in_subnet(
    address: IPv4Address | str,
    network: IPv4Address | str,
    mask: SubnetMask | IPv4Address | str,
) -> bool:
    """Check if an address belongs to the subnet given by network and mask.

    ``network`` need not be a canonical network address; it is masked
    the same way as ``address`` before comparing.
    """
    return SubnetCalculator.contains(
        coerce_address(address), coerce_address(network), coerce_mask(mask)
    )
