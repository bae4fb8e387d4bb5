"""
IPv4 Tools Module

Provides address parsing and conversion, subnet calculations,
address sequencing and public/private classification.
"""

from ipnav.ip.codec import (
    IPv4Address,
    SubnetMask,
    parse_address,
    parse_mask,
    parse_cidr,
    parse_integer,
    parse_prefix,
    to_integer,
    from_integer,
    to_hex,
    to_binary_string,
    from_binary_string,
    cidr_to_mask,
    mask_to_cidr,
)
from ipnav.ip.subnet import (
    SubnetInfo,
    SubnetCalculator,
    network_address,
    broadcast_address,
    subnet_info,
    calculate_subnet,
    is_in_subnet,
)
from ipnav.ip.sequence import (
    AddressRange,
    compare,
    next_address,
    previous_address,
    address_range,
    range_to_cidrs,
    private_block,
    is_private,
    is_public,
    special_purpose,
)

__all__ = [
    "IPv4Address",
    "SubnetMask",
    "parse_address",
    "parse_mask",
    "parse_cidr",
    "parse_integer",
    "parse_prefix",
    "to_integer",
    "from_integer",
    "to_hex",
    "to_binary_string",
    "from_binary_string",
    "cidr_to_mask",
    "mask_to_cidr",
    "SubnetInfo",
    "SubnetCalculator",
    "network_address",
    "broadcast_address",
    "subnet_info",
    "calculate_subnet",
    "is_in_subnet",
    "AddressRange",
    "compare",
    "next_address",
    "previous_address",
    "address_range",
    "range_to_cidrs",
    "private_block",
    "is_private",
    "is_public",
    "special_purpose",
]
