"""
IPv4 address codec.

Parses and validates dotted-decimal addresses, subnet masks and CIDR
notation, and converts addresses between their integer, binary and
dotted-decimal forms.
"""

import logging
import re
from dataclasses import dataclass

from ipnav.exceptions import (
    InvalidAddress,
    InvalidBinary,
    InvalidCIDR,
    InvalidMask,
    OutOfRange,
)

logger = logging.getLogger(__name__)

ADDRESS_BITS = 32
MAX_ADDRESS = 0xFFFFFFFF

# ASCII decimal digits only
_OCTET_RE = re.compile(r"[0-9]{1,3}")
_DECIMAL_RE = re.compile(r"[0-9]+")
_BINARY_GROUP_RE = re.compile(r"[01]{8}")
_BINARY_SEPARATOR_RE = re.compile(r"\.|\s+", re.ASCII)


def _dotted(value: int) -> str:
    return ".".join(str((value >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def _check_value(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRange(f"Address value must be an integer, got {value!r}", value)
    if not 0 <= value <= MAX_ADDRESS:
        raise OutOfRange(
            f"Integer {value} is outside the IPv4 range 0 to {MAX_ADDRESS}", value
        )


def _is_contiguous(value: int) -> bool:
    host_bits = ~value & MAX_ADDRESS
    return host_bits & (host_bits + 1) == 0


@dataclass(frozen=True, order=True, repr=False)
class IPv4Address:
    """An IPv4 address, held as its 32-bit unsigned integer value.

    Equality and ordering are numeric. ``str()`` gives the canonical
    dotted-decimal form.
    """
    value: int

    def __post_init__(self):
        _check_value(self.value)

    @property
    def octets(self) -> tuple[int, int, int, int]:
        """The four octets, most significant first."""
        v = self.value
        return ((v >> 24) & 0xFF, (v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return _dotted(self.value)

    def __repr__(self) -> str:
        return f"IPv4Address('{self}')"


@dataclass(frozen=True, repr=False)
class SubnetMask:
    """A subnet mask: contiguous one-bits followed by contiguous zero-bits."""
    value: int

    def __post_init__(self):
        _check_value(self.value)
        if not _is_contiguous(self.value):
            raise InvalidMask(
                f"Invalid subnet mask '{_dotted(self.value)}': mask bits are not contiguous",
                _dotted(self.value),
            )

    @property
    def prefix_length(self) -> int:
        return ADDRESS_BITS - (~self.value & MAX_ADDRESS).bit_length()

    @property
    def host_mask(self) -> IPv4Address:
        """Bitwise complement of the mask (the wildcard mask)."""
        return IPv4Address(~self.value & MAX_ADDRESS)

    def as_address(self) -> IPv4Address:
        return IPv4Address(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return _dotted(self.value)

    def __repr__(self) -> str:
        return f"SubnetMask('{self}')"


def parse_address(text: str) -> IPv4Address:
    """Parse a dotted-decimal IPv4 address.

    Exactly four dot-separated tokens are required, each a plain base-10
    number from 0 to 255. Leading zeros are read as decimal.

    Raises:
        InvalidAddress: if the text is not a valid dotted-decimal address.
    """
    if not isinstance(text, str):
        raise InvalidAddress(f"Expected an address string, got {type(text).__name__}", text)

    tokens = text.split(".")
    if len(tokens) != 4:
        logger.debug("Rejected address %r: %d tokens", text, len(tokens))
        raise InvalidAddress(
            f"Invalid IP address '{text}': expected 4 octets, found {len(tokens)}", text
        )

    value = 0
    for token in tokens:
        if not _OCTET_RE.fullmatch(token):
            logger.debug("Rejected address %r: bad octet %r", text, token)
            raise InvalidAddress(
                f"Invalid IP address '{text}': octet '{token}' is not a decimal number 0-255",
                text,
            )
        octet = int(token)
        if octet > 255:
            logger.debug("Rejected address %r: octet %d out of range", text, octet)
            raise InvalidAddress(
                f"Invalid IP address '{text}': octet {octet} is out of range 0-255", text
            )
        value = (value << 8) | octet

    return IPv4Address(value)


def parse_mask(text: str) -> SubnetMask:
    """Parse a dotted-decimal subnet mask and check its bits are contiguous.

    Raises:
        InvalidMask: if the text is not an address or not a valid mask.
    """
    try:
        address = parse_address(text)
    except InvalidAddress as exc:
        raise InvalidMask(
            f"Invalid subnet mask '{text}': not a dotted-decimal address", text
        ) from exc
    return SubnetMask(address.value)


def parse_cidr(text: str) -> tuple[IPv4Address, int]:
    """Parse ``address/prefix`` notation into an address and a prefix length.

    Raises:
        InvalidCIDR: on malformed syntax, a bad address or a prefix outside 0-32.
    """
    if not isinstance(text, str) or text.count("/") != 1:
        raise InvalidCIDR(
            f"Invalid CIDR notation '{text}': expected address/prefix", text
        )

    address_text, prefix_text = text.split("/")
    try:
        address = parse_address(address_text)
    except InvalidAddress as exc:
        raise InvalidCIDR(
            f"Invalid CIDR notation '{text}': '{address_text}' is not a valid address", text
        ) from exc

    if not _DECIMAL_RE.fullmatch(prefix_text) or int(prefix_text) > ADDRESS_BITS:
        raise InvalidCIDR(
            f"Invalid CIDR notation '{text}': prefix must be a number from 0 to 32", text
        )

    return address, int(prefix_text)


def coerce_address(address: IPv4Address | str) -> IPv4Address:
    """Accept an address object or its dotted-decimal text."""
    if isinstance(address, IPv4Address):
        return address
    return parse_address(address)


def coerce_mask(mask: SubnetMask | IPv4Address | str) -> SubnetMask:
    """Accept a mask object, an address holding mask bits, or mask text."""
    if isinstance(mask, SubnetMask):
        return mask
    if isinstance(mask, IPv4Address):
        return SubnetMask(mask.value)
    return parse_mask(mask)


def to_integer(address: IPv4Address | str) -> int:
    """Convert an address to its 32-bit unsigned integer value."""
    return coerce_address(address).value


def from_integer(value: int) -> IPv4Address:
    """Convert an integer in 0-4294967295 to an address.

    Raises:
        OutOfRange: if the value is outside the IPv4 range.
    """
    return IPv4Address(value)


def parse_integer(text: str) -> int:
    """Parse decimal text as an integer address value.

    Raises:
        OutOfRange: if the text is not a decimal number from 0 to 4294967295.
    """
    if not isinstance(text, str) or not _DECIMAL_RE.fullmatch(text):
        raise OutOfRange(
            f"Invalid integer '{text}': expected a number from 0 to {MAX_ADDRESS}", text
        )
    value = int(text)
    _check_value(value)
    return value


def parse_prefix(text: str) -> int:
    """Parse decimal text as a CIDR prefix length.

    Raises:
        OutOfRange: if the text is not a decimal number from 0 to 32.
    """
    if not isinstance(text, str) or not _DECIMAL_RE.fullmatch(text) or int(text) > ADDRESS_BITS:
        raise OutOfRange(
            f"Invalid CIDR prefix '{text}': expected a number from 0 to 32", text
        )
    return int(text)


def to_hex(address: IPv4Address | str) -> str:
    """Hexadecimal form of the address integer, e.g. ``0xC0A80101``."""
    return f"0x{coerce_address(address).value:X}"


def to_binary_string(address: IPv4Address | str, separator: str = ".") -> str:
    """Render an address as four 8-bit binary groups."""
    return separator.join(f"{octet:08b}" for octet in coerce_address(address).octets)


def from_binary_string(text: str) -> IPv4Address:
    """Parse four 8-bit binary groups separated by dots or whitespace.

    Raises:
        InvalidBinary: on a wrong group count, length or character.
    """
    if not isinstance(text, str):
        raise InvalidBinary(f"Expected a binary string, got {type(text).__name__}", text)

    groups = _BINARY_SEPARATOR_RE.split(text)
    if len(groups) != 4:
        raise InvalidBinary(
            f"Invalid binary address '{text}': expected 4 groups, found {len(groups)}", text
        )
    for group in groups:
        if not _BINARY_GROUP_RE.fullmatch(group):
            raise InvalidBinary(
                f"Invalid binary address '{text}': group '{group}' is not 8 binary digits",
                text,
            )

    return IPv4Address(int("".join(groups), 2))


def cidr_to_mask(prefix: int) -> SubnetMask:
    """Convert a prefix length (0-32) to its subnet mask.

    Raises:
        OutOfRange: if the prefix is outside 0-32.
    """
    if isinstance(prefix, bool) or not isinstance(prefix, int) or not 0 <= prefix <= ADDRESS_BITS:
        raise OutOfRange(f"Invalid CIDR prefix {prefix!r}: expected 0 to 32", prefix)
    return SubnetMask((MAX_ADDRESS << (ADDRESS_BITS - prefix)) & MAX_ADDRESS)


def mask_to_cidr(mask: SubnetMask | IPv4Address | str) -> int:
    """Convert a subnet mask to its prefix length.

    Raises:
        InvalidMask: if the mask is malformed or its bits are not contiguous.
    """
    return coerce_mask(mask).prefix_length
