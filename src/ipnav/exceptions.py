"""
Error taxonomy for ipnav.

Every failure raised by the address core is one of a closed set of kinds,
so callers can branch on ``error.kind`` instead of parsing messages.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kinds of failure the address core can report."""

    INVALID_ADDRESS = "invalid_address"
    INVALID_MASK = "invalid_mask"
    INVALID_CIDR = "invalid_cidr"
    INVALID_BINARY = "invalid_binary"
    OUT_OF_RANGE = "out_of_range"
    INVALID_RANGE = "invalid_range"


class IPNavError(ValueError):
    """Base class for all address core errors."""

    kind: ErrorKind

    def __init__(self, message: str, value: Any = None):
        self.message = message
        self.value = value
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for structured output."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "value": self.value,
        }


class InvalidAddress(IPNavError):
    """Malformed or out-of-range dotted-decimal address."""

    kind = ErrorKind.INVALID_ADDRESS


class InvalidMask(IPNavError):
    """Malformed subnet mask, or mask bits that are not contiguous."""

    kind = ErrorKind.INVALID_MASK


class InvalidCIDR(IPNavError):
    """Malformed ``address/prefix`` notation."""

    kind = ErrorKind.INVALID_CIDR


class InvalidBinary(IPNavError):
    """Malformed binary-group input."""

    kind = ErrorKind.INVALID_BINARY


class OutOfRange(IPNavError):
    """Integer or prefix outside its permitted range."""

    kind = ErrorKind.OUT_OF_RANGE


class InvalidRange(IPNavError):
    """Range whose start lies above its end."""

    kind = ErrorKind.INVALID_RANGE
