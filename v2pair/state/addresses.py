"""
Fixed-width account / asset identifiers.

Addresses are 20-byte values carried as canonical hex strings
(lowercase, 0x-prefixed). The all-zero address is the "unset" sentinel.
"""

from __future__ import annotations

import re

# Type alias
Address = str  # 20-byte hex string (0x...)

ADDRESS_NBYTES = 20

ZERO_ADDRESS: Address = "0x" + "00" * ADDRESS_NBYTES

_HEX_CHARS_RE = re.compile(r"^[0-9a-fA-F]+$")


def canonical_address(value: str, *, name: str = "address") -> Address:
    """
    Canonicalize an address (lowercase, 0x-prefixed).

    Accepts either 0x-prefixed or raw hex input.

    Raises:
        TypeError: If value is not a str
        ValueError: If value is not exactly 20 bytes of hex
    """
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str")

    s = value.strip()
    if s.lower().startswith("0x"):
        s = s[2:]
    expected_len = 2 * ADDRESS_NBYTES
    if len(s) != expected_len:
        raise ValueError(f"{name} must be {ADDRESS_NBYTES} bytes (hex length {expected_len})")
    if not _HEX_CHARS_RE.fullmatch(s):
        raise ValueError(f"{name} must be valid hex")
    return "0x" + s.lower()


def is_zero_address(value: str) -> bool:
    """Return True if value canonicalizes to the zero sentinel."""
    return canonical_address(value) == ZERO_ADDRESS


def address_from_int(value: int) -> Address:
    """Build an address from a non-negative integer (left-padded)."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"address value must be a non-negative int: {value!r}")
    if value >= 1 << (8 * ADDRESS_NBYTES):
        raise ValueError(f"address value does not fit in {ADDRESS_NBYTES} bytes")
    return "0x" + format(value, f"0{2 * ADDRESS_NBYTES}x")
