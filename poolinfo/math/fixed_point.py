"""Balancer Fixed Point (Bfp) helpers.

18-decimal fixed-point values are plain integers scaled by 10^18. This module
provides the multiplication primitives used for scaling, and exact conversion
between human-readable decimal strings and scaled integers, following the
grammar of ethers' ``parseFixed`` / ``formatFixed``.
"""

from __future__ import annotations

import re
from typing import ClassVar

__all__ = [
    # Classes
    "Bfp",
    # Functions
    "parse_fixed",
    "format_fixed",
    # Constants
    "ONE_18",
    "AMP_DECIMALS",
]

# =============================================================================
# Constants (matching Solidity exactly)
# =============================================================================

ONE_18 = 10**18

# Amplification parameter is stored with 3 decimals
AMP_DECIMALS = 3

_DECIMAL_RE = re.compile(r"(?P<sign>-)?(?P<whole>[0-9]*)(?:\.(?P<fraction>[0-9]*))?")


# =============================================================================
# Decimal string conversion
# =============================================================================


def parse_fixed(value: str, decimals: int = 0) -> int:
    """Convert a decimal string to an integer scaled by 10^decimals.

    The conversion is exact. Trailing fractional zeros are ignored, but any
    remaining fractional digit beyond ``decimals`` is an error rather than
    being rounded away.

    Args:
        value: Decimal string such as "1000", "0.003" or "-1.5"
        decimals: Number of decimals of the fixed-point representation

    Returns:
        The scaled integer (e.g. parse_fixed("0.003", 18) == 3 * 10**15)

    Raises:
        ValueError: If value is not a plain decimal number, or has more
            fractional digits than ``decimals``
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    if not isinstance(value, str):
        raise ValueError(f"Decimal value must be a string, got {type(value).__name__}")

    match = _DECIMAL_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"Invalid decimal value: {value!r}")

    whole = match.group("whole")
    fraction = match.group("fraction") or ""
    if not whole and not fraction:
        raise ValueError(f"Missing digits in decimal value: {value!r}")

    fraction = fraction.rstrip("0")
    if len(fraction) > decimals:
        raise ValueError(f"Fractional component of {value!r} exceeds {decimals} decimals")

    scaled = int(whole or "0") * 10**decimals + int(fraction.ljust(decimals, "0") or "0")
    return -scaled if match.group("sign") else scaled


def format_fixed(value: int, decimals: int = 0) -> str:
    """Convert a scaled integer back to a human-unit decimal string.

    Trailing fractional zeros are trimmed but at least one fractional digit
    is kept, so format_fixed(0, 18) == "0.0" and format_fixed(5 * 10**17, 18)
    == "0.5". With ``decimals == 0`` the plain integer string is returned.
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    negative = value < 0
    magnitude = -value if negative else value
    multiplier = 10**decimals

    whole = str(magnitude // multiplier)
    if decimals == 0:
        result = whole
    else:
        fraction = str(magnitude % multiplier).zfill(decimals).rstrip("0") or "0"
        result = f"{whole}.{fraction}"

    return f"-{result}" if negative else result


# =============================================================================
# Bfp class (wrapper for convenient usage)
# =============================================================================


class Bfp:
    """18-decimal fixed-point number stored as int.

    All values are stored as integers scaled by 10^18.
    Example: 1.5 is stored as 1_500_000_000_000_000_000
    """

    ONE: ClassVar[int] = ONE_18

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        """Create Bfp from raw scaled value."""
        self.value = value

    @classmethod
    def from_wei(cls, wei: int) -> Bfp:
        """Create from raw wei value (already scaled to 18 decimals)."""
        return cls(wei)

    def mul_down(self, other: Bfp) -> Bfp:
        """Multiply with floor rounding: (a * b) // 10^18"""
        return Bfp((self.value * other.value) // self.ONE)
