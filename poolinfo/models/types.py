"""Shared type definitions for pool models."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

# Maximum uint256 value
UINT256_MAX = 2**256 - 1


def coerce_decimal_string(value: Any) -> Any:
    """Render numeric JSON values as decimal strings.

    Indexers are not consistent about quoting numbers. Integers are converted
    with ``str``. Floats go through ``Decimal(repr(value))`` so the shortest
    round-trip form is written out in positional notation ("1e-05" becomes
    "0.00001"). Whether that string is a valid decimal is decided later, when
    the field is parsed to fixed point. Booleans and other types are left for
    pydantic to reject.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    return value


# Human-readable decimal number (e.g. "0.003"), parsed to fixed point downstream
DecimalString = Annotated[
    str,
    BeforeValidator(coerce_decimal_string),
    Field(description="Decimal number as string"),
]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.
                  If False (default), returns normalized form without validation.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False
