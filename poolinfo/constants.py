"""Well-known addresses used by the pool normalizer."""

from poolinfo.models.types import is_valid_address


def _validate_token_address(name: str, address: str) -> str:
    """Validate and return a token address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Native asset sentinel (ETH), used in place of the wrapped native asset when unwrapping
ADDRESS_ZERO = _validate_token_address("ADDRESS_ZERO", "0x" + "0" * 40)
