"""Pool normalization error classes.

Every error is fatal to the single normalization call that raised it.
"""

from __future__ import annotations


class PoolInfoError(Exception):
    """Base error for pool normalization."""

    pass


class FieldParseError(PoolInfoError):
    """A decimal string field is malformed, out of range, or missing."""

    def __init__(self, field: str, pool_address: str, value: object, reason: str) -> None:
        self.field = field
        self.pool_address = pool_address
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot parse {field}={value!r} for pool {pool_address}: {reason}")


class InvalidTokenDecimals(PoolInfoError):
    """Token decimals must be in range [0, 18]."""

    def __init__(self, decimals: int) -> None:
        self.decimals = decimals
        super().__init__(f"Token decimals must be in range [0, 18], got {decimals}")


class ArrayLengthMismatch(PoolInfoError):
    """Parallel per-token arrays have different lengths (internal bug)."""

    pass
