"""Pydantic models and records for pool data."""

from poolinfo.models.pool import RawPool, RawToken
from poolinfo.models.pool_info import NormalizedPoolInfo
from poolinfo.models.types import DecimalString, is_valid_address, normalize_address

__all__ = [
    # Types
    "DecimalString",
    # Raw input models
    "RawPool",
    "RawToken",
    # Output record
    "NormalizedPoolInfo",
    # Address helpers
    "normalize_address",
    "is_valid_address",
]
