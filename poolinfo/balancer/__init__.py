"""Balancer pool info normalization.

This package converts raw Balancer pool records into aligned fixed-point
arrays, matching the Balancer SDK's pool parsing exactly.

Pipeline stages:
- Scaling factors and upscaling (decimals and price rates)
- Canonical token ordering (optional, keyed on the wrapped native asset)
- Pool token (BPT) exclusion
"""

# Pool token exclusion
from .bpt import BPT_NOT_FOUND, WithoutBpt, drop_index, exclude_bpt, find_bpt_index

# Defaults
from .defaults import FIELD_DEFAULTS, field_or_default

# Errors
from .errors import ArrayLengthMismatch, FieldParseError, InvalidTokenDecimals, PoolInfoError

# Pool parsing
from .parsing import PoolInfoNormalizer, normalize_pools, parse_pool_info

# Scaling helpers
from .scaling import compute_scaling_factor, scaling_factor, upscale, upscale_array

# Canonical ordering
from .sorting import AssetHelpers, reorder_token_arrays

# Per-token records
from .tokens import TokenArrays, TokenState

__all__ = [
    # Pool parsing
    "parse_pool_info",
    "normalize_pools",
    "PoolInfoNormalizer",
    # Scaling helpers
    "compute_scaling_factor",
    "scaling_factor",
    "upscale",
    "upscale_array",
    # Canonical ordering
    "AssetHelpers",
    "reorder_token_arrays",
    # Pool token exclusion
    "BPT_NOT_FOUND",
    "WithoutBpt",
    "find_bpt_index",
    "drop_index",
    "exclude_bpt",
    # Per-token records
    "TokenState",
    "TokenArrays",
    # Defaults
    "FIELD_DEFAULTS",
    "field_or_default",
    # Errors
    "PoolInfoError",
    "FieldParseError",
    "InvalidTokenDecimals",
    "ArrayLengthMismatch",
]
