"""Default values for optional raw pool fields.

All default substitution goes through ``field_or_default`` so the policy can be
audited in one place. Keys are the raw (camelCase) field names.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

FIELD_DEFAULTS = MappingProxyType(
    {
        # Per-token fields
        "decimals": 18,
        "weight": "1",
        "priceRate": "1",
        "oldPriceRate": "1",
        "isExemptFromYieldProtocolFee": False,
        # Pool fields
        "amp": "1",
        "protocolSwapFeeCache": "0",
        "protocolYieldFeeCache": "0",
        "totalShares": "0",
        "lastJoinExitInvariant": "0",
        "athRateProduct": "0",
    }
)

# Fields where the indexer reports "not set" as an empty string
EMPTY_MEANS_MISSING = frozenset(
    {
        "protocolSwapFeeCache",
        "protocolYieldFeeCache",
        "totalShares",
        "lastJoinExitInvariant",
        "athRateProduct",
    }
)


def has_default(field: str) -> bool:
    """Return True if ``field`` is optional."""
    return field in FIELD_DEFAULTS


def field_or_default(field: str, value: Any) -> Any:
    """Return ``value``, or the default for ``field`` when it is missing.

    Required fields (those without a default) are returned unchanged, so a
    missing required value stays None for the caller to reject.
    """
    missing = value is None or (value == "" and field in EMPTY_MEANS_MISSING)
    if missing and has_default(field):
        return FIELD_DEFAULTS[field]
    return value
