"""Normalizer configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True)
class NormalizerConfig:
    """Options controlling token ordering and native asset handling.

    Attributes:
        wrapped_native_asset: Wrapped native asset address (e.g. WETH). When
            set, pool tokens are sorted into canonical (vault) order.
        unwrap_native_asset: If True, the wrapped native asset is reported as
            the native asset (zero address) in the parsed token list.
    """

    wrapped_native_asset: str | None = None
    unwrap_native_asset: bool = False

    @classmethod
    def from_env(cls) -> NormalizerConfig:
        """Build a configuration from environment variables.

        - POOLINFO_WRAPPED_NATIVE_ASSET: wrapped native asset address
        - POOLINFO_UNWRAP_NATIVE_ASSET: "true", "1" or "yes" to unwrap
        """
        wrapped = os.environ.get("POOLINFO_WRAPPED_NATIVE_ASSET") or None
        unwrap = os.environ.get("POOLINFO_UNWRAP_NATIVE_ASSET", "false").lower() in _TRUE_VALUES
        return cls(wrapped_native_asset=wrapped, unwrap_native_asset=unwrap)


# Default configuration instance (no reordering, no unwrapping)
DEFAULT_NORMALIZER_CONFIG = NormalizerConfig()
