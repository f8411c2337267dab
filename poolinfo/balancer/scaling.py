"""Balancer scaling helpers.

Functions for deriving per-token scaling factors and for scaling token amounts
from native decimals to the common 18-decimal fixed-point basis.
"""

from __future__ import annotations

from collections.abc import Sequence

from poolinfo.math.fixed_point import ONE_18, Bfp

from .errors import ArrayLengthMismatch, InvalidTokenDecimals

# Tokens with more decimals cannot be scaled up to 18
MAX_TOKEN_DECIMALS = 18


def validate_decimals(decimals: int) -> int:
    """Return ``decimals`` if it is in [0, 18].

    Raises:
        InvalidTokenDecimals: If decimals is out of range
    """
    if decimals < 0 or decimals > MAX_TOKEN_DECIMALS:
        raise InvalidTokenDecimals(decimals)
    return decimals


def compute_scaling_factor(decimals: int) -> int:
    """Scaling factor for a token's decimals, as 18-decimal fixed point.

    A token with ``d`` decimals needs its amounts multiplied by 10^(18 - d);
    that multiplier is returned in fixed point, so a 6-decimal token gives
    10^12 * 10^18.

    Raises:
        InvalidTokenDecimals: If decimals is not in [0, 18]
    """
    validate_decimals(decimals)
    return ONE_18 * 10 ** (MAX_TOKEN_DECIMALS - decimals)


def scaling_factor(decimals: int, price_rate: int | None = None) -> int:
    """Combine a token's decimal scaling factor with its price rate.

    Uses fixed-point multiplication rounding down, so the normalized value is
    never overstated.

    Args:
        decimals: Token decimals, in [0, 18]
        price_rate: Price rate at 18 decimals (defaults to 1.0)

    Returns:
        Scaling factor at 18 decimals

    Raises:
        InvalidTokenDecimals: If decimals is not in [0, 18]
    """
    rate = Bfp.from_wei(ONE_18 if price_rate is None else price_rate)
    return Bfp.from_wei(compute_scaling_factor(decimals)).mul_down(rate).value


def upscale(amount: int, factor: int) -> int:
    """Scale a native-decimals amount to 18 decimals, rounding down."""
    return Bfp.from_wei(amount).mul_down(Bfp.from_wei(factor)).value


def upscale_array(amounts: Sequence[int], scaling_factors: Sequence[int]) -> list[int]:
    """Upscale every amount by the scaling factor at the same index.

    Raises:
        ArrayLengthMismatch: If the sequences have different lengths
    """
    if len(amounts) != len(scaling_factors):
        raise ArrayLengthMismatch(
            f"Cannot upscale {len(amounts)} amounts with {len(scaling_factors)} scaling factors"
        )
    return [upscale(amount, factor) for amount, factor in zip(amounts, scaling_factors)]
