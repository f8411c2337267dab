"""Test helpers module for shared test utilities.

- constants: Token and pool addresses
- factories: Raw pool and token factory functions
"""

from tests.helpers.constants import (
    BB_A_USD,
    DAI,
    TOKEN_DECIMALS,
    USDC,
    WBTC,
    WEIGHTED_POOL,
    WETH,
)
from tests.helpers.factories import make_pool, make_token

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "WBTC",
    "BB_A_USD",
    "WEIGHTED_POOL",
    "TOKEN_DECIMALS",
    # Factories
    "make_token",
    "make_pool",
]
