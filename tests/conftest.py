"""Pytest configuration and fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from tests.helpers import BB_A_USD, DAI, USDC, WETH, make_pool, make_token

FIXTURES_DIR = Path(__file__).parent / "fixtures"
POOLS_DIR = FIXTURES_DIR / "pools"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def pools_dir() -> Path:
    """Return the pool fixtures directory path."""
    return POOLS_DIR


def load_pool_fixture(name: str) -> dict[str, Any]:
    """Load a raw pool fixture by name.

    Args:
        name: Fixture name (e.g., "bb_a_usd")

    Returns:
        Raw pool mapping in subgraph shape
    """
    path = POOLS_DIR / f"{name}.json"
    with open(path) as f:
        return json.load(f)


@pytest.fixture
def usdc_weth_pool() -> dict[str, Any]:
    """Two-token pool: 1000 USDC and 2 WETH, no amp, 0.3% fee."""
    return make_pool(tokens=[make_token(USDC, "1000"), make_token(WETH, "2")])


@pytest.fixture
def weth_first_pool() -> dict[str, Any]:
    """Three-token pool listed out of canonical order, with per-token extras."""
    return make_pool(
        tokens=[
            make_token(WETH, "2", weight="0.2", isExemptFromYieldProtocolFee=True),
            make_token(USDC, "1000", weight="0.5", priceRate="1.01"),
            make_token(DAI, "500", weight="0.3", oldPriceRate="0.99"),
        ]
    )


@pytest.fixture
def composable_stable_pool() -> dict[str, Any]:
    """Composable stable pool listing its own BPT first: [BPT, DAI, USDC]."""
    return make_pool(
        address=BB_A_USD,
        swap_fee="0.0001",
        amp="2000",
        tokens=[
            make_token(BB_A_USD, "2596148429267413.814265248164610048", decimals=18),
            make_token(DAI, "1000"),
            make_token(USDC, "2000"),
        ],
    )


@pytest.fixture
def bb_a_usd_pool() -> dict[str, Any]:
    """Mainnet bb-a-USD snapshot (4 tokens including the BPT)."""
    return load_pool_fixture("bb_a_usd")
