"""Tests for per-token records."""

import pytest

from poolinfo.balancer import ArrayLengthMismatch, TokenArrays, TokenState
from tests.helpers import DAI, USDC


def _token(address: str, balance: int) -> TokenState:
    return TokenState(
        address=address,
        decimals=18,
        balance_evm=balance,
        weight=10**18,
        price_rate=10**18,
        old_price_rate=10**18,
        exempt=False,
        scaling_factor=10**18,
    )


class TestTokenArrays:
    """Tests for TokenArrays projection and length checks."""

    def test_from_tokens(self) -> None:
        arrays = TokenArrays.from_tokens([_token(DAI, 5), _token(USDC, 7)], [50, 70])

        assert len(arrays.parsed_tokens) == 2
        assert arrays.parsed_tokens == (DAI, USDC)
        assert arrays.balances_evm == (5, 7)
        assert arrays.upscaled_balances == (50, 70)
        assert arrays.exempted_tokens == (False, False)

    def test_from_no_tokens(self) -> None:
        assert len(TokenArrays.from_tokens([], [])) == 0

    def test_length_mismatch_raises(self) -> None:
        """Upscaled balances must line up with the tokens."""
        with pytest.raises(ArrayLengthMismatch, match="upscaled_balances"):
            TokenArrays.from_tokens([_token(DAI, 5), _token(USDC, 7)], [50])
