"""Tests for raw pool models and the normalized output record."""

import pytest
from pydantic import ValidationError

from poolinfo.balancer import parse_pool_info
from poolinfo.models import RawPool, RawToken, is_valid_address, normalize_address
from tests.helpers import USDC, WEIGHTED_POOL, WETH, make_pool, make_token


class TestRawModels:
    """Tests for RawToken and RawPool."""

    def test_camel_case_aliases(self) -> None:
        token = RawToken.model_validate(
            {
                "address": USDC,
                "balance": "1000",
                "priceRate": "1.01",
                "oldPriceRate": "1",
                "isExemptFromYieldProtocolFee": True,
            }
        )
        assert token.price_rate == "1.01"
        assert token.old_price_rate == "1"
        assert token.is_exempt_from_yield_protocol_fee is True
        assert token.decimals is None

    def test_snake_case_names(self) -> None:
        pool = RawPool(address=WEIGHTED_POOL, swap_fee="0.003", total_shares="10")
        assert pool.swap_fee == "0.003"
        assert pool.total_shares == "10"
        assert pool.tokens == []

    def test_numbers_become_strings(self) -> None:
        token = RawToken.model_validate({"address": USDC, "balance": 1000, "weight": 0.5})
        assert token.balance == "1000"
        assert token.weight == "0.5"

    def test_floats_written_positionally(self) -> None:
        """Small and large floats do not come out in exponent form."""
        token = RawToken.model_validate(
            {"address": USDC, "balance": 1e16, "weight": 1e-05, "priceRate": 1.0}
        )
        assert token.balance == "10000000000000000"
        assert token.weight == "0.00001"
        assert token.price_rate == "1.0"

    def test_float_fee_parses(self) -> None:
        pool = make_pool(tokens=[make_token(USDC, 1e16)], swap_fee=None, swapFee=0.00001)
        info = parse_pool_info(pool)
        assert info.swap_fee_evm == 10**13
        assert info.balances_evm == (10**16 * 10**6,)

    def test_boolean_balance_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RawToken.model_validate({"address": USDC, "balance": True})

    def test_missing_address_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RawPool.model_validate({"tokens": []})

    def test_extra_fields_allowed(self) -> None:
        pool = RawPool.model_validate(make_pool(tokens=[], poolType="Weighted"))
        assert pool.token_count == 0


class TestNormalizedPoolInfo:
    """Tests for NormalizedPoolInfo serialization."""

    def test_to_dict(self) -> None:
        info = parse_pool_info(make_pool(tokens=[make_token(USDC, "1000"), make_token(WETH, "2")]))
        data = info.to_dict()

        assert data["parsedTokens"] == [USDC, WETH]
        assert data["balancesEvm"] == ["1000000000", "2000000000000000000"]
        assert data["upScaledBalances"] == ["1000000000000000000000", "2000000000000000000"]
        assert data["upScaledBalancesWithoutBpt"] == []
        assert data["exemptedTokens"] == [False, False]
        assert data["swapFeeEvm"] == "3000000000000000"
        assert data["ampWithPrecision"] == "1000"
        assert data["protocolSwapFeePct"] == "0.0"
        assert data["bptIndex"] == -1
        assert data["higherBalanceTokenIndex"] == 0

    def test_to_dict_has_every_field(self) -> None:
        info = parse_pool_info(make_pool(tokens=[make_token(USDC, "1")]))
        assert len(info.to_dict()) == 22


class TestAddressHelpers:
    """Tests for address normalization helpers."""

    def test_normalize_address(self) -> None:
        assert normalize_address("0xABC") == "0xabc"
        assert normalize_address("abc") == "0xabc"

    def test_normalize_address_validate(self) -> None:
        assert normalize_address(WETH.upper().replace("0X", "0x"), validate=True) == WETH
        with pytest.raises(ValueError):
            normalize_address("0x123", validate=True)

    def test_is_valid_address(self) -> None:
        assert is_valid_address(USDC)
        assert not is_valid_address("0x123")
        assert not is_valid_address("a0b86991c6218b36c1d19d4a2e9eb0ce3606eb48")
        assert not is_valid_address("0x" + "g" * 40)
