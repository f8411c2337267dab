"""Normalized pool info returned by the normalizer."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

# Output keys follow the camelCase naming used by the Balancer SDK
_CAMEL_CASE_OVERRIDES = {
    "upscaled_balances": "upScaledBalances",
    "upscaled_balances_without_bpt": "upScaledBalancesWithoutBpt",
}

_INDEX_FIELDS = frozenset({"bpt_index", "higher_balance_token_index"})


def _to_camel_case(name: str) -> str:
    if name in _CAMEL_CASE_OVERRIDES:
        return _CAMEL_CASE_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _to_json_value(value: Any) -> Any:
    # Integers are rendered as decimal strings (uint256 convention); bools stay bools
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, tuple):
        return [_to_json_value(v) for v in value]
    return value


@dataclass(frozen=True)
class NormalizedPoolInfo:
    """Pool data converted to fixed point, aligned to the final token order.

    Every per-token tuple has one entry per pool token, in the same
    (possibly canonically sorted) order as ``parsed_tokens``. The
    ``*_without_bpt`` tuples drop the pool's own token and are empty when the
    pool does not list it.

    Attributes:
        parsed_tokens: Token addresses (wrapped native asset possibly unwrapped)
        balances_evm: Balances in each token's native decimals
        weights: Weights at 18 decimals
        price_rates: Price rates at 18 decimals
        old_price_rates: Previous price rates at 18 decimals
        scaling_factors: Decimal scaling combined with price rate, 18 decimals
        upscaled_balances: Balances at the common 18-decimal basis
        exempted_tokens: Whether each token is exempt from yield protocol fees
        amp_with_precision: Amplification parameter scaled by 1000
        swap_fee_evm: Swap fee at 18 decimals
        total_shares_evm: Total BPT supply at 18 decimals
        protocol_swap_fee_pct: Protocol swap fee as a human-unit decimal string
        protocol_yield_fee_pct: Protocol yield fee as a human-unit decimal string
        last_join_exit_invariant: Passed through from the raw pool
        ath_rate_product: All-time-high rate product as a human-unit decimal string
        bpt_index: Position of the pool token in parsed_tokens, -1 if absent
        higher_balance_token_index: Index of the largest upscaled balance
    """

    parsed_tokens: tuple[str, ...]
    balances_evm: tuple[int, ...]
    weights: tuple[int, ...]
    price_rates: tuple[int, ...]
    old_price_rates: tuple[int, ...]
    scaling_factors: tuple[int, ...]
    upscaled_balances: tuple[int, ...]
    exempted_tokens: tuple[bool, ...]
    parsed_tokens_without_bpt: tuple[str, ...]
    balances_evm_without_bpt: tuple[int, ...]
    price_rates_without_bpt: tuple[int, ...]
    scaling_factors_without_bpt: tuple[int, ...]
    upscaled_balances_without_bpt: tuple[int, ...]
    amp_with_precision: int
    swap_fee_evm: int
    total_shares_evm: int
    protocol_swap_fee_pct: str
    protocol_yield_fee_pct: str
    last_join_exit_invariant: str
    ath_rate_product: str
    bpt_index: int
    higher_balance_token_index: int

    @property
    def has_bpt(self) -> bool:
        """Return True if the pool lists its own token."""
        return self.bpt_index != -1

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with camelCase keys.

        Amounts are rendered as decimal strings so that 256-bit values
        survive JSON consumers that parse numbers as doubles. Token indices
        stay plain integers.
        """
        return {
            _to_camel_case(f.name): (
                getattr(self, f.name)
                if f.name in _INDEX_FIELDS
                else _to_json_value(getattr(self, f.name))
            )
            for f in fields(self)
        }
