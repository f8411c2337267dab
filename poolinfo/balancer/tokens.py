"""Per-token records used while normalizing a pool.

Tokens are parsed one record at a time (``TokenState``) and projected into a
struct-of-arrays (``TokenArrays``) once every per-token value is known. From
that point on, every transformation returns a new ``TokenArrays`` so the
parallel arrays can only change together.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields

from .errors import ArrayLengthMismatch


@dataclass(frozen=True)
class TokenState:
    """One pool token with its values converted to fixed point.

    Attributes:
        address: Token address (wrapped native asset possibly unwrapped)
        decimals: Token decimals
        balance_evm: Balance in the token's native decimals
        weight: Weight at 18 decimals
        price_rate: Price rate at 18 decimals
        old_price_rate: Previous price rate at 18 decimals
        exempt: Whether the token is exempt from yield protocol fees
        scaling_factor: Decimal scaling combined with price rate, 18 decimals
    """

    address: str
    decimals: int
    balance_evm: int
    weight: int
    price_rate: int
    old_price_rate: int
    exempt: bool
    scaling_factor: int


@dataclass(frozen=True)
class TokenArrays:
    """Parallel per-token arrays, all indexed by the same token position."""

    parsed_tokens: tuple[str, ...]
    decimals: tuple[int, ...]
    scaling_factors: tuple[int, ...]
    balances_evm: tuple[int, ...]
    upscaled_balances: tuple[int, ...]
    weights: tuple[int, ...]
    price_rates: tuple[int, ...]
    old_price_rates: tuple[int, ...]
    exempted_tokens: tuple[bool, ...]

    def __post_init__(self) -> None:
        expected = len(self.parsed_tokens)
        for f in fields(self):
            length = len(getattr(self, f.name))
            if length != expected:
                raise ArrayLengthMismatch(
                    f"{f.name} has {length} entries, expected {expected} (one per token)"
                )

    @classmethod
    def from_tokens(
        cls, tokens: Sequence[TokenState], upscaled_balances: Sequence[int]
    ) -> TokenArrays:
        """Project per-token records and their upscaled balances into arrays."""
        return cls(
            parsed_tokens=tuple(t.address for t in tokens),
            decimals=tuple(t.decimals for t in tokens),
            scaling_factors=tuple(t.scaling_factor for t in tokens),
            balances_evm=tuple(t.balance_evm for t in tokens),
            upscaled_balances=tuple(upscaled_balances),
            weights=tuple(t.weight for t in tokens),
            price_rates=tuple(t.price_rate for t in tokens),
            old_price_rates=tuple(t.old_price_rate for t in tokens),
            exempted_tokens=tuple(t.exempt for t in tokens),
        )
