"""Pydantic models for raw pool records.

Field names follow the Balancer subgraph / SDK pool shape. Values arrive as
human-readable decimal strings and are only validated for type here; the
normalizer converts them to fixed point.
"""

from pydantic import BaseModel, Field

from poolinfo.models.types import DecimalString


class RawToken(BaseModel):
    """A pool token as reported by the indexer."""

    address: str
    balance: DecimalString
    # None means "not reported"; the normalizer substitutes 18
    decimals: int | None = None
    weight: DecimalString | None = None
    price_rate: DecimalString | None = Field(default=None, alias="priceRate")
    old_price_rate: DecimalString | None = Field(default=None, alias="oldPriceRate")
    is_exempt_from_yield_protocol_fee: bool | None = Field(
        default=None,
        alias="isExemptFromYieldProtocolFee",
    )

    model_config = {"extra": "allow", "populate_by_name": True}


class RawPool(BaseModel):
    """A pool snapshot with human-readable values.

    ``address`` doubles as the pool token (BPT) address for pools that list
    their own token among ``tokens``.
    """

    address: str
    tokens: list[RawToken] = Field(default_factory=list)
    amp: DecimalString | None = None
    # Required by the normalizer; kept optional here so a missing value is
    # reported as a field parse error carrying the pool address.
    swap_fee: DecimalString | None = Field(default=None, alias="swapFee")
    protocol_swap_fee_cache: DecimalString | None = Field(
        default=None,
        alias="protocolSwapFeeCache",
    )
    protocol_yield_fee_cache: DecimalString | None = Field(
        default=None,
        alias="protocolYieldFeeCache",
    )
    total_shares: DecimalString | None = Field(default=None, alias="totalShares")
    last_join_exit_invariant: DecimalString | None = Field(
        default=None,
        alias="lastJoinExitInvariant",
    )
    ath_rate_product: DecimalString | None = Field(default=None, alias="athRateProduct")

    model_config = {"extra": "allow", "populate_by_name": True}

    @property
    def token_count(self) -> int:
        """Return the number of tokens in this pool."""
        return len(self.tokens)
