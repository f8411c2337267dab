"""Canonical token ordering.

Balancer's vault keeps pool tokens sorted by address, with the native asset
taking the place of its wrapped token. ``AssetHelpers.sort_tokens`` computes
that order once from the token addresses and applies the same permutation to
any number of parallel arrays.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from poolinfo.constants import ADDRESS_ZERO
from poolinfo.models.types import normalize_address

from .errors import ArrayLengthMismatch
from .tokens import TokenArrays

logger = structlog.get_logger()


class AssetHelpers:
    """Address helpers bound to one chain's wrapped native asset.

    Args:
        wrapped_native_asset: Wrapped native asset address (e.g. WETH)
    """

    def __init__(self, wrapped_native_asset: str) -> None:
        self.weth = normalize_address(wrapped_native_asset)
        self.eth = ADDRESS_ZERO

    def is_eth(self, token: str) -> bool:
        """Return True if ``token`` is the native asset sentinel."""
        return normalize_address(token) == self.eth

    def is_weth(self, token: str) -> bool:
        """Return True if ``token`` is the wrapped native asset."""
        return normalize_address(token) == self.weth

    def translate_to_erc20(self, token: str) -> str:
        """Map the native asset to its wrapped token; other tokens unchanged."""
        return self.weth if self.is_eth(token) else token

    def sort_key(self, token: str) -> str:
        """Canonical sort key: lowercase address, native asset sorted as wrapped."""
        return normalize_address(self.translate_to_erc20(token))

    def sort_tokens(
        self, tokens: Sequence[str], *others: Sequence[Any]
    ) -> tuple[list[Any], ...]:
        """Sort tokens canonically, permuting every other array the same way.

        The permutation is computed from ``tokens`` only. The sort is stable,
        so tokens with equal keys keep their relative order.

        Args:
            tokens: Token addresses
            *others: Arrays aligned with ``tokens``

        Returns:
            Tuple of (sorted tokens, *sorted others)

        Raises:
            ArrayLengthMismatch: If any array differs in length from tokens
        """
        for position, array in enumerate(others):
            if len(array) != len(tokens):
                raise ArrayLengthMismatch(
                    f"Array {position} has {len(array)} entries, expected {len(tokens)}"
                )

        order = sorted(range(len(tokens)), key=lambda i: self.sort_key(tokens[i]))
        return tuple([array[i] for i in order] for array in (tokens, *others))


def reorder_token_arrays(arrays: TokenArrays, wrapped_native_asset: str) -> TokenArrays:
    """Return a new ``TokenArrays`` in canonical token order.

    Scaling factors cross the sort as decimal strings and are parsed back to
    integers, so no precision is lost whatever the array element type.
    """
    helpers = AssetHelpers(wrapped_native_asset)
    (
        parsed_tokens,
        decimals,
        scaling_factors_str,
        balances_evm,
        upscaled_balances,
        weights,
        price_rates,
        old_price_rates,
        exempted_tokens,
    ) = helpers.sort_tokens(
        arrays.parsed_tokens,
        arrays.decimals,
        [str(sf) for sf in arrays.scaling_factors],
        arrays.balances_evm,
        arrays.upscaled_balances,
        arrays.weights,
        arrays.price_rates,
        arrays.old_price_rates,
        arrays.exempted_tokens,
    )

    reordered = TokenArrays(
        parsed_tokens=tuple(parsed_tokens),
        decimals=tuple(decimals),
        scaling_factors=tuple(int(sf) for sf in scaling_factors_str),
        balances_evm=tuple(balances_evm),
        upscaled_balances=tuple(upscaled_balances),
        weights=tuple(weights),
        price_rates=tuple(price_rates),
        old_price_rates=tuple(old_price_rates),
        exempted_tokens=tuple(exempted_tokens),
    )

    if reordered.parsed_tokens != arrays.parsed_tokens:
        logger.debug(
            "pool_tokens_reordered",
            before=list(arrays.parsed_tokens),
            after=list(reordered.parsed_tokens),
        )

    return reordered
