"""Pool token (BPT) exclusion.

Composable pools list their own token among their tokens. Invariant math runs
on the remaining tokens, so the normalizer also reports every relevant array
with the BPT entry removed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

import structlog

from .tokens import TokenArrays

logger = structlog.get_logger()

T = TypeVar("T")

# bpt_index value when the pool does not list its own token
BPT_NOT_FOUND = -1


@dataclass(frozen=True)
class WithoutBpt:
    """Per-token arrays with the BPT entry removed.

    All tuples are empty when the pool does not list its own token.
    """

    scaling_factors: tuple[int, ...]
    parsed_tokens: tuple[str, ...]
    balances_evm: tuple[int, ...]
    price_rates: tuple[int, ...]
    upscaled_balances: tuple[int, ...]


def find_bpt_index(pool_address: str, tokens: Sequence[str]) -> int:
    """Position of ``pool_address`` in ``tokens``, or -1 if absent.

    Matching is exact string equality; addresses that differ only in case do
    not match.
    """
    for index, token in enumerate(tokens):
        if token == pool_address:
            return index
    return BPT_NOT_FOUND


def drop_index(values: Sequence[T], index: int) -> tuple[T, ...]:
    """Return ``values`` without the entry at ``index``.

    Returns an empty tuple when ``index`` is -1 (no BPT), never a full copy.

    Raises:
        IndexError: If index is neither -1 nor a valid position
    """
    if index == BPT_NOT_FOUND:
        return ()
    if not 0 <= index < len(values):
        raise IndexError(f"BPT index {index} out of range for {len(values)} tokens")
    return tuple(values[:index]) + tuple(values[index + 1 :])


def exclude_bpt(bpt_index: int, arrays: TokenArrays) -> WithoutBpt:
    """Build the "without BPT" arrays for ``bpt_index``."""
    without_bpt = WithoutBpt(
        scaling_factors=drop_index(arrays.scaling_factors, bpt_index),
        parsed_tokens=drop_index(arrays.parsed_tokens, bpt_index),
        balances_evm=drop_index(arrays.balances_evm, bpt_index),
        price_rates=drop_index(arrays.price_rates, bpt_index),
        upscaled_balances=drop_index(arrays.upscaled_balances, bpt_index),
    )

    if bpt_index != BPT_NOT_FOUND:
        logger.debug(
            "bpt_token_found",
            bpt_index=bpt_index,
            token=arrays.parsed_tokens[bpt_index],
        )

    return without_bpt
