"""Balancer pool info parsing.

Converts a raw pool record (human-readable decimal strings, as served by the
subgraph) into fixed-point arrays ready for invariant and pricing math.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog
from pydantic import ValidationError

from poolinfo.config import DEFAULT_NORMALIZER_CONFIG, NormalizerConfig
from poolinfo.constants import ADDRESS_ZERO
from poolinfo.math.fixed_point import AMP_DECIMALS, format_fixed, parse_fixed
from poolinfo.models.pool import RawPool, RawToken
from poolinfo.models.pool_info import NormalizedPoolInfo
from poolinfo.models.types import UINT256_MAX

from .bpt import exclude_bpt, find_bpt_index
from .defaults import field_or_default
from .errors import FieldParseError, PoolInfoError
from .scaling import scaling_factor, upscale_array, validate_decimals
from .sorting import reorder_token_arrays
from .tokens import TokenArrays, TokenState

logger = structlog.get_logger()

# Precision of every fixed-point field except balances and amp
EVM_DECIMALS = 18


def _field_error(
    field: str, pool_address: str, value: object, reason: str
) -> FieldParseError:
    logger.debug(
        "pool_field_parse_failed",
        pool=pool_address,
        field=field,
        raw_value=value,
        reason=reason,
    )
    return FieldParseError(field, pool_address, value, reason)


def _parse_decimal(
    value: str | None,
    decimals: int,
    *,
    field: str,
    pool_address: str,
    label: str | None = None,
) -> int:
    """Parse an optional decimal string field to fixed point.

    Missing optional fields take their default; a missing required field is
    an error.

    Args:
        value: Raw decimal string, or None if absent
        decimals: Fixed-point precision
        field: Raw field name (default table key)
        pool_address: Pool address, for error reporting
        label: Field name used in errors (defaults to ``field``)

    Raises:
        FieldParseError: If the value is missing, malformed, or not a uint256
    """
    label = label or field
    raw = field_or_default(field, value)
    if raw is None:
        raise _field_error(label, pool_address, raw, "required field is missing")

    try:
        parsed = parse_fixed(raw, decimals)
    except ValueError as err:
        raise _field_error(label, pool_address, raw, str(err)) from err

    if not 0 <= parsed <= UINT256_MAX:
        raise _field_error(label, pool_address, raw, "value is outside the uint256 range")

    return parsed


def _parse_token(
    index: int,
    token: RawToken,
    pool_address: str,
    wrapped_native_asset: str | None,
    unwrap_native_asset: bool,
) -> TokenState:
    """Convert one raw token to fixed point and derive its scaling factor."""
    prefix = f"tokens[{index}]"

    exempt = bool(
        field_or_default("isExemptFromYieldProtocolFee", token.is_exempt_from_yield_protocol_fee)
    )

    address = token.address
    if unwrap_native_asset and address == wrapped_native_asset:
        address = ADDRESS_ZERO

    decimals = validate_decimals(field_or_default("decimals", token.decimals))
    balance_evm = _parse_decimal(
        token.balance,
        decimals,
        field="balance",
        pool_address=pool_address,
        label=f"{prefix}.balance",
    )
    weight = _parse_decimal(
        token.weight,
        EVM_DECIMALS,
        field="weight",
        pool_address=pool_address,
        label=f"{prefix}.weight",
    )
    price_rate = _parse_decimal(
        token.price_rate,
        EVM_DECIMALS,
        field="priceRate",
        pool_address=pool_address,
        label=f"{prefix}.priceRate",
    )
    old_price_rate = _parse_decimal(
        token.old_price_rate,
        EVM_DECIMALS,
        field="oldPriceRate",
        pool_address=pool_address,
        label=f"{prefix}.oldPriceRate",
    )

    return TokenState(
        address=address,
        decimals=decimals,
        balance_evm=balance_evm,
        weight=weight,
        price_rate=price_rate,
        old_price_rate=old_price_rate,
        exempt=exempt,
        scaling_factor=scaling_factor(decimals, price_rate),
    )


def _argmax(values: Sequence[int]) -> int:
    """Index of the largest value (first one on ties), -1 if empty."""
    if not values:
        return -1
    return values.index(max(values))


def parse_pool_info(
    pool: RawPool | Mapping[str, Any],
    wrapped_native_asset: str | None = None,
    unwrap_native_asset: bool = False,
) -> NormalizedPoolInfo:
    """Parse pool info into EVM amounts.

    Sorts every per-token array into canonical token order if
    ``wrapped_native_asset`` is passed.

    Args:
        pool: Raw pool record (model or mapping in subgraph shape)
        wrapped_native_asset: Wrapped native asset address (e.g. WETH)
        unwrap_native_asset: If True, report the wrapped native asset as the
            native asset (zero address)

    Returns:
        A new NormalizedPoolInfo owned by the caller

    Raises:
        FieldParseError: If a decimal field is malformed or missing
        InvalidTokenDecimals: If a token's decimals are not in [0, 18]
        pydantic.ValidationError: If a mapping does not have the pool shape
    """
    if not isinstance(pool, RawPool):
        pool = RawPool.model_validate(pool)

    address = pool.address

    # Per-token values (array-of-structs)
    tokens = [
        _parse_token(index, token, address, wrapped_native_asset, unwrap_native_asset)
        for index, token in enumerate(pool.tokens)
    ]
    upscaled_balances = upscale_array(
        [t.balance_evm for t in tokens],
        [t.scaling_factor for t in tokens],
    )

    # Parallel arrays from here on (struct-of-arrays)
    arrays = TokenArrays.from_tokens(tokens, upscaled_balances)
    if wrapped_native_asset:
        arrays = reorder_token_arrays(arrays, wrapped_native_asset)

    # Solidity maths uses a 3-decimal precision for amp that must be replicated
    amp_with_precision = _parse_decimal(
        pool.amp, AMP_DECIMALS, field="amp", pool_address=address
    )
    swap_fee_evm = _parse_decimal(
        pool.swap_fee, EVM_DECIMALS, field="swapFee", pool_address=address
    )

    higher_balance_token_index = _argmax(arrays.upscaled_balances)

    protocol_swap_fee_pct = format_fixed(
        _parse_decimal(
            pool.protocol_swap_fee_cache,
            EVM_DECIMALS,
            field="protocolSwapFeeCache",
            pool_address=address,
        ),
        EVM_DECIMALS,
    )
    protocol_yield_fee_pct = format_fixed(
        _parse_decimal(
            pool.protocol_yield_fee_cache,
            EVM_DECIMALS,
            field="protocolYieldFeeCache",
            pool_address=address,
        ),
        EVM_DECIMALS,
    )

    bpt_index = find_bpt_index(address, arrays.parsed_tokens)
    without_bpt = exclude_bpt(bpt_index, arrays)

    total_shares_evm = _parse_decimal(
        pool.total_shares, EVM_DECIMALS, field="totalShares", pool_address=address
    )
    ath_rate_product = format_fixed(
        _parse_decimal(
            pool.ath_rate_product,
            EVM_DECIMALS,
            field="athRateProduct",
            pool_address=address,
        ),
        EVM_DECIMALS,
    )

    return NormalizedPoolInfo(
        parsed_tokens=arrays.parsed_tokens,
        balances_evm=arrays.balances_evm,
        weights=arrays.weights,
        price_rates=arrays.price_rates,
        old_price_rates=arrays.old_price_rates,
        scaling_factors=arrays.scaling_factors,
        upscaled_balances=arrays.upscaled_balances,
        exempted_tokens=arrays.exempted_tokens,
        parsed_tokens_without_bpt=without_bpt.parsed_tokens,
        balances_evm_without_bpt=without_bpt.balances_evm,
        price_rates_without_bpt=without_bpt.price_rates,
        scaling_factors_without_bpt=without_bpt.scaling_factors,
        upscaled_balances_without_bpt=without_bpt.upscaled_balances,
        amp_with_precision=amp_with_precision,
        swap_fee_evm=swap_fee_evm,
        total_shares_evm=total_shares_evm,
        protocol_swap_fee_pct=protocol_swap_fee_pct,
        protocol_yield_fee_pct=protocol_yield_fee_pct,
        # Returned as given, never parsed; malformed values are not an error
        last_join_exit_invariant=field_or_default(
            "lastJoinExitInvariant", pool.last_join_exit_invariant
        ),
        ath_rate_product=ath_rate_product,
        bpt_index=bpt_index,
        higher_balance_token_index=higher_balance_token_index,
    )


class PoolInfoNormalizer:
    """Normalizes raw pools with a fixed configuration.

    Args:
        config: Native asset handling options. Defaults to no reordering and
            no unwrapping.
    """

    def __init__(self, config: NormalizerConfig = DEFAULT_NORMALIZER_CONFIG) -> None:
        self.config = config

    def normalize(self, pool: RawPool | Mapping[str, Any]) -> NormalizedPoolInfo:
        """Normalize a single pool. Errors propagate to the caller."""
        return parse_pool_info(
            pool,
            wrapped_native_asset=self.config.wrapped_native_asset,
            unwrap_native_asset=self.config.unwrap_native_asset,
        )

    def normalize_many(
        self, pools: Iterable[RawPool | Mapping[str, Any]]
    ) -> dict[str, NormalizedPoolInfo]:
        """Normalize many pools, skipping the ones whose data is unusable.

        When several records share a pool address, the first one is kept and
        the later ones are skipped with a warning.

        Returns:
            Normalized pools keyed by pool address, in input order
        """
        results: dict[str, NormalizedPoolInfo] = {}
        seen: set[str] = set()
        for position, raw in enumerate(pools):
            try:
                pool = raw if isinstance(raw, RawPool) else RawPool.model_validate(raw)
            except ValidationError as err:
                logger.warning(
                    "pool_invalid_record",
                    position=position,
                    error_count=err.error_count(),
                )
                continue

            if pool.address in seen:
                logger.warning("pool_duplicate_address", pool=pool.address, position=position)
                continue
            seen.add(pool.address)

            try:
                results[pool.address] = self.normalize(pool)
            except PoolInfoError as err:
                logger.warning(
                    "pool_skipped",
                    pool=pool.address,
                    token_count=pool.token_count,
                    error=str(err),
                )

        return results


def normalize_pools(
    pools: Iterable[RawPool | Mapping[str, Any]],
    config: NormalizerConfig = DEFAULT_NORMALIZER_CONFIG,
) -> dict[str, NormalizedPoolInfo]:
    """Normalize many pools with ``config``, skipping unusable ones."""
    return PoolInfoNormalizer(config).normalize_many(pools)
