"""Balancer pool info normalizer - Python Implementation."""

from poolinfo.balancer import PoolInfoNormalizer, normalize_pools, parse_pool_info
from poolinfo.config import NormalizerConfig
from poolinfo.models import NormalizedPoolInfo, RawPool, RawToken

__version__ = "0.1.0"
__all__ = [
    "NormalizedPoolInfo",
    "NormalizerConfig",
    "PoolInfoNormalizer",
    "RawPool",
    "RawToken",
    "normalize_pools",
    "parse_pool_info",
    "__version__",
]
