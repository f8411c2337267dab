"""Mathematical utilities for pool normalization.

This package provides the fixed-point primitives used by the normalizer:
- Bfp: 18-decimal fixed-point arithmetic (Balancer-style)
- parse_fixed / format_fixed: exact decimal string conversion
"""

from poolinfo.math.fixed_point import Bfp, format_fixed, parse_fixed

__all__ = ["Bfp", "format_fixed", "parse_fixed"]
