"""Command line entry point for normalizing pool snapshots.

Usage:
    poolinfo normalize pools.json --wrapped-native-asset 0xc02a... > out.json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

import structlog

from poolinfo.balancer import normalize_pools
from poolinfo.config import NormalizerConfig

logger = structlog.get_logger()

_TRUE_VALUES = ("true", "1", "yes")


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structlog to write to stderr, keeping stdout for results."""
    renderer: Any = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def load_pools(path: Path) -> list[dict[str, Any]]:
    """Load one pool object or a list of pools from a JSON file."""
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    raise ValueError(f"Expected a pool object or a list of pools in {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poolinfo",
        description="Normalize Balancer pool snapshots into fixed-point arrays",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  POOLINFO_WRAPPED_NATIVE_ASSET  default for --wrapped-native-asset
  POOLINFO_UNWRAP_NATIVE_ASSET   "true" to unwrap by default
  POOLINFO_LOG_LEVEL             log level (default: INFO)
  POOLINFO_LOG_JSON              "true" for JSON logs
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser("normalize", help="Normalize pools from a JSON file")
    normalize.add_argument(
        "pools",
        type=Path,
        help="JSON file holding one pool object or a list of pools",
    )
    normalize.add_argument(
        "--wrapped-native-asset",
        type=str,
        default=None,
        help="Wrapped native asset address; enables canonical token ordering",
    )
    normalize.add_argument(
        "--unwrap-native-asset",
        action="store_true",
        help="Report the wrapped native asset as the zero address",
    )
    normalize.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write results to this file instead of stdout",
    )
    normalize.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    normalize.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def run_normalize(args: argparse.Namespace) -> int:
    config = NormalizerConfig.from_env()
    if args.wrapped_native_asset:
        config = replace(config, wrapped_native_asset=args.wrapped_native_asset)
    if args.unwrap_native_asset:
        config = replace(config, unwrap_native_asset=True)

    if not args.pools.exists():
        logger.error("pools_file_not_found", path=str(args.pools))
        return 1

    try:
        raw_pools = load_pools(args.pools)
    except (OSError, ValueError) as e:
        logger.error("pools_file_invalid", path=str(args.pools), error=str(e))
        return 1

    results = normalize_pools(raw_pools, config)
    logger.info(
        "pools_normalized",
        total=len(raw_pools),
        normalized=len(results),
        skipped=len(raw_pools) - len(results),
    )

    payload = json.dumps(
        {address: info.to_dict() for address, info in results.items()},
        indent=2,
    )
    if args.output is None:
        print(payload)
    else:
        args.output.write_text(payload + "\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the poolinfo CLI."""
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.verbose else os.environ.get("POOLINFO_LOG_LEVEL", "INFO")
    json_logs = args.json_logs or (
        os.environ.get("POOLINFO_LOG_JSON", "false").lower() in _TRUE_VALUES
    )
    configure_logging(level, json_logs)

    if args.command == "normalize":
        return run_normalize(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
