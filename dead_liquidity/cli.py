"""Command-line interface for the dead-liquidity analyzer."""
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys

from .config import AppConfig, load_config
from .logging_setup import configure_logging
from .services import DeadLiquidityAnalyzer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="dead-liquidity",
        description="Find long-inactive Aave deposits and the yield they accrued",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    run_parser = sub.add_parser("run", help="Analyze tokens and write CSV reports")
    run_parser.add_argument(
        "--token",
        dest="tokens",
        action="append",
        default=None,
        metavar="SYMBOL",
        help="Only analyze this token (repeatable; default: all configured)",
    )
    run_parser.add_argument(
        "--cutoff",
        type=int,
        default=None,
        metavar="UNIX_TS",
        help="Explicit cutoff timestamp (overrides the inactivity window)",
    )
    run_parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for CSV reports (overrides config)",
    )
    run_parser.add_argument(
        "--dated",
        action="store_true",
        help="Append today's date to report filenames",
    )

    sub.add_parser("tokens", help="List configured tokens")

    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    report = config.report
    if args.output_dir:
        report = dataclasses.replace(report, output_dir=args.output_dir)
    if args.dated:
        report = dataclasses.replace(report, include_date=True)
    return dataclasses.replace(config, report=report)


async def _run(args: argparse.Namespace) -> None:
    """Execute the selected command."""
    config = load_config(args.config)

    if args.command == "tokens":
        for token in config.tokens:
            print(f"{token.symbol}\t{token.address}")
        return

    config = _apply_overrides(config, args)
    analyzer = DeadLiquidityAnalyzer(config)
    await analyzer.run(cutoff=args.cutoff, symbols=args.tokens)


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)
    try:
        asyncio.run(_run(args))
    except Exception as e:
        logger.exception("Run failed: %s", e)
        sys.exit(1)
