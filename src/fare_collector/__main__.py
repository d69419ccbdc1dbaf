"""Command-line entrypoint for the fare collector."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from datetime import date
from typing import Any

from pydantic import ValidationError

from fare_collector.app import run_collection
from fare_collector.config import Settings, get_settings
from fare_collector.domain.exceptions import CollectionAborted
from fare_collector.logging_config import configure_logging, get_logging_config

logger = logging.getLogger("fare_collector")

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_CONFIG = 2


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Collect train fares as CSV records")
    p.add_argument("--start-date", type=date.fromisoformat, help="First travel day, YYYY-MM-DD")
    p.add_argument("--days", type=int, help="Number of days to scan per route")
    p.add_argument("--output", help="Append records to this file instead of stdout")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    p.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip a failed day instead of aborting the run",
    )
    return p


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    overrides: dict[str, Any] = {}
    if args.start_date is not None:
        overrides["start_date"] = args.start_date
    if args.days is not None:
        overrides["days"] = args.days
    if args.output is not None:
        overrides["output_path"] = args.output
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.keep_going:
        overrides["abort_on_error"] = False
    base = get_settings()
    if not overrides:
        return base
    return Settings.model_validate({**base.model_dump(), **overrides})


def main(argv: Sequence[str] | None = None) -> int:
    """Run one collection pass."""
    args = build_arg_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        configure_logging(get_logging_config(level=args.log_level or "INFO"))
        logger.error("Invalid configuration: %s", e)
        return EXIT_CONFIG

    configure_logging(get_logging_config(level=settings.log_level))
    try:
        if settings.output_path is None:
            asyncio.run(run_collection(settings, sys.stdout))
        else:
            with settings.output_path.open("a", encoding="utf-8", newline="") as stream:
                asyncio.run(run_collection(settings, stream))
    except CollectionAborted as e:
        logger.error("Collection aborted: %s", e)
        return EXIT_ABORTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
