"""CLI for collecting Guardian news into daily parquet files."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from collect_news.collect_news import collect_news
from collect_news.config import load_config
from collect_news.models import StopReason
from common.cli_helpers import parse_date, setup_logging

load_dotenv()

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Harvest Guardian news day by day")
    parser.add_argument(
        "--config",
        default=None,
        help="Config name: 'prod' or 'test'. Defaults to CONFIG_ENV or 'prod'.",
    )
    parser.add_argument(
        "--today",
        type=lambda v: parse_date(v, "today"),
        default=None,
        help="Treat this date as today (YYYY-MM-DD); days before it are harvested.",
    )
    parser.add_argument(
        "--max-minutes",
        type=float,
        default=None,
        help="Override the execution budget in minutes.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    setup_logging()
    args = parse_args(argv)

    config = load_config(args.config)
    if args.max_minutes is not None:
        config.harvest.max_duration_minutes = args.max_minutes

    summary = collect_news(config, today=args.today)

    if summary.stop_reason is StopReason.ERROR:
        sys.exit(1)


if __name__ == "__main__":
    main()
