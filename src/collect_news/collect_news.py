"""Build the harvest collaborators from config and run one invocation."""

import logging
import os
from datetime import date, timedelta
from typing import Optional

import requests
from dotenv import load_dotenv

from collect_news.budget import ExecutionBudget
from collect_news.checkpoint import StateStore, open_checkpoint
from collect_news.config import Config
from collect_news.fetch_news.fetch_page import PageFetcher
from collect_news.harvest import harvest_news
from collect_news.models import HarvestSummary
from collect_news.rate_limiter import RateLimiter
from collect_news.storage import ParquetBatchWriter

load_dotenv()

logger = logging.getLogger(__name__)


def collect_news(
    config: Config,
    today: Optional[date] = None,
    store: Optional[StateStore] = None,
    session: Optional[requests.Session] = None,
) -> HarvestSummary:
    """Run one bounded harvest invocation."""
    budget = ExecutionBudget(timedelta(minutes=config.harvest.max_duration_minutes))

    api_key = os.environ[config.api.api_key_env]
    writer = ParquetBatchWriter(config.storage)

    owns_session = session is None
    http = session or requests.Session()
    try:
        fetcher = PageFetcher(
            session=http,
            api_key=api_key,
            rate_limiter=RateLimiter(config.api.min_request_interval),
            config=config.api,
        )
        with open_checkpoint(config.state, store) as cursor:
            summary = harvest_news(
                cursor,
                fetcher,
                writer,
                budget,
                today=today,
                pillar=config.harvest.pillar,
            )
    finally:
        if owns_session:
            http.close()

    logger.info(
        "Harvest stopped (%s): %d days, %d records in %.1fs",
        summary.stop_reason.value,
        len(summary.harvested_dates),
        summary.records_written,
        budget.elapsed(),
    )
    return summary
