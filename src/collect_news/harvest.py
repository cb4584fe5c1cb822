"""Day-by-day harvest loop.

Walks forward from the checkpoint cursor one day at a time until one of:

- the execution budget is spent (checked before each day, never mid-day)
- the API quota is exhausted
- a fetch, decode or write fails
- the loop reaches today, which is never harvested because it is incomplete

The cursor is advanced for a day only after that day's batch is written, so
a later run always resumes at the first day without a complete batch.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from collect_news.budget import ExecutionBudget
from collect_news.checkpoint import CheckpointCursor
from collect_news.fetch_news.collect_day import collect_day
from collect_news.fetch_news.fetch_page import PageFetcher
from collect_news.fetch_news.filter_articles import PILLAR_NEWS
from collect_news.models import Fault, HarvestSummary, QuotaExceeded, StopReason
from collect_news.storage import ParquetBatchWriter

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def harvest_news(
    cursor: CheckpointCursor,
    fetcher: PageFetcher,
    writer: ParquetBatchWriter,
    budget: ExecutionBudget,
    today: Optional[date] = None,
    pillar: str = PILLAR_NEWS,
) -> HarvestSummary:
    """Harvest complete days from the cursor's resume date up to yesterday."""
    today = today or utc_today()

    try:
        day = cursor.resume_date()
    except Exception as e:
        logger.error("Failed to read harvest cursor: %s", e)
        return HarvestSummary(stop_reason=StopReason.ERROR)

    summary = HarvestSummary(stop_reason=StopReason.CAUGHT_UP, next_date=day)
    logger.info("Resuming harvest at %s (today is %s)", day, today)

    while day < today:
        if not budget.within_budget():
            logger.info("Execution budget spent after %.1fs, stopping before %s", budget.elapsed(), day)
            summary.stop_reason = StopReason.BUDGET
            return summary

        result = collect_day(fetcher, day, pillar)

        if isinstance(result, QuotaExceeded):
            logger.info("API limit exceeded at %s: %s", day, result.detail)
            summary.stop_reason = StopReason.QUOTA
            return summary
        if isinstance(result, Fault):
            logger.error("Failed to collect %s: %s", day, result.detail)
            summary.stop_reason = StopReason.ERROR
            return summary

        try:
            if result.records:
                writer.write(day, result.records)
            else:
                logger.info("No data for %s", day)
            cursor.set_last_harvested_date(day)
        except Exception as e:
            logger.error("Failed to persist %s: %s", day, e)
            summary.stop_reason = StopReason.ERROR
            return summary

        logger.info("%s inserted", day)
        summary.harvested_dates.append(day)
        summary.records_written += len(result.records)
        day += timedelta(days=1)
        summary.next_date = day

    logger.info("Harvest caught up to %s", today)
    return summary
