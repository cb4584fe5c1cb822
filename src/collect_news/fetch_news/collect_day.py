"""Fetch every page of search results for one day."""

import logging
from datetime import date

from collect_news.fetch_news.fetch_page import PageFetcher
from collect_news.fetch_news.filter_articles import PILLAR_NEWS, filter_articles
from collect_news.models import Collected, DayResult, Fault, QuotaExceeded

logger = logging.getLogger(__name__)


def read_page_count(envelope) -> int | None:
    """Read the total page count from a first-page envelope."""
    if not isinstance(envelope, dict):
        return None
    pages = envelope.get("pages")
    if isinstance(pages, bool):
        return None
    try:
        return int(pages)
    except (TypeError, ValueError):
        return None


def collect_day(fetcher: PageFetcher, day: date, pillar: str = PILLAR_NEWS) -> DayResult:
    """Collect all qualifying records for ``day``.

    Returns QuotaExceeded when the first page has no readable page count,
    Fault when any request or decode fails, otherwise Collected with the
    records of pages 1..N concatenated in page order.
    """
    try:
        first = fetcher.fetch(day, 1)
        page_count = read_page_count(first)
        if page_count is None:
            return QuotaExceeded(f"No pagination envelope for {day}")

        records = filter_articles(day, first, pillar)
        for page in range(2, page_count + 1):
            records.extend(filter_articles(day, fetcher.fetch(day, page), pillar))
    except Exception as e:
        logger.debug("Collecting %s failed", day, exc_info=True)
        return Fault(f"{type(e).__name__}: {e}")

    logger.info("Collected %d records from %d pages for %s", len(records), max(page_count, 1), day)
    return Collected(records)
