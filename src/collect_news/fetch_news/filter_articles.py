"""Keep news-pillar articles with a body and map them to NewsRecords."""

import logging
from datetime import date
from typing import Any, Optional

from collect_news.models import NewsRecord

logger = logging.getLogger(__name__)

PILLAR_NEWS = "pillar/news"


def parse_result(day: date, result: dict, pillar: str = PILLAR_NEWS) -> Optional[NewsRecord]:
    """Map one search result to a NewsRecord, or None if it does not qualify.

    Raises KeyError, TypeError or AttributeError when the entry is not
    shaped like a search result.
    """
    pillar_id = result.get("pillarId")
    if pillar_id is None or str(pillar_id).lower() != pillar.lower():
        return None

    body = (result.get("fields") or {}).get("bodyText")
    if not isinstance(body, str) or not body.strip():
        return None

    return NewsRecord(
        date=day,
        id=str(result["id"]),
        headline=str(result["webTitle"]),
        body=body,
    )


def filter_articles(day: date, page: Optional[dict[str, Any]], pillar: str = PILLAR_NEWS) -> list[NewsRecord]:
    """Return the qualifying records of one decoded page, in API order."""
    results = page.get("results") if isinstance(page, dict) else None
    if not isinstance(results, list):
        logger.warning("No result list on page for %s", day)
        return []

    records = []
    for result in results:
        try:
            record = parse_result(day, result, pillar)
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning("Skipping malformed result for %s: %r", day, e)
            continue
        if record is not None:
            records.append(record)

    return records
