"""Single page requests against the Guardian content search API."""

import logging
from datetime import date
from typing import Any, Optional

import requests

from collect_news.config import ApiConfig
from collect_news.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches one (day, page) of search results.

    The HTTP status is deliberately not checked: when the daily quota is
    spent the API answers with a body that lacks the ``response`` envelope,
    and callers detect that from the structure.
    """

    def __init__(
        self,
        session: requests.Session,
        api_key: str,
        rate_limiter: RateLimiter,
        config: ApiConfig,
    ):
        self.session = session
        self.api_key = api_key
        self.rate_limiter = rate_limiter
        self.config = config

    def build_params(self, day: date, page: int) -> dict[str, Any]:
        return {
            "api-key": self.api_key,
            "show-fields": "bodyText",
            "lang": self.config.language,
            "page-size": self.config.page_size,
            "from-date": day.isoformat(),
            "to-date": day.isoformat(),
            "page": page,
        }

    def fetch(self, day: date, page: int) -> Optional[dict]:
        """Fetch a page and return the decoded ``response`` object.

        Returns None when the body decodes but carries no ``response``
        object. Raises ``requests.RequestException`` on transport faults and
        ``ValueError`` when the body is not JSON.
        """
        params = self.build_params(day, page)

        self.rate_limiter.wait()
        response = self.session.get(
            self.config.url,
            params=params,
            timeout=self.config.request_timeout,
        )
        logger.debug("GET %s page=%d status=%s", day, page, response.status_code)

        payload = response.json()
        if not isinstance(payload, dict):
            return None
        envelope = payload.get("response")
        return envelope if isinstance(envelope, dict) else None
