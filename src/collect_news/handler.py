"""AWS Lambda entry point, invoked on a schedule with no payload."""

import logging

from collect_news.collect_news import collect_news
from collect_news.config import load_config

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def lambda_handler(event, context) -> None:
    config = load_config()
    summary = collect_news(config)
    logger.info("Next harvest date: %s", summary.next_date)
    return None
