"""Minimum spacing between outbound API requests."""

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class RateLimiter:
    """Serializing throttle for a single caller.

    ``wait()`` blocks until ``min_interval`` seconds have passed since the
    previous call unblocked. The first call in a run returns immediately.
    Not safe for concurrent callers.
    """

    def __init__(
        self,
        min_interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self.last_request_at: float | None = None

    def wait(self) -> None:
        if self.last_request_at is not None:
            remaining = self.min_interval - (self._clock() - self.last_request_at)
            if remaining > 0:
                logger.debug("Rate limit: sleeping %.3fs", remaining)
                self._sleep(remaining)
        self.last_request_at = self._clock()
