"""Wall-clock budget for one invocation."""

import time
from datetime import timedelta
from typing import Callable


class ExecutionBudget:
    """Tracks elapsed time since the invocation started.

    Only consulted between days; a day already in progress always runs to
    completion, so the hosting timeout must leave room above ``max_duration``.
    """

    def __init__(
        self,
        max_duration: timedelta = timedelta(minutes=14),
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_duration = max_duration
        self._clock = clock
        self.started_at = clock()

    def elapsed(self) -> float:
        """Seconds since the budget was created."""
        return self._clock() - self.started_at

    def within_budget(self) -> bool:
        return self.elapsed() <= self.max_duration.total_seconds()
