"""Durable harvest progress: the last fully collected day."""

import logging
import os
from contextlib import contextmanager
from datetime import date, timedelta
from typing import Iterator, Optional, Protocol

from collect_news.config import StateConfig

logger = logging.getLogger(__name__)


class StateStore(Protocol):
    def get(self, name: str) -> Optional[str]: ...

    def set(self, name: str, value: str) -> None: ...

    def close(self) -> None: ...


class MemoryStateStore:
    """In-process store used by the test config."""

    def __init__(self, seed: dict[str, str] | None = None):
        self.values: dict[str, str] = dict(seed or {})

    def get(self, name: str) -> Optional[str]:
        return self.values.get(name)

    def set(self, name: str, value: str) -> None:
        self.values[name] = value

    def close(self) -> None:
        pass


class PostgresStateStore:
    """Named values in a ``harvest_state`` table, one connection per run."""

    def __init__(self, connection):
        self.connection = connection

    @classmethod
    def connect(cls, dsn: str | None = None) -> "PostgresStateStore":
        import psycopg2

        store = cls(psycopg2.connect(dsn or os.environ["DATABASE_URL"]))
        store.ensure_table()
        return store

    def ensure_table(self) -> None:
        with self.connection.cursor() as cur:
            cur.execute("""
                CREATE TABLE IF NOT EXISTS harvest_state (
                    name TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
        self.connection.commit()

    def get(self, name: str) -> Optional[str]:
        with self.connection.cursor() as cur:
            cur.execute("SELECT value FROM harvest_state WHERE name = %s", (name,))
            row = cur.fetchone()
        self.connection.commit()
        return None if row is None else row[0]

    def set(self, name: str, value: str) -> None:
        try:
            with self.connection.cursor() as cur:
                cur.execute("""
                    INSERT INTO harvest_state (name, value)
                    VALUES (%s, %s)
                    ON CONFLICT (name)
                    DO UPDATE SET value = EXCLUDED.value
                """, (name, value))
            self.connection.commit()
        except Exception:
            self.connection.rollback()
            raise

    def close(self) -> None:
        self.connection.close()


class DynamoStateStore:
    """Named values as ``{name, value}`` items in a DynamoDB table."""

    def __init__(self, table):
        self.table = table

    def get(self, name: str) -> Optional[str]:
        item = self.table.get_item(Key={"name": name}, ConsistentRead=True).get("Item")
        return None if item is None else item.get("value")

    def set(self, name: str, value: str) -> None:
        self.table.put_item(Item={"name": name, "value": value})

    def close(self) -> None:
        pass


class CheckpointCursor:
    """Last harvested day plus the campaign start used on a cold start.

    The last harvested day only moves forward.
    """

    def __init__(
        self,
        store: StateStore,
        last_harvested_key: str = "DATE_LAST_ADDED_NEWS",
        campaign_start_key: str = "DATE_START_AV",
    ):
        self.store = store
        self.last_harvested_key = last_harvested_key
        self.campaign_start_key = campaign_start_key

    def _read_date(self, name: str) -> Optional[date]:
        value = self.store.get(name)
        if value is None or not value.strip():
            return None
        return date.fromisoformat(value.strip())

    def get_last_harvested_date(self) -> Optional[date]:
        return self._read_date(self.last_harvested_key)

    def get_fallback_start_date(self) -> date:
        start = self._read_date(self.campaign_start_key)
        if start is None:
            raise ValueError(f"Campaign start date {self.campaign_start_key} is not set")
        return start

    def set_last_harvested_date(self, day: date) -> None:
        """Durably record ``day`` as fully harvested.

        Raises ValueError if ``day`` is not after the stored value.
        """
        current = self.get_last_harvested_date()
        if current is not None and day <= current:
            raise ValueError(f"Cursor cannot move from {current} back to {day}")
        self.store.set(self.last_harvested_key, day.isoformat())

    def resume_date(self) -> date:
        """First day the next harvest should attempt."""
        last = self.get_last_harvested_date()
        if last is None:
            start = self.get_fallback_start_date()
            logger.info("No harvest history, starting at campaign start %s", start)
            return start
        return last + timedelta(days=1)


def build_state_store(config: StateConfig) -> StateStore:
    if config.backend == "memory":
        return MemoryStateStore(config.seed)
    if config.backend == "postgres":
        return PostgresStateStore.connect()
    if config.backend == "dynamodb":
        from common.aws import get_dynamodb_table

        return DynamoStateStore(get_dynamodb_table(config.table))
    raise ValueError(f"Unknown state backend: {config.backend}")


@contextmanager
def open_checkpoint(config: StateConfig, store: StateStore | None = None) -> Iterator[CheckpointCursor]:
    """Yield a cursor for one invocation and close its store on every exit path."""
    store = store if store is not None else build_state_store(config)
    try:
        yield CheckpointCursor(store, config.last_harvested_key, config.campaign_start_key)
    finally:
        store.close()
        logger.debug("Checkpoint store closed")
