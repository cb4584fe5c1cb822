"""Write one day's records as a single parquet object."""

import io
import logging
import os
from datetime import date
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from collect_news.config import StorageConfig
from collect_news.models import NewsRecord
from common.aws import upload_bytes_to_s3

logger = logging.getLogger(__name__)

NEWS_SCHEMA = pa.schema([
    pa.field("localDate", pa.date32(), nullable=False),
    pa.field("id", pa.string(), nullable=False),
    pa.field("headline", pa.string(), nullable=False),
    pa.field("body", pa.string(), nullable=False),
])


def build_parquet_key(key_template: str, day: date) -> str:
    """Build the date-partitioned object key for a day."""
    return key_template.format(date=day.isoformat())


def records_to_table(records: list[NewsRecord]) -> pa.Table:
    """Convert records to a PyArrow table."""
    rows = [
        {
            "localDate": record.date,
            "id": record.id,
            "headline": record.headline,
            "body": record.body,
        }
        for record in records
    ]
    return pa.Table.from_pylist(rows, schema=NEWS_SCHEMA)


def serialize_parquet(records: list[NewsRecord]) -> bytes:
    buffer = io.BytesIO()
    pq.write_table(records_to_table(records), buffer)
    return buffer.getvalue()


class ParquetBatchWriter:
    """Persists a whole day batch under its date key (S3 or local)."""

    def __init__(self, config: StorageConfig, bucket: str | None = None):
        self.config = config
        self.bucket = bucket
        if config.backend == "s3" and bucket is None:
            self.bucket = os.environ[config.bucket_env]
        elif config.backend not in ("s3", "local"):
            raise ValueError(f"Unknown storage backend: {config.backend}")

    def write(self, day: date, records: list[NewsRecord]) -> str:
        """Write ``records`` for ``day``; returns the location written.

        Raises ValueError if records is empty.
        """
        if not records:
            raise ValueError("Cannot write empty day batch")

        content = serialize_parquet(records)
        key = build_parquet_key(self.config.key_template, day)

        if self.config.backend == "local":
            location = self._write_local(content, key)
        else:
            upload_bytes_to_s3(content, self.bucket, key, "application/vnd.apache.parquet")
            location = f"s3://{self.bucket}/{key}"

        logger.info("Wrote %d records for %s to %s", len(records), day, location)
        return location

    def _write_local(self, content: bytes, key: str) -> str:
        path = Path(self.config.local_path) / key
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".tmp")
        with open(tmp_path, "wb") as f:
            f.write(content)
        os.replace(tmp_path, path)
        return str(path)
