"""Data models for the collect_news harvester."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class NewsRecord:
    """One harvested article, keyed by the day it was queried for."""
    date: date
    id: str
    headline: str
    body: str


@dataclass
class Collected:
    """Every page for the day was fetched; records may be empty."""
    records: list[NewsRecord]


@dataclass
class QuotaExceeded:
    """The first page came back without a readable pagination envelope."""
    detail: str = "API quota exceeded"


@dataclass
class Fault:
    """Transport, decode or unexpected failure while collecting a day."""
    detail: str


DayResult = Union[Collected, QuotaExceeded, Fault]


class StopReason(Enum):
    QUOTA = "quota"
    ERROR = "error"
    BUDGET = "budget"
    CAUGHT_UP = "caught_up"


@dataclass
class HarvestSummary:
    stop_reason: StopReason
    next_date: date | None = None
    harvested_dates: list[date] = field(default_factory=list)
    records_written: int = 0
