"""Tests for collect_news.fetch_news.collect_day module."""

from datetime import date
from unittest.mock import Mock, call

import requests

from collect_news.fetch_news.collect_day import collect_day, read_page_count
from collect_news.models import Collected, Fault, QuotaExceeded

DAY = date(2005, 8, 15)


def _article(id_, pillar="pillar/news", body="text"):
    return {"id": id_, "webTitle": f"Title {id_}", "pillarId": pillar, "fields": {"bodyText": body}}


def _fetcher(*pages):
    fetcher = Mock()
    fetcher.fetch.side_effect = list(pages)
    return fetcher


class TestReadPageCount:
    def test_reads_integer(self) -> None:
        assert read_page_count({"pages": 4}) == 4

    def test_missing_pages(self) -> None:
        assert read_page_count({"results": []}) is None

    def test_unreadable_pages(self) -> None:
        assert read_page_count({"pages": "many"}) is None
        assert read_page_count(None) is None


class TestCollectDay:
    def test_fetches_exactly_n_pages_in_order(self) -> None:
        fetcher = _fetcher(
            {"pages": 3, "results": [_article("p1a"), _article("p1b")]},
            {"pages": 3, "results": [_article("p2a")]},
            {"pages": 3, "results": [_article("p3a"), _article("p3b")]},
        )

        result = collect_day(fetcher, DAY)

        assert isinstance(result, Collected)
        assert [r.id for r in result.records] == ["p1a", "p1b", "p2a", "p3a", "p3b"]
        assert fetcher.fetch.call_args_list == [call(DAY, 1), call(DAY, 2), call(DAY, 3)]

    def test_missing_envelope_on_first_page_is_quota(self) -> None:
        fetcher = _fetcher(None)

        result = collect_day(fetcher, DAY)

        assert isinstance(result, QuotaExceeded)
        fetcher.fetch.assert_called_once_with(DAY, 1)

    def test_missing_pages_on_first_page_is_quota(self) -> None:
        result = collect_day(_fetcher({"results": [_article("a")]}), DAY)
        assert isinstance(result, QuotaExceeded)

    def test_malformed_later_page_counts_as_empty(self) -> None:
        fetcher = _fetcher(
            {"pages": 3, "results": [_article("a")]},
            None,
            {"pages": 3, "results": [_article("c")]},
        )

        result = collect_day(fetcher, DAY)

        assert isinstance(result, Collected)
        assert [r.id for r in result.records] == ["a", "c"]

    def test_zero_pages_is_empty_collection(self) -> None:
        fetcher = _fetcher({"pages": 0, "results": []})

        result = collect_day(fetcher, DAY)

        assert result == Collected([])
        assert fetcher.fetch.call_count == 1

    def test_transport_error_is_fault(self) -> None:
        fetcher = _fetcher(
            {"pages": 2, "results": [_article("a")]},
            requests.ConnectionError("reset by peer"),
        )

        result = collect_day(fetcher, DAY)

        assert isinstance(result, Fault)
        assert "reset by peer" in result.detail

    def test_decode_error_is_fault(self) -> None:
        result = collect_day(_fetcher(ValueError("Expecting value")), DAY)
        assert isinstance(result, Fault)

    def test_non_news_entries_filtered(self) -> None:
        fetcher = _fetcher(
            {"pages": 1, "results": [_article("a"), _article("s", pillar="pillar/sport"), _article("b", body=" ")]},
        )

        result = collect_day(fetcher, DAY)

        assert [r.id for r in result.records] == ["a"]
