"""Tests for common.cli_helpers module."""

import argparse
from datetime import date

import pytest

from common.cli_helpers import parse_date


class TestParseDate:
    def test_iso_date(self) -> None:
        assert parse_date("2005-08-15") == date(2005, 8, 15)

    def test_invalid_date_names_field(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="today must be YYYY-MM-DD"):
            parse_date("yesterday", "today")
