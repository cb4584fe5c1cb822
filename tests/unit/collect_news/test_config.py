"""Tests for collect_news.config module."""

import pytest

from collect_news.config import Config, load_config, parse_config


class TestLoadConfig:
    def test_prod_config(self) -> None:
        config = load_config("prod")

        assert config.api.page_size == 50
        assert config.api.min_request_interval == 1.0
        assert config.harvest.max_duration_minutes == 14
        assert config.harvest.pillar == "pillar/news"
        assert config.storage.backend == "s3"
        assert config.state.backend == "dynamodb"
        assert config.state.last_harvested_key == "DATE_LAST_ADDED_NEWS"

    def test_test_config_is_local(self) -> None:
        config = load_config("test")

        assert config.storage.backend == "local"
        assert config.state.backend == "memory"
        assert config.state.seed == {"DATE_START_AV": "2005-08-15"}

    def test_config_env_var(self, monkeypatch) -> None:
        monkeypatch.setenv("CONFIG_ENV", "test")
        assert load_config().state.backend == "memory"

    def test_missing_config_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("staging")


class TestParseConfig:
    def test_empty_uses_defaults(self) -> None:
        assert parse_config({}) == Config()

    def test_unquoted_seed_dates_become_strings(self) -> None:
        from datetime import date

        config = parse_config({"state": {"backend": "memory", "seed": {"DATE_START_AV": date(2005, 8, 15)}}})
        assert config.state.seed == {"DATE_START_AV": "2005-08-15"}
