"""Configuration loader for collect_news."""

from dataclasses import dataclass, field
from pathlib import Path

from common.config import find_config_path, load_yaml

CONFIG_DIR = Path(__file__).parent / "configs"


@dataclass
class ApiConfig:
    url: str = "https://content.guardianapis.com/search"
    api_key_env: str = "THEGUARDIAN_API_KEY"
    page_size: int = 50
    language: str = "en"
    request_timeout: int = 30
    min_request_interval: float = 1.0  # seconds between requests


@dataclass
class HarvestConfig:
    max_duration_minutes: float = 14
    pillar: str = "pillar/news"


@dataclass
class StorageConfig:
    backend: str = "s3"  # "s3" or "local"
    bucket_env: str = "S3_BUCKET_NAME"
    key_template: str = "raw/news/localDate={date}/data.parquet"
    local_path: str = "output"


@dataclass
class StateConfig:
    backend: str = "dynamodb"  # "dynamodb", "postgres" or "memory"
    table: str = "STATE"
    last_harvested_key: str = "DATE_LAST_ADDED_NEWS"
    campaign_start_key: str = "DATE_START_AV"
    seed: dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    api: ApiConfig = field(default_factory=ApiConfig)
    harvest: HarvestConfig = field(default_factory=HarvestConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    state: StateConfig = field(default_factory=StateConfig)


def load_config(config_name: str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses CONFIG_ENV env var or "prod".

    Returns:
        Loaded Config object
    """
    config_path = find_config_path(config_name, CONFIG_DIR, env_var="CONFIG_ENV")
    return parse_config(load_yaml(config_path))


def parse_config(data: dict) -> Config:
    """Parse config dictionary into Config object."""
    state_data = dict(data.get("state", {}))
    seed = {str(k): str(v) for k, v in (state_data.pop("seed", None) or {}).items()}

    return Config(
        api=ApiConfig(**data.get("api", {})),
        harvest=HarvestConfig(**data.get("harvest", {})),
        storage=StorageConfig(**data.get("storage", {})),
        state=StateConfig(seed=seed, **state_data),
    )
