"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration:
where datasets are loaded from, query defaults and logging.

Configuration can be overridden via environment variables:
- CITYGRAPH_DATASET_SOURCE=csv
- CITYGRAPH_DATASET_DATA_DIR=/path/to/data
- CITYGRAPH_QUERY_DEFAULT_MAX_DISTANCE=100
- CITYGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatasetConfig(BaseSettings):
    """Dataset source configuration.

    Environment variables prefixed with CITYGRAPH_DATASET_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYGRAPH_DATASET_")

    source: Literal["sample", "json", "csv"] = "sample"
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    json_file: str = "graph.json"
    cities_file: str = "cities.csv"
    edges_file: str = "edges.csv"

    @property
    def json_path(self) -> Path:
        """Full path to the JSON dataset file."""
        return self.data_dir / self.json_file

    @property
    def cities_path(self) -> Path:
        """Full path to cities CSV file."""
        return self.data_dir / self.cities_file

    @property
    def edges_path(self) -> Path:
        """Full path to edges CSV file."""
        return self.data_dir / self.edges_file


class QueryConfig(BaseSettings):
    """Range query defaults.

    Environment variables prefixed with CITYGRAPH_QUERY_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYGRAPH_QUERY_")

    default_max_distance: Optional[float] = Field(default=None, ge=0)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITYGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYGRAPH_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations are accessed via attributes:

        config = get_config()
        print(config.dataset.source)
        print(config.dataset.edges_path)

    Environment variables prefixed with CITYGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYGRAPH_")

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
