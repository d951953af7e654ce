"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- RG_GRAPH_DATA_DIR=/path/to/data
- RG_GRAPH_AGGLOMERATIONS_FILE=agglomerations.csv
- RG_SEARCH_MAX_WORKERS=4
- RG_SEARCH_VERBOSE=true
- RG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Trip data configuration.

    Environment variables prefixed with RG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    trips_file: str = "trips.csv"
    directions_file: str = "directions.csv"
    agglomerations_file: Optional[str] = None
    delimiter: str = Field(default=",", min_length=1, max_length=1)

    @property
    def trips_path(self) -> Path:
        """Full path to the trips CSV file."""
        return self.data_dir / self.trips_file

    @property
    def directions_path(self) -> Path:
        """Full path to the directions CSV file."""
        return self.data_dir / self.directions_file

    @property
    def agglomerations_path(self) -> Optional[Path]:
        """Full path to the agglomerations CSV file, if one is configured."""
        if not self.agglomerations_file:
            return None
        return self.data_dir / self.agglomerations_file


class SearchConfig(BaseSettings):
    """Route search configuration.

    Environment variables prefixed with RG_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_SEARCH_")

    max_workers: int = Field(default=1, ge=1)
    stop_at_target: bool = True
    verbose: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.trips_path)
        print(config.search.max_workers)

    Environment variables prefixed with RG_.
    """

    model_config = SettingsConfigDict(env_prefix="RG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


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
