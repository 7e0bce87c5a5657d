"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for tunable values:
data file locations, routing constants and logging.

Configuration can be overridden via environment variables:
- CAMPUS_NAV_DATA_DATA_DIR=/path/to/data
- CAMPUS_NAV_ROUTING_WALKING_SPEED_MPS=1.2
- CAMPUS_NAV_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataConfig(BaseSettings):
    """Campus data file configuration.

    Environment variables prefixed with CAMPUS_NAV_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_NAV_DATA_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    locations_file: str = "locations.json"
    pathways_file: str = "pathways.json"

    @property
    def locations_path(self) -> Path:
        """Full path to the locations JSON file."""
        return self.data_dir / self.locations_file

    @property
    def pathways_path(self) -> Path:
        """Full path to the pathways JSON file."""
        return self.data_dir / self.pathways_file


class RoutingConfig(BaseSettings):
    """Routing constants.

    Environment variables prefixed with CAMPUS_NAV_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_NAV_ROUTING_")

    # Average walking speed, 5 km/h.
    walking_speed_mps: float = Field(default=1.39, gt=0)
    # Straight-line fallback scale, 100% of the map is about 1000 m.
    fallback_meters_per_unit: float = Field(default=10.0, gt=0)
    suggestion_limit: int = Field(default=5, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CAMPUS_NAV_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_NAV_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.routing.walking_speed_mps)
        print(config.data.locations_path)

    Environment variables prefixed with CAMPUS_NAV_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_NAV_")

    data: DataConfig = Field(default_factory=DataConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
