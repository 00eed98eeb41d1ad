"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for tunable routing
behaviour: the default flow coefficient, the duplicate edge policy,
weighted graph caching and logging.

Configuration can be overridden via environment variables:
- FLOWROUTE_WEIGHT_DEFAULT_FLOW=0.3
- FLOWROUTE_SOLVER_DUPLICATE_EDGES=first
- FLOWROUTE_CACHE_MAX_SIZE=8
- FLOWROUTE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError

DuplicateEdgePolicy = Literal["first", "min_distance"]


class WeightingConfig(BaseSettings):
    """Edge weighting configuration.

    Environment variables prefixed with FLOWROUTE_WEIGHT_.
    """

    model_config = SettingsConfigDict(env_prefix="FLOWROUTE_WEIGHT_")

    default_flow: float = Field(default=0.2, ge=0.0)
    periods: tuple[str, ...] = ("morning", "noon", "evening", "weekend")


class SolverConfig(BaseSettings):
    """Shortest-path solver configuration.

    Environment variables prefixed with FLOWROUTE_SOLVER_.
    """

    model_config = SettingsConfigDict(env_prefix="FLOWROUTE_SOLVER_")

    duplicate_edges: DuplicateEdgePolicy = "min_distance"


class CacheConfig(BaseSettings):
    """Weighted graph cache configuration.

    Environment variables prefixed with FLOWROUTE_CACHE_.
    """

    model_config = SettingsConfigDict(env_prefix="FLOWROUTE_CACHE_")

    enabled: bool = True
    max_size: Optional[int] = Field(default=None, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with FLOWROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FLOWROUTE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.weighting.default_flow)
        print(config.solver.duplicate_edges)

    Environment variables prefixed with FLOWROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="FLOWROUTE_")

    weighting: WeightingConfig = Field(default_factory=WeightingConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger.

    Args:
        config: Optional override, defaults to ``get_config().observability``.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="FLOWROUTE_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)
