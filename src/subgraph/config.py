"""
Subgraph Configuration

Configuration settings using pydantic-settings for environment variable support.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.common.logging import configure_sanitized_logging


class SubgraphConfig(BaseSettings):
    """
    Configuration for entity resolution in a subgraph.

    Reads from environment variables with SUBGRAPH_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUBGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service Identity
    service_name: str = Field(
        default="subgraph",
        description="Service name for identification",
    )

    # Cache Control
    respect_cache_hints: bool = Field(
        default=True,
        description="Narrow the response cache policy by each resolved entity type",
    )
    default_max_age: int | None = Field(
        default=None,
        ge=0,
        description="max_age in seconds applied to entity types without a cache hint",
    )

    # Dispatch
    memoize_lookups: bool = Field(
        default=True,
        description="Reuse type lookups for repeated __typename values within a batch",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


def load_config() -> SubgraphConfig:
    """Load configuration from environment."""
    return SubgraphConfig()


def configure_logging(config: SubgraphConfig) -> None:
    """Configure sanitized root logging at the configured level."""
    configure_sanitized_logging(level=config.log_level)
