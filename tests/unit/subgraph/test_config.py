"""Tests for subgraph configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from src.common.logging import SanitizingFilter
from src.subgraph.config import SubgraphConfig, configure_logging, load_config


class TestSubgraphConfig:
    """Test suite for SubgraphConfig."""

    def test_defaults(self) -> None:
        """Defaults enable cache hints and lookup memoization."""
        config = SubgraphConfig(_env_file=None)
        assert config.service_name == "subgraph"
        assert config.respect_cache_hints is True
        assert config.default_max_age is None
        assert config.memoize_lookups is True
        assert config.log_level == "INFO"

    def test_reads_environment(self, monkeypatch) -> None:
        """SUBGRAPH_ variables override defaults."""
        monkeypatch.setenv("SUBGRAPH_RESPECT_CACHE_HINTS", "false")
        monkeypatch.setenv("SUBGRAPH_DEFAULT_MAX_AGE", "120")

        config = load_config()

        assert config.respect_cache_hints is False
        assert config.default_max_age == 120

    def test_rejects_negative_max_age(self) -> None:
        """default_max_age must not be negative."""
        with pytest.raises(ValidationError):
            SubgraphConfig(default_max_age=-1)


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def setup_method(self) -> None:
        """Remember the root level so it can be restored."""
        self._level = logging.getLogger().level

    def teardown_method(self) -> None:
        """Remove filters added by the test."""
        root = logging.getLogger()
        root.setLevel(self._level)
        root.filters = [f for f in root.filters if not isinstance(f, SanitizingFilter)]
        for handler in root.handlers:
            handler.filters = [
                f for f in handler.filters if not isinstance(f, SanitizingFilter)
            ]

    def test_applies_configured_level(self) -> None:
        """The root logger follows log_level and is sanitized."""
        configure_logging(SubgraphConfig(log_level="WARNING"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(f, SanitizingFilter) for f in root.filters)
