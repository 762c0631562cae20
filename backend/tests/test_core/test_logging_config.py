"""Tests for loguru logging configuration."""

import json
import sys

import pytest
from loguru import logger

from core.logging_config import (
    component_filter,
    configure_logging,
    configure_logging_from_settings,
)
from models.config import Settings


@pytest.fixture(autouse=True)
def restore_logger():
    """Restore loguru's default handler after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestComponentFilter:
    """Tests for component_filter."""

    def test_sets_default_component(self):
        """Records without a component get a placeholder."""
        record = {"extra": {}}
        assert component_filter(record) is True
        assert record["extra"]["component"] == "-"

    def test_keeps_bound_component(self):
        """A bound component is preserved."""
        record = {"extra": {"component": "password_generator"}}
        component_filter(record)
        assert record["extra"]["component"] == "password_generator"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_development_writes_readable_file(self, tmp_path):
        """Development logs are human-readable and include the component."""
        log_file = tmp_path / "logs" / "engine.log"
        configure_logging("development", log_file=str(log_file))

        logger.bind(component="dictionary_matcher").info("loaded dictionary")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "loaded dictionary" in content
        assert "dictionary_matcher" in content

    def test_production_writes_json(self, tmp_path):
        """Non-development logs are serialized as JSON."""
        log_file = tmp_path / "engine.log"
        configure_logging("production", log_file=str(log_file))

        logger.warning("generation exhausted")
        logger.remove()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[0]
        payload = json.loads(line)
        assert payload["record"]["message"] == "generation exhausted"
        assert payload["record"]["extra"]["component"] == "-"

    def test_level_override(self, tmp_path):
        """An explicit level filters lower-severity messages."""
        log_file = tmp_path / "engine.log"
        configure_logging("development", level="WARNING", log_file=str(log_file))

        logger.info("hidden message")
        logger.warning("visible message")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "hidden message" not in content
        assert "visible message" in content

    def test_production_default_level_is_info(self, tmp_path):
        """Production drops DEBUG messages by default."""
        log_file = tmp_path / "engine.log"
        configure_logging("production", log_file=str(log_file))

        logger.debug("debug detail")
        logger.info("info detail")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "debug detail" not in content
        assert "info detail" in content


class TestConfigureLoggingFromSettings:
    """Tests for configure_logging_from_settings."""

    def test_uses_settings_values(self, tmp_path):
        """ENVIRONMENT, LOG_LEVEL and LOG_FILE drive the configuration."""
        log_file = tmp_path / "engine.log"
        config = Settings(
            ENVIRONMENT="production", LOG_LEVEL="ERROR", LOG_FILE=str(log_file)
        )
        configure_logging_from_settings(config)

        logger.warning("not written")
        logger.error("written")
        logger.remove()

        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["record"]["message"] == "written"
