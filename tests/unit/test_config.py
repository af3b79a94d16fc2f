"""Tests for library configuration."""

import json
import logging

import pytest

from sprockets.config import (
    CONFIG_ENV_VAR,
    DEFAULT_LOG_LEVEL,
    ElementsConfig,
    configure_logging,
    get_config,
    reset_config,
    set_config,
)


class TestElementsConfig:
    """Tests for ElementsConfig dataclass."""

    def test_default_values(self):
        """Should default to warning-level logging."""
        config = ElementsConfig()
        assert config.log_level == DEFAULT_LOG_LEVEL == "WARNING"

    def test_to_dict(self):
        """Should serialize to dict."""
        config = ElementsConfig(log_level="DEBUG")
        assert config.to_dict() == {"log_level": "DEBUG"}

    def test_from_dict_normalizes_level(self):
        """Should upper-case level names."""
        config = ElementsConfig.from_dict({"log_level": "debug"})
        assert config.log_level == "DEBUG"

    def test_from_dict_ignores_unknown_keys(self):
        """Should drop keys that are not config fields."""
        config = ElementsConfig.from_dict({"log_level": "INFO", "default_width": "int32"})
        assert config == ElementsConfig(log_level="INFO")

    def test_from_dict_invalid_level_falls_back(self):
        """Should use the default level for unknown level names."""
        config = ElementsConfig.from_dict({"log_level": "LOUD"})
        assert config.log_level == DEFAULT_LOG_LEVEL

    def test_from_dict_not_a_dict(self):
        """Should use defaults for non-dict input."""
        assert ElementsConfig.from_dict(["DEBUG"]) == ElementsConfig()


class TestConfigPersistence:
    """Tests for save/load."""

    def test_save_and_load(self, tmp_path):
        """Should round-trip through a JSON file."""
        path = tmp_path / "sprockets.json"
        ElementsConfig(log_level="ERROR").save(path)

        assert json.loads(path.read_text())["log_level"] == "ERROR"
        assert ElementsConfig.load(path).log_level == "ERROR"

    def test_load_missing_file(self, tmp_path):
        """Should use defaults when the file does not exist."""
        assert ElementsConfig.load(tmp_path / "missing.json") == ElementsConfig()

    def test_load_corrupt_file(self, tmp_path):
        """Should use defaults when the file is not valid JSON."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert ElementsConfig.load(path) == ElementsConfig()

    def test_load_from_env(self, debug_config_file, monkeypatch):
        """Should read the file named by the environment variable."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(debug_config_file))
        assert ElementsConfig.load().log_level == "DEBUG"

    def test_load_without_env(self):
        """Should use defaults when no config file is configured."""
        assert ElementsConfig.load() == ElementsConfig()


class TestGlobalConfig:
    """Tests for the process-wide config."""

    def test_singleton(self):
        """Should return the same instance on repeated calls."""
        assert get_config() is get_config()

    def test_set_config(self):
        """Should replace the global instance."""
        config = ElementsConfig(log_level="INFO")
        set_config(config)
        assert get_config() is config

    def test_reset_reloads(self, debug_config_file, monkeypatch):
        """Should reload from the environment after reset."""
        first = get_config()
        monkeypatch.setenv(CONFIG_ENV_VAR, str(debug_config_file))

        reset_config()
        second = get_config()

        assert first is not second
        assert second.log_level == "DEBUG"


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.fixture
    def package_logger(self):
        """Isolate the sprockets logger's level and handlers."""
        logger = logging.getLogger("sprockets")
        saved_level, saved_handlers = logger.level, list(logger.handlers)
        logger.handlers = []
        yield logger
        logger.setLevel(saved_level)
        logger.handlers = saved_handlers

    def test_sets_level(self, package_logger):
        """Should apply the configured level to the package logger."""
        configure_logging(ElementsConfig(log_level="DEBUG"))
        assert package_logger.level == logging.DEBUG

    def test_uses_global_config(self, package_logger):
        """Should fall back to the global config."""
        set_config(ElementsConfig(log_level="ERROR"))
        configure_logging()
        assert package_logger.level == logging.ERROR

    def test_adds_single_handler(self, package_logger):
        """Should not stack handlers on repeated calls."""
        configure_logging(ElementsConfig())
        configure_logging(ElementsConfig())
        assert len(package_logger.handlers) == 1
