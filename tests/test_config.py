"""Tests for configuration models and loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

import filedispatch.config.manager as manager_module
from filedispatch.config import (
    BatchSettings,
    CompressionSettings,
    ConfigManager,
    DispatchConfig,
    LoggingSettings,
    get_config_manager,
)


@pytest.fixture(autouse=True)
def reset_config_manager(monkeypatch):
    """Start every test without a global config manager."""
    monkeypatch.setattr(manager_module, "_config_manager", None)


class TestModels:
    """Tests for the settings models."""

    def test_defaults(self):
        """Test default values of a fresh configuration."""
        config = DispatchConfig()

        assert config.compression == CompressionSettings(first="Hello", second="World")
        assert config.batch.fail_fast is True
        assert config.logging.level == "WARNING"
        assert config.logging.file_enabled is False

    def test_log_level_normalized(self):
        """Test that log levels are upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="LOUD")

    def test_unknown_key_rejected(self):
        """Test that unknown top-level keys are rejected."""
        with pytest.raises(ValidationError):
            DispatchConfig(colour="blue")

    def test_validate_assignment(self):
        """Test that assignments are validated."""
        config = DispatchConfig()

        with pytest.raises(ValidationError):
            config.batch = "nope"

    def test_batch_settings(self):
        """Test BatchSettings fail_fast override."""
        assert BatchSettings(fail_fast=False).fail_fast is False


class TestConfigManager:
    """Tests for ConfigManager."""

    @pytest.fixture(autouse=True)
    def no_default_config(self, monkeypatch):
        """Keep user and working-directory config files out of the tests."""
        monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [])

    def test_load_from_file(self, tmp_path):
        """Test loading every section from a YAML file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.safe_dump(
                {
                    "compression": {"first": "a", "second": "b"},
                    "batch": {"fail_fast": False},
                    "logging": {"level": "info"},
                }
            )
        )

        config = ConfigManager(config_file).load()

        assert config.compression.first == "a"
        assert config.compression.second == "b"
        assert config.batch.fail_fast is False
        assert config.logging.level == "INFO"

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty file yields the default configuration."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert ConfigManager(config_file).load() == DispatchConfig()

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing explicit file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "missing.yaml").load()

    def test_missing_file_defaults_when_allowed(self, tmp_path):
        """Test that create_if_missing falls back to defaults."""
        config = ConfigManager(tmp_path / "missing.yaml").load(create_if_missing=True)

        assert config == DispatchConfig()

    def test_default_location_used(self, tmp_path, monkeypatch):
        """Test that the first existing default location is loaded."""
        config_file = tmp_path / "filedispatch.yaml"
        config_file.write_text(yaml.safe_dump({"batch": {"fail_fast": False}}))
        monkeypatch.setattr(
            ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [tmp_path / "absent.yaml", config_file]
        )

        manager = ConfigManager()
        config = manager.load()

        assert config.batch.fail_fast is False
        assert manager.config_path == config_file

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML raises ValueError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("batch: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigManager(config_file).load()

    def test_invalid_values(self, tmp_path):
        """Test that invalid values raise ValueError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.safe_dump({"logging": {"level": "LOUD"}}))

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(config_file).load()

    def test_non_mapping_document(self, tmp_path):
        """Test that a YAML list instead of a mapping raises ValueError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            ConfigManager(config_file).load()


class TestGetConfigManager:
    """Tests for the global config manager."""

    def test_explicit_path(self, tmp_path):
        """Test that an explicit path creates a manager for it."""
        path = tmp_path / "config.yaml"

        manager = get_config_manager(path)

        assert manager.config_path == path
        assert get_config_manager() is manager
        assert isinstance(manager.config_path, Path)

    def test_same_instance_without_path(self):
        """Test that repeated calls without a path share one manager."""
        assert get_config_manager() is get_config_manager()

    def test_new_path_replaces_manager(self, tmp_path):
        """Test that a different explicit path replaces the global manager."""
        first = get_config_manager(tmp_path / "first.yaml")

        second = get_config_manager(tmp_path / "second.yaml")

        assert second is not first
        assert second.config_path == tmp_path / "second.yaml"
        assert get_config_manager() is second
