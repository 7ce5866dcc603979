"""Unit tests for configuration management module."""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml
from pydantic import ValidationError

from src.config import (
    LoggingConfig,
    RelationGraphConfig,
    TraversalConfig,
    get_config,
    load_config,
    reset_config,
)

ENV_VARS = (
    "RELGRAPH_TRAVERSAL_RECURSION_HEADROOM",
    "RELGRAPH_LOGGING_LEVEL",
    "RELGRAPH_LOGGING_JSON",
)


@pytest.fixture
def valid_config_dict() -> dict[str, Any]:
    """Fixture providing valid configuration dictionary."""
    return {
        "traversal": {"recursion_headroom": 500},
        "logging": {"level": "DEBUG", "json_logs": False},
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, valid_config_dict: dict[str, Any]) -> Path:
    """Fixture providing temporary YAML config file."""
    config_path = tmp_path / "relgraph.yaml"
    with config_path.open("w") as f:
        yaml.dump(valid_config_dict, f)
    return config_path


@pytest.fixture
def temp_json_config_file(tmp_path: Path, valid_config_dict: dict[str, Any]) -> Path:
    """Fixture providing temporary JSON config file."""
    config_path = tmp_path / "relgraph.json"
    with config_path.open("w") as f:
        json.dump(valid_config_dict, f)
    return config_path


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset configuration singleton before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def clean_env_vars(monkeypatch):
    """Clean environment variables before each test."""
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)


class TestTraversalConfig:
    """Tests for TraversalConfig model."""

    def test_defaults(self):
        """Test default recursion headroom."""
        assert TraversalConfig().recursion_headroom == 1000

    def test_headroom_lower_bound(self):
        """Test recursion headroom must be at least 10."""
        with pytest.raises(ValidationError):
            TraversalConfig(recursion_headroom=5)


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self):
        """Test default logging settings."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.json_logs is True

    def test_invalid_level(self):
        """Test LoggingConfig rejects unknown levels."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")


class TestRelationGraphConfig:
    """Tests for RelationGraphConfig loading."""

    def test_defaults(self):
        """Test all sections default when omitted."""
        config = RelationGraphConfig()
        assert config.traversal.recursion_headroom == 1000
        assert config.logging.level == "INFO"

    def test_from_yaml(self, temp_config_file: Path):
        """Test loading configuration from YAML."""
        config = RelationGraphConfig.from_yaml(temp_config_file)

        assert config.traversal.recursion_headroom == 500
        assert config.logging.level == "DEBUG"
        assert config.logging.json_logs is False

    def test_from_json(self, temp_json_config_file: Path):
        """Test JSON files load through the YAML parser."""
        config = RelationGraphConfig.from_yaml(temp_json_config_file)

        assert config.traversal.recursion_headroom == 500

    def test_missing_file(self, tmp_path: Path):
        """Test loading a missing file fails."""
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            RelationGraphConfig.from_yaml(tmp_path / "missing.yaml")

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        """Test an empty file yields the default configuration."""
        config_path = tmp_path / "relgraph.yaml"
        config_path.write_text("")

        config = RelationGraphConfig.from_yaml(config_path)
        assert config == RelationGraphConfig()

    def test_invalid_yaml(self, tmp_path: Path):
        """Test malformed YAML is reported as ValueError."""
        config_path = tmp_path / "relgraph.yaml"
        config_path.write_text("traversal: [unclosed")

        with pytest.raises(ValueError, match="Invalid YAML"):
            RelationGraphConfig.from_yaml(config_path)

    def test_non_mapping_yaml(self, tmp_path: Path):
        """Test a YAML list is rejected."""
        config_path = tmp_path / "relgraph.yaml"
        config_path.write_text("- 1\n- 2\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            RelationGraphConfig.from_yaml(config_path)

    def test_invalid_values(self, tmp_path: Path):
        """Test validation errors propagate from the file contents."""
        config_path = tmp_path / "relgraph.yaml"
        config_path.write_text("traversal:\n  recursion_headroom: 1\n")

        with pytest.raises(ValidationError):
            RelationGraphConfig.from_yaml(config_path)

    def test_env_overrides(self, temp_config_file: Path, monkeypatch):
        """Test environment variables override file values."""
        monkeypatch.setenv("RELGRAPH_TRAVERSAL_RECURSION_HEADROOM", "2000")
        monkeypatch.setenv("RELGRAPH_LOGGING_LEVEL", "warning")
        monkeypatch.setenv("RELGRAPH_LOGGING_JSON", "yes")

        config = RelationGraphConfig.from_yaml(temp_config_file)

        assert config.traversal.recursion_headroom == 2000
        assert config.logging.level == "WARNING"
        assert config.logging.json_logs is True

    def test_from_env_without_file(self, monkeypatch):
        """Test environment overrides apply on top of defaults."""
        monkeypatch.setenv("RELGRAPH_LOGGING_LEVEL", "ERROR")

        config = RelationGraphConfig.from_env()

        assert config.logging.level == "ERROR"
        assert config.traversal.recursion_headroom == 1000


class TestValidateConfig:
    """Tests for configuration warnings."""

    def test_no_warnings_for_defaults(self):
        """Test default configuration produces no warnings."""
        assert RelationGraphConfig().validate_config() == []

    def test_low_headroom_warning(self):
        """Test a low recursion headroom is flagged."""
        config = RelationGraphConfig(traversal=TraversalConfig(recursion_headroom=50))

        warnings = config.validate_config()
        assert any("Recursion headroom is low" in warning for warning in warnings)

    def test_debug_logging_warning(self):
        """Test debug logging is flagged."""
        config = RelationGraphConfig(logging=LoggingConfig(level="DEBUG"))

        warnings = config.validate_config()
        assert any("Debug logging" in warning for warning in warnings)


class TestConfigManager:
    """Tests for the configuration singleton."""

    def test_load_config_explicit_path(self, temp_config_file: Path):
        """Test loading an explicit path."""
        config = load_config(temp_config_file)
        assert config.traversal.recursion_headroom == 500

    def test_load_config_explicit_missing_path(self, tmp_path: Path):
        """Test an explicit missing path fails."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_load_config_discovers_default_file(self, temp_config_file: Path, monkeypatch):
        """Test relgraph.yaml in the working directory is found."""
        monkeypatch.chdir(temp_config_file.parent)

        config = load_config()
        assert config.traversal.recursion_headroom == 500

    def test_load_config_without_file_uses_defaults(self, tmp_path: Path, monkeypatch):
        """Test defaults apply when no configuration file exists."""
        monkeypatch.chdir(tmp_path)

        assert load_config() == RelationGraphConfig()

    def test_get_config_is_cached(self, temp_config_file: Path):
        """Test get_config returns the same instance until reset."""
        first = get_config(temp_config_file)
        second = get_config()

        assert first is second

        reset_config()
        assert get_config(temp_config_file) is not first

    def test_get_config_reload(self, temp_config_file: Path, tmp_path: Path):
        """Test reload picks up a different file."""
        first = get_config(temp_config_file)

        other = tmp_path / "other.yaml"
        other.write_text("traversal:\n  recursion_headroom: 42\n")

        reloaded = get_config(other, reload=True)
        assert reloaded is not first
        assert reloaded.traversal.recursion_headroom == 42
