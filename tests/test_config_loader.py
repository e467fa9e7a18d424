"""
Tests for configuration loader.

This module tests the ConfigLoader class including file loading,
environment variable processing, and configuration merging.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict
from unittest.mock import patch

import pytest
import yaml

from plug.infrastructure.config.loader import ConfigLoader
from plug.infrastructure.config.models import PlugConfig


class TestConfigLoader:
    """Test cases for ConfigLoader class."""

    @pytest.fixture
    def config_loader(self) -> ConfigLoader:
        """Create a ConfigLoader instance."""
        return ConfigLoader()

    @pytest.fixture
    def sample_config_dict(self) -> Dict[str, Any]:
        """Sample configuration dictionary."""
        return {
            "name": "Test Application",
            "debug": True,
            "environment": "testing",
            "container": {
                "detect_cycles": False,
                "deep_clone_values": True
            },
            "logging": {
                "level": "DEBUG",
                "file_enabled": False
            }
        }

    def test_load_defaults(self, config_loader: ConfigLoader) -> None:
        """Test loading without a file."""
        with patch.dict(os.environ, {}, clear=True):
            config = config_loader.load_config()

        assert config == PlugConfig()
        assert config.config_file_path is None

    def test_load_json(self, config_loader: ConfigLoader, tmp_path: Path,
                       sample_config_dict: Dict[str, Any]) -> None:
        """Test loading a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps(sample_config_dict), encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True):
            config = config_loader.load_config(str(path))

        assert config.name == "Test Application"
        assert config.container.detect_cycles is False
        assert config.container.deep_clone_values is True
        assert config.logging.level == "DEBUG"
        assert config.config_file_path == str(path)

    def test_load_yaml(self, config_loader: ConfigLoader, tmp_path: Path,
                       sample_config_dict: Dict[str, Any]) -> None:
        """Test loading a YAML file."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(sample_config_dict), encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True):
            config = config_loader.load_config(str(path))

        assert config.environment == "testing"
        assert config.container.detect_cycles is False

    def test_load_empty_yaml(self, config_loader: ConfigLoader, tmp_path: Path) -> None:
        """Test that an empty YAML file yields defaults."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True):
            config = config_loader.load_config(str(path))

        assert config.container == PlugConfig().container

    def test_missing_file(self, config_loader: ConfigLoader, tmp_path: Path) -> None:
        """Test loading a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            config_loader.load_config(str(tmp_path / "missing.yaml"))

    def test_unsupported_format(self, config_loader: ConfigLoader, tmp_path: Path) -> None:
        """Test loading a file with an unknown extension."""
        path = tmp_path / "config.ini"
        path.write_text("[plug]", encoding="utf-8")

        with pytest.raises(ValueError, match="Unsupported configuration file format"):
            config_loader.load_config(str(path))

    def test_invalid_json(self, config_loader: ConfigLoader, tmp_path: Path) -> None:
        """Test loading malformed JSON."""
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            config_loader.load_config(str(path))

    def test_invalid_yaml(self, config_loader: ConfigLoader, tmp_path: Path) -> None:
        """Test loading malformed YAML."""
        path = tmp_path / "config.yaml"
        path.write_text("key: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            config_loader.load_config(str(path))

    def test_environment_overrides(self, config_loader: ConfigLoader, tmp_path: Path,
                                   sample_config_dict: Dict[str, Any]) -> None:
        """Test that environment variables override file values."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps(sample_config_dict), encoding="utf-8")
        env = {
            "PLUG_DETECT_CYCLES": "true",
            "PLUG_WARN_ON_UNRESOLVED": "no",
            "PLUG_LOG_LEVEL": "warning",
            "PLUG_ENVIRONMENT": "staging",
        }

        with patch.dict(os.environ, env, clear=True):
            config = config_loader.load_config(str(path))

        assert config.container.detect_cycles is True
        assert config.container.warn_on_unresolved is False
        assert config.container.deep_clone_values is True
        assert config.logging.level == "WARNING"
        assert config.environment == "staging"

    def test_custom_prefix(self) -> None:
        """Test a loader with another environment prefix."""
        loader = ConfigLoader(env_prefix="APP_")

        with patch.dict(os.environ, {"APP_DEBUG": "1", "PLUG_DEBUG": "0"}, clear=True):
            config = loader.load_config()

        assert config.debug is True

    def test_invalid_override(self, config_loader: ConfigLoader) -> None:
        """Test that an invalid log level override is rejected."""
        with patch.dict(os.environ, {"PLUG_LOG_LEVEL": "loud"}, clear=True):
            with pytest.raises(ValueError, match="Log level"):
                config_loader.load_config()

    def test_environment_overrides_nesting(self, config_loader: ConfigLoader) -> None:
        """Test that dotted paths become nested sections."""
        env = {"PLUG_DEBUG": "yes", "PLUG_LOG_DIR": "/var/log/plug", "PLUG_BUILTIN_SERVICES": "off"}

        with patch.dict(os.environ, env, clear=True):
            overrides = config_loader.environment_overrides()

        assert overrides == {
            "debug": True,
            "logging": {"log_directory": "/var/log/plug"},
            "container": {"builtin_services": False},
        }

    def test_override_keeps_sibling_values(self, config_loader: ConfigLoader,
                                           tmp_path: Path) -> None:
        """Test that an override leaves the rest of a file section alone."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(
            {"container": {"detect_cycles": False, "builtin_references": False}}), encoding="utf-8")

        with patch.dict(os.environ, {"PLUG_DETECT_CYCLES": "1"}, clear=True):
            config = config_loader.load_config(str(path))

        assert config.container.detect_cycles is True
        assert config.container.builtin_references is False

    def test_non_mapping_file(self, config_loader: ConfigLoader, tmp_path: Path) -> None:
        """Test that a file holding a list is rejected."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="must be a mapping"):
            config_loader.load_config(str(path))

    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".json"])
    def test_save_and_reload(self, config_loader: ConfigLoader, tmp_path: Path,
                             suffix: str) -> None:
        """Test saving a configuration and loading it back."""
        path = tmp_path / f"saved{suffix}"
        config = PlugConfig(name="saved", debug=True, config_file_path="elsewhere.yaml")

        config_loader.save_config(config, str(path))
        with patch.dict(os.environ, {}, clear=True):
            restored = config_loader.load_config(str(path))

        assert restored.name == "saved"
        assert restored.debug is True
        assert restored.container == config.container
        assert restored.config_file_path == str(path)

    def test_save_unsupported_format(self, config_loader: ConfigLoader, tmp_path: Path) -> None:
        """Test saving to a file with an unknown extension."""
        with pytest.raises(ValueError, match="Unsupported configuration file format"):
            config_loader.save_config(PlugConfig(), str(tmp_path / "x.toml"))
