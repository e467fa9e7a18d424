"""
Configuration loading and saving utilities.

Configuration comes from a YAML or JSON file, chosen by extension, with
``PLUG_``-prefixed environment variables applied on top.
"""

import json
import os
from pathlib import Path
from typing import IO, Any, Callable, Dict, List, Optional, Tuple

import yaml

from ..objects import ObjectModifier
from .models import PlugConfig


def parse_bool(value: str) -> bool:
    """Parse a boolean flag from an environment variable."""
    return value.strip().lower() in ('true', '1', 'yes', 'on', 'enabled')


# (variable suffix, dotted config path, converter)
ENV_OVERRIDES: List[Tuple[str, str, Callable[[str], Any]]] = [
    ("DEBUG", "debug", parse_bool),
    ("ENVIRONMENT", "environment", str),
    ("LOG_LEVEL", "logging.level", str.upper),
    ("LOG_DIR", "logging.log_directory", str),
    ("LOG_FILE_ENABLED", "logging.file_enabled", parse_bool),
    ("DETECT_CYCLES", "container.detect_cycles", parse_bool),
    ("BUILTIN_REFERENCES", "container.builtin_references", parse_bool),
    ("BUILTIN_SERVICES", "container.builtin_services", parse_bool),
    ("WARN_ON_UNRESOLVED", "container.warn_on_unresolved", parse_bool),
    ("DEEP_CLONE_VALUES", "container.deep_clone_values", parse_bool),
]


def _read_yaml(stream: IO[str]) -> Dict[str, Any]:
    return yaml.safe_load(stream) or {}


def _write_yaml(data: Dict[str, Any], stream: IO[str]) -> None:
    yaml.safe_dump(data, stream, default_flow_style=False, sort_keys=False)


def _write_json(data: Dict[str, Any], stream: IO[str]) -> None:
    json.dump(data, stream, indent=2)


_FORMATS: Dict[str, Tuple[str, Callable[[IO[str]], Any], Callable[[Dict[str, Any], IO[str]], None]]] = {
    '.yaml': ("YAML", _read_yaml, _write_yaml),
    '.yml': ("YAML", _read_yaml, _write_yaml),
    '.json': ("JSON", json.load, _write_json),
}


class ConfigLoader:
    """Configuration loader supporting YAML, JSON and environment variables."""

    def __init__(self, env_prefix: str = "PLUG_") -> None:
        self._env_prefix = env_prefix
        self._modifier = ObjectModifier()

    def load_config(self, config_file: Optional[str] = None) -> PlugConfig:
        """
        Load configuration from file and environment variables.

        Args:
            config_file: Path to a ``.yaml``, ``.yml`` or ``.json`` file (optional)

        Returns:
            Loaded and validated configuration

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file cannot be parsed or an override is invalid
        """
        config_data: Dict[str, Any] = self._read_file(config_file) if config_file else {}
        self._modifier.merge(config_data, self.environment_overrides(), deep=True)

        config = PlugConfig.from_dict(config_data)
        config.config_file_path = config_file
        return config

    def save_config(self, config: PlugConfig, file_path: str) -> None:
        """
        Write a configuration to a file in the format its extension names.

        Raises:
            ValueError: If the extension is not a supported format
        """
        _, _, write = self._format_of(Path(file_path))
        data = config.to_dict()
        data.pop('config_file_path', None)

        with open(file_path, 'w', encoding='utf-8') as f:
            write(data, f)

    def environment_overrides(self) -> Dict[str, Any]:
        """Collect configuration overrides from prefixed environment variables."""
        overrides: Dict[str, Any] = {}

        for suffix, config_path, converter in ENV_OVERRIDES:
            env_var = self._env_prefix + suffix
            raw = os.environ.get(env_var)
            if raw is None:
                continue

            try:
                value = converter(raw)
            except (ValueError, TypeError) as e:
                raise ValueError(f"Invalid value for {env_var}: {raw} ({e})") from e

            *parents, leaf = config_path.split('.')
            section = overrides
            for key in parents:
                section = section.setdefault(key, {})
            section[leaf] = value

        return overrides

    def _format_of(self, path: Path) -> Tuple[str, Callable[[IO[str]], Any],
                                              Callable[[Dict[str, Any], IO[str]], None]]:
        try:
            return _FORMATS[path.suffix.lower()]
        except KeyError:
            raise ValueError(
                f"Unsupported configuration file format: {path.suffix}") from None

    def _read_file(self, file_path: str) -> Dict[str, Any]:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        label, read, _ = self._format_of(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = read(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid {label} in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {file_path} must be a mapping")
        return data
