"""
Configuration models and data structures.

This module defines the configuration models used by the container and its
bootstrap code, providing validation for configuration values.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
BUILTIN_FACTORIES = ("singleton", "transient")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
    log_directory: str = "logs"
    max_file_size: str = "10 MB"
    backup_count: int = 5
    console_enabled: bool = True
    file_enabled: bool = False


@dataclass
class ContainerConfig:
    """Container behaviour configuration."""
    default_factories: List[str] = field(default_factory=lambda: list(BUILTIN_FACTORIES))
    builtin_references: bool = True
    builtin_services: bool = True
    detect_cycles: bool = True
    warn_on_unresolved: bool = True
    deep_clone_values: bool = False


@dataclass
class PlugConfig:
    """Main configuration."""

    name: str = "plug"
    version: str = "0.1.0"
    debug: bool = False
    environment: str = "production"

    container: ContainerConfig = field(default_factory=ContainerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    config_file_path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_logging()
        self._validate_factories()

    def _validate_logging(self) -> None:
        """Validate the log level and rotation settings."""
        if self.logging.level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(VALID_LOG_LEVELS)}, got {self.logging.level}")

        if self.logging.backup_count < 0:
            raise ValueError(
                f"Log backup count must not be negative, got {self.logging.backup_count}")

    def _validate_factories(self) -> None:
        """Validate the default factory names."""
        for name in self.container.default_factories:
            if name not in BUILTIN_FACTORIES:
                raise ValueError(f"Unknown default factory: {name}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PlugConfig':
        """Create configuration from dictionary."""
        container_config = ContainerConfig(**data.get('container', {}))
        logging_config = LoggingConfig(**data.get('logging', {}))

        return cls(
            name=data.get('name', 'plug'),
            version=data.get('version', '0.1.0'),
            debug=data.get('debug', False),
            environment=data.get('environment', 'production'),
            container=container_config,
            logging=logging_config,
            config_file_path=data.get('config_file_path')
        )
