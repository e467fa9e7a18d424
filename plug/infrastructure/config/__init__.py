"""
Configuration management infrastructure.

This module provides configuration models and loading for the container
and its bootstrap code.
"""

from .models import ContainerConfig, LoggingConfig, PlugConfig
from .loader import ConfigLoader

__all__ = [
    "ContainerConfig",
    "LoggingConfig",
    "PlugConfig",
    "ConfigLoader",
]
