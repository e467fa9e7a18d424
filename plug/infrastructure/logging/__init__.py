"""
Logging infrastructure.

This module provides centralized logging configuration for applications
bootstrapping a container.
"""

from .setup import setup_logging, get_logger, InterceptHandler

__all__ = [
    "setup_logging",
    "get_logger",
    "InterceptHandler",
]
