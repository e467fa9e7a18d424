"""
Core interfaces defining the contracts between the container parts.
"""

from .factory import IFactory, FactoryConstructor
from .module import IModule

__all__ = [
    "IFactory",
    "FactoryConstructor",
    "IModule",
]
