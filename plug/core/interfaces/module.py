"""
Module interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class IModule(ABC):
    """Interface for deferred construction plans held by module registrations."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the module name."""
        pass

    @abstractmethod
    def get_instance(self) -> Any:
        """
        Resolve the dependencies and obtain an instance from the bound factory.

        Raises:
            CyclicDependencyError: If the module is already being built
        """
        pass
