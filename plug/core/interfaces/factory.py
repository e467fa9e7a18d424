"""
Factory interface.

A factory is a pluggable strategy that decides the lifetime of module
instances. The container only relies on the ``get_instance`` contract, so any
object exposing a callable ``get_instance`` is accepted; subclassing
``IFactory`` is a convenience.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence


class IFactory(ABC):
    """Interface for instance factories."""

    @abstractmethod
    def get_instance(self, constructor: Callable[..., Any], args: Sequence[Any]) -> Any:
        """
        Produce or obtain an instance.

        Args:
            constructor: Callable building a new instance
            args: Positional arguments resolved from the module dependencies

        Returns:
            The instance handed out to the caller
        """
        pass


FactoryConstructor = Callable[[], Any]
"""Zero-argument callable producing a factory object."""
