"""
Factory store and the built-in lifetime factories.

The store keeps factory constructors and builds a fresh factory object on
every retrieval, so lifetime state (such as a cached singleton) belongs to the
module holding the factory and is never shared between modules.
"""

import keyword
import logging
import re
from typing import Any, Callable, Dict, List, Sequence

from ..core.exceptions import FactoryNotRegisteredError, InvalidFactoryError
from ..core.interfaces.factory import FactoryConstructor, IFactory

logger = logging.getLogger(__name__)

_UNSAFE_CHARACTERS = re.compile(r'\W')


def sanitize_factory_name(name: str) -> str:
    """
    Turn a factory name into a valid Python identifier.

    Characters outside ``[A-Za-z0-9_]`` become underscores, a leading digit
    or a keyword gets an underscore prefix or suffix.

    Raises:
        InvalidFactoryError: If the name is not a non-empty string
    """
    if not name or not isinstance(name, str):
        raise InvalidFactoryError("Factory name must be a non-empty string")

    sanitized = _UNSAFE_CHARACTERS.sub('_', name.strip())
    if not sanitized:
        raise InvalidFactoryError(f"Invalid factory name: {name!r}", name)
    if sanitized[0].isdigit():
        sanitized = f"_{sanitized}"
    if keyword.iskeyword(sanitized):
        sanitized = f"{sanitized}_"
    return sanitized


class SingletonFactory(IFactory):
    """Builds the instance on first request and returns it forever after."""

    def __init__(self) -> None:
        self._created = False
        self._instance: Any = None

    def get_instance(self, constructor: Callable[..., Any], args: Sequence[Any]) -> Any:
        # Arguments after the first construction are ignored
        if not self._created:
            self._instance = constructor(*args)
            self._created = True
        return self._instance


class TransientFactory(IFactory):
    """Builds a new instance on every request."""

    def get_instance(self, constructor: Callable[..., Any], args: Sequence[Any]) -> Any:
        return constructor(*args)


DEFAULT_FACTORIES: Dict[str, FactoryConstructor] = {
    "singleton": SingletonFactory,
    "transient": TransientFactory,
}


class FactoryStore:
    """Name to factory constructor map."""

    def __init__(self) -> None:
        self._factories: Dict[str, FactoryConstructor] = {}

    def add(self, name: str, factory_constructor: FactoryConstructor) -> None:
        """
        Store a factory constructor without instantiating it.

        Raises:
            InvalidFactoryError: If the constructor is not callable
        """
        if not callable(factory_constructor):
            raise InvalidFactoryError(
                f"Factory {name} must be a callable producing a factory", name)

        self._factories[name] = factory_constructor
        logger.debug(f"Stored factory {name!r}")

    def retrieve(self, name: str) -> Any:
        """
        Build a new factory object.

        Returns:
            A factory exposing ``get_instance``

        Raises:
            FactoryNotRegisteredError: If no factory has this name
            InvalidFactoryError: If the built object has no callable ``get_instance``
        """
        if name not in self._factories:
            raise FactoryNotRegisteredError(name)

        factory = self._factories[name]()
        if not callable(getattr(factory, 'get_instance', None)):
            raise InvalidFactoryError(
                f"Factory {name} must provide a 'get_instance' method", name)
        return factory

    def names(self) -> List[str]:
        """Get all factory names."""
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories
