"""
Prototype store and capability composition.

A prototype (capability object) is a bag of methods and fields that can be
merged onto a module constructor at registration time.
"""

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

from ..core.exceptions import (
    InvalidArgumentError,
    InvalidModuleRegistrationError,
    InvalidPrototypeError,
    PrototypeNotFoundError,
)
from ..infrastructure.objects import ObjectModifier

logger = logging.getLogger(__name__)


def is_capability(value: Any) -> bool:
    """Check whether a value can be used as a capability object."""
    if isinstance(value, Mapping) or inspect.isclass(value):
        return True
    if inspect.isroutine(value):
        return False
    return hasattr(value, '__dict__')


class PrototypeStore:
    """Name to capability object map."""

    def __init__(self) -> None:
        self._prototypes: Dict[str, Any] = {}

    def add(self, name: str, capability: Any) -> None:
        """
        Store a capability object.

        Raises:
            InvalidPrototypeError: If the name is not a string or the
                capability is not a mapping, class or attribute bag
        """
        if not name or not isinstance(name, str):
            raise InvalidPrototypeError("Prototype name must be a non-empty string")
        if not is_capability(capability):
            raise InvalidPrototypeError(
                f"Prototype {name} must be a mapping, a class or an object with attributes",
                name
            )

        self._prototypes[name] = capability
        logger.debug(f"Stored prototype {name!r}")

    def retrieve(self, names: Sequence[str]) -> List[Any]:
        """
        Retrieve capability objects, all or nothing.

        Raises:
            InvalidArgumentError: If names is not a list or tuple
            PrototypeNotFoundError: If any name is not registered
        """
        if not isinstance(names, (list, tuple)):
            raise InvalidArgumentError("Must provide a list of prototype names", "names")

        missing = [name for name in names if name not in self._prototypes]
        if missing:
            raise PrototypeNotFoundError(missing[0])

        return [self._prototypes[name] for name in names]

    def __contains__(self, name: object) -> bool:
        return name in self._prototypes


def compose(constructor: Any, capabilities: Sequence[Any],
            modifier: Optional[ObjectModifier] = None, deep: bool = False) -> type:
    """
    Build a subclass of ``constructor`` carrying the given capabilities.

    Capabilities are merged in order onto a fresh namespace, so later ones win
    on key collisions; the constructor's own attributes are merged last and
    always win over composed ones.

    Args:
        constructor: Class to extend
        capabilities: Capability objects in merge order
        modifier: Object modifier performing the merges
        deep: Whether nested dicts are merged recursively

    Returns:
        The composed class, a subclass of ``constructor``

    Raises:
        InvalidModuleRegistrationError: If constructor is not a class
    """
    if not inspect.isclass(constructor):
        raise InvalidModuleRegistrationError(
            f"Capability composition requires a class, got {constructor!r}")

    modifier = modifier or ObjectModifier()

    namespace: Dict[str, Any] = {}
    modifier.extend(namespace, *capabilities, deep=deep)
    modifier.merge(namespace, constructor, deep)

    # Python internals the constructor defines itself are inherited, never shadowed
    for key in vars(constructor):
        if key.startswith('__') and key.endswith('__'):
            namespace.pop(key, None)

    namespace['__module__'] = constructor.__module__
    namespace['__qualname__'] = constructor.__qualname__
    namespace['__doc__'] = constructor.__doc__

    metaclass = type(constructor)
    return metaclass(constructor.__name__, (constructor,), namespace)
