"""
Object cloning and merging utilities.

The container clones registered values with these helpers so that external
mutation of the original object cannot leak into the register, and merges
capability objects into module namespaces during composition.
"""

import copy
import inspect
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any, Dict, Iterable, MutableMapping, Tuple


class ObjectModifier:
    """Clone plain values and merge attribute bags."""

    def clone(self, value: Any, deep: bool = False) -> Any:
        """
        Clone a value.

        Dicts, lists, tuples and sets are copied; with ``deep`` the copy
        recurses into their items. Dates and times are copied by value.
        Plain objects carrying a ``__dict__`` (dataclass instances,
        namespaces, ordinary class instances) are shallow copied, and with
        ``deep`` each of their own attributes is cloned in turn. Scalars,
        functions, classes and modules are returned unchanged.

        Args:
            value: Value to clone
            deep: Whether to recurse through nested containers

        Returns:
            The cloned value
        """
        if isinstance(value, dict):
            cloned = copy.copy(value)
            if deep:
                for key in cloned:
                    cloned[key] = self.clone(cloned[key], deep)
            return cloned

        if isinstance(value, list):
            if deep:
                return [self.clone(item, deep) for item in value]
            return list(value)

        if isinstance(value, tuple):
            if deep and not hasattr(value, '_fields'):
                return tuple(self.clone(item, deep) for item in value)
            return value

        if isinstance(value, set):
            return set(value)

        if isinstance(value, (datetime, date, time)):
            return value.replace()

        if not hasattr(value, '__dict__') or inspect.isroutine(value) \
                or inspect.isclass(value) or inspect.ismodule(value):
            return value

        return self._clone_object(value, deep)

    def _clone_object(self, value: Any, deep: bool) -> Any:
        cloned = copy.copy(value)
        # Enum members and other objects that copy to themselves
        if cloned is value:
            return value

        if deep:
            attributes = vars(cloned)
            for key, item in list(attributes.items()):
                attributes[key] = self.clone(item, deep)
        return cloned

    def merge(self, target: MutableMapping[str, Any], source: Any,
              deep: bool = False) -> MutableMapping[str, Any]:
        """
        Copy the own attributes of ``source`` onto ``target``.

        Later merges always overwrite earlier keys. With ``deep``, nested dicts
        are merged key by key into fresh dicts instead of being replaced.
        Functions are never copied, only rebound under the same key.

        Args:
            target: Mapping receiving the attributes
            source: Mapping, class or object with ``__dict__``
            deep: Whether to recurse into nested dicts

        Returns:
            The updated target
        """
        for key, value in self.own_items(source):
            if deep and isinstance(value, dict):
                existing = target.get(key)
                if not isinstance(existing, dict):
                    existing = {}
                    target[key] = existing
                self.merge(existing, value, deep)
            else:
                target[key] = value
        return target

    def extend(self, target: MutableMapping[str, Any], *sources: Any,
               deep: bool = False) -> MutableMapping[str, Any]:
        """Merge each source onto ``target`` in order."""
        for source in sources:
            self.merge(target, source, deep)
        return target

    def own_items(self, source: Any) -> Iterable[Tuple[str, Any]]:
        """
        Get the own attributes of a mapping, class or object.

        Python internals such as ``__dict__``, ``__weakref__`` and
        ``__module__`` are skipped for classes and objects.
        """
        if isinstance(source, Mapping):
            return list(source.items())

        if not hasattr(source, "__dict__"):
            raise TypeError(
                f"Cannot read attributes of {type(source).__name__} value")

        attributes: Dict[str, Any] = vars(source)

        return [
            (key, value) for key, value in attributes.items()
            if not (key.startswith('__') and key.endswith('__'))
        ]
