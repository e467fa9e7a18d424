"""
Module: a deferred construction plan.

A module binds a factory, a constructor and the dependency registrations that
were looked up when the module was registered. Each request resolves the
dependencies to values and lets the factory decide whether to build a new
instance or hand out an existing one.
"""

import threading
from typing import Any, Callable, List, Optional, Sequence

from ..core.domain.registration import Registration
from ..core.exceptions import CyclicDependencyError
from ..core.interfaces.module import IModule

_construction = threading.local()


def _construction_stack() -> List['Module']:
    stack = getattr(_construction, 'stack', None)
    if stack is None:
        stack = _construction.stack = []
    return stack


class Module(IModule):
    """Factory, constructor and dependency registrations."""

    def __init__(self,
                 name: str,
                 factory: Any,
                 constructor: Callable[..., Any],
                 dependencies: Sequence[Optional[Registration]] = (),
                 detect_cycles: bool = True) -> None:
        self._name = name
        self._factory = factory
        self._constructor = constructor
        self._dependencies = tuple(dependencies)
        self._detect_cycles = detect_cycles

    @property
    def name(self) -> str:
        return self._name

    @property
    def factory(self) -> Any:
        return self._factory

    @property
    def constructor(self) -> Callable[..., Any]:
        return self._constructor

    @property
    def dependencies(self) -> Sequence[Optional[Registration]]:
        return self._dependencies

    def resolve_dependencies(self) -> List[Any]:
        """
        Map the dependency registrations to positional arguments.

        Dependencies that were missing at registration time resolve to ``None``.
        """
        return [
            registration.get_value() if registration is not None else None
            for registration in self._dependencies
        ]

    def get_instance(self) -> Any:
        if not self._detect_cycles:
            return self._factory.get_instance(self._constructor, self.resolve_dependencies())

        stack = _construction_stack()
        if self in stack:
            chain = [module.name for module in stack[stack.index(self):]]
            raise CyclicDependencyError(chain + [self._name])

        stack.append(self)
        try:
            args = self.resolve_dependencies()
            return self._factory.get_instance(self._constructor, args)
        finally:
            stack.pop()

    def __repr__(self) -> str:
        return f"Module(name={self._name!r}, constructor={self._constructor!r})"
