"""
Inversion of control container.

This module provides ``Plug``, the public container object. It keeps a
register of named values and modules, a store of lifetime factories and a
store of capability objects, and resolves names back to live values.
"""

import logging
import os
import sys
import threading
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..core.domain.registration import RegistrationKind
from ..core.exceptions import (
    FactoryNotRegisteredError,
    InvalidArgumentError,
    InvalidFactoryError,
    InvalidModuleRegistrationError,
    MissingConstructorError,
)
from ..core.interfaces.factory import FactoryConstructor
from ..core.services.deferred import Promise
from ..core.services.emitter import EventEmitter
from ..infrastructure.config.models import ContainerConfig
from ..infrastructure.objects import ObjectModifier
from .factories import DEFAULT_FACTORIES, FactoryStore, sanitize_factory_name
from .module import Module
from .prototypes import PrototypeStore, compose
from .register import Register

logger = logging.getLogger(__name__)

ModuleSpec = Sequence[Any]
"""Dependency names followed by a constructor, e.g. ``["http", Service]``."""


class Plug:
    """
    Inversion of control container.

    Registration verbs return the container so calls can be chained::

        plug = Plug()
        plug.value("settings", {"retries": 3}) \\
            .singleton("client", ["settings", Client]) \\
            .transient("job", ["client", Job])
        job = plug.resolve("job")

    Every registered factory adds a verb of the same name (``singleton`` and
    ``transient`` are installed by default).
    """

    def __init__(self, config: Optional[ContainerConfig] = None,
                 modifier: Optional[ObjectModifier] = None) -> None:
        self._verbs: Dict[str, Callable[..., 'Plug']] = {}
        self._config = config or ContainerConfig()
        self._lock = threading.RLock()
        self._modifier = modifier or ObjectModifier()
        self._register = Register(warn_on_unresolved=self._config.warn_on_unresolved)
        self._factories = FactoryStore()
        self._prototypes = PrototypeStore()

        for name in self._config.default_factories:
            if name not in DEFAULT_FACTORIES:
                raise FactoryNotRegisteredError(name)
            self.factory(name, DEFAULT_FACTORIES[name])

        if self._config.builtin_references:
            self.reference("runtime", sys)
            self.reference("environ", os.environ)
            self.reference("container", self)

        if self._config.builtin_services:
            self.prototype("emitter", EventEmitter)
            if self.has_factory("singleton"):
                self.register_module("singleton", "promise", [Promise])

    @property
    def config(self) -> ContainerConfig:
        return self._config

    def __getattr__(self, name: str) -> Callable[..., 'Plug']:
        # Only reached for attributes missing from the instance and class
        verbs = self.__dict__.get('_verbs')
        if verbs is not None and name in verbs:
            return verbs[name]
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute or factory '{name}'")

    def reference(self, name: str, value: Any) -> 'Plug':
        """
        Register a value by reference.

        Args:
            name: Registration name
            value: Value stored as-is
        """
        with self._lock:
            self._register.add(name, RegistrationKind.VALUE, value)
            logger.debug(f"Registered reference {name!r}")
        return self

    def value(self, name: str, value: Any, deep: Optional[bool] = None) -> 'Plug':
        """
        Register a clone of a value.

        The container keeps its own copy so later mutation of ``value`` by
        the caller does not change the registration.

        Args:
            name: Registration name
            value: Value to clone
            deep: Clone nested containers too; defaults to the
                ``deep_clone_values`` setting
        """
        if deep is None:
            deep = self._config.deep_clone_values

        with self._lock:
            self._register.add(name, RegistrationKind.VALUE,
                               self._modifier.clone(value, deep))
            logger.debug(f"Registered value {name!r} (deep={deep})")
        return self

    def factory(self, name: str, factory_constructor: FactoryConstructor) -> 'Plug':
        """
        Register a factory and install a module registration verb for it.

        Args:
            name: Factory name, sanitized to a valid identifier
            factory_constructor: Callable producing an object with a
                ``get_instance(constructor, args)`` method

        Raises:
            InvalidFactoryError: If the name is empty, the constructor is not
                callable, or the name shadows a container attribute
        """
        if not name or not isinstance(name, str) or not callable(factory_constructor):
            raise InvalidFactoryError("A valid factory must be supplied", name or None)

        factory_name = sanitize_factory_name(name)
        if hasattr(type(self), factory_name):
            raise InvalidFactoryError(
                f"Factory name {factory_name!r} is reserved by the container", factory_name)

        with self._lock:
            self._factories.add(factory_name, factory_constructor)
            self._verbs[factory_name] = self._make_verb(factory_name)
            logger.debug(f"Registered factory {factory_name!r}")
        return self

    def _make_verb(self, factory_name: str) -> Callable[..., 'Plug']:
        def verb(module_name: str, spec: ModuleSpec,
                 prototypes: Optional[Sequence[str]] = None, deep: bool = False) -> 'Plug':
            return self.register_module(factory_name, module_name, spec, prototypes, deep)

        verb.__name__ = verb.__qualname__ = factory_name
        verb.__doc__ = f"Register a module under the {factory_name!r} factory."
        return verb

    def prototype(self, name: str, capability: Any) -> 'Plug':
        """
        Register a capability object for later composition.

        Raises:
            InvalidPrototypeError: If the name is not a string or the
                capability is not a mapping, class or attribute bag
        """
        with self._lock:
            self._prototypes.add(name, capability)
        return self

    from_ = prototype

    def register_module(self,
                        factory_name: str,
                        module_name: str,
                        spec: ModuleSpec,
                        prototypes: Optional[Sequence[str]] = None,
                        deep: bool = False) -> 'Plug':
        """
        Register a module under a factory.

        Dependencies are looked up now, so a dependency registered later is
        not seen by this module; a missing dependency resolves to ``None``.

        Args:
            factory_name: Name of a registered factory, sanitized the same
                way as in ``factory``
            module_name: Registration name of the module
            spec: Dependency names followed by the constructor; a nested list
                of names among the dependencies is taken as prototype names
            prototypes: Names of capability objects to compose onto the
                constructor, in merge order
            deep: Merge nested dicts of capability objects recursively

        Raises:
            InvalidModuleRegistrationError: If the name or spec is missing
            InvalidArgumentError: If a dependency or prototype name is not
                a non-empty string
            MissingConstructorError: If the spec does not end with a callable
            FactoryNotRegisteredError: If the factory is unknown
            InvalidFactoryError: If the factory has no ``get_instance``
                or its name is empty
            PrototypeNotFoundError: If a capability object is unknown
        """
        if not module_name or not isinstance(module_name, str) \
                or not isinstance(spec, (list, tuple)):
            raise InvalidModuleRegistrationError(module=module_name or None)

        if len(spec) < 1:
            raise MissingConstructorError(
                "Module registration requires a constructor function", module_name)

        constructor = spec[-1]
        if not callable(constructor):
            raise MissingConstructorError(
                "Last element of the constructor list must be a constructor function",
                module_name
            )

        dependency_names, prototype_names = self._split_spec(spec[:-1])
        if prototypes is not None:
            if not isinstance(prototypes, (list, tuple)):
                raise InvalidArgumentError("Prototypes must be a list of names", "prototypes")
            prototype_names.extend(prototypes)

        for prototype_name in prototype_names:
            if not isinstance(prototype_name, str) or not prototype_name:
                raise InvalidArgumentError(
                    f"Prototype names must be non-empty strings, got {prototype_name!r}",
                    "prototypes")

        with self._lock:
            factory = self._factories.retrieve(sanitize_factory_name(factory_name))

            if prototype_names:
                capabilities = self._prototypes.retrieve(prototype_names)
                constructor = compose(constructor, capabilities, self._modifier, deep)

            dependencies = [
                registration for _, registration in self._register.retrieve(dependency_names)
            ]

            module = Module(module_name, factory, constructor, dependencies,
                            detect_cycles=self._config.detect_cycles)
            self._register.add(module_name, RegistrationKind.MODULE, module)
            logger.debug(
                f"Registered module {module_name!r} with factory {factory_name!r}, "
                f"dependencies {dependency_names}, prototypes {prototype_names}")
        return self

    def _split_spec(self, items: Sequence[Any]) -> Tuple[List[str], List[str]]:
        dependency_names: List[str] = []
        prototype_names: List[str] = []

        for item in items:
            if isinstance(item, (list, tuple)):
                prototype_names.extend(item)
            elif isinstance(item, str) and item:
                dependency_names.append(item)
            else:
                raise InvalidArgumentError(
                    f"Dependency names must be non-empty strings, got {item!r}", "spec")

        return dependency_names, prototype_names

    def resolve(self, names: Union[str, Sequence[str]]) -> Any:
        """
        Resolve one or more names to live values.

        A single name (or a list holding one name) returns the bare value,
        ``None`` if it is not registered. Several names return a dict keyed by
        name that omits the names which are not registered.

        Raises:
            InvalidArgumentError: If names is neither a string nor a list
        """
        if isinstance(names, str):
            names = [names]
        elif not isinstance(names, (list, tuple)):
            raise InvalidArgumentError("Must provide a name or a list of names", "names")

        with self._lock:
            registrations = self._register.retrieve(names)

            if len(registrations) == 1:
                registration = registrations[0][1]
                return registration.get_value() if registration is not None else None

            resolution: Dict[str, Any] = {}
            for name, registration in registrations:
                if registration is None:
                    continue
                resolution[name] = registration.get_value()
            return resolution

    def is_registered(self, name: str) -> bool:
        """Check if a name is registered."""
        return name in self._register

    def has_factory(self, name: str) -> bool:
        """Check if a factory is registered."""
        return name in self._factories

    def has_prototype(self, name: str) -> bool:
        """Check if a capability object is registered."""
        return name in self._prototypes

    def get_registrations(self) -> List[str]:
        """Get all registration names (for debugging)."""
        return self._register.names()
