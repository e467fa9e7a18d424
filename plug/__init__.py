"""
Plug - a minimal inversion of control container.

This package provides a register of named values, pluggable lifetime
factories (singleton and transient built in), positional dependency injection
and composition of capability objects onto module constructors.
"""

__version__ = "0.1.0"

# Public API exports
from .application.container import Plug
from .application.defaults import get_container, set_container, reset_container
from .core.interfaces.factory import IFactory
from .core.services.emitter import EventEmitter
from .core.services.deferred import Deferred, Promise
from .core.exceptions import (
    PlugError,
    InvalidRegistrationError,
    InvalidArgumentError,
    InvalidModuleRegistrationError,
    MissingConstructorError,
    FactoryNotRegisteredError,
    InvalidFactoryError,
    InvalidPrototypeError,
    PrototypeNotFoundError,
    CyclicDependencyError,
)
from .infrastructure.config.models import ContainerConfig, PlugConfig
from .infrastructure.objects import ObjectModifier

__all__ = [
    "Plug",
    "get_container",
    "set_container",
    "reset_container",
    "IFactory",
    "EventEmitter",
    "Deferred",
    "Promise",
    "PlugError",
    "InvalidRegistrationError",
    "InvalidArgumentError",
    "InvalidModuleRegistrationError",
    "MissingConstructorError",
    "FactoryNotRegisteredError",
    "InvalidFactoryError",
    "InvalidPrototypeError",
    "PrototypeNotFoundError",
    "CyclicDependencyError",
    "ContainerConfig",
    "PlugConfig",
    "ObjectModifier",
]
