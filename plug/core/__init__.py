"""
Core module containing the domain model, interfaces, exceptions and the
services shipped with the container.
"""

from .domain.registration import Registration, RegistrationKind
from .interfaces.factory import IFactory
from .interfaces.module import IModule
from .services.emitter import EventEmitter
from .services.deferred import Deferred, Promise
from .exceptions import (
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

__all__ = [
    "Registration",
    "RegistrationKind",
    "IFactory",
    "IModule",
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
]
