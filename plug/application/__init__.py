"""
Application layer containing the container and its registration machinery.
"""

from .container import Plug
from .defaults import get_container, set_container, reset_container
from .factories import FactoryStore, SingletonFactory, TransientFactory, sanitize_factory_name
from .module import Module
from .prototypes import PrototypeStore, compose
from .register import Register

__all__ = [
    "Plug",
    "get_container",
    "set_container",
    "reset_container",
    "FactoryStore",
    "SingletonFactory",
    "TransientFactory",
    "sanitize_factory_name",
    "Module",
    "PrototypeStore",
    "compose",
    "Register",
]
