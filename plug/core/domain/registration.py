"""
Registration domain model.

A registration is a named slot in the register holding either a plain value
or a module (a deferred construction plan).
"""

from enum import Enum, auto
from typing import Any

from ..interfaces.module import IModule


class RegistrationKind(Enum):
    """Kinds of registration payloads."""
    VALUE = auto()   # Plain value or reference, returned as-is
    MODULE = auto()  # Module, resolved through its factory on every access


class Registration:
    """
    Tagged value holder.

    The kind is fixed at creation; the payload may be replaced in place when
    the same name is registered again with the same kind.
    """

    __slots__ = ("_name", "_kind", "payload")

    def __init__(self, name: str, kind: RegistrationKind, payload: Any) -> None:
        self._name = name
        self._kind = kind
        self.payload = payload

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> RegistrationKind:
        return self._kind

    @property
    def is_module(self) -> bool:
        return self._kind is RegistrationKind.MODULE

    def get_value(self) -> Any:
        """
        Get the live value of this registration.

        Modules are asked for an instance through their factory; plain values
        are returned unchanged.
        """
        if self._kind is RegistrationKind.MODULE:
            module: IModule = self.payload
            return module.get_instance()
        return self.payload

    def __repr__(self) -> str:
        return f"Registration(name={self._name!r}, kind={self._kind.name})"
