"""
Exception hierarchy for the container.

Structural misuse (bad shapes, missing required fields) raises one of the
errors below at the call that caused it. Lookup misses during resolution are
not exceptions: they are logged and degrade to ``None``.
"""

from typing import Any, Dict, List, Optional


class PlugError(Exception):
    """Base exception for all container errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.error_code = error_code or "PLUG_ERROR"
        self.details = details or {}


class InvalidRegistrationError(PlugError):
    """Raised when a registration is added without a name or kind."""

    def __init__(self, message: str = "Invalid registration") -> None:
        super().__init__(message, "INVALID_REGISTRATION")


class InvalidArgumentError(PlugError):
    """Raised when a list of names or specs is required and something else is given."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(
            message,
            "INVALID_ARGUMENT",
            {"argument": argument} if argument else {}
        )


class InvalidModuleRegistrationError(PlugError):
    """Raised when a module registration is missing its name or constructor list."""

    def __init__(self, message: str = "Invalid module registration",
                 module: Optional[str] = None) -> None:
        super().__init__(
            message,
            "INVALID_MODULE_REGISTRATION",
            {"module": module} if module else {}
        )


class MissingConstructorError(PlugError):
    """Raised when the constructor list is empty or does not end with a callable."""

    def __init__(self, message: str, module: Optional[str] = None) -> None:
        super().__init__(
            message,
            "MISSING_CONSTRUCTOR",
            {"module": module} if module else {}
        )


class FactoryNotRegisteredError(PlugError):
    """Raised when a module is registered under an unknown factory."""

    def __init__(self, factory: str) -> None:
        super().__init__(
            f"Factory {factory} is not registered",
            "FACTORY_NOT_REGISTERED",
            {"factory": factory}
        )


class InvalidFactoryError(PlugError):
    """Raised for unusable factory names or factories lacking ``get_instance``."""

    def __init__(self, message: str, factory: Optional[str] = None) -> None:
        super().__init__(
            message,
            "INVALID_FACTORY",
            {"factory": factory} if factory else {}
        )


class InvalidPrototypeError(PlugError):
    """Raised when a capability object is registered with a bad name or value."""

    def __init__(self, message: str, prototype: Optional[str] = None) -> None:
        super().__init__(
            message,
            "INVALID_PROTOTYPE",
            {"prototype": prototype} if prototype else {}
        )


class PrototypeNotFoundError(PlugError):
    """Raised when composition names a capability object that was never registered."""

    def __init__(self, prototype: str) -> None:
        super().__init__(
            f"Prototype {prototype} is not registered",
            "PROTOTYPE_NOT_FOUND",
            {"prototype": prototype}
        )


class CyclicDependencyError(PlugError):
    """Raised when a module is requested again while it is still being built."""

    def __init__(self, chain: List[str]) -> None:
        super().__init__(
            f"Circular dependency detected: {' -> '.join(chain)}",
            "CYCLIC_DEPENDENCY",
            {"chain": list(chain)}
        )
        self.chain = list(chain)
