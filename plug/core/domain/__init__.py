"""
Domain models shared by the register and the container.
"""

from .registration import Registration, RegistrationKind

__all__ = [
    "Registration",
    "RegistrationKind",
]
