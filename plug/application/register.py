"""
Register of named registrations.

The register maps a registration name to exactly one registration. Adding a
name that already exists overwrites it; looking up a name that does not exist
logs a warning and yields ``None`` instead of failing the whole batch.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.domain.registration import Registration, RegistrationKind
from ..core.exceptions import InvalidArgumentError, InvalidRegistrationError

logger = logging.getLogger(__name__)


class Register:
    """Name to registration map."""

    def __init__(self, warn_on_unresolved: bool = True) -> None:
        self._registrations: Dict[str, Registration] = {}
        self._warn_on_unresolved = warn_on_unresolved

    def add(self, name: str, kind: RegistrationKind, payload: Any) -> Registration:
        """
        Add or overwrite a registration.

        Re-adding a name with the same kind replaces the payload in place, so
        modules already holding the registration see the new payload. A
        different kind replaces the registration object itself.

        Args:
            name: Registration name
            kind: Registration kind
            payload: Value or module to store

        Returns:
            The stored registration

        Raises:
            InvalidRegistrationError: If name or kind is missing
        """
        if not name or not isinstance(name, str) or kind is None:
            raise InvalidRegistrationError()

        registration = self._registrations.get(name)
        if registration is not None and registration.kind is kind:
            logger.debug(f"Updating registration {name!r}")
            registration.payload = payload
            return registration

        if registration is not None:
            logger.debug(
                f"Replacing {registration.kind.name} registration {name!r} with {kind.name}")

        registration = Registration(name, kind, payload)
        self._registrations[name] = registration
        return registration

    def get(self, name: str) -> Optional[Registration]:
        """
        Retrieve a single registration.

        Raises:
            InvalidArgumentError: If name is not a non-empty string
        """
        if not name or not isinstance(name, str):
            raise InvalidArgumentError("Invalid name provided", "name")

        registration = self._registrations.get(name)
        if registration is None and self._warn_on_unresolved:
            logger.warning(
                f"Failed to resolve {name}. Expect None for mapped variable.")
        return registration

    def retrieve(self, names: Sequence[str]) -> List[Tuple[str, Optional[Registration]]]:
        """
        Retrieve a batch of registrations.

        Args:
            names: List or tuple of registration names

        Returns:
            ``(name, registration)`` pairs in request order; the registration
            is ``None`` for names that are not registered

        Raises:
            InvalidArgumentError: If names is not a list or tuple
        """
        if not isinstance(names, (list, tuple)):
            raise InvalidArgumentError("Must provide a list of names", "names")

        return [(name, self.get(name)) for name in names]

    def names(self) -> List[str]:
        """Get all registration names in registration order."""
        return list(self._registrations)

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)
