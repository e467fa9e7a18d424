"""
Tests for the register and registration model.
"""

import logging

import pytest

from plug.application.module import Module
from plug.application.register import Register
from plug.application.factories import TransientFactory
from plug.core.domain.registration import Registration, RegistrationKind
from plug.core.exceptions import InvalidArgumentError, InvalidRegistrationError


class TestRegistration:
    """Test cases for Registration."""

    def test_value_registration_returns_payload(self) -> None:
        """Test that value registrations return their payload unchanged."""
        payload = object()
        registration = Registration("thing", RegistrationKind.VALUE, payload)

        assert registration.get_value() is payload
        assert not registration.is_module

    def test_module_registration_builds_instance(self) -> None:
        """Test that module registrations ask the module for an instance."""
        module = Module("numbers", TransientFactory(), list)
        registration = Registration("numbers", RegistrationKind.MODULE, module)

        first = registration.get_value()
        second = registration.get_value()

        assert registration.is_module
        assert first == [] and second == []
        assert first is not second

    def test_kind_is_read_only(self) -> None:
        """Test that the kind cannot be reassigned."""
        registration = Registration("thing", RegistrationKind.VALUE, 1)

        with pytest.raises(AttributeError):
            registration.kind = RegistrationKind.MODULE  # type: ignore[misc]


class TestRegister:
    """Test cases for Register."""

    @pytest.fixture
    def register(self) -> Register:
        """Create an empty register."""
        return Register()

    def test_add_and_retrieve(self, register: Register) -> None:
        """Test adding and retrieving registrations."""
        register.add("a", RegistrationKind.VALUE, 1)
        register.add("b", RegistrationKind.VALUE, 2)

        pairs = register.retrieve(["b", "a"])

        assert [name for name, _ in pairs] == ["b", "a"]
        assert [registration.get_value() for _, registration in pairs] == [2, 1]

    def test_add_requires_name_and_kind(self, register: Register) -> None:
        """Test that a registration needs a name and a kind."""
        with pytest.raises(InvalidRegistrationError):
            register.add("", RegistrationKind.VALUE, 1)
        with pytest.raises(InvalidRegistrationError):
            register.add(None, RegistrationKind.VALUE, 1)  # type: ignore[arg-type]
        with pytest.raises(InvalidRegistrationError):
            register.add("a", None, 1)  # type: ignore[arg-type]

    def test_same_kind_overwrites_in_place(self, register: Register) -> None:
        """Test that re-adding a name replaces the payload of the same registration."""
        first = register.add("a", RegistrationKind.VALUE, 1)
        second = register.add("a", RegistrationKind.VALUE, 2)

        assert first is second
        assert first.get_value() == 2
        assert len(register) == 1

    def test_different_kind_replaces_registration(self, register: Register) -> None:
        """Test that changing kind replaces the registration object."""
        first = register.add("a", RegistrationKind.VALUE, 1)
        second = register.add("a", RegistrationKind.MODULE, Module("a", TransientFactory(), dict))

        assert first is not second
        assert first.kind is RegistrationKind.VALUE
        assert second.kind is RegistrationKind.MODULE
        assert register.get("a") is second
        assert len(register) == 1

    def test_retrieve_missing_name_yields_none(self, register: Register,
                                               caplog: pytest.LogCaptureFixture) -> None:
        """Test that a missing name leaves a hole and logs a warning."""
        register.add("a", RegistrationKind.VALUE, 1)

        with caplog.at_level(logging.WARNING):
            pairs = register.retrieve(["a", "missing"])

        assert pairs[1] == ("missing", None)
        assert pairs[0][1] is not None
        assert "Failed to resolve missing" in caplog.text

    def test_retrieve_requires_list(self, register: Register) -> None:
        """Test that retrieve rejects a bare string."""
        with pytest.raises(InvalidArgumentError):
            register.retrieve("a")  # type: ignore[arg-type]

    def test_retrieve_rejects_invalid_names(self, register: Register) -> None:
        """Test that names must be non-empty strings."""
        with pytest.raises(InvalidArgumentError):
            register.retrieve([None])  # type: ignore[list-item]

    def test_names_and_contains(self, register: Register) -> None:
        """Test the register introspection helpers."""
        register.add("a", RegistrationKind.VALUE, 1)
        register.add("b", RegistrationKind.VALUE, 2)

        assert register.names() == ["a", "b"]
        assert "a" in register
        assert "c" not in register

    def test_silent_register(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that warnings can be disabled."""
        register = Register(warn_on_unresolved=False)

        with caplog.at_level(logging.WARNING):
            assert register.get("missing") is None

        assert caplog.records == []
