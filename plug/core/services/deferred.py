"""
Deferred/promise primitive.

Callbacks run synchronously: those registered while the deferred is pending
are called on completion, those registered afterwards are called at once.
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

ALREADY_COMPLETED = ("Promise has already been completed. "
                     "A promise cannot be resolved or rejected after completion.")


class PromiseState(Enum):
    """Deferred states."""
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    COMPLETED = "completed"  # Callback state matching either outcome


class Deferred:
    """A value that will be resolved or rejected later."""

    def __init__(self) -> None:
        self.state = PromiseState.PENDING
        self._callbacks: List[Tuple[PromiseState, Callable[..., Any]]] = []
        self.success_args: Optional[Tuple[Any, ...]] = None
        self.error_args: Optional[Tuple[Any, ...]] = None

    @property
    def is_pending(self) -> bool:
        return self.state is PromiseState.PENDING

    def _register(self, state: PromiseState, callback: Callable[..., Any],
                  args: Optional[Tuple[Any, ...]]) -> 'Deferred':
        if self.state is state or (state is PromiseState.COMPLETED and not self.is_pending):
            callback(*(args or ()))
        else:
            self._callbacks.append((state, callback))
        return self

    def success(self, callback: Callable[..., Any]) -> 'Deferred':
        """Call ``callback`` with the resolution arguments."""
        return self._register(PromiseState.SUCCESS, callback, self.success_args)

    def error(self, callback: Callable[..., Any]) -> 'Deferred':
        """Call ``callback`` with the rejection arguments."""
        return self._register(PromiseState.ERROR, callback, self.error_args)

    def then(self, callback: Callable[..., Any]) -> 'Deferred':
        """Call ``callback`` once the deferred completes, whatever the outcome."""
        args = self.success_args if self.success_args is not None else self.error_args
        return self._register(PromiseState.COMPLETED, callback, args)

    def _complete(self, state: PromiseState, args: Tuple[Any, ...]) -> None:
        for callback_state, callback in self._callbacks:
            if callback_state is state or callback_state is PromiseState.COMPLETED:
                callback(*args)
        self._callbacks.clear()

    def resolve(self, *args: Any) -> None:
        if not self.is_pending:
            logger.warning(ALREADY_COMPLETED)
            return

        self.state = PromiseState.SUCCESS
        self.success_args = args
        self._complete(self.state, args)

    def reject(self, *args: Any) -> None:
        if not self.is_pending:
            logger.warning(ALREADY_COMPLETED)
            return

        self.state = PromiseState.ERROR
        self.error_args = args
        self._complete(self.state, args)


class Promise:
    """Deferred factory, registered as the ``promise`` singleton module."""

    def defer(self) -> Deferred:
        return Deferred()
