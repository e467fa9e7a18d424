"""
Publish/subscribe capability.

``EventEmitter`` is meant to be registered as a prototype and composed onto
module constructors, but it can also be subclassed directly. Listeners are
stored on each instance, so composed modules never share subscribers.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class EventEmitter:
    """Minimal synchronous event emitter."""

    def _event_listeners(self) -> Dict[str, List[Callable[..., Any]]]:
        listeners = getattr(self, '_listeners_by_event', None)
        if listeners is None:
            listeners = {}
            self._listeners_by_event = listeners
        return listeners

    def on(self, event: str, callback: Callable[..., Any]) -> None:
        """Subscribe a callback to an event."""
        if not isinstance(event, str) or not callable(callback):
            logger.warning(
                "Incorrect event registration. Event name must be a string and callback must be callable")
            return

        self._event_listeners().setdefault(event, []).append(callback)

    def off(self, event: str, callback: Optional[Callable[..., Any]] = None) -> None:
        """
        Unsubscribe a callback, or every callback when none is given.
        """
        if not isinstance(event, str):
            logger.warning("Incorrect event registration. Event name must be a string")
            return

        listeners = self._event_listeners()
        if event not in listeners:
            return

        if callback is None:
            del listeners[event]
            return

        if callback in listeners[event]:
            listeners[event].remove(callback)
        if not listeners[event]:
            del listeners[event]

    def emit(self, event: str, *args: Any) -> None:
        """Call every callback subscribed to an event with the given arguments."""
        # Copy so callbacks may unsubscribe while being called
        for callback in list(self._event_listeners().get(event, ())):
            callback(*args)

    def listener_count(self, event: str) -> int:
        return len(self._event_listeners().get(event, ()))
