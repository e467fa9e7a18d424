"""
Services shipped with the container: a publish/subscribe capability and a
deferred primitive.
"""

from .emitter import EventEmitter
from .deferred import Deferred, Promise, PromiseState

__all__ = [
    "EventEmitter",
    "Deferred",
    "Promise",
    "PromiseState",
]
