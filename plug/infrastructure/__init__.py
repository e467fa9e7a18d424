"""
Infrastructure layer: configuration, logging and object utilities.
"""

from .objects import ObjectModifier

__all__ = [
    "ObjectModifier",
]
