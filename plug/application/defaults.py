"""
Process-wide default container.

Applications should prefer passing an explicit ``Plug`` to whatever needs it;
the default instance exists for bootstrap code that wants a shared container
without wiring one through.
"""

import logging
import threading
from typing import Optional

from ..infrastructure.config.loader import ConfigLoader
from ..infrastructure.config.models import PlugConfig
from .container import Plug

logger = logging.getLogger(__name__)

_container: Optional[Plug] = None
_container_lock = threading.Lock()


def get_container(config: Optional[PlugConfig] = None) -> Plug:
    """
    Get the process-wide default container, creating it on first use.

    Args:
        config: Configuration used when the container is created; loaded
            from ``PLUG_`` environment variables when omitted

    Returns:
        The default container
    """
    global _container

    with _container_lock:
        if _container is None:
            if config is None:
                config = ConfigLoader().load_config()
            _container = Plug(config.container)
            logger.info("Default container initialized")

        return _container


def set_container(container: Plug) -> None:
    """Replace the process-wide default container."""
    global _container

    with _container_lock:
        _container = container


def reset_container() -> None:
    """Discard the process-wide default container."""
    global _container

    with _container_lock:
        if _container is not None:
            _container = None
            logger.info("Default container discarded")
