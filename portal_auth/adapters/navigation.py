"""
Navigation adapters.
"""

import logging
from typing import Callable, List, Optional

from portal_auth.ports.navigation_port import NavigatorPort

logger = logging.getLogger(__name__)


class RecordingNavigator(NavigatorPort):
    """
    Navigator that records every push.

    Optionally forwards to a callback (e.g. the host router).
    """

    def __init__(self, on_push: Optional[Callable[[str], None]] = None):
        self.history: List[str] = []
        self._on_push = on_push

    @property
    def current(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def push(self, route: str):
        logger.info("Navigating to %s", route)
        self.history.append(route)
        if self._on_push:
            self._on_push(route)
