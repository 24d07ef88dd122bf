"""
Notification adapters.
"""

import logging
from typing import List, Tuple

from portal_auth.ports.notification_port import NotifierPort

logger = logging.getLogger(__name__)


class LoggingNotifier(NotifierPort):
    """Writes toasts to the log and keeps them as (level, message) pairs."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def success(self, message: str):
        logger.info(message)
        self.messages.append(("success", message))

    def error(self, message: str):
        logger.error(message)
        self.messages.append(("error", message))
