"""
Notification Port - Fire-and-forget toast channel.
"""

from abc import ABC, abstractmethod


class NotifierPort(ABC):
    """Port: Show transient success/error messages. Never awaited or inspected."""

    @abstractmethod
    def success(self, message: str):
        pass

    @abstractmethod
    def error(self, message: str):
        pass
