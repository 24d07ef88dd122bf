"""
Navigation Port - Interface to the host application's router.
"""

from abc import ABC, abstractmethod


class NavigatorPort(ABC):
    """Port: Move the user to another destination."""

    @abstractmethod
    def push(self, route: str):
        """
        Navigate to a route.

        Args:
            route: Destination path (e.g. "/dashboard")
        """
        pass
