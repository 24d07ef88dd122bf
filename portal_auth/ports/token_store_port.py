"""
Token Store Port - Interface for persisting the session across restarts.

Implementations:
- FileTokenStore: JSON file on disk
- RedisTokenStore: Redis key
- MemoryTokenStore: In-memory (testing only)
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class TokenStorePort(ABC):
    """Port: Persist and recover the opaque session token."""

    @abstractmethod
    def load(self) -> Optional[Dict[str, Any]]:
        """
        Load the persisted record.

        Returns:
            Dict with 'token' and optionally 'user', or None if nothing is stored
        """
        pass

    @abstractmethod
    def save(self, token: str, user: Optional[Dict[str, Any]] = None):
        """
        Persist a token, replacing any previous one.

        Args:
            token: Opaque session token
            user: Optional serialized user to restore without a round-trip
        """
        pass

    @abstractmethod
    def clear(self) -> bool:
        """
        Remove the persisted record.

        Returns:
            True if something was removed, False if nothing was stored
        """
        pass
