"""
Memory Token Store - In-memory token persistence (testing only).
"""

from typing import Optional, Dict, Any
from portal_auth.ports.token_store_port import TokenStorePort


class MemoryTokenStore(TokenStorePort):
    """
    In-memory token storage.

    WARNING: Only for testing. Nothing survives a restart.
    """

    def __init__(self, token: Optional[str] = None, user: Optional[Dict[str, Any]] = None):
        """Optionally start with a persisted record, as if from a previous run."""
        self._record: Optional[Dict[str, Any]] = None
        if token:
            self.save(token, user)

    def load(self) -> Optional[Dict[str, Any]]:
        return dict(self._record) if self._record else None

    def save(self, token: str, user: Optional[Dict[str, Any]] = None):
        self._record = {"token": token, "user": dict(user) if user else None}

    def clear(self) -> bool:
        if self._record is None:
            return False
        self._record = None
        return True
