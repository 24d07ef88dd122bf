"""
Session Domain Model - Snapshot of the client's authentication state.
"""

from dataclasses import dataclass, replace
from typing import Dict, Any, Optional
from portal_auth.domain.user import User


@dataclass(frozen=True)
class Session:
    """
    Session snapshot - what the client currently knows about its identity.

    Domain rules:
    - Snapshots are immutable; every transition yields a new one
    - token and user are set together, never one without the other
    - is_loading is True only until rehydration finishes
    """
    token: Optional[str] = None
    user: Optional[User] = None
    is_loading: bool = True

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    @property
    def is_authenticated(self) -> bool:
        """Token and user present, and rehydration finished."""
        return self.has_token and self.user is not None and not self.is_loading

    def authenticated(self, token: str, user: User) -> "Session":
        """Replace the held identity (never merges with the previous one)."""
        return replace(self, token=token, user=user)

    def resolved(self) -> "Session":
        """Mark rehydration as finished."""
        return replace(self, is_loading=False)

    def cleared(self) -> "Session":
        """Drop the held identity."""
        return replace(self, token=None, user=None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (token is not included)."""
        return {
            "has_token": self.has_token,
            "user": self.user.to_dict() if self.user else None,
            "is_loading": self.is_loading,
            "is_authenticated": self.is_authenticated,
        }
