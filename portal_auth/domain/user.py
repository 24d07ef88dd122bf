"""
User Domain Model - The identity returned by the authentication service.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from enum import Enum


class UserRole(Enum):
    """Roles that drive post-login navigation."""
    USER = "user"      # Library member
    ADMIN = "admin"    # Library staff


@dataclass
class User:
    """
    User entity - the authenticated identity held by the session.

    Domain rules:
    - role is always one of the enumerated values
    - Fields the service sends that we don't model are kept in metadata
    """
    role: UserRole
    user_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None

    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        data = dict(self.metadata)
        data.update({
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        """
        Deserialize from a service payload.

        Raises:
            ValueError: If role is missing or not a known role
        """
        if "role" not in data:
            raise ValueError("User payload has no role")

        known = {"id", "user_id", "name", "email", "role"}
        user_id = data.get("id", data.get("user_id"))

        return cls(
            role=UserRole(data["role"]),
            user_id=str(user_id) if user_id is not None else None,
            name=data.get("name"),
            email=data.get("email"),
            metadata={k: v for k, v in data.items() if k not in known},
        )
