"""
JWT Token Inspector - Reads token claims on the client side.

The client never holds the signing key, so signatures are NOT verified
here. Claims are only used to skip restoring a token that has already
expired and to recover the user without a round-trip.
"""

import logging
from typing import Optional, Dict, Any

import jwt

from portal_auth.domain.user import User, UserRole

logger = logging.getLogger(__name__)


class JWTTokenInspector:
    """
    Unverified JWT claim reader (PyJWT).

    Opaque (non-JWT) tokens have no claims: they are never considered
    expired and yield no user.
    """

    def __init__(self, leeway: int = 0):
        """
        Args:
            leeway: Seconds of clock skew tolerated when checking expiry
        """
        self._leeway = leeway

    def claims(self, token: str) -> Optional[Dict[str, Any]]:
        """Decode claims without verifying signature or expiry."""
        try:
            return jwt.decode(token, options={"verify_signature": False})
        except jwt.InvalidTokenError:
            return None

    def is_expired(self, token: str) -> bool:
        try:
            jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": True},
                leeway=self._leeway,
            )
        except jwt.ExpiredSignatureError:
            return True
        except jwt.InvalidTokenError:
            return False
        return False

    def user_from_claims(self, token: str) -> Optional[User]:
        """Build a User from token claims, if they carry a known role."""
        claims = self.claims(token)
        if not claims or "role" not in claims:
            return None

        try:
            role = UserRole(claims["role"])
        except ValueError:
            logger.warning("Token carries unknown role %r", claims["role"])
            return None

        sub = claims.get("sub")
        return User(
            role=role,
            user_id=str(sub) if sub is not None else None,
            name=claims.get("name"),
            email=claims.get("email"),
        )
