"""
In-Memory Auth Adapter - An in-process authentication authority.

WARNING: For development and tests only. Accounts are lost on restart.
"""

import asyncio
import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any, List

import jwt

from portal_auth.ports.auth_port import AuthServicePort
from portal_auth.domain.errors import AuthError
from portal_auth.domain.user import UserRole

logger = logging.getLogger(__name__)


class InMemoryAuthAdapter(AuthServicePort):
    """
    In-memory authority that issues HS256 JWTs with PyJWT.

    Passwords are salted and hashed (SHA-256) before storage.
    Every call is recorded in `calls` so tests can count round-trips.
    """

    def __init__(
        self,
        secret: str = "portal-dev-secret",
        algorithm: str = "HS256",
        token_ttl: int = 3600,
        latency: float = 0.0,
    ):
        """
        Initialize in-memory authority.

        Args:
            secret: JWT signing secret
            algorithm: JWT algorithm (default HS256)
            token_ttl: Token lifetime in seconds
            latency: Simulated network delay in seconds
        """
        self._secret = secret
        self._algorithm = algorithm
        self._token_ttl = token_ttl
        self._latency = latency
        # Format: {email: account}
        self._accounts: Dict[str, Dict[str, Any]] = {}
        self.calls: List[str] = []

    def add_account(
        self,
        name: str,
        email: str,
        password: str,
        role: str = UserRole.USER.value,
    ) -> Dict[str, Any]:
        """Seed an account directly. Returns the public user payload."""
        key = email.lower()
        salt = secrets.token_hex(8)
        self._accounts[key] = {
            "id": str(len(self._accounts) + 1),
            "name": name,
            "email": email,
            "role": UserRole(role).value,
            "salt": salt,
            "password_hash": self._hash(password, salt),
        }
        return self._public(self._accounts[key])

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        await self._network("login")

        account = self._accounts.get(email.lower())
        if not account or account["password_hash"] != self._hash(password, account["salt"]):
            raise AuthError("Invalid credentials", status_code=401)

        return {"token": self.issue_token(account), "user": self._public(account)}

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        password_confirmation: str,
        role: str,
    ) -> Dict[str, Any]:
        await self._network("register")

        if email.lower() in self._accounts:
            raise AuthError("The email has already been taken.", status_code=422)
        if password != password_confirmation:
            raise AuthError("The password field confirmation does not match.", status_code=422)
        try:
            UserRole(role)
        except ValueError:
            raise AuthError("The selected role is invalid.", status_code=422)

        user = self.add_account(name, email, password, role)
        return {"message": "User registered successfully", "user": user}

    async def fetch_user(self, token: str) -> Dict[str, Any]:
        await self._network("fetch_user")

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.InvalidTokenError:
            raise AuthError("Unauthenticated.", status_code=401)

        account = self._accounts.get(str(payload.get("email", "")).lower())
        if not account:
            raise AuthError("Unauthenticated.", status_code=401)
        return self._public(account)

    def issue_token(self, account: Dict[str, Any], expires_in: Optional[int] = None) -> str:
        """Create a signed JWT for an account."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": account["id"],
            "name": account["name"],
            "email": account["email"],
            "role": account["role"],
            "iat": now,
            "exp": now + timedelta(seconds=self._token_ttl if expires_in is None else expires_in),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    async def _network(self, operation: str):
        self.calls.append(operation)
        logger.debug("In-memory authority handling %s", operation)
        if self._latency:
            await asyncio.sleep(self._latency)

    @staticmethod
    def _hash(password: str, salt: str) -> str:
        return hashlib.sha256(f"{salt}:{password}".encode()).hexdigest()

    @staticmethod
    def _public(account: Dict[str, Any]) -> Dict[str, Any]:
        return {k: account[k] for k in ("id", "name", "email", "role")}
