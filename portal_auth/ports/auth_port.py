"""
Auth Service Port - Interface to the remote authentication authority.

Implementations:
- HTTPAuthAdapter: REST authority over httpx
- InMemoryAuthAdapter: In-process authority (development and tests)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class AuthServicePort(ABC):
    """Port: Submit credentials to the authentication authority."""

    @abstractmethod
    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Exchange credentials for a token.

        Args:
            email: Account email
            password: Account password

        Returns:
            Dict with 'token' (str) and 'user' (dict carrying at least 'role')

        Raises:
            AuthError: Invalid credentials or transport failure
        """
        pass

    @abstractmethod
    async def register(
        self,
        name: str,
        email: str,
        password: str,
        password_confirmation: str,
        role: str,
    ) -> Dict[str, Any]:
        """
        Create an account. Does not authenticate.

        Returns:
            Acknowledgement payload from the authority

        Raises:
            AuthError: Validation/conflict (e.g. duplicate email) or transport failure
        """
        pass

    @abstractmethod
    async def fetch_user(self, token: str) -> Dict[str, Any]:
        """
        Resolve the user a token belongs to.

        Args:
            token: Previously issued token

        Returns:
            User payload (dict carrying at least 'role')

        Raises:
            AuthError: Token rejected or transport failure
        """
        pass
