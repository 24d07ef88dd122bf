"""
HTTP Auth Adapter - Talks to a REST authentication authority over httpx.

Endpoints (relative to base_url):
    POST /login      {email, password}                      -> {token, user}
    POST /register   {name, email, password,
                      password_confirmation, role}          -> acknowledgement
    GET  /user       Authorization: Bearer <token>          -> user
"""

import logging
from typing import Optional, Dict, Any

import httpx

from portal_auth.ports.auth_port import AuthServicePort
from portal_auth.domain.errors import AuthError

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Authentication failed"


class HTTPAuthAdapter(AuthServicePort):
    """
    REST authentication adapter.

    Any HTTP error status or transport failure becomes an AuthError whose
    message is taken from the response body when the authority sends one.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000/api",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize HTTP adapter.

        Args:
            base_url: Authority base URL
            timeout: Request timeout in seconds
            client: Pre-built AsyncClient (its own base_url is used as-is)
        """
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        data = await self._request(
            "POST", "/login", json={"email": email, "password": password}
        )

        token = data.get("token")
        user = data.get("user")
        if not token or not isinstance(user, dict) or "role" not in user:
            raise AuthError("Malformed login response", details={"keys": sorted(data)})

        return {"token": token, "user": user}

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        password_confirmation: str,
        role: str,
    ) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/register",
            json={
                "name": name,
                "email": email,
                "password": password,
                "password_confirmation": password_confirmation,
                "role": role,
            },
        )

    async def fetch_user(self, token: str) -> Dict[str, Any]:
        data = await self._request(
            "GET", "/user", headers={"Authorization": f"Bearer {token}"}
        )
        # Some authorities wrap the user, some don't
        user = data.get("user", data)
        if not isinstance(user, dict) or "role" not in user:
            raise AuthError("Malformed user response")
        return user

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "HTTPAuthAdapter":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.RequestError as e:
            logger.warning("Auth request %s %s failed: %r", method, path, e)
            raise AuthError(f"Network error: {e}" if str(e) else "Network error") from e

        if response.is_error:
            message = self._error_message(response)
            logger.warning(
                "Auth request %s %s rejected with %d: %s",
                method, path, response.status_code, message,
            )
            raise AuthError(message, status_code=response.status_code)

        if not response.content:
            return {}

        try:
            data = response.json()
        except ValueError as e:
            raise AuthError(
                "Invalid response from authentication service",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise AuthError(
                "Invalid response from authentication service",
                status_code=response.status_code,
            )
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pick the most useful message out of an error body."""
        try:
            body = response.json()
        except ValueError:
            return DEFAULT_ERROR

        if not isinstance(body, dict):
            return DEFAULT_ERROR

        if body.get("message"):
            return str(body["message"])

        # {"errors": {"email": ["The email has already been taken."]}}
        errors = body.get("errors")
        if isinstance(errors, dict):
            for messages in errors.values():
                if isinstance(messages, list) and messages:
                    return str(messages[0])
                if messages:
                    return str(messages)

        return DEFAULT_ERROR
