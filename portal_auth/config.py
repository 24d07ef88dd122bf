"""
Configuration - Settings for the authentication flow.

Settings come from constructor arguments or, via from_env(), from
environment variables sharing a prefix (default PORTAL_AUTH_):

    PORTAL_AUTH_BASE_URL         Authority base URL
    PORTAL_AUTH_TIMEOUT          Request timeout in seconds
    PORTAL_AUTH_ADMIN_HOME       Admin landing route
    PORTAL_AUTH_USER_HOME        User landing route
    PORTAL_AUTH_FORGOT_PASSWORD  Forgot-password route
    PORTAL_AUTH_TOKEN_FILE       Persist the session to this JSON file
    PORTAL_AUTH_REDIS_URL        Persist the session in Redis instead
    PORTAL_AUTH_TOKEN_KEY        Redis key for the session record
    PORTAL_AUTH_TOKEN_TTL        Redis expiry for the session record (seconds)
"""

import os
from dataclasses import dataclass
from typing import Optional, Mapping

from portal_auth.domain.routes import Routes
from portal_auth.ports.auth_port import AuthServicePort
from portal_auth.ports.token_store_port import TokenStorePort


@dataclass
class AuthSettings:
    """Settings for wiring the authentication flow."""
    base_url: str = "http://localhost:8000/api"
    timeout: float = 10.0

    admin_home: str = "/dashboard"
    user_home: str = "/user"
    forgot_password: str = "/auth/forgot-password"

    # Persistence (Redis wins over file; neither means memory only)
    token_file: Optional[str] = None
    redis_url: Optional[str] = None
    token_key: str = "portal:session"
    token_ttl: Optional[int] = None

    @classmethod
    def from_env(
        cls,
        prefix: str = "PORTAL_AUTH_",
        environ: Optional[Mapping[str, str]] = None,
    ) -> "AuthSettings":
        """
        Build settings from environment variables.

        Args:
            prefix: Variable name prefix
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If a numeric setting can't be parsed
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, default):
            value = env.get(f"{prefix}{name}")
            return default if value in (None, "") else value

        try:
            timeout = float(get("TIMEOUT", defaults.timeout))
        except ValueError:
            raise ValueError(f"{prefix}TIMEOUT must be a number")

        ttl = get("TOKEN_TTL", None)
        try:
            token_ttl = int(ttl) if ttl is not None else None
        except ValueError:
            raise ValueError(f"{prefix}TOKEN_TTL must be an integer")

        return cls(
            base_url=get("BASE_URL", defaults.base_url),
            timeout=timeout,
            admin_home=get("ADMIN_HOME", defaults.admin_home),
            user_home=get("USER_HOME", defaults.user_home),
            forgot_password=get("FORGOT_PASSWORD", defaults.forgot_password),
            token_file=get("TOKEN_FILE", None),
            redis_url=get("REDIS_URL", None),
            token_key=get("TOKEN_KEY", defaults.token_key),
            token_ttl=token_ttl,
        )

    def routes(self) -> Routes:
        return Routes(
            admin_home=self.admin_home,
            user_home=self.user_home,
            forgot_password=self.forgot_password,
        )

    def create_auth_service(self) -> AuthServicePort:
        """HTTP adapter pointed at base_url."""
        from portal_auth.adapters.http_auth import HTTPAuthAdapter
        return HTTPAuthAdapter(base_url=self.base_url, timeout=self.timeout)

    def create_token_store(self) -> TokenStorePort:
        """Token store for the configured persistence (redis > file > memory)."""
        if self.redis_url:
            from portal_auth.adapters.redis_token_store import RedisTokenStore
            return RedisTokenStore(url=self.redis_url, key=self.token_key, ttl=self.token_ttl)

        if self.token_file:
            from portal_auth.adapters.file_token_store import FileTokenStore
            return FileTokenStore(self.token_file)

        from portal_auth.adapters.memory_token_store import MemoryTokenStore
        return MemoryTokenStore()
