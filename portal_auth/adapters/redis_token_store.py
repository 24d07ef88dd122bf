"""
Redis Token Store - Redis-backed token persistence.
"""

import json
import logging
from typing import Optional, Dict, Any

from portal_auth.ports.token_store_port import TokenStorePort

logger = logging.getLogger(__name__)


class RedisTokenStore(TokenStorePort):
    """
    Redis-backed token storage.

    The record is stored as JSON under a single key, with an optional TTL
    so an abandoned session disappears on its own.
    """

    def __init__(
        self,
        redis_client=None,
        url: str = "redis://localhost:6379/0",
        key: str = "portal:session",
        ttl: Optional[int] = None,
    ):
        """
        Initialize Redis token store.

        Args:
            redis_client: Redis client instance (redis.Redis)
            url: Connection URL used when no client is given
            key: Key holding the record
            ttl: Expiration in seconds (None keeps it until cleared)
        """
        self._redis = redis_client
        self._url = url
        self._key = key
        self._ttl = ttl

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            try:
                import redis
            except ImportError:
                raise ImportError("redis package required: pip install redis")
            self._redis = redis.Redis.from_url(self._url, decode_responses=True)
        return self._redis

    def load(self) -> Optional[Dict[str, Any]]:
        data = self._get_redis().get(self._key)
        if not data:
            return None

        try:
            record = json.loads(data)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt session record at %s", self._key)
            return None

        if not isinstance(record, dict) or not record.get("token"):
            return None
        return record

    def save(self, token: str, user: Optional[Dict[str, Any]] = None):
        self._get_redis().set(
            self._key,
            json.dumps({"token": token, "user": user}),
            ex=self._ttl,
        )

    def clear(self) -> bool:
        return self._get_redis().delete(self._key) > 0
