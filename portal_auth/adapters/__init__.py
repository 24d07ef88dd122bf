"""
Adapters - Implementations of ports.

Authentication authority:
- HTTPAuthAdapter: REST authority over httpx
- InMemoryAuthAdapter: In-process authority issuing JWTs (development/tests)
- JWTTokenInspector: Client-side JWT claim reader

Token persistence:
- FileTokenStore: JSON file
- RedisTokenStore: Redis key
- MemoryTokenStore: In-memory (testing)

Host application:
- RecordingNavigator: Records navigation
- LoggingNotifier: Logs notifications
"""

# Authentication authority
from portal_auth.adapters.http_auth import HTTPAuthAdapter
from portal_auth.adapters.memory_auth import InMemoryAuthAdapter
from portal_auth.adapters.jwt_inspector import JWTTokenInspector

# Token persistence
from portal_auth.adapters.file_token_store import FileTokenStore
from portal_auth.adapters.redis_token_store import RedisTokenStore
from portal_auth.adapters.memory_token_store import MemoryTokenStore

# Host application
from portal_auth.adapters.navigation import RecordingNavigator
from portal_auth.adapters.notification import LoggingNotifier

__all__ = [
    # Authentication authority
    "HTTPAuthAdapter",
    "InMemoryAuthAdapter",
    "JWTTokenInspector",
    # Token persistence
    "FileTokenStore",
    "RedisTokenStore",
    "MemoryTokenStore",
    # Host application
    "RecordingNavigator",
    "LoggingNotifier",
]
