"""
Ports - Interfaces for the authentication authority, token persistence,
navigation and notifications.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from portal_auth.ports.auth_port import AuthServicePort
from portal_auth.ports.token_store_port import TokenStorePort
from portal_auth.ports.navigation_port import NavigatorPort
from portal_auth.ports.notification_port import NotifierPort

__all__ = [
    "AuthServicePort",
    "TokenStorePort",
    "NavigatorPort",
    "NotifierPort",
]
