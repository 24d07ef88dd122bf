"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from portal_auth.domain.user import User, UserRole
from portal_auth.domain.session import Session
from portal_auth.domain.credential import (
    Credentials,
    FormMode,
    LoginRequest,
    RegisterRequest,
    build_request,
)
from portal_auth.domain.errors import PortalAuthError, ValidationError, AuthError
from portal_auth.domain.result import SubmitResult, ErrorKind
from portal_auth.domain.routes import Routes

__all__ = [
    "User",
    "UserRole",
    "Session",
    "Credentials",
    "FormMode",
    "LoginRequest",
    "RegisterRequest",
    "build_request",
    "PortalAuthError",
    "ValidationError",
    "AuthError",
    "SubmitResult",
    "ErrorKind",
    "Routes",
]
