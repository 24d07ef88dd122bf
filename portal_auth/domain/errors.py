"""
Error taxonomy for the authentication flow.

Two categories reach the user:
- ValidationError: caught locally, no network call was made
- AuthError: reported by the authentication service or the transport
"""

from typing import Optional, Dict, Any


class PortalAuthError(Exception):
    """
    Base exception for the authentication flow.

    Attributes:
        message: Human-readable message, shown inline and in notifications
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(PortalAuthError):
    """Form input rejected before contacting the authentication service."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)
        self.field = field
        if field:
            self.details["field"] = field


class AuthError(PortalAuthError):
    """
    Failure reported by the authentication service.

    Invalid credentials, duplicate registration and transport failures
    all land here; callers don't need to tell them apart.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)
        self.status_code = status_code
