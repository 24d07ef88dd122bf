"""
Submission result - the outcome of one form submission, as a value.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from portal_auth.domain.errors import AuthError, ValidationError


class ErrorKind(Enum):
    """Where a failed submission was stopped."""
    VALIDATION = "validation"   # locally, before any network call
    AUTH = "auth"               # by the authentication service


@dataclass(frozen=True)
class SubmitResult:
    """
    Outcome of a submission.

    Failures carry the message shown inline and in the error
    notification.
    """
    ok: bool
    message: str
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def success(cls, message: str) -> "SubmitResult":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, error: Exception) -> "SubmitResult":
        """Build a failure from any exception raised during submission."""
        kind = ErrorKind.VALIDATION if isinstance(error, ValidationError) else ErrorKind.AUTH
        message = getattr(error, "message", None) or str(error) or "Authentication failed"
        return cls(ok=False, message=message, error_kind=kind)

    @property
    def is_validation_error(self) -> bool:
        return self.error_kind is ErrorKind.VALIDATION

    @property
    def is_auth_error(self) -> bool:
        return self.error_kind is ErrorKind.AUTH
