"""
Portal Auth - Client-side login/register flow.

Hexagonal architecture: a session store, a login/register form and a
one-shot role-based redirect, talking to the authentication authority,
token persistence and the host router through ports.

Usage:
    from portal_auth import AuthClient, AuthSettings
    from portal_auth.adapters import RecordingNavigator, LoggingNotifier

    client = AuthClient.from_settings(AuthSettings.from_env())
    await client.start()

    page = client.page(RecordingNavigator(), LoggingNotifier())
    page.mount()
    page.form.on_field_change("email", "jane@x.com")
    page.form.on_field_change("password", "longpass1")
    await page.form.on_submit()
"""

__version__ = "0.1.0"

from portal_auth.config import AuthSettings
from portal_auth.sdk.client import AuthClient
from portal_auth.sdk.session_store import SessionStore
from portal_auth.sdk.auth_form import AuthForm
from portal_auth.sdk.redirect_guard import RedirectGuard
from portal_auth.sdk.page import AuthPage, PageView
from portal_auth.domain.user import User, UserRole
from portal_auth.domain.session import Session
from portal_auth.domain.credential import Credentials, FormMode
from portal_auth.domain.errors import AuthError, ValidationError
from portal_auth.domain.result import SubmitResult, ErrorKind

__all__ = [
    "AuthSettings",
    "AuthClient",
    "SessionStore",
    "AuthForm",
    "RedirectGuard",
    "AuthPage",
    "PageView",
    "User",
    "UserRole",
    "Session",
    "Credentials",
    "FormMode",
    "AuthError",
    "ValidationError",
    "SubmitResult",
    "ErrorKind",
]
