"""
SDK - The authentication flow: session store, form, redirect guard.
"""

from portal_auth.sdk.session_store import SessionStore
from portal_auth.sdk.auth_form import AuthForm
from portal_auth.sdk.redirect_guard import RedirectGuard, RedirectState, evaluate_redirect
from portal_auth.sdk.page import AuthPage, PageView
from portal_auth.sdk.client import AuthClient

__all__ = [
    "SessionStore",
    "AuthForm",
    "RedirectGuard",
    "RedirectState",
    "evaluate_redirect",
    "AuthPage",
    "PageView",
    "AuthClient",
]
