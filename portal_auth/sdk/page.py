"""
Auth Page - Composes the form and the redirect guard over one session store.
"""

import logging
from enum import Enum
from typing import Optional

from portal_auth.ports.navigation_port import NavigatorPort
from portal_auth.ports.notification_port import NotifierPort
from portal_auth.domain.credential import FormMode
from portal_auth.domain.routes import Routes
from portal_auth.sdk.session_store import SessionStore
from portal_auth.sdk.auth_form import AuthForm
from portal_auth.sdk.redirect_guard import RedirectGuard

logger = logging.getLogger(__name__)


class PageView(Enum):
    """What the page shows."""
    LOADING = "loading"
    FORM = "form"


class AuthPage:
    """
    The login/register screen.

    Shows a loader while the session is restoring or already holds a
    token (the guard is about to navigate away), the form otherwise.

    Example:
        with AuthPage(store, navigator, notifier) as page:
            page.form.on_field_change("email", "jane@x.com")
            ...
    """

    def __init__(
        self,
        store: SessionStore,
        navigator: NavigatorPort,
        notifier: NotifierPort,
        routes: Optional[Routes] = None,
    ):
        self._store = store
        self._navigator = navigator
        self._routes = routes or Routes()

        self.form = AuthForm(store, notifier)
        self.guard = RedirectGuard(store, navigator, self._routes)

    @property
    def view(self) -> PageView:
        session = self._store.session
        if session.is_loading or session.has_token:
            return PageView.LOADING
        return PageView.FORM

    def mount(self):
        self.form.mount()
        self.guard.mount()

    def unmount(self):
        self.guard.unmount()
        self.form.unmount()

    def forgot_password(self) -> bool:
        """
        Go to the forgot-password route. Only offered in Login mode.

        Returns:
            True if navigation happened
        """
        if self.form.mode is not FormMode.LOGIN:
            return False
        self._navigator.push(self._routes.forgot_password)
        return True

    def __enter__(self) -> "AuthPage":
        self.mount()
        return self

    def __exit__(self, *exc_info):
        self.unmount()
