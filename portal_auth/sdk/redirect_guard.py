"""
Redirect Guard - One role-based navigation per mount.

The transition itself is the pure function evaluate_redirect(); the
guard only feeds it session snapshots and performs the navigation it
asks for.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from portal_auth.ports.navigation_port import NavigatorPort
from portal_auth.domain.routes import Routes
from portal_auth.domain.session import Session
from portal_auth.sdk.session_store import SessionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedirectState:
    """Idle while has_redirected is False, Redirected after. Never goes back."""
    has_redirected: bool = False


def evaluate_redirect(
    state: RedirectState,
    session: Session,
    routes: Routes,
) -> Tuple[RedirectState, Optional[str]]:
    """
    Decide whether a session snapshot triggers the redirect.

    Fires once: token present, not loading, user (and so role) present,
    not redirected yet.

    Returns:
        (next state, route to navigate to or None)
    """
    if state.has_redirected:
        return state, None
    if not session.has_token or session.is_loading or session.user is None:
        return state, None

    return RedirectState(has_redirected=True), routes.home_for(session.user.role)


class RedirectGuard:
    """Watches the session store and navigates home once authenticated."""

    def __init__(
        self,
        store: SessionStore,
        navigator: NavigatorPort,
        routes: Optional[Routes] = None,
    ):
        self._store = store
        self._navigator = navigator
        self._routes = routes or Routes()
        self._state: Optional[RedirectState] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def is_mounted(self) -> bool:
        return self._state is not None

    @property
    def has_redirected(self) -> bool:
        return bool(self._state and self._state.has_redirected)

    @property
    def is_waiting(self) -> bool:
        """Idle with no resolved session yet: render the loading indicator."""
        session = self._store.session
        return not self.has_redirected and (session.is_loading or not session.is_authenticated)

    def mount(self):
        """Start watching; evaluates the current snapshot immediately."""
        if self.is_mounted:
            return
        self._state = RedirectState()
        self._unsubscribe = self._store.subscribe(self.on_session_change)
        self.on_session_change(self._store.session)

    def unmount(self):
        """Stop watching and discard the redirect state."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        self._state = None

    def on_session_change(self, session: Session):
        if self._state is None:
            return

        # State is committed before navigating so a re-entrant update can't fire twice
        self._state, route = evaluate_redirect(self._state, session, self._routes)
        if route:
            logger.debug("Redirecting %s to %s", session.user.role.value, route)
            self._navigator.push(route)
