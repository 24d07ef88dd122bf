"""
Unit tests for the one-shot role-based redirect.
"""

import pytest
from portal_auth.adapters import MemoryTokenStore
from portal_auth.domain.routes import Routes
from portal_auth.domain.session import Session
from portal_auth.domain.user import User, UserRole
from portal_auth.sdk.redirect_guard import RedirectGuard, RedirectState, evaluate_redirect
from portal_auth.sdk.session_store import SessionStore

ROUTES = Routes(admin_home="/dashboard", user_home="/user")


def authenticated(role, loading=False, token="tok"):
    return Session(token=token, user=User(role=role), is_loading=loading)


class TestEvaluateRedirect:

    def test_admin_goes_to_admin_home(self):
        state, route = evaluate_redirect(RedirectState(), authenticated(UserRole.ADMIN), ROUTES)

        assert route == "/dashboard"
        assert state.has_redirected

    def test_user_goes_to_user_home(self):
        state, route = evaluate_redirect(RedirectState(), authenticated(UserRole.USER), ROUTES)

        assert route == "/user"
        assert state.has_redirected

    def test_waits_while_loading_even_with_token(self):
        state, route = evaluate_redirect(RedirectState(), authenticated(UserRole.ADMIN, loading=True), ROUTES)

        assert route is None
        assert not state.has_redirected

    def test_no_token(self):
        session = Session(user=User(role=UserRole.USER), is_loading=False)
        assert evaluate_redirect(RedirectState(), session, ROUTES)[1] is None

    def test_token_without_user(self):
        session = Session(token="tok", is_loading=False)
        assert evaluate_redirect(RedirectState(), session, ROUTES)[1] is None

    def test_never_fires_twice(self):
        state = RedirectState(has_redirected=True)
        next_state, route = evaluate_redirect(state, authenticated(UserRole.ADMIN), ROUTES)

        assert route is None
        assert next_state is state

    def test_destination_per_role(self):
        destinations = {role: ROUTES.home_for(role) for role in UserRole}
        assert destinations == {UserRole.ADMIN: "/dashboard", UserRole.USER: "/user"}


class TestRedirectGuard:

    def test_navigates_once_across_updates(self, authority, navigator):
        store = SessionStore(authority)
        guard = RedirectGuard(store, navigator, ROUTES)
        guard.mount()

        guard.on_session_change(authenticated(UserRole.USER))
        guard.on_session_change(authenticated(UserRole.ADMIN, token="refreshed"))
        guard.on_session_change(authenticated(UserRole.USER))

        assert navigator.history == ["/user"]
        assert guard.has_redirected

    def test_no_navigation_until_loading_ends(self, authority, navigator):
        store = SessionStore(authority)
        guard = RedirectGuard(store, navigator, ROUTES)
        guard.mount()

        guard.on_session_change(authenticated(UserRole.ADMIN, loading=True))
        assert navigator.history == []

        guard.on_session_change(authenticated(UserRole.ADMIN, loading=False))
        assert navigator.history == ["/dashboard"]

    @pytest.mark.asyncio
    async def test_redirects_after_login(self, authority, navigator):
        store = SessionStore(authority)
        await store.init()
        guard = RedirectGuard(store, navigator, ROUTES)
        guard.mount()
        assert navigator.history == []

        await store.login("sam@example.com", "staffpass1")
        await store.login("jane@example.com", "longpass1")

        assert navigator.history == ["/dashboard"]

    @pytest.mark.asyncio
    async def test_redirects_after_rehydration(self, authority, navigator):
        store = SessionStore(authority, MemoryTokenStore("opaque-token", {"role": "user"}))
        guard = RedirectGuard(store, navigator, ROUTES)
        guard.mount()

        assert guard.is_waiting
        assert navigator.history == []

        await store.init()

        assert navigator.history == ["/user"]
        assert not guard.is_waiting

    @pytest.mark.asyncio
    async def test_mount_with_resolved_session(self, authority, navigator):
        store = SessionStore(authority)
        await store.login("jane@example.com", "longpass1")
        await store.init()

        guard = RedirectGuard(store, navigator, ROUTES)
        guard.mount()
        guard.mount()

        assert navigator.history == ["/user"]

    @pytest.mark.asyncio
    async def test_unmount_stops_watching(self, authority, navigator):
        store = SessionStore(authority)
        await store.init()
        guard = RedirectGuard(store, navigator, ROUTES)
        guard.mount()
        guard.unmount()

        await store.login("jane@example.com", "longpass1")

        assert navigator.history == []
        assert not guard.is_mounted

    @pytest.mark.asyncio
    async def test_each_mount_gets_fresh_state(self, authority, navigator):
        store = SessionStore(authority)
        await store.init()
        await store.login("jane@example.com", "longpass1")

        guard = RedirectGuard(store, navigator, ROUTES)
        guard.mount()
        guard.unmount()
        guard.mount()

        assert navigator.history == ["/user", "/user"]

    def test_default_routes(self, authority, navigator):
        guard = RedirectGuard(SessionStore(authority), navigator)
        guard.mount()

        guard.on_session_change(authenticated(UserRole.ADMIN))

        assert navigator.current == "/dashboard"
