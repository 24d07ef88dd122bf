"""
Auth Client - High-level SDK wiring the flow from settings.

Simplifies common setups for application developers.
"""

from typing import Optional

from portal_auth.config import AuthSettings
from portal_auth.ports.auth_port import AuthServicePort
from portal_auth.ports.token_store_port import TokenStorePort
from portal_auth.ports.navigation_port import NavigatorPort
from portal_auth.ports.notification_port import NotifierPort
from portal_auth.domain.session import Session
from portal_auth.sdk.session_store import SessionStore
from portal_auth.sdk.page import AuthPage


class AuthClient:
    """
    Process-wide entry point owning one SessionStore.

    Example:
        from portal_auth import AuthClient, AuthSettings
        from portal_auth.adapters import RecordingNavigator, LoggingNotifier

        client = AuthClient.from_settings(AuthSettings.from_env())
        await client.start()                       # rehydrate persisted token

        with client.page(RecordingNavigator(), LoggingNotifier()) as page:
            page.form.on_field_change("email", "jane@x.com")
            page.form.on_field_change("password", "longpass1")
            await page.form.on_submit()

        await client.close()
    """

    def __init__(
        self,
        auth: AuthServicePort,
        tokens: Optional[TokenStorePort] = None,
        settings: Optional[AuthSettings] = None,
    ):
        """
        Initialize auth client with adapters.

        Args:
            auth: Authentication authority adapter (required)
            tokens: Token persistence adapter (optional)
            settings: Settings for routes (defaults used if omitted)
        """
        self._auth = auth
        self._settings = settings or AuthSettings()
        self.store = SessionStore(auth, tokens)

    @classmethod
    def from_settings(cls, settings: AuthSettings) -> "AuthClient":
        """Build adapters (HTTP authority, token store) from settings."""
        return cls(
            auth=settings.create_auth_service(),
            tokens=settings.create_token_store(),
            settings=settings,
        )

    @property
    def session(self) -> Session:
        return self.store.session

    async def start(self):
        """Rehydrate the persisted session. Call once at process start."""
        await self.store.init()

    def page(self, navigator: NavigatorPort, notifier: NotifierPort) -> AuthPage:
        """Create a login/register page bound to this client's session."""
        return AuthPage(self.store, navigator, notifier, self._settings.routes())

    def logout(self) -> bool:
        return self.store.logout()

    async def close(self):
        """Release the authority adapter's resources, if it holds any."""
        aclose = getattr(self._auth, "aclose", None)
        if aclose is not None:
            await aclose()
