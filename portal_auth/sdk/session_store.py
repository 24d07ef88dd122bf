"""
Session Store - Single source of truth for the client's session.

Owns the only mutable session state. The form and the redirect guard
get the store injected and only read snapshots from it.
"""

import logging
from typing import Callable, List, Optional, Tuple

from portal_auth.ports.auth_port import AuthServicePort
from portal_auth.ports.token_store_port import TokenStorePort
from portal_auth.adapters.jwt_inspector import JWTTokenInspector
from portal_auth.domain.session import Session
from portal_auth.domain.user import User
from portal_auth.domain.errors import AuthError

logger = logging.getLogger(__name__)

SessionListener = Callable[[Session], None]


class SessionStore:
    """
    Session state machine.

    Lifecycle:
        store = SessionStore(auth_service, token_store)   # is_loading=True
        await store.init()                                # rehydrate, is_loading=False
        await store.login(email, password)                # token + user, atomically
        store.logout()

    Each change replaces the whole snapshot and notifies subscribers
    synchronously. Concurrent logins are last-write-wins.
    """

    def __init__(
        self,
        auth_service: AuthServicePort,
        token_store: Optional[TokenStorePort] = None,
        inspector: Optional[JWTTokenInspector] = None,
    ):
        """
        Initialize session store.

        Args:
            auth_service: Authentication authority (required)
            token_store: Where the token survives restarts (optional)
            inspector: Token claim reader used during rehydration
        """
        self._auth = auth_service
        self._tokens = token_store
        self._inspector = inspector or JWTTokenInspector()
        self._session = Session()
        self._listeners: List[SessionListener] = []
        self._initialized = False

    @property
    def session(self) -> Session:
        """Current snapshot."""
        return self._session

    @property
    def token(self) -> Optional[str]:
        return self._session.token

    @property
    def user(self) -> Optional[User]:
        return self._session.user

    @property
    def is_loading(self) -> bool:
        return self._session.is_loading

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Call listener with every new snapshot.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def init(self):
        """
        Rehydrate a persisted session, then resolve is_loading.

        Safe to call more than once; only the first call does anything.
        """
        if self._initialized:
            return
        self._initialized = True

        try:
            restored = await self._rehydrate()
            # A login that finished while we were restoring wins
            if restored and not self._session.has_token:
                token, user = restored
                logger.info("Restored session for %s", user.email or user.user_id)
                self._set(self._session.authenticated(token, user).resolved())
        finally:
            if self._session.is_loading:
                self._set(self._session.resolved())

    async def login(self, email: str, password: str):
        """
        Authenticate and hold the resulting identity.

        On failure the previous token/user are left untouched.

        Raises:
            AuthError: Rejected credentials, transport failure or malformed response
        """
        payload = await self._auth.login(email, password)

        try:
            token = payload["token"]
            user = User.from_dict(payload["user"])
        except (KeyError, TypeError, ValueError) as e:
            raise AuthError("Malformed login response") from e
        if not token:
            raise AuthError("Malformed login response")

        self._set(self._session.authenticated(token, user))
        logger.info("Logged in as %s (%s)", user.email or user.user_id, user.role.value)
        self._persist(token, user)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        password_confirmation: str,
        role: str,
    ):
        """
        Create an account. The session is not touched; the caller logs in after.

        Raises:
            AuthError: Validation/conflict or transport failure
        """
        await self._auth.register(name, email, password, password_confirmation, role)
        logger.info("Registered %s as %s", email, role)

    def logout(self) -> bool:
        """
        Drop the held identity and its persisted copy.

        Returns:
            True if a session was held
        """
        had_token = self._session.has_token
        self._set(self._session.cleared())
        self._forget()
        if had_token:
            logger.info("Logged out")
        return had_token

    def _set(self, session: Session):
        if session == self._session:
            return
        self._session = session

        for listener in list(self._listeners):
            try:
                listener(session)
            except Exception:
                logger.exception("Session listener failed")

    async def _rehydrate(self) -> Optional[Tuple[str, User]]:
        if not self._tokens:
            return None

        try:
            record = self._tokens.load()
        except Exception as e:
            logger.warning("Could not read persisted session: %s", e)
            return None

        token = record.get("token") if record else None
        if not token:
            return None

        if self._inspector.is_expired(token):
            logger.info("Persisted token has expired")
            self._forget_restored()
            return None

        user = self._stored_user(record) or self._inspector.user_from_claims(token)
        if user is None:
            try:
                user = User.from_dict(await self._auth.fetch_user(token))
            except (AuthError, ValueError) as e:
                logger.warning("Could not restore session: %s", e)
                self._forget_restored()
                return None
            except Exception:
                logger.exception("Could not restore session")
                self._forget_restored()
                return None

            # The record now belongs to a login that finished meanwhile
            if self._session.has_token:
                return None
            self._persist(token, user)

        return token, user

    def _forget_restored(self):
        """Forget the persisted record unless a login has since replaced it."""
        if self._session.has_token:
            return
        self._forget()

    @staticmethod
    def _stored_user(record) -> Optional[User]:
        data = record.get("user")
        if not isinstance(data, dict):
            return None
        try:
            return User.from_dict(data)
        except ValueError:
            return None

    def _persist(self, token: str, user: User):
        if not self._tokens:
            return
        try:
            self._tokens.save(token, user.to_dict())
        except Exception as e:
            logger.warning("Could not persist session: %s", e)

    def _forget(self):
        if not self._tokens:
            return
        try:
            self._tokens.clear()
        except Exception as e:
            logger.warning("Could not clear persisted session: %s", e)
