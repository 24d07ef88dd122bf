"""
Auth Form - Collects credentials and submits them to the session store.
"""

import logging
from typing import Optional, Tuple

from portal_auth.ports.notification_port import NotifierPort
from portal_auth.domain.credential import Credentials, FormMode, LoginRequest, SubmitRequest, build_request
from portal_auth.domain.errors import PortalAuthError
from portal_auth.domain.result import SubmitResult
from portal_auth.sdk.session_store import SessionStore

logger = logging.getLogger(__name__)

LOGIN_SUCCESS = "Logged in successfully!"
REGISTER_SUCCESS = "Registered successfully! Please login."


class AuthForm:
    """
    Login/Register form state.

    Submissions are exclusive: while one is in flight, further submits
    and mode toggles are ignored. is_submitting is always released,
    whatever the outcome.

    Example:
        form = AuthForm(store, notifier)
        form.on_field_change("email", "jane@x.com")
        form.on_field_change("password", "longpass1")
        result = await form.on_submit()
    """

    def __init__(
        self,
        store: SessionStore,
        notifier: NotifierPort,
        mode: FormMode = FormMode.LOGIN,
    ):
        self._store = store
        self._notifier = notifier
        self._mounted = True

        self.mode = mode
        self.credentials = Credentials()
        self.is_submitting = False
        self.error: Optional[str] = None

    @property
    def visible_fields(self) -> Tuple[str, ...]:
        return self.mode.fields

    @property
    def submit_label(self) -> str:
        return "Sign in" if self.mode is FormMode.LOGIN else "Create Account"

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting

    def on_field_change(self, field_name: str, value: str):
        """Update one credential field. No validation happens here."""
        self.credentials.update(field_name, value)

    def on_mode_toggle(self) -> bool:
        """
        Switch between Login and Register.

        Returns:
            False (and nothing changes) while a submission is in flight
        """
        if self.is_submitting:
            logger.debug("Mode toggle ignored while submitting")
            return False

        self.mode = self.mode.toggled()
        self.credentials.reset()
        self.error = None
        return True

    async def on_submit(self) -> Optional[SubmitResult]:
        """
        Validate and submit the current credentials.

        Returns:
            SubmitResult, or None if ignored because a submission is in flight
        """
        if self.is_submitting:
            logger.debug("Submit ignored while a submission is in flight")
            return None

        self.is_submitting = True
        self.error = None

        try:
            request = build_request(self.mode, self.credentials)
            result = await self._send(request)
        except PortalAuthError as e:
            logger.warning("Authentication error: %s", e.message)
            result = SubmitResult.failure(e)
        except Exception as e:
            logger.exception("Authentication error")
            result = SubmitResult.failure(e)
        finally:
            self.is_submitting = False

        if result.ok:
            self._notifier.success(result.message)
        else:
            if self._mounted:
                self.error = result.message
            self._notifier.error(result.message)

        return result

    def mount(self):
        """Resume writing display state after a previous unmount()."""
        self._mounted = True

    def unmount(self):
        """Stop writing display state; an in-flight submission may still finish."""
        self._mounted = False

    async def _send(self, request: SubmitRequest) -> SubmitResult:
        if isinstance(request, LoginRequest):
            await self._store.login(request.email, request.password)
            if self._mounted:
                self.credentials.reset()
            return SubmitResult.success(LOGIN_SUCCESS)

        await self._store.register(
            request.name,
            request.email,
            request.password,
            request.password_confirmation,
            request.role.value,
        )
        # No auto-login: the new user signs in with the Login form
        if self._mounted:
            self.mode = FormMode.LOGIN
            self.credentials.reset(keep_email=True)
        return SubmitResult.success(REGISTER_SUCCESS)
