"""
Basic Authentication Example - In-memory authority with file-persisted sessions.
"""

import asyncio
import logging
import tempfile
from pathlib import Path

from portal_auth import AuthClient, AuthSettings
from portal_auth.adapters import InMemoryAuthAdapter, FileTokenStore, RecordingNavigator, LoggingNotifier


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    authority = InMemoryAuthAdapter(secret="my-secret-key", latency=0.1)
    token_file = Path(tempfile.mkdtemp()) / "session.json"
    settings = AuthSettings()

    client = AuthClient(auth=authority, tokens=FileTokenStore(token_file), settings=settings)
    await client.start()

    navigator = RecordingNavigator()
    with client.page(navigator, LoggingNotifier()) as page:
        print(f"Page shows: {page.view.value}")

        # Register a library member
        page.form.on_mode_toggle()
        for field, value in {
            "name": "Alice",
            "email": "alice@example.com",
            "password": "correct-horse",
            "password_confirmation": "correct-horse",
            "role": "user",
        }.items():
            page.form.on_field_change(field, value)

        result = await page.form.on_submit()
        print(f"\nRegister: {result.message} (mode is now {page.form.mode.value})")

        # Wrong password first
        page.form.on_field_change("password", "wrong-password")
        result = await page.form.on_submit()
        print(f"Login: {result.message} (inline error: {page.form.error!r})")

        # Then the right one
        page.form.on_field_change("password", "correct-horse")
        result = await page.form.on_submit()
        print(f"Login: {result.message}")
        print(f"Navigated to: {navigator.current}")
        print(f"Page shows: {page.view.value}")

    # Next start restores the session from disk
    restarted = AuthClient(auth=authority, tokens=FileTokenStore(token_file), settings=settings)
    await restarted.start()
    print(f"\nRestored session for: {restarted.session.user.email}")

    restarted.logout()
    print(f"Logged out, session file kept: {token_file.exists()}")


if __name__ == "__main__":
    asyncio.run(main())
