"""
Shared fixtures.
"""

import pytest

from portal_auth.adapters import InMemoryAuthAdapter, LoggingNotifier, RecordingNavigator


@pytest.fixture
def authority():
    """In-memory authority with one member and one staff account."""
    auth = InMemoryAuthAdapter(secret="test-secret-key")
    auth.add_account("Jane Member", "jane@example.com", "longpass1", role="user")
    auth.add_account("Sam Staff", "sam@example.com", "staffpass1", role="admin")
    return auth


@pytest.fixture
def slow_authority():
    """Same accounts, but every call yields to the event loop for a while."""
    auth = InMemoryAuthAdapter(secret="test-secret-key", latency=0.05)
    auth.add_account("Jane Member", "jane@example.com", "longpass1", role="user")
    return auth


@pytest.fixture
def notifier():
    return LoggingNotifier()


@pytest.fixture
def navigator():
    return RecordingNavigator()
