"""
Unit tests for settings.
"""

import pytest
from portal_auth.adapters import FileTokenStore, HTTPAuthAdapter, MemoryTokenStore, RedisTokenStore
from portal_auth.config import AuthSettings
from portal_auth.domain.routes import Routes


def test_defaults():
    settings = AuthSettings.from_env(environ={})

    assert settings == AuthSettings()
    assert settings.routes() == Routes(
        admin_home="/dashboard",
        user_home="/user",
        forgot_password="/auth/forgot-password",
    )


def test_from_env():
    settings = AuthSettings.from_env(environ={
        "PORTAL_AUTH_BASE_URL": "https://library.example.com/api",
        "PORTAL_AUTH_TIMEOUT": "2.5",
        "PORTAL_AUTH_ADMIN_HOME": "/staff",
        "PORTAL_AUTH_TOKEN_TTL": "600",
        "PORTAL_AUTH_USER_HOME": "",
    })

    assert settings.base_url == "https://library.example.com/api"
    assert settings.timeout == 2.5
    assert settings.routes().admin_home == "/staff"
    assert settings.routes().user_home == "/user"
    assert settings.token_ttl == 600


def test_custom_prefix():
    settings = AuthSettings.from_env(prefix="LIB_", environ={"LIB_USER_HOME": "/member"})
    assert settings.user_home == "/member"


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("PORTAL_AUTH_FORGOT_PASSWORD", "/reset")
    assert AuthSettings.from_env().forgot_password == "/reset"


@pytest.mark.parametrize("name", ["TIMEOUT", "TOKEN_TTL"])
def test_bad_numbers(name):
    with pytest.raises(ValueError, match=name):
        AuthSettings.from_env(environ={f"PORTAL_AUTH_{name}": "soon"})


def test_token_store_selection(tmp_path):
    assert isinstance(AuthSettings().create_token_store(), MemoryTokenStore)

    file_settings = AuthSettings(token_file=str(tmp_path / "session.json"))
    assert isinstance(file_settings.create_token_store(), FileTokenStore)

    # Redis wins and connects lazily
    redis_settings = AuthSettings(token_file="ignored.json", redis_url="redis://localhost:6379/1")
    assert isinstance(redis_settings.create_token_store(), RedisTokenStore)


def test_auth_service():
    assert isinstance(AuthSettings().create_auth_service(), HTTPAuthAdapter)
