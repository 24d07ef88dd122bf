"""
Unit tests for credentials and request validation.
"""

import pytest
from portal_auth.domain.credential import (
    Credentials,
    FormMode,
    LoginRequest,
    RegisterRequest,
    PASSWORD_MISMATCH,
    build_request,
)
from portal_auth.domain.errors import ValidationError
from portal_auth.domain.user import UserRole


def register_credentials(**overrides):
    values = dict(
        name="Jane",
        email="jane@x.com",
        password="longpass1",
        password_confirmation="longpass1",
        role="user",
    )
    values.update(overrides)
    return Credentials(**values)


class TestFormMode:

    def test_toggle(self):
        assert FormMode.LOGIN.toggled() is FormMode.REGISTER
        assert FormMode.REGISTER.toggled() is FormMode.LOGIN

    def test_fields_per_mode(self):
        assert FormMode.LOGIN.fields == ("email", "password")
        assert set(FormMode.REGISTER.fields) == {
            "name", "role", "email", "password", "password_confirmation",
        }


class TestCredentials:

    def test_defaults(self):
        creds = Credentials()
        assert creds.email == ""
        assert creds.role == "user"

    def test_update(self):
        creds = Credentials()
        creds.update("email", "a@b.com")
        assert creds.email == "a@b.com"

    def test_update_unknown_field(self):
        with pytest.raises(ValidationError) as exc:
            Credentials().update("is_admin", "yes")
        assert exc.value.field == "is_admin"

    def test_reset_keeps_email_when_asked(self):
        creds = register_credentials()
        creds.reset(keep_email=True)

        assert creds.email == "jane@x.com"
        assert creds.password == ""
        assert creds.name == ""

    def test_repr_hides_passwords(self):
        creds = register_credentials(password="hunter2-secret", password_confirmation="hunter2-secret")
        assert "hunter2-secret" not in repr(creds)


class TestLoginValidation:

    def test_valid_login(self):
        request = build_request(FormMode.LOGIN, Credentials(email="a@b.com", password="longpass1"))

        assert isinstance(request, LoginRequest)
        assert request.email == "a@b.com"
        assert request.password == "longpass1"

    def test_short_password_rejected(self):
        """Seven characters is one short."""
        creds = Credentials(email="a@b.com", password="short12")

        with pytest.raises(ValidationError) as exc:
            build_request(FormMode.LOGIN, creds)

        assert exc.value.field == "password"
        assert exc.value.message.startswith("Password:")

    def test_empty_email_rejected(self):
        with pytest.raises(ValidationError) as exc:
            build_request(FormMode.LOGIN, Credentials(password="longpass1"))
        assert exc.value.field == "email"

    def test_malformed_email_rejected(self):
        with pytest.raises(ValidationError) as exc:
            build_request(FormMode.LOGIN, Credentials(email="not-an-email", password="longpass1"))
        assert exc.value.field == "email"

    def test_email_submitted_as_typed(self):
        creds = Credentials(email="Jane@Example.COM", password="longpass1")

        assert build_request(FormMode.LOGIN, creds).email == "Jane@Example.COM"
        assert build_request(FormMode.REGISTER, register_credentials(email="Jane@X.com")).email == "Jane@X.com"

    def test_register_only_fields_ignored(self):
        """Login doesn't look at the confirmation or name."""
        creds = Credentials(email="a@b.com", password="longpass1", password_confirmation="other")
        assert isinstance(build_request(FormMode.LOGIN, creds), LoginRequest)


class TestRegisterValidation:

    def test_valid_register(self):
        request = build_request(FormMode.REGISTER, register_credentials())

        assert isinstance(request, RegisterRequest)
        assert request.name == "Jane"
        assert request.role is UserRole.USER

    def test_admin_role(self):
        request = build_request(FormMode.REGISTER, register_credentials(role="admin"))
        assert request.role is UserRole.ADMIN

    def test_password_mismatch(self):
        creds = register_credentials(password_confirmation="longpass2")

        with pytest.raises(ValidationError) as exc:
            build_request(FormMode.REGISTER, creds)

        assert exc.value.message == PASSWORD_MISMATCH
        assert exc.value.message == "Passwords don't match"
        assert exc.value.field == "password_confirmation"

    def test_name_required(self):
        with pytest.raises(ValidationError) as exc:
            build_request(FormMode.REGISTER, register_credentials(name="   "))

        assert exc.value.field == "name"
        assert exc.value.message == "Full Name is required"

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError) as exc:
            build_request(FormMode.REGISTER, register_credentials(role="librarian"))
        assert exc.value.field == "role"

    def test_short_password_rejected(self):
        creds = register_credentials(password="short", password_confirmation="short")

        with pytest.raises(ValidationError) as exc:
            build_request(FormMode.REGISTER, creds)
        assert exc.value.field == "password"
