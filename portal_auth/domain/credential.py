"""
Credential Domain Model - Form input and the requests built from it.

Raw input lives in a mutable Credentials record. On submit it is turned
into a mode-specific request model; each mode has its own field set and
validation rules.
"""

from dataclasses import dataclass, field, fields
from typing import Tuple, Union
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from portal_auth.domain.errors import ValidationError
from portal_auth.domain.user import UserRole


MIN_PASSWORD_LENGTH = 8
PASSWORD_MISMATCH = "Passwords don't match"

FIELD_LABELS = {
    "name": "Full Name",
    "email": "Email Address",
    "password": "Password",
    "password_confirmation": "Confirm Password",
    "role": "Account Type",
}


class FormMode(Enum):
    """Which submission flow is active."""
    LOGIN = "login"
    REGISTER = "register"

    @property
    def fields(self) -> Tuple[str, ...]:
        """Credential fields rendered and required in this mode."""
        if self is FormMode.LOGIN:
            return ("email", "password")
        return ("name", "role", "email", "password", "password_confirmation")

    def toggled(self) -> "FormMode":
        return FormMode.REGISTER if self is FormMode.LOGIN else FormMode.LOGIN


@dataclass
class Credentials:
    """
    Transient form input for the current submission attempt.

    One backing record is shared by both modes; the mode decides which
    fields are read.
    """
    name: str = ""
    email: str = ""
    password: str = field(default="", repr=False)
    password_confirmation: str = field(default="", repr=False)
    role: str = UserRole.USER.value

    def update(self, field_name: str, value: str):
        """
        Set a single field. No validation beyond the field name.

        Raises:
            ValidationError: If field_name is not a credential field
        """
        if field_name not in FIELD_LABELS:
            raise ValidationError(f"Unknown field: {field_name}", field=field_name)
        setattr(self, field_name, value)

    def reset(self, keep_email: bool = False):
        """Restore defaults, optionally keeping the email address."""
        email = self.email
        for f in fields(self):
            setattr(self, f.name, f.default)
        if keep_email:
            self.email = email


class LoginRequest(BaseModel):
    """Validated login submission."""

    model_config = ConfigDict(frozen=True)

    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)


class RegisterRequest(BaseModel):
    """Validated registration submission."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    password_confirmation: str
    role: UserRole

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("name_required", "Full Name is required")
        return value

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.password_confirmation:
            raise PydanticCustomError("password_mismatch", PASSWORD_MISMATCH)
        return self


SubmitRequest = Union[LoginRequest, RegisterRequest]


def build_request(mode: FormMode, credentials: Credentials) -> SubmitRequest:
    """
    Validate credentials for the given mode.

    Args:
        mode: Active form mode
        credentials: Raw form input

    Returns:
        LoginRequest or RegisterRequest

    Raises:
        ValidationError: First problem found, as a human-readable message
    """
    data = {name: getattr(credentials, name) for name in mode.fields}
    model = LoginRequest if mode is FormMode.LOGIN else RegisterRequest

    try:
        request = model(**data)
    except PydanticValidationError as e:
        raise _to_validation_error(e) from e

    # EmailStr normalises the address; submit it exactly as typed
    return request.model_copy(update={"email": credentials.email})


def _to_validation_error(exc: PydanticValidationError) -> ValidationError:
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    field_name = str(loc[0]) if loc else None

    if error["type"] == "password_mismatch":
        return ValidationError(PASSWORD_MISMATCH, field="password_confirmation")
    if error["type"] == "name_required" or field_name is None:
        return ValidationError(error["msg"], field=field_name)

    label = FIELD_LABELS.get(field_name, field_name)
    return ValidationError(f"{label}: {error['msg']}", field=field_name)
