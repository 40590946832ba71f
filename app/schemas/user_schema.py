from datetime import datetime
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator
from typing import Optional

NAME_REQUIRED = "Name is required"
EMAIL_INVALID = "Please include a valid email"
PASSWORD_TOO_SHORT = "Please enter a password with 6 or more characters"
PASSWORD_REQUIRED = "Password is required"
MIN_PASSWORD_LENGTH = 6


def normalize_email(value: Optional[str]) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(EMAIL_INVALID)
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(EMAIL_INVALID)
    return value.strip().lower()


def check_new_password(value: Optional[str]) -> str:
    if not isinstance(value, str) or len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(PASSWORD_TOO_SHORT)
    return value


# Fields default to None and are checked before type coercion, so a missing
# or wrongly typed field reports the same message as a malformed one.
class UserRegister(BaseModel):
    name: Optional[str] = Field(default=None, validate_default=True)
    email: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(NAME_REQUIRED)
        return value.strip()

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value):
        return normalize_email(value)

    @field_validator("password", mode="before")
    @classmethod
    def _password(cls, value):
        return check_new_password(value)


class UserLogin(BaseModel):
    email: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value):
        return normalize_email(value)

    @field_validator("password", mode="before")
    @classmethod
    def _password(cls, value):
        if not isinstance(value, str):
            raise ValueError(PASSWORD_REQUIRED)
        return value


class ForgotPasswordRequest(BaseModel):
    email: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value):
        return normalize_email(value)


class ResetPasswordRequest(BaseModel):
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("password", mode="before")
    @classmethod
    def _password(cls, value):
        return check_new_password(value)


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    msg: str


class UserRead(BaseModel):
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None
