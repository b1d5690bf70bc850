import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError

from restoadmin.core.config import settings

PHONE_INTERNATIONAL = re.compile(r"^\+92[0-9]{10}$")
PHONE_LOCAL = re.compile(r"^03[0-9]{9}$")


def first_error_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    return errors[0]["msg"]


def format_phone_number(phone: str) -> str:
    # 03xxxxxxxxx -> +923xxxxxxxxx
    if phone.startswith("03"):
        return "+92" + phone[1:]
    return phone


class SetPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(alias="phoneNumber")
    password: str
    confirm_password: str = Field(alias="confirmPassword")

    @field_validator("phone_number")
    @classmethod
    def phone_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise PydanticCustomError("phone_required", "Phone number is required")
        return v

    @field_validator("password")
    @classmethod
    def password_min_length(cls, v: str) -> str:
        if len(v) < settings.PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least {min_length} characters",
                {"min_length": settings.PASSWORD_MIN_LENGTH},
            )
        return v

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise PydanticCustomError("password_mismatch", "Passwords don't match")
        return self


class PasswordLoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(alias="phoneNumber")
    password: str

    @field_validator("phone_number")
    @classmethod
    def phone_format(cls, v: str) -> str:
        if not (PHONE_INTERNATIONAL.match(v) or PHONE_LOCAL.match(v)):
            raise PydanticCustomError(
                "phone_format",
                "Phone number must be in +92xxxxxxxxxx or 03xxxxxxxxx format"
            )
        return format_phone_number(v)

    @field_validator("password")
    @classmethod
    def password_required(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("password_required", "Password is required")
        return v
