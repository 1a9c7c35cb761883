"""User domain models."""

from pydantic import Field, field_validator

from src.registry.core.constants import UserType
from src.registry.entities.core._base import Entity, WireModel, reject_null

PHONE_NUMBER_LENGTH = 10


def normalize_email(value: str | None) -> str | None:
    return value.strip().lower() if isinstance(value, str) else value


class UserFields(WireModel):
    """Fields a client may supply when creating a user.

    The password arrives here already encrypted by the request handler.
    """

    full_name: str = Field(description="User's full name")
    gender: str = Field(description="User's gender")
    phone_number: str = Field(
        min_length=PHONE_NUMBER_LENGTH,
        max_length=PHONE_NUMBER_LENGTH,
        description="Phone number, unique per user",
    )
    address: str | None = Field(default=None, description="User's address")
    email: str = Field(description="Email address, unique per user")
    password: str = Field(description="Encrypted password")
    user_type: UserType = Field(default=UserType.USER, description="Role on the platform")

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)


class UserUpdate(WireModel):
    """Partial user update; every field is optional."""

    full_name: str | None = None
    gender: str | None = None
    phone_number: str | None = Field(
        default=None,
        min_length=PHONE_NUMBER_LENGTH,
        max_length=PHONE_NUMBER_LENGTH,
    )
    address: str | None = None
    email: str | None = None
    password: str | None = None
    user_type: UserType | None = None

    @field_validator(
        "full_name", "gender", "phone_number", "email", "password", "user_type",
        mode="before",
    )
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str | None) -> str | None:
        return normalize_email(value)


class User(Entity, UserFields):
    """Stored user document."""
