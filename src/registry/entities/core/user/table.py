"""User database table model."""

from sqlmodel import Field

from src.registry.core.constants import UserType
from src.registry.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "users"

    full_name: str
    gender: str
    phone_number: str = Field(unique=True, max_length=10)
    address: str | None = None
    email: str = Field(unique=True, index=True)
    password: str
    user_type: str = Field(default=UserType.USER.value)
