"""User entity package: domain models, table and repository."""

from .entity import User, UserFields, UserUpdate
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserFields", "UserRepository", "UserTable", "UserUpdate"]
