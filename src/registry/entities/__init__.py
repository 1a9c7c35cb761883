"""Entities grouped by business concept.

Each entity package holds its pydantic domain models (``entity.py``), its
SQLModel table (``table.py``) and its repository (``repository.py``).
"""

from .core.user import User, UserFields, UserRepository, UserTable, UserUpdate
from .service.institute import (
    Institute,
    InstituteFields,
    InstituteRepository,
    InstituteTable,
    InstituteUpdate,
)

__all__ = [
    "Institute",
    "InstituteFields",
    "InstituteRepository",
    "InstituteTable",
    "InstituteUpdate",
    "User",
    "UserFields",
    "UserRepository",
    "UserTable",
    "UserUpdate",
]
