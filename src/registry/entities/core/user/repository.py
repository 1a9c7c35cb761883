"""User data access."""

from src.registry.core.helpers.select import SelectMetas
from src.registry.entities.core.repository import BaseRepository
from src.registry.entities.core.user.entity import User, UserFields, UserUpdate
from src.registry.entities.core.user.table import UserTable


class UserRepository(BaseRepository[UserTable]):
    """Data-access layer for users."""

    TABLE = UserTable
    DOCUMENT = User
    CREATE = UserFields
    UPDATE = UserUpdate
    OUTBOUND = (SelectMetas.DEFAULT, SelectMetas.USERS)
