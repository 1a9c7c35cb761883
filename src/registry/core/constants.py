"""Shared enumerations and status codes."""

from enum import Enum, IntEnum


class RecordStatus(str, Enum):
    """Lifecycle state stored on every record."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    # Query sentinel only, never stored
    ALL = "all"


class UserType(str, Enum):
    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "superAdmin"


class SelectType(str, Enum):
    SELECT = "select"
    DESELECT = "deselect"


class Status(IntEnum):
    """Status codes carried in the response envelope."""

    SUCCESS = 200
    CREATED = 201
    NO_RECORDS = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FAILURE = 500
    SERVICE_UNAVAILABLE = 503


# Actor recorded for records created outside an authenticated request
SYSTEM_USER = "system"
