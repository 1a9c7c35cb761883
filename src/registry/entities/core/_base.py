import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel

from src.registry.core.constants import RecordStatus


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(UTC)


class WireModel(BaseModel):
    """Pydantic model exchanged with clients under camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Entity(WireModel):
    """Base fields shared by every stored document."""

    id: str = PydanticField(
        default_factory=_new_id,
        alias="_id",
        description="Unique identifier for the entity",
    )
    rec_status: RecordStatus = PydanticField(default=RecordStatus.ACTIVE)
    created_by: str | None = None
    created_at: datetime = PydanticField(default_factory=_utcnow)
    updated_by: str | None = None
    updated_at: datetime | None = None


class EntityTable(SQLModel, table=False):
    """Columns backing the shared base fields."""

    id: str = Field(
        primary_key=True,
        default_factory=_new_id,
        description="Unique identifier for the entity",
    )
    rec_status: str = Field(default=RecordStatus.ACTIVE.value, index=True)
    created_by: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_by: str | None = None
    updated_at: datetime | None = None


def reject_null(value):
    """``mode="before"`` validator body for fields whose column is NOT NULL.

    Partial updates leave absent fields unset; an explicit ``null`` is refused.
    """
    if value is None:
        raise ValueError("Field may be omitted but not set to null")
    return value
