from sqlmodel import Field

from src.registry.entities.core._base import EntityTable


class InstituteTable(EntityTable, table=True):
    """Database persistence model for institutes."""

    __tablename__ = "institutes"

    location: str
    description: str | None = None
    admin_id: str | None = Field(default=None, index=True)
