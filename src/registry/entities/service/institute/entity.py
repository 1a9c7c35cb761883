"""Institute domain models."""

from pydantic import Field, field_validator

from src.registry.entities.core._base import Entity, WireModel, reject_null


def _strip(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


class InstituteFields(WireModel):
    """Fields a client may supply when creating an institute."""

    location: str = Field(description="Where the institute is located")
    description: str | None = None
    admin_id: str | None = Field(
        default=None, description="Id of the user administering the institute"
    )

    @field_validator("location", "description")
    @classmethod
    def strip_text(cls, value: str | None) -> str | None:
        return _strip(value)


class InstituteUpdate(WireModel):
    location: str | None = None
    description: str | None = None
    admin_id: str | None = None

    @field_validator("location", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

    @field_validator("location", "description")
    @classmethod
    def strip_text(cls, value: str | None) -> str | None:
        return _strip(value)


class Institute(Entity, InstituteFields):
    """Stored institute document; ``adminId`` is populated on read."""

    admin_id: str | dict | None = None
