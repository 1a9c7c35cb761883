"""Institute data access."""

from typing import Any

from sqlmodel.ext.asyncio.session import AsyncSession

from src.registry.core.helpers.select import SelectMetas, get_clean_object
from src.registry.entities.core.repository import BaseRepository
from src.registry.entities.core.user.entity import User
from src.registry.entities.core.user.table import UserTable
from src.registry.entities.service.institute.entity import (
    Institute,
    InstituteFields,
    InstituteUpdate,
)
from src.registry.entities.service.institute.table import InstituteTable


class InstituteRepository(BaseRepository[InstituteTable]):
    """Data-access layer for institutes.

    Documents leave with ``adminId`` replaced by the referenced user,
    stripped of the password and the audit fields, or ``None`` when the
    reference does not resolve.
    """

    TABLE = InstituteTable
    DOCUMENT = Institute
    CREATE = InstituteFields
    UPDATE = InstituteUpdate
    OUTBOUND = (SelectMetas.DEFAULT,)

    async def _document(self, session: AsyncSession, row: InstituteTable) -> dict[str, Any]:
        document = await super()._document(session, row)
        document["adminId"] = await self._admin(session, row.admin_id)
        return document

    async def _admin(self, session: AsyncSession, admin_id: str | None) -> dict[str, Any] | None:
        if admin_id is None:
            return None
        admin = await session.get(UserTable, admin_id)
        if admin is None:
            return None
        document = User.model_validate(admin, from_attributes=True).model_dump(
            mode="json", by_alias=True
        )
        return get_clean_object(document, SelectMetas.DEFAULT, SelectMetas.USERS)
