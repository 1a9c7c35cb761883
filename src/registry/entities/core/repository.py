"""Shared data-access behaviour for document-shaped entities.

Repositories speak in documents: plain dicts keyed by the camelCase wire
names (``_id``, ``recStatus``, ``fullName``...). Filters use the same names
and are translated to table columns here, so the request layer never sees
the relational schema.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from functools import cached_property
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from pydantic import TypeAdapter, ValidationError
from sqlalchemy import false, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.registry.core.constants import RecordStatus
from src.registry.core.helpers.select import (
    SelectMeta,
    get_select_string,
    parse_select_string,
)
from src.registry.core.services.database.db_session import DbSessionService
from src.registry.entities.core._base import Entity, EntityTable, WireModel

TableT = TypeVar("TableT", bound=EntityTable)


@dataclass(frozen=True)
class QueryOptions:
    """Read options; ``select`` is a projection string, ``None`` returns every field."""

    select: str | None = None


class BaseRepository(Generic[TableT]):
    """Create/read/soft-delete/update over one table.

    Subclasses declare the table, the document model used for output, the
    models validating create and update payloads, and the deselects applied
    to documents returned by writes.
    """

    TABLE: ClassVar[type[EntityTable]]
    DOCUMENT: ClassVar[type[Entity]]
    CREATE: ClassVar[type[WireModel]]
    UPDATE: ClassVar[type[WireModel]]
    OUTBOUND: ClassVar[tuple[SelectMeta, ...]] = ()

    def __init__(self, db: DbSessionService) -> None:
        self._db = db

    @cached_property
    def _columns_by_field(self) -> dict[str, str]:
        return {
            info.alias or name: name
            for name, info in self.DOCUMENT.model_fields.items()
        }

    @cached_property
    def _filter_types(self) -> dict[str, TypeAdapter]:
        return {
            name: TypeAdapter(info.annotation)
            for name, info in self.DOCUMENT.model_fields.items()
        }

    def _coerce(self, column: str, value: Any) -> Any:
        """Convert a query value to the field type.

        Raises:
            pydantic.ValidationError: the value cannot hold for this field
        """
        coerced = self._filter_types[column].validate_python(value)
        return coerced.value if isinstance(coerced, Enum) else coerced

    def _conditions(self, filters: Mapping[str, Any]) -> list[Any]:
        conditions = []
        for key, value in filters.items():
            column = self._columns_by_field.get(key)
            if column is None:
                logger.warning(
                    "Ignoring filter on unknown field {} for {}", key, self.TABLE.__name__
                )
                continue
            try:
                value = self._coerce(column, value)
            except ValidationError:
                # A value the field cannot hold matches no record
                logger.warning(
                    "Filter {}={!r} does not fit {}; matching nothing",
                    key,
                    value,
                    self.TABLE.__name__,
                )
                conditions.append(false())
                continue
            conditions.append(getattr(self.TABLE, column) == value)
        return conditions

    def _statement(self, filters: Mapping[str, Any]):
        statement = select(self.TABLE)
        conditions = self._conditions(filters)
        if conditions:
            statement = statement.where(*conditions)
        return statement

    async def _document(self, session: AsyncSession, row: TableT) -> dict[str, Any]:
        """Serialize a row; subclasses extend this to embed referenced records."""
        return self.DOCUMENT.model_validate(row, from_attributes=True).model_dump(
            mode="json", by_alias=True
        )

    def _outbound(self, document: dict[str, Any]) -> dict[str, Any]:
        return parse_select_string(get_select_string(*self.OUTBOUND)).apply(document)

    async def add(self, payload: Mapping[str, Any], actor: str) -> dict[str, Any]:
        """Insert a new active record created by ``actor``.

        Raises:
            pydantic.ValidationError: a supplied value violates the field rules
            sqlalchemy.exc.IntegrityError: a unique constraint is violated
        """
        values = self.CREATE.model_validate(payload).model_dump(mode="json")
        row = self.TABLE(**values, created_by=actor)
        async with self._db.session_scope() as session:
            session.add(row)
            await session.flush()
            await session.refresh(row)
            document = await self._document(session, row)
        logger.info("Created {} {}", self.TABLE.__name__, row.id)
        return self._outbound(document)

    async def get_many(
        self, filters: Mapping[str, Any], options: QueryOptions | None = None
    ) -> list[dict[str, Any]]:
        projection = parse_select_string(options.select if options else None)
        async with self._db.session_scope() as session:
            rows = (await session.exec(self._statement(filters))).all()
            documents = [await self._document(session, row) for row in rows]
        return [projection.apply(document) for document in documents]

    async def get_one(
        self, filters: Mapping[str, Any], options: QueryOptions | None = None
    ) -> dict[str, Any] | None:
        projection = parse_select_string(options.select if options else None)
        async with self._db.session_scope() as session:
            row = (await session.exec(self._statement(filters).limit(1))).first()
            if row is None:
                return None
            document = await self._document(session, row)
        return projection.apply(document)

    async def soft_delete(self, record_id: str) -> dict[str, Any] | None:
        """Mark a record inactive; the row itself is kept."""
        async with self._db.session_scope() as session:
            row = await session.get(self.TABLE, record_id)
            if row is None:
                logger.info("Soft delete of unknown {} {}", self.TABLE.__name__, record_id)
                return None
            row.rec_status = RecordStatus.INACTIVE.value
            session.add(row)
            await session.flush()
            document = await self._document(session, row)
        logger.info("Soft deleted {} {}", self.TABLE.__name__, record_id)
        return self._outbound(document)

    async def update(
        self, record_id: str, payload: Mapping[str, Any], actor: str
    ) -> None:
        """Apply a partial update stamped with ``actor``.

        The target is not looked up first: an unknown id matches no row and
        the call still succeeds.
        """
        values = self.UPDATE.model_validate(payload).model_dump(
            mode="json", exclude_unset=True
        )
        values.update(updated_by=actor, updated_at=datetime.now(UTC))
        statement = (
            update(self.TABLE).where(self.TABLE.id == record_id).values(**values)
        )
        async with self._db.session_scope() as session:
            connection = await session.connection()
            result = await connection.execute(statement)
        logger.info(
            "Updated {} {} ({} row(s) matched)",
            self.TABLE.__name__,
            record_id,
            result.rowcount,
        )
