"""Database engine and session factory used across the application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.registry.runtime.context import get_config


class DbSessionService:
    def __init__(self, connection_string: str | None = None):
        """Initialize the shared async engine.

        Args:
            connection_string: Overrides ``database.url`` from config
        """
        main_config = get_config()
        db_config = main_config.database
        url = connection_string or db_config.url

        logger.info("Configuring database engine for environment: {}", main_config.app.environment)
        self._engine: AsyncEngine = create_async_engine(url, **self._engine_kwargs(url))

    def _engine_kwargs(self, url: str) -> dict[str, Any]:
        db_config = get_config().database
        kwargs: dict[str, Any] = {"echo": db_config.echo}

        if url.startswith("sqlite"):
            kwargs["connect_args"] = {"check_same_thread": False, "timeout": 20}
            if ":memory:" in url or url.rstrip("/").endswith("sqlite+aiosqlite:"):
                # Every session must see the same in-memory database
                kwargs["poolclass"] = StaticPool
            if get_config().app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
        else:
            kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )
        return kwargs

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def create_all(self) -> None:
        """Create all database tables."""
        from src.registry.entities import InstituteTable, UserTable  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized with tables.")

    def get_session(self) -> AsyncSession:
        """Return a new session bound to the shared engine."""
        return AsyncSession(self._engine, expire_on_commit=False, autoflush=True)

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """Commit on success, roll back and re-raise on failure."""
        db = self.get_session()
        try:
            yield db
            await db.commit()
        except Exception as e:
            await db.rollback()
            logger.bind(error_type=type(e).__name__).error(
                "Database transaction failed: {}", e
            )
            raise
        finally:
            await db.close()

    async def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            async with self._engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False

    async def dispose(self) -> None:
        await self._engine.dispose()
