from __future__ import annotations

from collections.abc import AsyncGenerator, Callable, Generator

import pytest
from starlette.requests import Request

from src.registry.core.services import DbSessionService
from src.registry.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    JWTConfig,
    SecurityConfig,
)
from src.registry.runtime.context import get_config, with_context

_JWT_SECRET = "registry-test-secret"
_ENCRYPTION_KEY = "registry-test-encryption-key"

IN_MEMORY_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def jwt_secret() -> str:
    return _JWT_SECRET


@pytest.fixture
def encryption_key() -> str:
    return _ENCRYPTION_KEY


@pytest.fixture(autouse=True)
def test_config(jwt_secret: str, encryption_key: str) -> Generator[ConfigData]:
    """Run every test against known secrets in the test environment."""
    override = ConfigData(
        jwt=JWTConfig(secret=jwt_secret),
        security=SecurityConfig(encryption_key=encryption_key),
        app=AppConfig(environment="test"),
    )
    with with_context(override):
        yield get_config()


@pytest.fixture
async def database_service() -> AsyncGenerator[DbSessionService]:
    """A fresh in-memory database with every table created."""
    service = DbSessionService(IN_MEMORY_DATABASE_URL)
    await service.create_all()
    try:
        yield service
    finally:
        await service.dispose()


@pytest.fixture
def request_factory() -> Callable[[dict[str, str]], Request]:
    def _make_request(headers: dict[str, str]) -> Request:
        scope = {
            "type": "http",
            "headers": [
                (name.lower().encode("ascii"), value.encode("latin-1"))
                for name, value in headers.items()
            ],
            "method": "GET",
            "path": "/",
            "query_string": b"",
        }
        return Request(scope)

    return _make_request
