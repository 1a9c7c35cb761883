"""Unit tests for the configuration context manager."""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.registry.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    JWTConfig,
)
from src.registry.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert isinstance(get_config(), ConfigData)
        assert context.config is get_config()

    def test_with_context_override_single_level(self):
        original_config = get_config()

        with with_context(ConfigData(jwt=JWTConfig(secret="override"))):
            assert get_config().jwt.secret == "override"
            # Untouched sections are inherited
            assert get_config().database == original_config.database

        assert get_config() is original_config

    def test_with_context_nested_overrides(self):
        original_config = get_config()

        with with_context(ConfigData(app=AppConfig(environment="production"))):
            with with_context(ConfigData(jwt=JWTConfig(secret="level2"))):
                assert get_config().jwt.secret == "level2"
                assert get_config().app.environment == "production"

            assert get_config().jwt.secret == original_config.jwt.secret

        assert get_config() is original_config

    def test_with_context_no_override(self):
        original_config = get_config()

        with with_context(None):
            assert get_config() is original_config

    def test_rejects_non_config_override(self):
        with pytest.raises(ValueError):
            with with_context({"jwt": {"secret": "x"}}):
                pass

    def test_exception_restores_context(self):
        original_config = get_config()

        with pytest.raises(RuntimeError):
            with with_context(ConfigData(database=DatabaseConfig(url="sqlite+aiosqlite://"))):
                raise RuntimeError("boom")

        assert get_config() is original_config

    def test_set_config_replaces_everything(self):
        def worker() -> str:
            set_config(ConfigData(jwt=JWTConfig(secret="replaced")))
            return get_config().jwt.secret

        # A thread gets its own copy of the context
        with ThreadPoolExecutor(max_workers=1) as executor:
            assert executor.submit(worker).result() == "replaced"

        assert get_config().jwt.secret != "replaced"


class TestAsyncContexts:
    @pytest.mark.asyncio
    async def test_async_context_isolation(self):
        async def async_worker(worker_id: int) -> str:
            with with_context(ConfigData(jwt=JWTConfig(secret=f"worker-{worker_id}"))):
                await asyncio.sleep(0.01)
                return get_config().jwt.secret

        results = await asyncio.gather(*(async_worker(i) for i in range(5)))

        assert results == [f"worker-{i}" for i in range(5)]


class TestThreadSafety:
    def test_thread_isolation(self):
        original_config = get_config()
        results = {}

        def thread_worker(worker_id: int) -> None:
            with with_context(ConfigData(jwt=JWTConfig(secret=f"thread-{worker_id}"))):
                results[worker_id] = get_config().jwt.secret

        with ThreadPoolExecutor(max_workers=5) as executor:
            for future in [executor.submit(thread_worker, i) for i in range(5)]:
                future.result()

        assert results == {i: f"thread-{i}" for i in range(5)}
        assert get_config() is original_config
