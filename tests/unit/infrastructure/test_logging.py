"""Unit tests for the loguru setup."""

import json
import logging
from pathlib import Path

from loguru import logger

from src.registry.api.utils.app_startup import PLAIN_FORMAT, configure_logging
from src.registry.runtime.config.config_data import ConfigData, LoggingConfig
from src.registry.runtime.context import with_context


def _records(path: Path) -> list[dict]:
    return [json.loads(line)["record"] for line in path.read_text().splitlines()]


class TestConfigureLogging:
    def test_json_file_sink_carries_service_context(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "registry.log"
        override = ConfigData(
            logging=LoggingConfig(service="registry-test", format="json", file=str(log_file))
        )

        with with_context(override):
            configure_logging()
            logger.info("hello")
            with logger.contextualize(request_id="req-1"):
                logger.info("inside request")
            logger.remove()  # flushes the enqueued file sink

        records = {record["message"]: record for record in _records(log_file)}
        assert records["hello"]["extra"]["service"] == "registry-test"
        assert records["hello"]["extra"]["environment"] == "test"
        assert records["hello"]["extra"]["request_id"] == "-"
        assert records["inside request"]["extra"]["request_id"] == "req-1"

    def test_stdlib_records_are_forwarded(self, tmp_path: Path):
        log_file = tmp_path / "registry.log"

        with with_context(ConfigData(logging=LoggingConfig(file=str(log_file)))):
            configure_logging()
            logging.getLogger("registry.thirdparty").warning("from stdlib")
            logging.getLogger("uvicorn.access").warning("dropped access line")
            logger.remove()

        records = _records(log_file)
        forwarded = [r for r in records if r["message"] == "from stdlib"]
        assert forwarded[0]["extra"]["logger_name"] == "registry.thirdparty"
        assert not [r for r in records if r["message"] == "dropped access line"]

    def test_quiets_library_loggers(self):
        configure_logging()

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("aiosqlite").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").level == logging.CRITICAL


def test_plain_format_shows_service_and_request_id():
    assert "{extra[service]}" in PLAIN_FORMAT
    assert "{extra[request_id]}" in PLAIN_FORMAT
