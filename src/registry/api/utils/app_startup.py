"""Loguru setup for the registry service.

Every record carries the service name, the environment and a request id
(``-`` outside a request). Records emitted through the standard ``logging``
module (uvicorn, SQLAlchemy, aiosqlite) are forwarded to loguru.
"""

import logging
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from src.registry.runtime.config.config_data import LoggingConfig
from src.registry.runtime.context import get_config

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[service]}</magenta> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# Third-party loggers and the level they are capped at
LIBRARY_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "aiosqlite": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.CRITICAL,
}


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records to loguru.

    uvicorn's access log and its error-level records are dropped: the request
    middleware logs both already.
    """

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == "uvicorn.access":
            return
        if record.name == "uvicorn.error" and record.levelno >= logging.ERROR:
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _sink_options(cfg: LoggingConfig, style: str, verbose: bool) -> dict[str, Any]:
    return {
        "level": cfg.level,
        "format": PLAIN_FORMAT,
        "serialize": style == "json",
        "backtrace": verbose,
        "diagnose": verbose,
    }


def _intercept_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True
    for name, level in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level)


def configure_logging() -> None:
    config = get_config()
    cfg = config.logging
    env = config.app.environment
    verbose = env != "production"

    logger.remove()
    logger.configure(
        extra={"request_id": "-", "service": cfg.service, "environment": env}
    )

    logger.add(
        sys.stderr,
        colorize=cfg.console_format == "plain",
        enqueue=False,
        **_sink_options(cfg, cfg.console_format, verbose),
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            rotation=f"{cfg.max_size_mb} MB",
            retention=cfg.backup_count,
            compression="zip",
            enqueue=True,
            **_sink_options(cfg, cfg.format, verbose),
        )

    _intercept_stdlib_logging()

    logger.bind(
        log_level=cfg.level,
        console_format=cfg.console_format,
        file_format=cfg.format,
        log_file=cfg.file,
    ).info("Logging configured for {} ({})", cfg.service, env)
