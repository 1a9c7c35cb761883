"""Health check endpoints router for monitoring service availability."""

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.registry.api.http.deps import get_database_service
from src.registry.api.http.responses import envelope
from src.registry.core.constants import Status
from src.registry.core.services import DbSessionService
from src.registry.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_class=JSONResponse)
async def health() -> JSONResponse:
    """Liveness probe: answers as long as the process is running."""
    return envelope(Status.SUCCESS, "healthy", {"service": "api"})


@router.get("/ready", response_class=JSONResponse)
async def readiness(
    database: DbSessionService = Depends(get_database_service),
) -> JSONResponse:
    """Readiness probe: 503 until the database answers."""
    config = get_config()
    db_healthy = await database.health_check()
    checks = {
        "database": {
            "status": "healthy" if db_healthy else "unhealthy",
            "type": "sqlite" if config.database.is_sqlite else "sql",
        }
    }
    data = {"environment": config.app.environment, "checks": checks}
    if not db_healthy:
        return envelope(Status.SERVICE_UNAVAILABLE, "not_ready", data)
    return envelope(Status.SUCCESS, "ready", data)
