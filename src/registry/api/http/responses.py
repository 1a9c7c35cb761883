"""JSON responses wrapping the uniform ``{status, message, data?}`` envelope."""

from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError
from starlette.responses import JSONResponse

from src.registry.core.constants import Status
from src.registry.core.helpers import response_structure
from src.registry.core.messages import Message
from src.registry.runtime.context import get_config


def envelope(
    status: int,
    message: str,
    data: Any = None,
    *,
    http_status: int | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Answer with the envelope; the HTTP status defaults to ``status``."""
    return JSONResponse(
        status_code=http_status or int(status),
        content=jsonable_encoder(response_structure(status, message, data)),
        headers=headers,
    )


def no_records() -> JSONResponse:
    """Empty lookups still answer HTTP 200, flagged in the envelope status."""
    return envelope(Status.NO_RECORDS, Message.NO_RECORDS, http_status=Status.SUCCESS)


def error_data(exc: BaseException) -> dict[str, str] | None:
    """Error detail for a 500 envelope, withheld in production."""
    if get_config().app.environment == "production":
        return None
    return {"error": str(exc) or type(exc).__name__}


def failure(message: str, exc: BaseException) -> JSONResponse:
    return envelope(Status.FAILURE, message, error_data(exc))


def invalid_fields(exc: ValidationError) -> JSONResponse:
    """400 envelope listing the field values pydantic rejected."""
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return envelope(Status.BAD_REQUEST, Message.INVALID_FIELDS, {"errors": errors})
