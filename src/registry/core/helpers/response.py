"""Uniform response envelope."""

from typing import Any

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Shape of every JSON body returned by the API."""

    status: int = Field(description="Outcome code, mirrors the HTTP status")
    message: str = Field(description="Human-readable outcome")
    data: Any | None = Field(default=None, description="Payload, omitted when empty")


def response_structure(status: int, message: str, data: Any = None) -> dict[str, Any]:
    """Build the ``{status, message, data?}`` envelope."""
    body: dict[str, Any] = {"status": int(status), "message": message}
    if data is not None:
        body["data"] = data
    return body
