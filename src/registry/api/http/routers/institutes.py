"""Institute API router: create, list, fetch, soft-delete and update."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from loguru import logger
from pydantic import ValidationError
from starlette.responses import JSONResponse

from src.registry.api.http.deps import get_actor, get_institute_repository, verify_token
from src.registry.api.http.responses import (
    envelope,
    failure,
    invalid_fields,
    no_records,
)
from src.registry.core.constants import Status
from src.registry.core.helpers import (
    FiltersMeta,
    SelectMetas,
    get_object_with_valid_fields,
    get_select_string,
    schema_for,
    update_filters,
    validate_add_record,
    validate_update_record,
)
from src.registry.core.messages import Message
from src.registry.entities import InstituteFields, InstituteRepository
from src.registry.entities.core.repository import QueryOptions

router = APIRouter(
    prefix="/institutes", tags=["institutes"], dependencies=[Depends(verify_token)]
)

INSTITUTE_SCHEMA = schema_for(InstituteFields)
INSTITUTE_SELECT = get_select_string(SelectMetas.DEFAULT)


@router.put("", status_code=Status.CREATED, response_class=JSONResponse)
async def add_institute(
    payload: dict[str, Any] = Body(...),
    actor: str = Depends(get_actor),
    repository: InstituteRepository = Depends(get_institute_repository),
) -> JSONResponse:
    result = validate_add_record(payload, INSTITUTE_SCHEMA)
    if not result.is_valid:
        return envelope(
            Status.BAD_REQUEST,
            Message.MISSING_FIELDS,
            {"missingFields": result.missing_fields},
        )

    record = get_object_with_valid_fields(payload, result.valid_fields)
    try:
        institute = await repository.add(record, actor)
    except ValidationError as exc:
        return invalid_fields(exc)
    except Exception as exc:
        logger.exception("Failed to add institute")
        return failure(Message.ADD_INSTITUTE_ERROR, exc)
    return envelope(Status.CREATED, Message.ADD_INSTITUTE_SUCCESS, institute)


@router.get("", response_class=JSONResponse)
async def list_institutes(
    request: Request,
    repository: InstituteRepository = Depends(get_institute_repository),
) -> JSONResponse:
    """List institutes filtered by ``status`` and ``admin``."""
    filters = update_filters(dict(request.query_params), FiltersMeta.INSTITUTES)
    try:
        institutes = await repository.get_many(
            filters, QueryOptions(select=INSTITUTE_SELECT)
        )
    except Exception as exc:
        logger.exception("Failed to list institutes")
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    return envelope(Status.SUCCESS, Message.GET_ALL_INSTITUTES, institutes)


@router.get("/{institute_id}", response_class=JSONResponse)
async def get_institute(
    institute_id: str,
    repository: InstituteRepository = Depends(get_institute_repository),
) -> JSONResponse:
    if not institute_id.strip():
        return envelope(Status.BAD_REQUEST, Message.NO_UNIQUE_ID)
    try:
        institute = await repository.get_one(
            {"_id": institute_id}, QueryOptions(select=INSTITUTE_SELECT)
        )
    except Exception as exc:
        logger.exception("Failed to fetch institute {}", institute_id)
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    if institute is None:
        return no_records()
    return envelope(Status.SUCCESS, Message.SINGLE_INSTITUTE, institute)


@router.delete("/{institute_id}", response_class=JSONResponse)
async def delete_institute(
    institute_id: str,
    repository: InstituteRepository = Depends(get_institute_repository),
) -> JSONResponse:
    if not institute_id.strip():
        return envelope(Status.BAD_REQUEST, Message.NO_UNIQUE_ID)
    try:
        institute = await repository.soft_delete(institute_id)
    except Exception as exc:
        logger.exception("Failed to delete institute {}", institute_id)
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    if institute is None:
        return no_records()
    return envelope(Status.SUCCESS, Message.DELETE_INSTITUTE, institute)


@router.post("", response_class=JSONResponse)
async def update_institute(
    payload: dict[str, Any] = Body(...),
    actor: str = Depends(get_actor),
    repository: InstituteRepository = Depends(get_institute_repository),
) -> JSONResponse:
    result = validate_update_record(payload, INSTITUTE_SCHEMA)
    if not result.is_valid:
        return envelope(Status.BAD_REQUEST, Message.NO_UPDATE_FIELDS)
    institute_id = payload.get("_id")
    if not institute_id:
        return envelope(Status.BAD_REQUEST, Message.NO_UNIQUE_ID)

    record = get_object_with_valid_fields(payload, result.valid_fields)
    try:
        await repository.update(str(institute_id), record, actor)
    except ValidationError as exc:
        return invalid_fields(exc)
    except Exception as exc:
        logger.exception("Failed to update institute {}", institute_id)
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    return envelope(Status.SUCCESS, Message.INSTITUTE_UPDATE)
