"""User API router: create, list, fetch, soft-delete and update."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from loguru import logger
from pydantic import ValidationError
from starlette.responses import JSONResponse

from src.registry.api.http.deps import (
    get_actor,
    get_password_cipher,
    get_user_repository,
    verify_token,
)
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
from src.registry.core.security import PasswordCipher
from src.registry.entities import UserFields, UserRepository
from src.registry.entities.core.repository import QueryOptions

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(verify_token)])

USER_SCHEMA = schema_for(UserFields)
USER_SELECT = get_select_string(SelectMetas.DEFAULT, SelectMetas.USERS)


def _encrypt_password(record: dict[str, Any], cipher: PasswordCipher) -> None:
    password = record.get("password")
    if isinstance(password, str):
        record["password"] = cipher.encrypt_string(password)


@router.put("", status_code=Status.CREATED, response_class=JSONResponse)
async def add_user(
    payload: dict[str, Any] = Body(...),
    actor: str = Depends(get_actor),
    repository: UserRepository = Depends(get_user_repository),
    cipher: PasswordCipher = Depends(get_password_cipher),
) -> JSONResponse:
    """Create a user; the password is stored encrypted."""
    result = validate_add_record(payload, USER_SCHEMA)
    if not result.is_valid:
        return envelope(
            Status.BAD_REQUEST,
            Message.MISSING_FIELDS,
            {"missingFields": result.missing_fields},
        )

    record = get_object_with_valid_fields(payload, result.valid_fields)
    _encrypt_password(record, cipher)
    try:
        user = await repository.add(record, actor)
    except ValidationError as exc:
        return invalid_fields(exc)
    except Exception as exc:
        logger.exception("Failed to add user")
        return failure(Message.ADD_USER_ERROR, exc)
    return envelope(Status.CREATED, Message.ADD_USER_SUCCESS, user)


@router.get("", response_class=JSONResponse)
async def list_users(
    request: Request,
    repository: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    """List users filtered by ``status``, ``type`` and ``gender``."""
    filters = update_filters(dict(request.query_params), FiltersMeta.USERS)
    try:
        users = await repository.get_many(filters, QueryOptions(select=USER_SELECT))
    except Exception as exc:
        logger.exception("Failed to list users")
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    return envelope(Status.SUCCESS, Message.GET_ALL_USERS, users)


@router.get("/{user_id}", response_class=JSONResponse)
async def get_user(
    user_id: str,
    repository: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    if not user_id.strip():
        return envelope(Status.BAD_REQUEST, Message.NO_UNIQUE_ID)
    try:
        user = await repository.get_one({"_id": user_id}, QueryOptions(select=USER_SELECT))
    except Exception as exc:
        logger.exception("Failed to fetch user {}", user_id)
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    if user is None:
        return no_records()
    return envelope(Status.SUCCESS, Message.SINGLE_USER, user)


@router.delete("/{user_id}", response_class=JSONResponse)
async def delete_user(
    user_id: str,
    repository: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    """Soft-delete a user by marking it inactive."""
    if not user_id.strip():
        return envelope(Status.BAD_REQUEST, Message.NO_UNIQUE_ID)
    try:
        user = await repository.soft_delete(user_id)
    except Exception as exc:
        logger.exception("Failed to delete user {}", user_id)
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    if user is None:
        return no_records()
    return envelope(Status.SUCCESS, Message.DELETE_USER, user)


@router.post("", response_class=JSONResponse)
async def update_user(
    payload: dict[str, Any] = Body(...),
    actor: str = Depends(get_actor),
    repository: UserRepository = Depends(get_user_repository),
    cipher: PasswordCipher = Depends(get_password_cipher),
) -> JSONResponse:
    """Apply a partial update to the user named by ``_id`` in the body."""
    result = validate_update_record(payload, USER_SCHEMA)
    if not result.is_valid:
        return envelope(Status.BAD_REQUEST, Message.NO_UPDATE_FIELDS)
    user_id = payload.get("_id")
    if not user_id:
        return envelope(Status.BAD_REQUEST, Message.NO_UNIQUE_ID)

    record = get_object_with_valid_fields(payload, result.valid_fields)
    _encrypt_password(record, cipher)
    try:
        await repository.update(str(user_id), record, actor)
    except ValidationError as exc:
        return invalid_fields(exc)
    except Exception as exc:
        logger.exception("Failed to update user {}", user_id)
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    return envelope(Status.SUCCESS, Message.USER_UPDATE)
