"""Login and token refresh endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from loguru import logger
from starlette.responses import JSONResponse

from src.registry.api.http.deps import (
    get_jwt_generation_service,
    get_password_cipher,
    get_user_repository,
    verify_token,
)
from src.registry.api.http.responses import envelope, failure, no_records
from src.registry.core.constants import Status
from src.registry.core.helpers import SelectMetas, get_clean_object
from src.registry.core.messages import Message
from src.registry.core.security import PasswordCipher
from src.registry.core.services import JwtGeneratorService, strip_registered_claims
from src.registry.entities import UserRepository
from src.registry.entities.core.user.entity import normalize_email

router = APIRouter(tags=["auth"])


@router.post("/login", response_class=JSONResponse)
async def login(
    payload: dict[str, Any] = Body(...),
    repository: UserRepository = Depends(get_user_repository),
    cipher: PasswordCipher = Depends(get_password_cipher),
    jwt_gen: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> JSONResponse:
    """Exchange email and password for an access/refresh token pair.

    The tokens carry the user document without the password and the audit
    fields.
    """
    email = payload.get("email")
    password = payload.get("password")
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        return envelope(Status.UNAUTHORIZED, Message.UNAUTHORIZED)

    try:
        # Unprojected, so the stored password is included
        user = await repository.get_one({"email": normalize_email(email)})
        if user is None:
            return no_records()
        if not cipher.match_text(password, user.get("password") or ""):
            logger.info("Login rejected for {}", user.get("email"))
            return envelope(Status.UNAUTHORIZED, Message.NOT_AUTHENTICATED)

        claims = get_clean_object(user, SelectMetas.DEFAULT, SelectMetas.USERS)
        tokens = jwt_gen.generate_token_pair(claims)
    except Exception as exc:
        logger.exception("Login failed")
        return failure(Message.INTERNAL_SERVER_ERROR, exc)

    logger.info("User {} authenticated", claims.get("email"))
    return envelope(Status.SUCCESS, Message.AUTHENTICATED, tokens.model_dump(by_alias=True))


@router.post("/refreshToken", response_class=JSONResponse)
async def refresh_token(
    claims: dict[str, Any] = Depends(verify_token),
    jwt_gen: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> JSONResponse:
    """Reissue both tokens for the claims of a still-valid token."""
    try:
        tokens = jwt_gen.generate_token_pair(strip_registered_claims(claims))
    except Exception as exc:
        logger.exception("Token refresh failed")
        return failure(Message.INTERNAL_SERVER_ERROR, exc)
    return envelope(Status.SUCCESS, Message.AUTHENTICATED, tokens.model_dump(by_alias=True))
