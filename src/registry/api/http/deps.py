"""FastAPI dependency implementations."""

from typing import Any

from fastapi import Depends, HTTPException, Request

from src.registry.api.http.app_data import ApplicationDependencies
from src.registry.core.constants import SYSTEM_USER, Status
from src.registry.core.messages import Message
from src.registry.core.security import PasswordCipher
from src.registry.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
)
from src.registry.entities import InstituteRepository, UserRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    return get_app_dependencies(request).database_service


def get_jwt_generation_service(request: Request) -> JwtGeneratorService:
    """Get the JWT generation service instance."""
    return get_app_dependencies(request).jwt_generation_service


def get_jwt_verify_service(request: Request) -> JwtVerificationService:
    """Get the JWT verification service instance."""
    return get_app_dependencies(request).jwt_verify_service


def get_password_cipher(request: Request) -> PasswordCipher:
    return get_app_dependencies(request).password_cipher


def get_user_repository(request: Request) -> UserRepository:
    return get_app_dependencies(request).user_repository


def get_institute_repository(request: Request) -> InstituteRepository:
    return get_app_dependencies(request).institute_repository


def _bearer_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise HTTPException(status_code=Status.UNAUTHORIZED, detail=Message.UNAUTHORIZED)
    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=Status.UNAUTHORIZED, detail=Message.UNAUTHORIZED)
    return token.strip()


async def verify_token(
    request: Request,
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
) -> dict[str, Any]:
    """Authenticate the request using a Bearer token issued at login.

    The verified claims are stored on ``request.state.claims`` and returned.
    """
    claims = jwt_verify.verify_jwt(_bearer_token(request))
    request.state.claims = claims
    return claims


async def get_actor(claims: dict[str, Any] = Depends(verify_token)) -> str:
    """Identity stamped on records written by the authenticated user."""
    return claims.get("email") or SYSTEM_USER
