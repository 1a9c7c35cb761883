"""Core services exports."""

from .database.db_session import DbSessionService
from .jwt import (
    JwtGeneratorService,
    JwtVerificationService,
    TokenPair,
    strip_registered_claims,
)

__all__ = [
    "DbSessionService",
    "JwtGeneratorService",
    "JwtVerificationService",
    "TokenPair",
    "strip_registered_claims",
]
