"""Bearer token issuance and verification."""

from .jwt_gen import REGISTERED_CLAIMS, JwtGeneratorService, TokenPair
from .jwt_verify import JwtVerificationService, strip_registered_claims

__all__ = [
    "REGISTERED_CLAIMS",
    "JwtGeneratorService",
    "JwtVerificationService",
    "TokenPair",
    "strip_registered_claims",
]
