"""JWT verification service."""

from typing import Any

from authlib.jose import JoseError, jwt
from fastapi import HTTPException
from loguru import logger

from src.registry.core.constants import Status
from src.registry.core.messages import Message
from src.registry.core.services.jwt.jwt_gen import REGISTERED_CLAIMS
from src.registry.runtime.context import get_config


def strip_registered_claims(claims: dict[str, Any]) -> dict[str, Any]:
    """Drop issue/expiry bookkeeping so the claims can be signed again."""
    return {k: v for k, v in claims.items() if k not in REGISTERED_CLAIMS}


class JwtVerificationService:
    def verify_jwt(self, token: str, *, key: str | None = None) -> dict[str, Any]:
        """Verify signature and expiry of a token issued by this service.

        Returns:
            The token's claims as a plain dict

        Raises:
            HTTPException: 401 for any malformed, forged or expired token
        """
        cfg = get_config()
        verification_key = key or cfg.jwt.secret
        if not verification_key:
            raise HTTPException(status_code=Status.FAILURE, detail="JWT signing secret not configured")

        try:
            claims = jwt.decode(
                token,
                verification_key,
                claims_options={"exp": {"essential": True}},
            )
            claims.validate(leeway=cfg.jwt.clock_skew)
        except (JoseError, ValueError) as exc:
            logger.debug(f"JWT rejected: {exc}")
            raise HTTPException(status_code=Status.UNAUTHORIZED, detail=Message.UNAUTHORIZED) from exc

        if claims.header.get("alg") != cfg.jwt.algorithm:
            raise HTTPException(status_code=Status.UNAUTHORIZED, detail=Message.UNAUTHORIZED)

        return dict(claims)
