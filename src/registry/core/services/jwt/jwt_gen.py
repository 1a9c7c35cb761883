import time
from typing import Any

from authlib.common.security import generate_token
from authlib.jose import JoseError, jwt
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from src.registry.runtime.config.config_data import ConfigData
from src.registry.runtime.context import get_config

# Claims owned by the token itself rather than by the user it describes
REGISTERED_CLAIMS = frozenset({"iat", "exp", "nbf", "jti"})


class TokenPair(BaseModel):
    """Access and refresh tokens returned by login and refresh."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")
    refresh_token: str = Field(alias="refreshToken")


class JwtGeneratorService:
    """Service for signing the API's own bearer tokens."""

    def generate_jwt(
        self,
        claims: dict[str, Any],
        expires_in_seconds: int,
        secret: str | None = None,
        algorithm: str | None = None,
    ) -> str:
        """Sign ``claims`` into a JWT valid for ``expires_in_seconds``.

        Args:
            claims: User claims to embed; registered claims in it are replaced
            expires_in_seconds: Token lifetime in seconds
            secret: Signing secret, defaults to ``jwt.secret`` from config
            algorithm: HMAC algorithm, defaults to ``jwt.algorithm`` from config

        Returns:
            Signed JWT token string

        Raises:
            ValueError: If no signing secret is configured
            JoseError: If encoding fails
        """
        config: ConfigData = get_config()
        secret = secret or config.jwt.secret
        algorithm = algorithm or config.jwt.algorithm
        if not secret:
            raise ValueError("JWT signing secret not configured")

        now = int(time.time())
        payload = {k: v for k, v in claims.items() if k not in REGISTERED_CLAIMS}
        payload.update(
            {
                "iat": now,
                "exp": now + expires_in_seconds,
                "jti": generate_token(16),
            }
        )

        header = {"alg": algorithm, "typ": "JWT"}
        try:
            token = jwt.encode(header, payload, secret)
        except JoseError:
            logger.exception("JWT encoding failed")
            raise
        return token.decode() if isinstance(token, bytes) else token

    def generate_token_pair(self, claims: dict[str, Any]) -> TokenPair:
        """Issue a short-lived access token and a long-lived refresh token."""
        cfg = get_config().jwt
        return TokenPair(
            access_token=self.generate_jwt(claims, cfg.access_token_expires_seconds),
            refresh_token=self.generate_jwt(claims, cfg.refresh_token_expires_seconds),
        )
