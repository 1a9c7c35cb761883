import time
from typing import Any

from authlib.jose import jwt


def sign_token(
    claims: dict[str, Any],
    secret: str,
    *,
    expires_in: int = 3600,
    algorithm: str = "HS256",
) -> str:
    """Sign a token outside the application services."""
    now = int(time.time())
    payload = {**claims, "iat": now, "exp": now + expires_in}
    token = jwt.encode({"alg": algorithm, "typ": "JWT"}, payload, secret)
    return token.decode("ascii")


def decode_token(token: str, secret: str) -> dict[str, Any]:
    return dict(jwt.decode(token, secret))


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
