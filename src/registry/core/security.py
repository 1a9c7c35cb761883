"""Reversible credential encryption.

Passwords are stored as Fernet ciphertext and verified by decrypting the
stored value and comparing it with the submitted text. The Fernet key is
derived with PBKDF2-HMAC-SHA256 from the configured ``security.encryption_key``
passphrase and ``security.encryption_salt``, so both must stay the same for
as long as stored passwords need to verify.
"""

import base64
from functools import lru_cache

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from loguru import logger

from src.registry.runtime.context import get_config

PBKDF2_ITERATIONS = 600_000


@lru_cache(maxsize=8)
def derive_fernet_key(passphrase: str, salt: str) -> bytes:
    """Stretch a passphrase into a url-safe 32-byte Fernet key.

    Deterministic for a given (passphrase, salt) pair; results are memoized
    because each derivation runs the full iteration count.
    """
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt.encode("utf-8"),
        iterations=PBKDF2_ITERATIONS,
    )
    return base64.urlsafe_b64encode(kdf.derive(passphrase.encode("utf-8")))


class PasswordCipher:
    """Encrypts and verifies stored passwords."""

    def __init__(self, passphrase: str | None = None, salt: str | None = None):
        security = get_config().security
        if passphrase is None:
            passphrase = security.encryption_key
        if salt is None:
            salt = security.encryption_salt
        if not passphrase:
            raise ValueError("security.encryption_key is not configured")
        if not salt:
            raise ValueError("security.encryption_salt is not configured")
        self._fernet = Fernet(derive_fernet_key(passphrase, salt))

    def encrypt_string(self, text: str) -> str:
        return self._fernet.encrypt(text.encode("utf-8")).decode("ascii")

    def decrypt_string(self, encrypted_text: str) -> str:
        """Decrypt ``encrypted_text``.

        Raises:
            InvalidToken: the ciphertext is malformed or was produced with another key
        """
        return self._fernet.decrypt(encrypted_text.encode("ascii")).decode("utf-8")

    def match_text(self, normal_text: str, encrypted_text: str) -> bool:
        """Whether ``encrypted_text`` decrypts to ``normal_text``."""
        try:
            decrypted = self.decrypt_string(encrypted_text)
        except (InvalidToken, UnicodeError, ValueError):
            logger.warning("Stored password could not be decrypted")
            return False
        return normal_text == decrypted
