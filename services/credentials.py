"""Password hashing helpers."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash


DEFAULT_HASH_METHOD = "scrypt"
DEFAULT_SALT_LENGTH = 16


class CredentialHasher:
    """Salted, work-factor hashing of secrets.

    The method string carries the work factor and is shared by every call
    site in a deployment, e.g. ``"scrypt:32768:8:1"`` or
    ``"pbkdf2:sha256:600000"``. Each call to :meth:`hash` draws a fresh salt,
    so hashing the same secret twice yields different strings.
    """

    def __init__(
        self,
        method: str = DEFAULT_HASH_METHOD,
        salt_length: int = DEFAULT_SALT_LENGTH,
    ):
        self.method = method
        self.salt_length = salt_length

    def hash(self, secret: str) -> str:
        """Return a salted hash of ``secret``."""

        return generate_password_hash(
            secret, method=self.method, salt_length=self.salt_length
        )

    def verify(self, secret: str, hashed: str | None) -> bool:
        """Return True if ``secret`` produced ``hashed``.

        Malformed or foreign hash formats verify as False instead of raising.
        """

        if not hashed or not isinstance(hashed, str):
            return False
        try:
            return check_password_hash(hashed, secret)
        except (ValueError, TypeError):
            return False
