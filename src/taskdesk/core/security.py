"""Password hashing helpers."""

from __future__ import annotations

from passlib.context import CryptContext

# bcrypt only reads the first 72 bytes of a secret.
MAX_PASSWORD_BYTES = 72

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__truncate_error=True)


def password_fits(password: str) -> bool:
    """Return ``True`` when ``password`` is short enough for bcrypt to use in full."""

    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def get_password_hash(password: str) -> str:
    """Return a hashed representation of ``password``.

    Raises ``passlib.exc.PasswordSizeError`` for secrets bcrypt would truncate.
    """

    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hashed counterpart.

    Secrets longer than bcrypt's limit never match; otherwise two passwords
    sharing their first 72 bytes would both verify.
    """

    if not password_fits(plain_password):
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)


__all__ = ["MAX_PASSWORD_BYTES", "get_password_hash", "password_fits", "pwd_context", "verify_password"]
