"""Password hashing and admin token helpers."""
from __future__ import annotations

from datetime import timedelta

import bcrypt
from jose import JWTError, jwt

from microblog.core.settings import settings
from microblog.db.time import utcnow

ADMIN_ROLE = "admin"
# bcrypt only consumes the first 72 bytes of a password.
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a bcrypt hash of ``password`` suitable for storage."""
    salt = bcrypt.gensalt(rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Return True if ``password`` matches the stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("ascii"))
    except ValueError:
        # Malformed stored hash.
        return False


def create_access_token(username: str) -> str:
    """Create a signed admin token for ``username``."""
    expire = utcnow() + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode: dict[str, object] = {"sub": username, "role": ADMIN_ROLE, "exp": expire}
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def is_admin_token(token: str) -> bool:
    """Return True if ``token`` is an unexpired admin token signed by this server."""
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return False
    return payload.get("role") == ADMIN_ROLE and bool(payload.get("sub"))
