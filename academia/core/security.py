"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from academia.core.config import settings

# Every bcrypt variant ($2a$, $2b$, $2y$) starts with this prefix.
BCRYPT_PREFIX = "$2"

# Length limits for passwords set through the API. Legacy stored passwords may be shorter.
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

# Claims every session token must carry.
REQUIRED_CLAIMS = ("id", "nombre", "rol", "correo", "exp")


def is_password_hash(stored: str | None) -> bool:
    """True if a stored password value is a bcrypt hash rather than legacy plaintext."""
    return bool(stored) and stored.startswith(BCRYPT_PREFIX)


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage with a fresh salt."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored bcrypt hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    nombre: str,
    rol: str,
    correo: str,
    now: datetime | None = None,
) -> str:
    """Create a signed session token carrying identity and role claims plus iat/exp."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "id": user_id,
        "nombre": nombre,
        "rol": rol,
        "correo": correo,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a session token; return its claims.
    Raises jwt.PyJWTError on a bad signature, an expired token or missing claims.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": list(REQUIRED_CLAIMS)},
    )
