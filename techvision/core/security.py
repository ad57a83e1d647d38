"""Password hashing, reset-token hashing, and bearer credential (JWT) creation/verification."""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from techvision.core.config import settings

# Bcrypt cost (rounds); each record gets its own salt from gensalt().
BCRYPT_ROUNDS = 12

# Input bounds for signup/login/reset validation.
NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MAX_LEN = 128

# 32 random bytes, hex-encoded.
RESET_TOKEN_BYTES = 32

ADMIN_CLAIM = "isAdmin"


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def generate_reset_token() -> str:
    """Return a new plaintext password-reset token. Only its hash is ever stored."""
    return secrets.token_hex(RESET_TOKEN_BYTES)


def hash_reset_token(token: str) -> str:
    """One-way hash used to store and look up reset tokens."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def create_access_token(sub: str | int, is_admin: bool) -> str:
    """Create a signed bearer credential with sub (user id), isAdmin, iat and exp."""
    now = datetime.now(UTC)
    expire = now + timedelta(days=settings.JWT_EXPIRE_DAYS)
    payload: dict[str, Any] = {
        "sub": str(sub),
        ADMIN_CLAIM: bool(is_admin),
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, isAdmin, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
