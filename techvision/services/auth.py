"""Auth: signup, login, and the password reset lifecycle (request, then consume)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from techvision.core.errors import (
    AuthenticationError,
    ConflictError,
    DependencyError,
    InvalidOrExpiredTokenError,
)
from techvision.core.security import (
    create_access_token,
    generate_reset_token,
    hash_password,
    hash_reset_token,
    verify_password,
)
from techvision.models.user import User
from techvision.services.email import EmailDeliveryError, send_password_reset_email

if TYPE_CHECKING:
    from techvision.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
RESET_REQUESTED = "If an account with that email exists, a reset link has been sent."
RESET_EMAIL_FAILED = "Error sending password reset email."
RESET_TOKEN_INVALID = "Password reset token is invalid or has expired."


def signup(db: Session, name: str, email: str, password: str) -> User:
    """Create a non-admin user. Raises ConflictError if the email is already registered."""
    if db.query(User).filter(User.email == email).first() is not None:
        raise ConflictError("User already exists")
    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        is_admin=False,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent signup for the same email.
        db.rollback()
        raise ConflictError("User already exists") from e
    db.refresh(user)
    logger.info("User signed up", extra={"user_id": user.id})
    return user


def login(db: Session, email: str, password: str) -> tuple[User, str]:
    """Authenticate and return (user, bearer token). Unknown email and wrong password fail identically."""
    user = db.query(User).filter(User.email == email).first()
    if user is None or not verify_password(password, user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS)
    token = create_access_token(sub=user.id, is_admin=user.is_admin)
    return user, token


def request_password_reset(
    db: Session,
    email: str,
    settings: Settings,
    now: datetime | None = None,
) -> None:
    """
    Start a pending reset for the user with this email, if any, and email the plaintext token.

    Any earlier pending reset is overwritten. When delivery fails the pending
    reset is cleared again and DependencyError is raised. Unknown emails return
    silently so callers can answer with the same message either way.
    """
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        return

    now = now or datetime.now(UTC)
    token = generate_reset_token()
    token_hash = hash_reset_token(token)
    user.password_reset_token = token_hash
    user.password_reset_expires = now + timedelta(minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES)
    db.commit()

    try:
        send_password_reset_email(user.email, user.name, token, settings)
    except EmailDeliveryError as e:
        logger.error(
            "Password reset email failed",
            extra={"user_id": user.id, "reason": str(e.cause or e)[:500]},
        )
        # Only undo our own pending reset; a newer request may have replaced it meanwhile.
        db.query(User).filter(
            User.id == user.id,
            User.password_reset_token == token_hash,
        ).update(
            {User.password_reset_token: None, User.password_reset_expires: None},
            synchronize_session=False,
        )
        db.commit()
        raise DependencyError(RESET_EMAIL_FAILED) from e
    logger.info("Password reset requested", extra={"user_id": user.id})


def reset_password(
    db: Session,
    token: str,
    new_password: str,
    now: datetime | None = None,
) -> User:
    """
    Consume a reset token and set a new password.

    Raises InvalidOrExpiredTokenError for a wrong, already used, or expired
    token. The update is conditional on the stored hash so the token can only
    succeed once even under concurrent use.
    """
    now = now or datetime.now(UTC)
    token_hash = hash_reset_token(token)
    user = (
        db.query(User)
        .filter(
            User.password_reset_token == token_hash,
            User.password_reset_expires > now,
        )
        .first()
    )
    if user is None:
        raise InvalidOrExpiredTokenError(RESET_TOKEN_INVALID)

    updated = (
        db.query(User)
        .filter(User.id == user.id, User.password_reset_token == token_hash)
        .update(
            {
                User.password_hash: hash_password(new_password),
                User.password_reset_token: None,
                User.password_reset_expires: None,
            },
            synchronize_session=False,
        )
    )
    if updated != 1:
        db.rollback()
        raise InvalidOrExpiredTokenError(RESET_TOKEN_INVALID)
    db.commit()
    db.refresh(user)
    logger.info("Password reset completed", extra={"user_id": user.id})
    return user
