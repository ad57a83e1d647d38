"""Idempotent admin seeding from operator-supplied credentials."""

import logging
from typing import Literal

from sqlalchemy.orm import Session

from techvision.core.security import hash_password
from techvision.models.user import User

logger = logging.getLogger(__name__)

SeedOutcome = Literal["created", "promoted", "unchanged"]

ADMIN_DISPLAY_NAME = "Admin"


def ensure_admin(
    db: Session,
    email: str,
    password: str,
    name: str = ADMIN_DISPLAY_NAME,
) -> SeedOutcome:
    """
    Make sure a user with this email exists and is an admin.

    Creates the account when missing, promotes an existing non-admin, and
    leaves an existing admin untouched. An existing account keeps its password.
    """
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        db.add(
            User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                is_admin=True,
            )
        )
        db.commit()
        logger.info("Admin user created", extra={"admin_email": email})
        return "created"
    if not user.is_admin:
        user.is_admin = True
        db.commit()
        logger.info("Existing user promoted to admin", extra={"admin_email": email})
        return "promoted"
    logger.info("Admin user already exists", extra={"admin_email": email})
    return "unchanged"
