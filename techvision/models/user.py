"""ORM model for site users (auth, admin flag and pending password reset)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, false

from techvision.models.base import Base, created_at_column, updated_at_column


class User(Base):
    """
    Site account.

    password_reset_token holds the SHA-256 hex of the emailed token, never the token itself.
    It and password_reset_expires are both set (pending reset) or both NULL.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
    password_reset_token = Column(String(64), nullable=True, index=True)
    password_reset_expires = Column(DateTime(timezone=True), nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()
