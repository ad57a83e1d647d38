"""Test environment: in-memory SQLite, fixed JWT secret, cheap bcrypt. Runs before any techvision import."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "dev"
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-enough-length-for-hs256")
os.environ["SMTP_HOST"] = ""
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("CONTENT_DEFAULTS_FILE", None)

from techvision.core import security  # noqa: E402

security.BCRYPT_ROUNDS = 4
