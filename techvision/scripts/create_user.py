"""
Create a site user, or create/promote an admin. Run from project root:
  python -m techvision.scripts.create_user NAME EMAIL PASSWORD [--admin]
Example:
  python -m techvision.scripts.create_user "Jane Doe" jane@example.com your-secure-password --admin

With --admin an existing account is promoted instead of rejected.
"""
import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from techvision.core.database import SessionLocal
from techvision.core.errors import ConflictError
from techvision.core.security import EMAIL_MAX_LEN, NAME_MAX_LEN, PASSWORD_MAX_LEN
from techvision.services.admin_seed import ensure_admin
from techvision.services.auth import signup

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a TechVision user (admins cannot sign up through the API).")
    parser.add_argument("name", help=f"Display name (1-{NAME_MAX_LEN} chars)")
    parser.add_argument("email", help=f"Email (1-{EMAIL_MAX_LEN} chars, case-sensitive)")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--admin", action="store_true", help="Create as admin, or promote an existing user")
    args = parser.parse_args(argv)

    name = args.name.strip()
    email = args.email.strip()
    if not name or len(name) > NAME_MAX_LEN:
        print("Invalid name length.", file=sys.stderr)
        return 1
    if not email or len(email) > EMAIL_MAX_LEN:
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        if args.admin:
            outcome = ensure_admin(db, email, args.password, name=name)
            print(f"Admin '{email}': {outcome}.")
            return 0
        signup(db, name=name, email=email, password=args.password)
        print(f"Created user '{email}'.")
        return 0
    except ConflictError:
        print(f"User '{email}' already exists.", file=sys.stderr)
        return 1
    except SQLAlchemyError as e:
        print(f"Database error: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
