"""
Authorization gate.

A route declares the guards it needs with require(...). The bearer credential
is decoded once, then each guard runs in order against the claims and the
first one that raises stops the pipeline. Claims come from the signed token
only; nothing is read from a request body or the database.
"""

from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from techvision.core.errors import AuthenticationError, AuthorizationError
from techvision.core.security import ADMIN_CLAIM, decode_access_token
from techvision.schemas.auth import CurrentUser

Guard = Callable[[CurrentUser | None], None]

security = HTTPBearer(auto_error=False)


def read_claims(credentials: HTTPAuthorizationCredentials | None) -> CurrentUser | None:
    """Verify the bearer credential. None when absent; raises 401 when present but invalid."""
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError as e:
        raise AuthenticationError("Invalid or expired token", status.HTTP_401_UNAUTHORIZED) from e
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        raise AuthenticationError("Invalid token payload", status.HTTP_401_UNAUTHORIZED) from e
    return CurrentUser(id=user_id, isAdmin=payload.get(ADMIN_CLAIM) is True)


def authenticated(user: CurrentUser | None) -> None:
    if user is None:
        raise AuthenticationError("Not authenticated", status.HTTP_401_UNAUTHORIZED)


def admin(user: CurrentUser | None) -> None:
    if user is None or not user.isAdmin:
        raise AuthorizationError("Admin access required")


def require(*guards: Guard) -> Callable[..., CurrentUser | None]:
    """Build a dependency that runs guards in sequence and returns the verified claims."""

    def dependency(
        credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    ) -> CurrentUser | None:
        user = read_claims(credentials)
        for guard in guards:
            guard(user)
        return user

    return dependency


AuthenticatedUser = Annotated[CurrentUser, Depends(require(authenticated))]
AdminUser = Annotated[CurrentUser, Depends(require(authenticated, admin))]
