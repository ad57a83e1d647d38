"""Service-level error taxonomy. Each error carries the HTTP status it is rendered with."""

from fastapi import status


class ServiceError(Exception):
    """Base for errors raised by services; message is safe to show to clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class InvalidInputError(ServiceError):
    """Missing or ill-formed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(InvalidInputError):
    """Resource already exists (e.g. email already registered)."""


class AuthenticationError(ServiceError):
    """Bad or missing credentials. Message is deliberately generic."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthorizationError(ServiceError):
    """Authenticated but not allowed."""

    status_code = status.HTTP_403_FORBIDDEN


class InvalidOrExpiredTokenError(ServiceError):
    """Password reset token is wrong or expired; the two causes are not distinguished."""

    status_code = status.HTTP_400_BAD_REQUEST


class DependencyError(ServiceError):
    """Database, email or external API failure. Message does not expose internals."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
