"""Signup, login, password reset, and the authenticated whoami route."""

from fastapi import APIRouter, status

from techvision.api.deps import DbSession
from techvision.api.guards import AuthenticatedUser
from techvision.core.config import get_settings
from techvision.schemas.auth import (
    CurrentUser,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ResetPasswordRequest,
    SignupRequest,
    UserSummary,
)
from techvision.services import auth as auth_service

router = APIRouter()


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def signup(body: SignupRequest, db: DbSession) -> MessageResponse:
    auth_service.signup(db, name=body.name, email=body.email, password=body.password)
    return MessageResponse(message="User created successfully")


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, db: DbSession) -> LoginResponse:
    """
    Exchange email and password for a bearer credential.
    Send it as: Authorization: Bearer <token>
    """
    user, token = auth_service.login(db, email=body.email, password=body.password)
    return LoginResponse(
        token=token,
        user=UserSummary(id=user.id, name=user.name, email=user.email, isAdmin=user.is_admin),
    )


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(body: ForgotPasswordRequest, db: DbSession) -> MessageResponse:
    """Always answers with the same message so account existence is not revealed."""
    auth_service.request_password_reset(db, body.email, get_settings())
    return MessageResponse(message=auth_service.RESET_REQUESTED)


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(body: ResetPasswordRequest, db: DbSession) -> MessageResponse:
    """Set a new password with a single-use reset token."""
    auth_service.reset_password(db, body.token, body.password)
    return MessageResponse(message="Password has been reset successfully.")


@router.get("/me", response_model=CurrentUser)
def me(user: AuthenticatedUser) -> CurrentUser:
    return user
