"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from techvision.core.security import EMAIL_MAX_LEN, NAME_MAX_LEN, PASSWORD_MAX_LEN


class SignupRequest(BaseModel):
    """New account details. All fields required and non-empty."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class ForgotPasswordRequest(BaseModel):
    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN)


class ResetPasswordRequest(BaseModel):
    """Plaintext reset token from the emailed link plus the new password."""

    token: str = Field(..., min_length=1, max_length=256)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class MessageResponse(BaseModel):
    message: str


class UserSummary(BaseModel):
    """Public view of a user (no password or reset fields)."""

    id: int
    name: str
    email: str
    isAdmin: bool


class LoginResponse(BaseModel):
    """Bearer credential returned after successful login."""

    token: str = Field(..., description="Signed bearer credential, valid for JWT_EXPIRE_DAYS")
    user: UserSummary


class CurrentUser(BaseModel):
    """Claims from a verified bearer credential. No database lookup is involved."""

    id: int
    isAdmin: bool = False
