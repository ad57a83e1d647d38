"""Request/response schemas for the contact form."""

from pydantic import BaseModel, Field

from techvision.core.security import EMAIL_MAX_LEN, NAME_MAX_LEN


class ContactRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN)
    message: str = Field(..., min_length=1, max_length=10_000)


class ContactResponse(BaseModel):
    success: bool = True
    message: str
