"""Request/response schemas for editable site sections."""

from datetime import datetime

from pydantic import BaseModel, Field


class SectionUpdateRequest(BaseModel):
    """html may be the empty string; absent or null is rejected by the route."""

    html: str | None = None


class SectionResponse(BaseModel):
    success: bool = True
    sectionId: str
    html: str


class SectionUpdateResponse(SectionResponse):
    message: str


class SectionRecord(BaseModel):
    sectionId: str
    html: str
    updatedBy: str | None = None
    createdAt: datetime | None = None
    updatedAt: datetime | None = None


class SectionListResponse(BaseModel):
    success: bool = True
    content: list[SectionRecord] = Field(default_factory=list)
