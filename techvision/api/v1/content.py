"""Editable site sections: public read with seed-on-first-read, admin-only write and list."""

from typing import Annotated

from fastapi import APIRouter, Path

from techvision.api.deps import Store
from techvision.api.guards import AdminUser
from techvision.core.errors import InvalidInputError
from techvision.models.page_content import PageContent
from techvision.schemas.content import (
    SectionListResponse,
    SectionRecord,
    SectionResponse,
    SectionUpdateRequest,
    SectionUpdateResponse,
)

router = APIRouter()

SectionId = Annotated[str, Path(min_length=1, max_length=100)]


def _record(doc: PageContent) -> SectionRecord:
    return SectionRecord(
        sectionId=doc.section_id,
        html=doc.html,
        updatedBy=doc.updated_by,
        createdAt=doc.created_at,
        updatedAt=doc.updated_at,
    )


@router.get("/content/{section_id}", response_model=SectionResponse)
def get_section(section_id: SectionId, store: Store) -> SectionResponse:
    doc = store.get_section(section_id)
    return SectionResponse(sectionId=doc.section_id, html=doc.html)


@router.put("/content/{section_id}", response_model=SectionUpdateResponse)
def put_section(
    section_id: SectionId,
    body: SectionUpdateRequest,
    store: Store,
    admin: AdminUser,
) -> SectionUpdateResponse:
    """Replace the section's HTML. An empty string is valid content; a missing html field is not."""
    if body.html is None:
        raise InvalidInputError("HTML content is required")
    doc = store.put_section(section_id, body.html, updated_by=str(admin.id))
    return SectionUpdateResponse(
        message=f"Content updated successfully for {section_id}",
        sectionId=doc.section_id,
        html=doc.html,
    )


@router.get("/content", response_model=SectionListResponse)
def list_sections(store: Store, _admin: AdminUser) -> SectionListResponse:
    return SectionListResponse(content=[_record(doc) for doc in store.list_sections()])
