"""Contact form endpoint."""

from fastapi import APIRouter

from techvision.api.deps import DbSession
from techvision.core.config import get_settings
from techvision.schemas.contact import ContactRequest, ContactResponse
from techvision.services.contact import submit_contact_message

router = APIRouter()


@router.post("/contact", response_model=ContactResponse)
def post_contact(body: ContactRequest, db: DbSession) -> ContactResponse:
    submit_contact_message(db, body.name, body.email, body.message, get_settings())
    return ContactResponse(message="Thank you for your message! We'll get back to you soon.")
