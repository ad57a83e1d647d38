"""Contact form: store the submission, then notify the inbox if configured."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from techvision.models.contact_message import ContactMessage
from techvision.services.email import EmailDeliveryError, send_contact_notification

if TYPE_CHECKING:
    from techvision.core.config import Settings

logger = logging.getLogger(__name__)


def submit_contact_message(
    db: Session,
    name: str,
    email: str,
    message: str,
    settings: Settings,
) -> ContactMessage:
    """Persist the message. A failed notification is logged; the stored message still counts."""
    record = ContactMessage(name=name, email=email, message=message)
    db.add(record)
    db.commit()
    db.refresh(record)

    try:
        notified = send_contact_notification(name, email, message, settings)
    except EmailDeliveryError as e:
        logger.warning(
            "Contact notification failed",
            extra={"contact_message_id": record.id, "reason": str(e.cause or e)[:500]},
        )
        notified = False
    logger.info(
        "Contact message received",
        extra={"contact_message_id": record.id, "notified": notified},
    )
    return record
