"""SQLAlchemy ORM models."""

from techvision.models.base import Base
from techvision.models.contact_message import ContactMessage
from techvision.models.page_content import PageContent
from techvision.models.user import User

__all__ = ["Base", "ContactMessage", "PageContent", "User"]
