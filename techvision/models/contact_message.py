"""ORM model for contact form submissions."""

from sqlalchemy import Column, Integer, String, Text

from techvision.models.base import Base, created_at_column


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = created_at_column()
