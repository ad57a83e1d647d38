"""ORM model for editable site sections."""

from sqlalchemy import Column, Integer, String, Text

from techvision.models.base import Base, created_at_column, updated_at_column


class PageContent(Base):
    """One independently editable block of HTML, keyed by section id. html may be empty."""

    __tablename__ = "page_contents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_id = Column(String(100), nullable=False, unique=True, index=True)
    html = Column(Text, nullable=False, default="")
    updated_by = Column(String(255), nullable=True)
    created_at = created_at_column()
    updated_at = updated_at_column()
