"""Section id -> HTML store with seed-on-first-read."""

import logging
from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from techvision.models.page_content import PageContent

logger = logging.getLogger(__name__)

SYSTEM_AUTHOR = "system"


class ContentStore:
    """
    Editable site sections backed by the page_contents table.

    defaults maps section id -> HTML used to seed a section on its first read;
    ids without a default are seeded with the empty string.
    """

    def __init__(self, db: Session, defaults: Mapping[str, str]) -> None:
        self.db = db
        self.defaults = dict(defaults)

    def get_section(self, section_id: str) -> PageContent:
        """Return the stored section, creating it from the default on first read."""
        doc = self._find(section_id)
        if doc is not None:
            return doc
        doc = PageContent(
            section_id=section_id,
            html=self.defaults.get(section_id, ""),
            updated_by=SYSTEM_AUTHOR,
        )
        self.db.add(doc)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent first read seeded it already; use theirs.
            self.db.rollback()
            existing = self._find(section_id)
            if existing is None:
                raise
            return existing
        self.db.refresh(doc)
        logger.info("Section seeded with default content", extra={"section_id": section_id})
        return doc

    def put_section(self, section_id: str, html: str, updated_by: str) -> PageContent:
        """Insert or overwrite the section's HTML verbatim."""
        doc = self._find(section_id)
        if doc is None:
            doc = PageContent(section_id=section_id, html=html, updated_by=updated_by)
            self.db.add(doc)
        else:
            doc.html = html
            doc.updated_by = updated_by
        self.db.commit()
        self.db.refresh(doc)
        logger.info(
            "Section updated",
            extra={"section_id": section_id, "updated_by": updated_by, "html_length": len(html)},
        )
        return doc

    def list_sections(self) -> list[PageContent]:
        return self.db.query(PageContent).order_by(PageContent.section_id).all()

    def _find(self, section_id: str) -> PageContent | None:
        return self.db.query(PageContent).filter(PageContent.section_id == section_id).first()
