"""Shared FastAPI dependencies for the site backend."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from techvision.core.config import get_settings
from techvision.core.database import get_db
from techvision.services.content_store import ContentStore
from techvision.services.default_content import load_section_defaults

DbSession = Annotated[Session, Depends(get_db)]


@lru_cache
def get_section_defaults() -> dict[str, str]:
    """Default HTML per section, resolved once from settings."""
    return load_section_defaults(get_settings())


def get_content_store(db: DbSession) -> ContentStore:
    return ContentStore(db, get_section_defaults())


Store = Annotated[ContentStore, Depends(get_content_store)]
