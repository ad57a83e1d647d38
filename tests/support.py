"""Helpers shared by tests: isolated SQLite sessions and a TestClient bound to one session."""

from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from techvision.core.database import get_db
from techvision.models import Base


def make_session() -> Session:
    """Fresh in-memory database with all tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)()


def make_client(db: Session) -> TestClient:
    """TestClient for the site app with get_db pointing at db. Call clear_overrides() in tearDown."""
    from techvision.main import app

    def _override() -> Generator[Session, None, None]:
        yield db

    app.dependency_overrides[get_db] = _override
    return TestClient(app)


def clear_overrides() -> None:
    from techvision.main import app

    app.dependency_overrides.clear()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
