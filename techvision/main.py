"""Site backend entrypoint. No business logic; only wiring, middleware and startup seeding."""

from dotenv import load_dotenv

load_dotenv()

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from techvision.api.errors import register_exception_handlers
from techvision.api.v1 import router as v1_router
from techvision.core.config import Settings, settings
from techvision.core.database import SessionLocal
from techvision.services.admin_seed import ensure_admin

logger = logging.getLogger(__name__)


def seed_admin(settings: Settings) -> None:
    """Run ensure_admin once with ADMIN_EMAIL/ADMIN_PASSWORD. Failures are logged, not raised."""
    password = settings.ADMIN_PASSWORD.get_secret_value() if settings.ADMIN_PASSWORD else ""
    if not settings.ADMIN_EMAIL or not password:
        logger.warning("ADMIN_EMAIL or ADMIN_PASSWORD not set; skipping admin seeding.")
        return
    db = SessionLocal()
    try:
        ensure_admin(db, settings.ADMIN_EMAIL, password)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Admin seeding failed. Check DATABASE_URL and that migrations have run.")
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting TechVision API (env=%s)", settings.APP_ENV)
    seed_admin(settings)
    yield
    logger.info("Shutting down TechVision API")


app = FastAPI(
    title="TechVision API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)

app.include_router(v1_router, prefix=settings.API_PREFIX)

# Mounted last so API routes take precedence over files.
if Path(settings.PUBLIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True), name="public")
