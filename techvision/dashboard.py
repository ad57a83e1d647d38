"""Analytics proxy entrypoint (separate process from the site backend). No database."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from techvision.api.analytics import router as analytics_router
from techvision.api.errors import handle_http_exception, handle_validation_error
from techvision.core.config import settings

app = FastAPI(
    title="TechVision Analytics Proxy",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.DASHBOARD_CORS_ORIGINS,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.add_exception_handler(StarletteHTTPException, handle_http_exception)
app.add_exception_handler(RequestValidationError, handle_validation_error)

app.include_router(analytics_router, tags=["analytics"])
