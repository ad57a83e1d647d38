"""Liveness plus database and mail status, for load balancers and operators."""

from fastapi import APIRouter

from techvision.api.deps import DbSession
from techvision.core.config import settings
from techvision.core.database import check_db_connected
from techvision.schemas.health import HealthResponse
from techvision.services.email import is_email_configured

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: DbSession) -> HealthResponse:
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        mail="configured" if is_email_configured(settings) else "disabled",
    )
