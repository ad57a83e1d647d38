"""Health check payload for the site backend."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"]
    mail: Literal["configured", "disabled"] = Field(
        description="Whether reset and contact emails are actually sent (SMTP_HOST set)",
    )
