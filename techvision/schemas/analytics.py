"""Response schema for the combined analytics dashboard payload."""

from typing import Any

from pydantic import BaseModel, Field


class DashboardData(BaseModel):
    """Four reports fetched together for the dashboard's first paint."""

    realtimeByCountry: dict[str, Any] = Field(default_factory=dict)
    realtimeByPages: dict[str, Any] = Field(default_factory=dict)
    historicalPages: dict[str, Any] = Field(default_factory=dict)
    topEvents: dict[str, Any] = Field(default_factory=dict)
    lastUpdated: str = Field(..., description="ISO 8601 UTC timestamp of the fetch")
