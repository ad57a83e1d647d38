"""Analytics proxy routes: each GET maps to a fixed Data API report and relays its JSON."""

import logging
from collections.abc import Awaitable
from functools import lru_cache
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query

from techvision.core.config import get_settings
from techvision.schemas.analytics import DashboardData
from techvision.services.analytics import (
    DEFAULT_END_DATE,
    DEFAULT_START_DATE,
    AnalyticsClient,
    AnalyticsServiceError,
    fetch_dashboard_data,
    is_valid_report_date,
    page_performance_request,
    page_views_request,
    realtime_by_country_request,
    realtime_by_screen_request,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@lru_cache
def get_analytics_client() -> AnalyticsClient:
    """One client per process so its access token is reused across requests."""
    return AnalyticsClient.from_settings(get_settings())


Analytics = Annotated[AnalyticsClient, Depends(get_analytics_client)]


class DateRange:
    """startDate/endDate query parameters, validated against the forms the Data API accepts."""

    def __init__(
        self,
        start_date: Annotated[str, Query(alias="startDate", max_length=32)] = DEFAULT_START_DATE,
        end_date: Annotated[str, Query(alias="endDate", max_length=32)] = DEFAULT_END_DATE,
    ) -> None:
        for name, value in (("startDate", start_date), ("endDate", end_date)):
            if not is_valid_report_date(value):
                raise HTTPException(
                    status_code=400,
                    detail=f"{name} must be YYYY-MM-DD, NdaysAgo, yesterday or today.",
                )
        self.start_date = start_date
        self.end_date = end_date


async def _relay(call: Awaitable[Any], what: str) -> Any:
    try:
        return await call
    except AnalyticsServiceError as e:
        logger.error(
            "Analytics fetch failed",
            extra={"report": what, "reason": (e.message or str(e))[:500]},
        )
        raise HTTPException(status_code=500, detail=f"Failed to fetch {what} data") from e


@router.get("/realtime")
async def get_realtime(client: Analytics) -> dict[str, Any]:
    """Active users right now, by country."""
    return await _relay(client.run_realtime_report(realtime_by_country_request()), "realtime")


@router.get("/realtime-pages")
async def get_realtime_pages(client: Analytics) -> dict[str, Any]:
    """Active users right now, by screen/page name."""
    return await _relay(
        client.run_realtime_report(realtime_by_screen_request()), "realtime page"
    )


@router.get("/page-views")
async def get_page_views(client: Analytics, dates: Annotated[DateRange, Depends()]) -> dict[str, Any]:
    return await _relay(
        client.run_report(page_views_request(dates.start_date, dates.end_date)), "page views"
    )


@router.get("/dashboard-data", response_model=DashboardData)
async def get_dashboard_data(
    client: Analytics, dates: Annotated[DateRange, Depends()]
) -> dict[str, Any]:
    """Realtime by country and page, historical page views, and top events in one response."""
    return await _relay(
        fetch_dashboard_data(client, dates.start_date, dates.end_date), "dashboard"
    )


@router.get("/page-performance")
async def get_page_performance(
    client: Analytics, dates: Annotated[DateRange, Depends()]
) -> dict[str, Any]:
    return await _relay(
        client.run_report(page_performance_request(dates.start_date, dates.end_date)),
        "page performance",
    )


@router.get("/health")
def get_health() -> dict[str, str]:
    return {"status": "ok"}
