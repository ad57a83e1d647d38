"""Google Analytics Data API (v1beta) client: service-account OAuth and fixed report requests."""

from __future__ import annotations

import asyncio
import json
import logging
import re
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import jwt

if TYPE_CHECKING:
    from techvision.core.config import Settings

logger = logging.getLogger(__name__)

ANALYTICS_SCOPE = "https://www.googleapis.com/auth/analytics.readonly"
DATA_API_BASE_URL = "https://analyticsdata.googleapis.com/v1beta"
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"
JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"
ASSERTION_LIFETIME_SEC = 3600
# Refresh the access token this many seconds before Google says it expires.
TOKEN_EXPIRY_MARGIN_SEC = 60

DEFAULT_START_DATE = "7daysAgo"
DEFAULT_END_DATE = "today"
DATE_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2}|\d+daysAgo|yesterday|today)$")


class AnalyticsServiceError(Exception):
    """Raised when credentials cannot be loaded or the Data API call fails."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


def is_valid_report_date(value: str) -> bool:
    """True for YYYY-MM-DD, NdaysAgo, yesterday, today (the forms the Data API accepts)."""
    return bool(DATE_PATTERN.match(value))


def _dimensions(*names: str) -> list[dict[str, str]]:
    return [{"name": n} for n in names]


def _metrics(*names: str) -> list[dict[str, str]]:
    return [{"name": n} for n in names]


def _order_by_metric_desc(metric: str) -> list[dict[str, Any]]:
    return [{"metric": {"metricName": metric}, "desc": True}]


def realtime_by_country_request() -> dict[str, Any]:
    return {"dimensions": _dimensions("country"), "metrics": _metrics("activeUsers")}


def realtime_by_screen_request() -> dict[str, Any]:
    return {"dimensions": _dimensions("unifiedScreenName"), "metrics": _metrics("activeUsers")}


def realtime_by_page_request() -> dict[str, Any]:
    return {"dimensions": _dimensions("pagePath", "pageTitle"), "metrics": _metrics("activeUsers")}


def page_views_request(start_date: str, end_date: str) -> dict[str, Any]:
    return {
        "dateRanges": [{"startDate": start_date, "endDate": end_date}],
        "dimensions": _dimensions("pagePath", "pageTitle"),
        "metrics": _metrics("screenPageViews", "sessions", "activeUsers"),
        "orderBys": _order_by_metric_desc("screenPageViews"),
    }


def historical_pages_request(start_date: str, end_date: str) -> dict[str, Any]:
    return {
        "dateRanges": [{"startDate": start_date, "endDate": end_date}],
        "dimensions": _dimensions("pagePath", "pageTitle"),
        "metrics": _metrics("screenPageViews", "sessions"),
        "orderBys": _order_by_metric_desc("screenPageViews"),
    }


def top_events_request(start_date: str, end_date: str) -> dict[str, Any]:
    return {
        "dateRanges": [{"startDate": start_date, "endDate": end_date}],
        "dimensions": _dimensions("eventName"),
        "metrics": _metrics("eventCount"),
        "orderBys": _order_by_metric_desc("eventCount"),
    }


def page_performance_request(start_date: str, end_date: str) -> dict[str, Any]:
    return {
        "dateRanges": [{"startDate": start_date, "endDate": end_date}],
        "dimensions": _dimensions("pagePath", "pageTitle"),
        "metrics": _metrics(
            "screenPageViews",
            "sessions",
            "activeUsers",
            "averageSessionDuration",
            "bounceRate",
        ),
        "orderBys": _order_by_metric_desc("screenPageViews"),
    }


@dataclass(frozen=True)
class ServiceAccount:
    """The fields of a Google service account key file needed for the JWT-bearer grant."""

    client_email: str
    private_key: str
    private_key_id: str | None = None
    token_uri: str = DEFAULT_TOKEN_URI

    @classmethod
    def from_file(cls, path: str | Path) -> ServiceAccount:
        try:
            with Path(path).open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise AnalyticsServiceError(
                "Service account key file could not be read.", cause=e
            ) from e
        if not isinstance(data, dict) or not data.get("client_email") or not data.get("private_key"):
            raise AnalyticsServiceError(
                "Service account key file is missing client_email or private_key."
            )
        return cls(
            client_email=data["client_email"],
            private_key=data["private_key"],
            private_key_id=data.get("private_key_id"),
            token_uri=data.get("token_uri") or DEFAULT_TOKEN_URI,
        )

    def signed_assertion(self, now: int) -> str:
        claims = {
            "iss": self.client_email,
            "scope": ANALYTICS_SCOPE,
            "aud": self.token_uri,
            "iat": now,
            "exp": now + ASSERTION_LIFETIME_SEC,
        }
        headers = {"kid": self.private_key_id} if self.private_key_id else None
        return jwt.encode(claims, self.private_key, algorithm="RS256", headers=headers)


class AnalyticsClient:
    """
    Runs Data API reports for one GA4 property.

    The service account is loaded on first use so the proxy can start before
    the key file is in place. The access token is reused until shortly before
    it expires.
    """

    def __init__(
        self,
        property_id: str,
        service_account_file: str,
        timeout: float = 30.0,
        account: ServiceAccount | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.property_id = property_id
        self.service_account_file = service_account_file
        self.timeout = timeout
        self._account = account
        self._transport = transport
        self._access_token: str | None = None
        self._token_expires_at = 0.0

    @classmethod
    def from_settings(cls, settings: Settings) -> AnalyticsClient:
        return cls(
            property_id=settings.GA_PROPERTY_ID,
            service_account_file=settings.GA_SERVICE_ACCOUNT_FILE,
            timeout=settings.GA_REQUEST_TIMEOUT_SEC,
        )

    async def run_report(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._call("runReport", body)

    async def run_realtime_report(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._call("runRealtimeReport", body)

    def _get_account(self) -> ServiceAccount:
        if self._account is None:
            self._account = ServiceAccount.from_file(self.service_account_file)
        return self._account

    async def _get_access_token(self, client: httpx.AsyncClient) -> str:
        if self._access_token and time.time() < self._token_expires_at:
            return self._access_token
        account = self._get_account()
        now = int(time.time())
        try:
            assertion = account.signed_assertion(now)
        except (jwt.PyJWTError, ValueError, TypeError) as e:
            raise AnalyticsServiceError("Service account private key is invalid.", cause=e) from e
        try:
            resp = await client.post(
                account.token_uri,
                data={"grant_type": JWT_BEARER_GRANT, "assertion": assertion},
            )
        except httpx.HTTPError as e:
            raise AnalyticsServiceError("Token endpoint request failed.", cause=e) from e
        if resp.status_code != 200:
            raise AnalyticsServiceError(f"Token endpoint returned status {resp.status_code}.")
        try:
            body = resp.json()
        except json.JSONDecodeError as e:
            raise AnalyticsServiceError("Token endpoint response is not valid JSON.", cause=e) from e
        token = body.get("access_token")
        if not token:
            raise AnalyticsServiceError("Token endpoint response missing access_token.")
        expires_in = int(body.get("expires_in", ASSERTION_LIFETIME_SEC))
        self._access_token = token
        self._token_expires_at = now + max(0, expires_in - TOKEN_EXPIRY_MARGIN_SEC)
        return token

    async def _call(self, method: str, body: dict[str, Any]) -> dict[str, Any]:
        if not self.property_id:
            raise AnalyticsServiceError("GA_PROPERTY_ID is not set.")
        url = f"{DATA_API_BASE_URL}/properties/{self.property_id}:{method}"
        start = time.perf_counter()
        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout), transport=self._transport) as client:
            token = await self._get_access_token(client)
            try:
                resp = await client.post(
                    url,
                    json=body,
                    headers={"Authorization": f"Bearer {token}"},
                )
            except httpx.TimeoutException as e:
                raise AnalyticsServiceError("Analytics request timed out.", cause=e) from e
            except httpx.HTTPError as e:
                raise AnalyticsServiceError("Analytics request failed.", cause=e) from e
        elapsed = time.perf_counter() - start

        if resp.status_code == 401:
            # Token revoked or expired early; next call fetches a new one.
            self._access_token = None
        if resp.status_code != 200:
            logger.info(
                "Analytics report failed",
                extra={"method": method, "status_code": resp.status_code, "latency_seconds": elapsed},
            )
            raise AnalyticsServiceError(f"Analytics API returned status {resp.status_code}.")
        try:
            data = resp.json()
        except json.JSONDecodeError as e:
            raise AnalyticsServiceError("Analytics response is not valid JSON.", cause=e) from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise AnalyticsServiceError("Analytics response is not a JSON object.")
        logger.info(
            "Analytics report completed",
            extra={"method": method, "row_count": data.get("rowCount", 0), "latency_seconds": elapsed},
        )
        return data


async def fetch_dashboard_data(
    client: AnalyticsClient,
    start_date: str = DEFAULT_START_DATE,
    end_date: str = DEFAULT_END_DATE,
) -> dict[str, Any]:
    """Fetch the four dashboard reports concurrently. Any failure cancels the rest and fails the whole call."""
    tasks = [
        asyncio.ensure_future(call)
        for call in (
            client.run_realtime_report(realtime_by_country_request()),
            client.run_realtime_report(realtime_by_page_request()),
            client.run_report(historical_pages_request(start_date, end_date)),
            client.run_report(top_events_request(start_date, end_date)),
        )
    ]
    try:
        realtime_country, realtime_pages, historical_pages, top_events = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        # Reap the cancelled siblings so their exceptions are retrieved.
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return {
        "realtimeByCountry": realtime_country or {},
        "realtimeByPages": realtime_pages or {},
        "historicalPages": historical_pages or {},
        "topEvents": top_events or {},
        "lastUpdated": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
    }
