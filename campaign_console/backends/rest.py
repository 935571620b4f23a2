"""Thin async client for the hosted backend's REST (PostgREST-style) table API.

Every failure leaves this module as an AppError subclass: HTTP statuses map
through error_from_status, transport failures become NetworkError.
"""

import logging
import time
from typing import Any

import httpx

from campaign_console.core.config import config
from campaign_console.core.errors import AppError, NetworkError, error_from_status

logger = logging.getLogger(__name__)


def ilike_pattern(term: str, quoted: bool = False) -> str:
    """Containment pattern for an ilike filter; quoted form is safe inside or=(...)."""
    pattern = f"*{term}*"
    if not quoted:
        return pattern
    escaped = pattern.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def parse_content_range(value: str | None) -> int | None:
    """Total from a Content-Range header such as '0-4/42' or '*/0'."""
    if not value or "/" not in value:
        return None
    total = value.rsplit("/", 1)[1].strip()
    return int(total) if total.isdigit() else None


def _retry_after(response: httpx.Response) -> float | None:
    raw = response.headers.get("retry-after")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def error_from_response(response: httpx.Response) -> AppError:
    body: dict[str, Any] = {}
    try:
        payload = response.json()
        if isinstance(payload, dict):
            body = payload
    except ValueError:
        pass
    message = body.get("message") or body.get("msg") or f"Backend request failed ({response.status_code})"
    return error_from_status(
        response.status_code,
        str(message),
        retry_after=_retry_after(response),
        field=body.get("field") if isinstance(body.get("field"), str) else None,
    )


class RestClient:
    """Read-only table access; one short-lived httpx client per request."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        url = base_url if base_url is not None else config.backend_url
        self._base_url = (url or "").rstrip("/")
        self._api_key = api_key if api_key is not None else config.backend_api_key
        self._timeout = timeout if timeout is not None else config.backend_timeout_seconds
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._base_url and self._api_key)

    def _headers(self, count: bool) -> dict[str, str]:
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }
        if count:
            headers["Prefer"] = "count=exact"
        return headers

    async def select(
        self,
        table: str,
        params: dict[str, str],
        *,
        count: bool = False,
    ) -> tuple[list[dict[str, Any]], int | None]:
        """GET rows from `table`. Returns (rows, total) where total is set only when counting."""
        if not self.is_configured:
            raise AppError("Backend connection is not configured", "NOT_CONFIGURED", 500)

        url = f"{self._base_url}/rest/v1/{table}"
        t0 = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params=params, headers=self._headers(count))
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("Backend: select(%s) failed with HTTP %s", table, e.response.status_code)
            raise error_from_response(e.response) from e
        except httpx.TransportError as e:
            logger.warning("Backend: select(%s) transport error: %s", table, e)
            raise NetworkError() from e

        try:
            rows = response.json()
        except ValueError as e:
            raise AppError(f"Malformed response for table '{table}'", "BACKEND_ERROR", 502) from e
        if not isinstance(rows, list):
            raise AppError(f"Unexpected response for table '{table}'", "BACKEND_ERROR", 502)
        elapsed_ms = round((time.monotonic() - t0) * 1000, 1)
        logger.info("Backend: select(%s) returned %d rows in %.1fms", table, len(rows), elapsed_ms)
        total = parse_content_range(response.headers.get("content-range")) if count else None
        return rows, total
