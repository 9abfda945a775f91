"""HTTP client for SNCF API requests.

API Documentation: https://doc.navitia.io/
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

from sncf_departures.adapters.api_rate_limiter import ApiRateLimiter
from sncf_departures.adapters.api_request_logger import log_api_request
from sncf_departures.adapters.sncf_api.constants import DEFAULT_HEADERS, SNCF_BASE_URL
from sncf_departures.domain.errors import DecodeError, NetworkError

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


def build_auth_header(api_key: str) -> str:
    """Basic auth header with the API key as user and an empty password."""
    token = base64.b64encode(f"{api_key}:".encode()).decode("ascii")
    return f"Basic {token}"


def quote_id(object_id: str) -> str:
    """Quote a Navitia object id for use as a path segment."""
    return quote(object_id, safe=":")


class SncfHttpClient:
    """Issues authenticated GET requests against the SNCF coverage."""

    def __init__(
        self,
        session: ClientSession,
        api_key: str,
        base_url: str = SNCF_BASE_URL,
        timeout_seconds: float = 10,
        rate_limiter: ApiRateLimiter | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            api_key: SNCF API key.
            base_url: Coverage base URL.
            timeout_seconds: Total timeout for one request.
            rate_limiter: Limiter shared with other clients of the same API.
        """
        if not api_key:
            logger.warning("No SNCF API key configured, requests will be rejected with 401")
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._headers = {**DEFAULT_HEADERS, "Authorization": build_auth_header(api_key)}
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = rate_limiter

    async def get_json(self, path: str, params: dict[str, str | int] | None = None) -> Any:
        """GET a path below the coverage base URL and return the decoded JSON body.

        Raises:
            NetworkError: If the request could not be sent or the status is not 2xx.
            DecodeError: If the body is not JSON.
        """
        url = f"{self._base_url}{path}"
        log_api_request("GET", url, params=params, headers=self._headers)

        if self._rate_limiter is not None:
            await self._rate_limiter.acquire()

        try:
            async with self._session.get(
                url, params=params, headers=self._headers, timeout=self._timeout
            ) as response:
                if not 200 <= response.status < 300:
                    await self._log_error_response(response, url)
                    raise NetworkError(
                        f"SNCF API returned status {response.status}",
                        status_code=response.status,
                        url=url,
                    )
                return await self._read_json(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error requesting {url}: {e!r}")
            raise NetworkError(f"Request to {url} failed: {e!r}", url=url) from e

    @staticmethod
    async def _read_json(response: ClientResponse, url: str) -> Any:
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise DecodeError(f"Response from {url} is not valid JSON") from e

    @staticmethod
    async def _log_error_response(response: ClientResponse, url: str) -> None:
        """Log error response details."""
        try:
            error_text = await response.text(errors="replace")
        except ValueError:
            error_text = ""
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"SNCF API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )
