"""Behavior-focused tests for rate limiting middleware."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from sncf_departures.adapters.web.rate_limit_middleware import (
    DEFAULT_RETRY_AFTER_SECONDS,
    RateLimitMiddleware,
    extract_client_ip,
    retry_after_seconds,
)


def _request(path: str = "/", forwarded_for: str | None = None, host: str | None = "10.0.0.1"):
    request = MagicMock()
    request.url.path = path
    request.headers = {"X-Forwarded-For": forwarded_for} if forwarded_for is not None else {}
    request.client = SimpleNamespace(host=host) if host else None
    return request


class TestExtractClientIp:
    """Tests for client IP extraction behavior."""

    def test_when_forwarded_chain_then_first_ip(self) -> None:
        """Given an X-Forwarded-For chain, when extracting, then returns the trimmed first IP."""
        request = _request(forwarded_for="  203.0.113.50 , 70.41.3.18", host=None)

        assert extract_client_ip(request) == "203.0.113.50"

    def test_when_no_forwarded_header_then_direct_ip(self) -> None:
        """Given no X-Forwarded-For, when extracting, then uses the direct connection IP."""
        assert extract_client_ip(_request(forwarded_for="")) == "10.0.0.1"

    def test_when_no_client_info_then_unknown(self) -> None:
        """Given no client information, when extracting, then returns 'unknown'."""
        assert extract_client_ip(_request(host=None)) == "unknown"


class TestRetryAfter:
    def test_reads_state_retry_after(self) -> None:
        """Given a throttled result with state, when reading, then its retry_after is used."""
        result = SimpleNamespace(state=SimpleNamespace(retry_after=12.5))

        assert retry_after_seconds(result) == 12.5

    def test_defaults_when_missing(self) -> None:
        """Given no retry information, when reading, then the default is used."""
        assert retry_after_seconds(SimpleNamespace(state=None)) == DEFAULT_RETRY_AFTER_SECONDS


class TestDispatch:
    @pytest.mark.asyncio
    async def test_when_quota_exceeded_then_429(self) -> None:
        """Given a one-request quota, when a second request arrives, then it is rejected."""
        middleware = RateLimitMiddleware(MagicMock(), requests_per_minute=1)
        call_next = AsyncMock(return_value="ok")

        first = await middleware.dispatch(_request(), call_next)
        second = await middleware.dispatch(_request(), call_next)

        assert first == "ok"
        assert second.status_code == 429
        assert "Retry-After" in second.headers
        call_next.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_quota_is_per_ip(self) -> None:
        """Given two clients, when each sends one request, then neither is limited."""
        middleware = RateLimitMiddleware(MagicMock(), requests_per_minute=1)
        call_next = AsyncMock(return_value="ok")

        assert await middleware.dispatch(_request(host="10.0.0.1"), call_next) == "ok"
        assert await middleware.dispatch(_request(host="10.0.0.2"), call_next) == "ok"

    @pytest.mark.asyncio
    async def test_health_check_is_exempt(self) -> None:
        """Given an exhausted quota, when probing /healthz, then the request passes."""
        middleware = RateLimitMiddleware(MagicMock(), requests_per_minute=1)
        call_next = AsyncMock(return_value="ok")

        for _ in range(3):
            assert await middleware.dispatch(_request(path="/healthz"), call_next) == "ok"
