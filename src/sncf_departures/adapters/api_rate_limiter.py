"""Rate limiter for outgoing API requests.

The SNCF API enforces a daily quota, so requests issued by every open browser tab
share one limiter that spaces them by a minimum delay.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Ensures a minimum delay between two requests to the same API."""

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}

    def __init__(self, api_name: str, min_delay_seconds: float = 0.1) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between requests in seconds.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._last_request_time: float | None = None
        self._lock = asyncio.Lock()

    @classmethod
    def shared(cls, api_name: str, min_delay_seconds: float = 0.1) -> ApiRateLimiter:
        """Get or create the limiter shared by all clients of an API."""
        if api_name not in cls._instances:
            cls._instances[api_name] = cls(api_name, min_delay_seconds)
            logger.info(f"Created rate limiter for {api_name} with {min_delay_seconds}s minimum delay")
        return cls._instances[api_name]

    async def acquire(self) -> None:
        """Wait until enough time has passed since the previous request."""
        async with self._lock:
            if self._last_request_time is not None:
                wait_time = self.min_delay_seconds - (time.monotonic() - self._last_request_time)
                if wait_time > 0:
                    logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                    await asyncio.sleep(wait_time)

            self._last_request_time = time.monotonic()

    async def __aenter__(self) -> ApiRateLimiter:
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Nothing to release."""
