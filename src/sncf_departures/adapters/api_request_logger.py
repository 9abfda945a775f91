"""Utility for logging outgoing SNCF API requests when SNCF_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via the SNCF_LOG_REQUESTS environment variable."""
    return os.getenv("SNCF_LOG_REQUESTS", "").lower() == "true"


def build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build the full URL with query parameters, sorted for stable output."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{param_str}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Mask credentials before they reach the log."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log request details if SNCF_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters (optional).
        headers: Request headers (optional, credentials are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {build_url_with_params(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
