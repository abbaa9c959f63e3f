"""Opt-in logging of outgoing Navitia requests.

Enabled with IDFM_LOG_REQUESTS=true. The PRIM API key never reaches the log.
"""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "<redacted>"
# Lower-cased; PRIM expects the key in an "apiKey" header
_SECRET_HEADERS = frozenset({"apikey", "authorization"})


def should_log_requests() -> bool:
    """Whether IDFM_LOG_REQUESTS is set to true (any case)."""
    return os.getenv("IDFM_LOG_REQUESTS", "").lower() == "true"


def request_target(url: str, params: dict[str, Any] | None) -> str:
    """URL with its encoded query string, parameters sorted for stable logs."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {
        name: REDACTED if name.lower() in _SECRET_HEADERS else value
        for name, value in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log one request line with redacted headers when IDFM_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return

    logger.info(f"{method} {request_target(url, params)} headers={redact_headers(headers or {})}")
