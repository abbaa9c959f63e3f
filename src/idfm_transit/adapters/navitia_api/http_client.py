"""HTTP client for Navitia API requests.

Every request is a GET against the configured service root plus a relative
path, with the PRIM API key attached as a header.
API Documentation: https://doc.navitia.io/
"""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from idfm_transit.adapters.api_request_logger import log_api_request
from idfm_transit.adapters.navitia_api.constants import (
    API_KEY_HEADER,
    DEFAULT_HEADERS,
    UNKNOWN_API_ERROR,
)
from idfm_transit.adapters.navitia_api.exceptions import (
    DecodeError,
    HttpError,
    NavitiaError,
    TransportError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

QueryParams = dict[str, str | int]


class NavitiaHttpClient:
    """HTTP client for the Navitia API.

    Stateless apart from the injected session, so concurrent calls are safe.
    """

    def __init__(self, session: "ClientSession", base_url: str, api_key: str) -> None:
        """Initialize the client.

        Args:
            session: aiohttp ClientSession used for every request.
            base_url: Service root without trailing slash.
            api_key: Static PRIM API key.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._headers = {**DEFAULT_HEADERS, API_KEY_HEADER: api_key}
        if not api_key:
            logger.warning("No PRIM API key configured; Navitia requests will be rejected")

    @property
    def base_url(self) -> str:
        """Service root requests are sent to."""
        return self._base_url

    async def get_json(self, path: str, params: QueryParams | None = None) -> dict[str, Any]:
        """Perform one GET request and return the decoded JSON body.

        Args:
            path: Path relative to the service root, e.g. "/places".
            params: Query parameters.

        Returns:
            The decoded JSON object. Its shape is not validated here.

        Raises:
            TransportError: If the service could not be reached.
            HttpError: If the response status is not 2xx.
            UpstreamError: If the body is a Navitia error envelope.
            DecodeError: If the body is not a JSON object.
        """
        url = f"{self._base_url}{path}"
        log_api_request("GET", url, params=params, headers=self._headers)

        try:
            async with self._session.get(url, params=params, headers=self._headers) as response:
                return await self._handle_response(response, path)
        except NavitiaError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Fetch failed for {path}: {e!r}")
            raise TransportError(f"Fetch failed for {path}: {e}") from e

    async def _handle_response(self, response: "ClientResponse", path: str) -> dict[str, Any]:
        """Check status, decode the body and unwrap error envelopes."""
        if not 200 <= response.status < 300:
            await self._log_error_response(response, path)
            raise HttpError(response.status, response.reason or "")

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            logger.error(f"Navitia returned a body that is not JSON for {path}: {e}")
            raise DecodeError(f"Response for {path} is not valid JSON") from e

        if not isinstance(data, dict):
            logger.error(f"Navitia returned {type(data).__name__} instead of an object for {path}")
            raise DecodeError(f"Response for {path} is not a JSON object")

        error = data.get("error")
        if error:
            logger.error(f"Navitia API error detail for {path}: {json.dumps(error, indent=2)}")
            raise self._build_upstream_error(error)

        return data

    @staticmethod
    def _build_upstream_error(error: Any) -> UpstreamError:
        """Build an UpstreamError from the "error" member of a response."""
        if isinstance(error, dict):
            message = error.get("message") or UNKNOWN_API_ERROR
            error_id = error.get("id")
            return UpstreamError(str(message), str(error_id) if error_id else None)
        return UpstreamError(UNKNOWN_API_ERROR)

    async def _log_error_response(self, response: "ClientResponse", path: str) -> None:
        """Log error response details."""
        try:
            error_text = await response.text()
        except (aiohttp.ClientError, UnicodeDecodeError):
            error_text = ""
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.warning(
            f"Navitia API returned status {response.status} {response.reason} for {path}: "
            f"{error_body} (Content-Type: {content_type})"
        )
