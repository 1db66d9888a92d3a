# linkedin_api_mcp/client.py
"""
HTTP client for the HarvestAPI LinkedIn service.

Wraps one long-lived ``httpx.AsyncClient`` configured with the base URL, the
API-key header, the optional forward proxy and a single fixed timeout. Every
failure (non-2xx status, network error, timeout) is re-wrapped here into a
``RemoteAPIError`` carrying the status code and the remote message. Nothing is
retried.
"""

from typing import Any, Dict, Mapping, Optional

import httpx
import structlog

from linkedin_api_mcp.config import AppConfig
from linkedin_api_mcp.constants import API_KEY_HEADER, CONTENT_TYPE_JSON, USER_AGENT
from linkedin_api_mcp.exceptions import RemoteAPIError

logger = structlog.get_logger(__name__)

QueryParams = Mapping[str, Any]


def _error_reason(response: httpx.Response) -> str:
    """Extract the remote ``message`` or ``error`` text, else the raw body."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, Mapping):
        for key in ("message", "error"):
            value = body.get(key)
            if value:
                return value if isinstance(value, str) else str(value)

    text = response.text.strip()
    return text or response.reason_phrase or "Unknown error"


class HarvestAPIClient:
    """Async client for the HarvestAPI LinkedIn endpoints."""

    def __init__(
        self,
        config: AppConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Immutable application configuration
            transport: Optional transport override (used by tests)
        """
        headers = {"Content-Type": CONTENT_TYPE_JSON, "User-Agent": USER_AGENT}
        if config.api_key:
            headers[API_KEY_HEADER] = config.api_key

        client_kwargs: Dict[str, Any] = {
            "base_url": config.base_url.rstrip("/"),
            "timeout": httpx.Timeout(config.request_timeout),
            "headers": headers,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        elif config.proxy_url:
            client_kwargs["proxy"] = config.proxy_url

        self.base_url = client_kwargs["base_url"]
        self._http = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> "HarvestAPIClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def get(self, endpoint: str, params: Optional[QueryParams] = None) -> Dict[str, Any]:
        """Issue one GET request and return the decoded JSON envelope.

        Args:
            endpoint: Path under the base URL (e.g. ``/profile``)
            params: Query parameters, already keyed by remote names

        Returns:
            The JSON object returned by the API (``{}`` for a non-object body)

        Raises:
            RemoteAPIError: On a non-2xx status, network error or timeout
        """
        query = dict(params or {})
        logger.debug("Calling HarvestAPI", endpoint=endpoint, params=sorted(query))

        try:
            response = await self._http.get(endpoint, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            reason = _error_reason(e.response)
            logger.error("HarvestAPI returned an error", endpoint=endpoint, status=status_code, reason=reason)
            raise RemoteAPIError(status_code, reason, cause=e) from e
        except httpx.TimeoutException as e:
            logger.error("HarvestAPI request timed out", endpoint=endpoint, error=str(e))
            raise RemoteAPIError(None, f"Request timed out: {e}", cause=e) from e
        except httpx.RequestError as e:
            logger.error("Error communicating with HarvestAPI", endpoint=endpoint, error=str(e))
            raise RemoteAPIError(None, str(e) or type(e).__name__, cause=e) from e

        try:
            body = response.json()
        except ValueError as e:
            raise RemoteAPIError(response.status_code, "Response body is not valid JSON", cause=e) from e

        logger.debug("HarvestAPI response received", endpoint=endpoint, status=response.status_code)
        return body if isinstance(body, dict) else {}
