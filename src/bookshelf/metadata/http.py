# ABOUTME: HTTP client abstraction for catalog API calls.
# ABOUTME: Thin httpx wrapper that turns transport and status failures into MetadataFetchError.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "bookshelf/0.1.0"
DEFAULT_TIMEOUT = 30.0


class MetadataFetchError(Exception):
    """Raised when an HTTP request to a catalog API fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against catalog APIs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...

    def close(self) -> None: ...


class BookshelfHttpClient:
    """HTTP client for catalog API calls.

    Wraps httpx.Client with a fixed User-Agent and timeout. Retries, backoff
    and rate limiting are left to whatever sits in front of the network.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a GET request and decode the JSON body.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response body.

        Raises:
            MetadataFetchError: On transport errors, non-200 responses, or a
                body that is not a JSON object.
        """
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc

        if response.status_code != 200:
            raise MetadataFetchError(f"HTTP {response.status_code} from {url}")

        try:
            data = response.json()
        except ValueError as exc:
            raise MetadataFetchError(f"Invalid JSON from {url}: {exc}") from exc

        if not isinstance(data, dict):
            raise MetadataFetchError(f"Unexpected JSON payload from {url}")

        logger.debug("GET %s -> %d", response.url, response.status_code)
        return data

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()
