# ABOUTME: Unit tests for the HTTP client abstraction.
# ABOUTME: Tests the HttpClient protocol, BookshelfHttpClient, and error translation.

import httpx
import pytest

from bookshelf.metadata.http import (
    BookshelfHttpClient,
    HttpClient,
    MetadataFetchError,
)


class FakeTransport(httpx.BaseTransport):
    """Fake transport for httpx that returns canned responses."""

    def __init__(self, responses: list[httpx.Response] | None = None) -> None:
        self._responses = list(responses or [])
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={"ok": True})

    @property
    def call_count(self) -> int:
        return len(self.requests)


class FailingTransport(httpx.BaseTransport):
    """Transport that fails every request at the connection level."""

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)


class TestHttpClientProtocol:
    """Tests for HttpClient protocol compliance."""

    def test_bookshelf_client_satisfies_protocol(self) -> None:
        """BookshelfHttpClient satisfies the HttpClient protocol."""
        client = BookshelfHttpClient(transport=FakeTransport())
        assert isinstance(client, HttpClient)


class TestBookshelfHttpClient:
    """Tests for BookshelfHttpClient concrete class."""

    def test_get_returns_json(self) -> None:
        """GET request returns parsed JSON response."""
        client = BookshelfHttpClient(transport=FakeTransport())
        result = client.get("https://example.com/api", params={"q": "test"})
        assert result == {"ok": True}

    def test_query_params_sent(self) -> None:
        """Query parameters end up on the request URL."""
        transport = FakeTransport()
        client = BookshelfHttpClient(transport=transport)
        client.get("https://example.com/volumes", params={"q": "Dune", "maxResults": "20"})
        request = transport.requests[0]
        assert request.url.params["q"] == "Dune"
        assert request.url.params["maxResults"] == "20"

    def test_user_agent_header(self) -> None:
        """Requests include the bookshelf User-Agent header."""
        transport = FakeTransport()
        client = BookshelfHttpClient(transport=transport)
        client.get("https://example.com/api")
        assert transport.requests[0].headers["user-agent"].startswith("bookshelf/")

    def test_http_error_raises_metadata_fetch_error(self) -> None:
        """Non-200 responses raise MetadataFetchError."""
        transport = FakeTransport([httpx.Response(404, json={"error": "not found"})])
        client = BookshelfHttpClient(transport=transport)

        with pytest.raises(MetadataFetchError, match="404"):
            client.get("https://example.com/missing")

    def test_server_error_not_retried(self) -> None:
        """A 503 fails immediately; retrying is left to the host."""
        transport = FakeTransport([httpx.Response(503), httpx.Response(200, json={})])
        client = BookshelfHttpClient(transport=transport)

        with pytest.raises(MetadataFetchError, match="503"):
            client.get("https://example.com/api")
        assert transport.call_count == 1

    def test_network_error_raises_metadata_fetch_error(self) -> None:
        """Connection-level failures are wrapped in MetadataFetchError."""
        client = BookshelfHttpClient(transport=FailingTransport())

        with pytest.raises(MetadataFetchError, match="connection refused"):
            client.get("https://example.com/api")

    def test_invalid_json_raises_metadata_fetch_error(self) -> None:
        """A 200 with a non-JSON body is a fetch failure."""
        transport = FakeTransport([httpx.Response(200, text="<html>oops</html>")])
        client = BookshelfHttpClient(transport=transport)

        with pytest.raises(MetadataFetchError, match="Invalid JSON"):
            client.get("https://example.com/api")

    def test_non_object_json_raises_metadata_fetch_error(self) -> None:
        """A JSON array is not a usable catalog payload."""
        transport = FakeTransport([httpx.Response(200, json=[1, 2, 3])])
        client = BookshelfHttpClient(transport=transport)

        with pytest.raises(MetadataFetchError, match="Unexpected JSON"):
            client.get("https://example.com/api")

    def test_close(self) -> None:
        """Closing the client closes the underlying httpx client."""
        client = BookshelfHttpClient(transport=FakeTransport())
        client.close()
        assert client._client.is_closed
