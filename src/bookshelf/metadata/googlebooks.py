# ABOUTME: Google Books catalog source implementation.
# ABOUTME: Runs volume searches and volume lookups, reporting failures as None instead of raising.

import logging
from urllib.parse import quote

from bookshelf.metadata.googlebooks_parser import parse_search_response, parse_volume_response
from bookshelf.metadata.http import HttpClient, MetadataFetchError
from bookshelf.metadata.types import CandidateRecord, DetailRecord

logger = logging.getLogger(__name__)

GOOGLE_BOOKS_API_URL = "https://www.googleapis.com/books/v1"

# Key hosts store MetadataRecord.external_id under.
PROVIDER_ID_KEY = "GoogleBooks"


class GoogleBooksSource:
    """BookSource backed by the Google Books volumes API.

    Uses a dependency-injected HttpClient for testability. Any
    MetadataFetchError is logged and reported as None so the resolver can
    treat "catalog unreachable" as an ordinary outcome.
    """

    def __init__(self, http_client: HttpClient, *, base_url: str = GOOGLE_BOOKS_API_URL) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "googlebooks"

    def search(self, query: str, offset: int, limit: int) -> list[CandidateRecord] | None:
        """Search volumes by free text, returning one page in catalog rank order."""
        params = {"q": query, "startIndex": str(offset), "maxResults": str(limit)}
        try:
            data = self._http.get(f"{self._base_url}/volumes", params=params)
        except MetadataFetchError as exc:
            logger.warning("Search failed for %r: %s", query, exc)
            return None
        return parse_search_response(data)

    def fetch_detail(self, volume_id: str) -> DetailRecord | None:
        """Fetch the full record for one volume id."""
        url = f"{self._base_url}/volumes/{quote(volume_id, safe='')}"
        try:
            data = self._http.get(url)
        except MetadataFetchError as exc:
            logger.warning("Volume lookup failed for %s: %s", volume_id, exc)
            return None

        detail = parse_volume_response(data)
        if detail is None:
            logger.info("Volume lookup for %s returned no volume", volume_id)
        return detail

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()
