# ABOUTME: BookSource protocol defining the contract for book catalogs.
# ABOUTME: Any catalog API (Google Books, a fixture, etc.) implements search + detail lookup.

from typing import Protocol, runtime_checkable

from bookshelf.metadata.types import CandidateRecord, DetailRecord


@runtime_checkable
class BookSource(Protocol):
    """Protocol for the catalog the resolver talks to.

    Both calls return None when the catalog could not be reached or the
    volume is unknown. An empty search list means the catalog answered
    with zero hits, which is a different thing.
    """

    @property
    def name(self) -> str: ...

    def search(self, query: str, offset: int, limit: int) -> list[CandidateRecord] | None: ...

    def fetch_detail(self, volume_id: str) -> DetailRecord | None: ...

    def close(self) -> None: ...
