# ABOUTME: Resolution pipeline: query -> catalog search -> candidate match -> detail -> metadata.
# ABOUTME: Collaborators are injected; every outcome is a result value, never an exception.

import enum
import logging
import threading
from dataclasses import dataclass

from bookshelf.metadata.mapper import map_detail
from bookshelf.metadata.matching import select_best
from bookshelf.metadata.naming import normalize, parse_query_name
from bookshelf.metadata.source import BookSource
from bookshelf.metadata.types import CandidateRecord, MetadataRecord, Query

logger = logging.getLogger(__name__)

# The search always asks for one fixed page and never paginates. A match
# ranked beyond it is reported as not found.
SEARCH_OFFSET = 0
SEARCH_LIMIT = 20


class ResolutionCancelled(Exception):
    """Raised inside the resolver when the caller's cancel event is set."""


class ResolveOutcome(enum.Enum):
    MATCHED = "matched"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"


@dataclass
class ResolveResult:
    """Result of a single resolution.

    Attributes:
        outcome: What happened.
        metadata: The mapped record, only set when outcome is MATCHED.
        queried_by_id: True when the metadata came from a direct id lookup.
            Hosts should store metadata.external_id and skip the fuzzy
            search next time.
    """

    outcome: ResolveOutcome
    metadata: MetadataRecord | None = None
    queried_by_id: bool = False

    @property
    def found(self) -> bool:
        return self.outcome is ResolveOutcome.MATCHED


def _check_cancelled(cancel_event: threading.Event | None, stage: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise ResolutionCancelled(f"cancelled {stage}")


class Resolver:
    """Resolves a Query to catalog metadata through an injected BookSource.

    Holds no per-resolution state, so one instance can serve any number of
    concurrent resolve() calls.
    """

    def __init__(self, source: BookSource) -> None:
        self._source = source

    def resolve(self, query: Query, cancel_event: threading.Event | None = None) -> ResolveResult:
        """Resolve a query to metadata.

        The cancel event is checked on entry, before each catalog call and
        when each call returns; a response that arrives after cancellation
        is discarded.
        """
        try:
            return self._resolve(query, cancel_event)
        except ResolutionCancelled as exc:
            logger.info("Resolution of %r %s", query.name, exc)
            return ResolveResult(outcome=ResolveOutcome.CANCELLED)

    def find_id(self, query: Query, cancel_event: threading.Event | None = None) -> str | None:
        """Search the catalog for the query and return the matched volume id.

        Raises:
            ResolutionCancelled: If the cancel event is set at a checkpoint.
        """
        _check_cancelled(cancel_event, "before search")

        bare_name, year = self.parse_query(query)
        if not bare_name:
            logger.info("Query %r has no usable name", query.name)
            return None

        candidates = self._source.search(bare_name, SEARCH_OFFSET, SEARCH_LIMIT)
        _check_cancelled(cancel_event, "during search")
        if candidates is None:
            logger.info("No search response for %r", bare_name)
            return None

        volume_id = select_best(normalize(bare_name), year, candidates)
        if volume_id is None:
            logger.info(
                "No match for %r (year=%s) among %d candidates", bare_name, year, len(candidates)
            )
        else:
            logger.debug("Matched %r to volume %s", bare_name, volume_id)
        return volume_id

    def search_results(self, query: Query) -> list[CandidateRecord] | None:
        """Return the raw search window for a query's bare name, unfiltered."""
        bare_name, _ = self.parse_query(query)
        if not bare_name:
            return []
        return self._source.search(bare_name, SEARCH_OFFSET, SEARCH_LIMIT)

    def close(self) -> None:
        """Release the source's connections. Call once no resolutions remain."""
        self._source.close()

    @staticmethod
    def parse_query(query: Query) -> tuple[str, str | None]:
        """Derive (bare name, year) from a query.

        A "(1999)" suffix in the name wins over query.year.
        """
        bare_name, year = parse_query_name(query.name)
        if not year and query.year is not None:
            year = str(query.year)
        return bare_name, year

    def _resolve(self, query: Query, cancel_event: threading.Event | None) -> ResolveResult:
        _check_cancelled(cancel_event, "on entry")

        volume_id = query.known_id or self.find_id(query, cancel_event)
        if not volume_id:
            return ResolveResult(outcome=ResolveOutcome.NOT_FOUND)

        _check_cancelled(cancel_event, "before detail fetch")
        detail = self._source.fetch_detail(volume_id)
        _check_cancelled(cancel_event, "during detail fetch")
        if detail is None:
            logger.info("No detail response for volume %s", volume_id)
            return ResolveResult(outcome=ResolveOutcome.NOT_FOUND)

        return ResolveResult(
            outcome=ResolveOutcome.MATCHED,
            metadata=map_detail(detail),
            queried_by_id=True,
        )
