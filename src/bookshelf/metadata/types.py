# ABOUTME: Core data structures for book identity resolution.
# ABOUTME: Query in, CandidateRecord/DetailRecord from the catalog, MetadataRecord out.

from dataclasses import dataclass, field

# Canonical comparable form of a title. Only ever compared for equality.
NormalizedName = str


@dataclass(frozen=True)
class Query:
    """A loosely-identified book to resolve.

    `name` is whatever the host knows the book as (often a file or folder
    name, possibly with a trailing "(1999)"). `known_id` is a catalog volume
    id from a previous resolution; when present the fuzzy search is skipped.
    """

    name: str
    year: int | None = None
    known_id: str | None = None


@dataclass
class CandidateRecord:
    """A lightweight search hit: just enough to decide whether it is our book."""

    id: str
    title: str
    published_date: str = ""


@dataclass
class DetailRecord:
    """A fully-fetched catalog volume.

    `average_rating` is on the catalog's 0-5 scale.
    """

    id: str
    title: str
    description: str = ""
    published_date: str = ""
    publisher: str | None = None
    main_category: str | None = None
    categories: list[str] = field(default_factory=list)
    average_rating: float | None = None
    image_url: str | None = None


@dataclass
class MetadataRecord:
    """Normalized metadata handed to the destination catalog.

    `community_rating` is on a 0-10 scale. `external_id` is the catalog
    volume id; hosts store it and pass it back as `Query.known_id`.
    """

    name: str
    overview: str = ""
    production_year: int | None = None
    studios: set[str] = field(default_factory=set)
    tags: set[str] = field(default_factory=set)
    community_rating: float | None = None
    external_id: str | None = None
    image_url: str | None = None
