# ABOUTME: Metadata package for book identity resolution against external catalogs.
# ABOUTME: Exports the data model, the title normalizer, and the BookSource protocol.

from bookshelf.metadata.mapper import map_detail
from bookshelf.metadata.matching import select_best
from bookshelf.metadata.naming import normalize, parse_query_name
from bookshelf.metadata.source import BookSource
from bookshelf.metadata.types import (
    CandidateRecord,
    DetailRecord,
    MetadataRecord,
    NormalizedName,
    Query,
)

__all__ = [
    "BookSource",
    "CandidateRecord",
    "DetailRecord",
    "MetadataRecord",
    "NormalizedName",
    "Query",
    "map_detail",
    "normalize",
    "parse_query_name",
    "select_best",
]
