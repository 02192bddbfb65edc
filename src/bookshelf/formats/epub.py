# ABOUTME: Builds resolution queries from EPUB metadata using ebooklib.
# ABOUTME: Defensive wrapper that handles malformed files gracefully.

import logging
from pathlib import Path

from ebooklib import epub

from bookshelf.metadata.googlebooks import PROVIDER_ID_KEY
from bookshelf.metadata.matching import published_year
from bookshelf.metadata.types import Query

logger = logging.getLogger(__name__)

# Identifier schemes that carry a Google Books volume id (Calibre writes "GOOGLE",
# hosts keyed by PROVIDER_ID_KEY write "GoogleBooks").
_GOOGLE_SCHEMES = frozenset({"google", PROVIDER_ID_KEY.lower(), "google_books"})


class EpubReadError(Exception):
    """Raised when an EPUB file cannot be read or parsed."""


def _get_metadata_value(book: epub.EpubBook, namespace: str, name: str) -> str | None:
    """Extract a single metadata value from an EpubBook, or None if missing."""
    values = book.get_metadata(namespace, name)
    if not values:
        return None
    # Metadata entries are tuples of (value, attributes)
    value = values[0][0]
    return str(value).strip() if value else None


def _identifier_scheme(attrs: dict[str, str]) -> str:
    """Find the scheme attribute whether or not lxml kept the opf namespace."""
    for key, value in attrs.items():
        if key == "scheme" or key.endswith("}scheme") or key.endswith(":scheme"):
            return value.lower()
    return ""


def _get_google_id(book: epub.EpubBook) -> str | None:
    """Return a Google Books volume id stored as a DC identifier, if any."""
    for value, attrs in book.get_metadata("DC", "identifier"):
        if not value:
            continue
        if _identifier_scheme(attrs or {}) in _GOOGLE_SCHEMES:
            return str(value).strip()
    return None


def read_epub_query(path: Path) -> Query:
    """Build a resolution Query from an EPUB file.

    The DC title (or the file stem when there is none) becomes the name,
    the year of the DC date becomes the year, and a Google identifier
    becomes the known id.

    Raises:
        EpubReadError: If the file cannot be read or parsed.
    """
    if not path.exists():
        raise EpubReadError(f"File not found: {path}")

    try:
        book = epub.read_epub(str(path), options={"ignore_ncx": True})
    except Exception as exc:
        raise EpubReadError(f"Failed to read EPUB: {path}: {exc}") from exc

    title = _get_metadata_value(book, "DC", "title")
    if not title:
        logger.debug("No DC title in %s, using file name", path)
        title = path.stem

    return Query(
        name=title,
        year=published_year(_get_metadata_value(book, "DC", "date")),
        known_id=_get_google_id(book),
    )


def find_epubs(path: Path) -> list[Path]:
    """Find EPUB files at the given path (single file or directory)."""
    if path.is_file():
        return [path]
    return sorted(path.rglob("*.epub"))
