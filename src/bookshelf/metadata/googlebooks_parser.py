# ABOUTME: Parsing functions for Google Books API JSON responses.
# ABOUTME: Converts volume search and volume detail payloads into CandidateRecord/DetailRecord.

from typing import Any

from bookshelf.metadata.types import CandidateRecord, DetailRecord

# Cover sizes in order of preference.
_IMAGE_SIZES = ("extraLarge", "large", "medium", "small", "thumbnail", "smallThumbnail")


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _optional_text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def parse_search_response(data: dict[str, Any]) -> list[CandidateRecord]:
    """Parse a Google Books volumes search response into candidates.

    The API omits "items" entirely when nothing matched, which is an empty
    result rather than an error. Items without an id are skipped, order is
    preserved.
    """
    items = data.get("items") or []
    results: list[CandidateRecord] = []

    for item in items:
        if not isinstance(item, dict):
            continue
        volume_id = _text(item.get("id"))
        if not volume_id:
            continue
        info = item.get("volumeInfo") or {}
        results.append(
            CandidateRecord(
                id=volume_id,
                title=_text(info.get("title")),
                published_date=_text(info.get("publishedDate")),
            )
        )

    return results


def select_image_url(image_links: dict[str, Any]) -> str | None:
    """Pick the largest available cover link, upgraded to https."""
    for size in _IMAGE_SIZES:
        url = image_links.get(size)
        if isinstance(url, str) and url:
            return url.replace("http://", "https://", 1)
    return None


def _parse_rating(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def parse_volume_response(data: dict[str, Any]) -> DetailRecord | None:
    """Parse a Google Books single-volume response into a DetailRecord.

    Returns None when the payload does not describe a volume (no id),
    which is how an unknown id comes back from some proxies.
    """
    volume_id = _text(data.get("id"))
    if not volume_id:
        return None

    info = data.get("volumeInfo") or {}
    raw_categories = info.get("categories")
    categories = (
        [c for c in raw_categories if isinstance(c, str)]
        if isinstance(raw_categories, list)
        else []
    )

    return DetailRecord(
        id=volume_id,
        title=_text(info.get("title")),
        description=_text(info.get("description")),
        published_date=_text(info.get("publishedDate")),
        publisher=_optional_text(info.get("publisher")),
        main_category=_optional_text(info.get("mainCategory")),
        categories=categories,
        average_rating=_parse_rating(info.get("averageRating")),
        image_url=select_image_url(info.get("imageLinks") or {}),
    )
