# ABOUTME: Candidate selection for catalog search results.
# ABOUTME: First result whose normalized title matches and whose year is within one wins.

from collections.abc import Iterable

from bookshelf.metadata.naming import normalize
from bookshelf.metadata.types import CandidateRecord, NormalizedName

# Allowed difference between the query year and a candidate's published year.
YEAR_TOLERANCE = 1


def published_year(published_date: str | None) -> int | None:
    """Parse the year out of a catalog date like "1965-08-01" or "1965".

    Uses the first four characters when the string is longer, the whole
    string otherwise. Returns None if that does not parse as an integer.
    """
    if not published_date:
        return None
    prefix = published_date[:4] if len(published_date) > 4 else published_date
    return _parse_int(prefix)


def _parse_int(text: str) -> int | None:
    # Plain decimal only: int() alone would also take "1_99" and non-ASCII digits.
    digits = text.strip()
    if digits[:1] in ("+", "-"):
        digits = digits[1:]
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


def _parse_target_year(target_year: int | str | None) -> int | None:
    if target_year is None or isinstance(target_year, int):
        return target_year
    return _parse_int(target_year)


def year_within_tolerance(target_year: int | str | None, published_date: str) -> bool:
    """Check the year gate for one candidate.

    Passes when either side has no parsable year, so a candidate is only
    rejected on a definite mismatch.
    """
    wanted = _parse_target_year(target_year)
    if wanted is None:
        return True
    found = published_year(published_date)
    if found is None:
        return True
    return abs(found - wanted) <= YEAR_TOLERANCE


def candidate_matches(
    target: NormalizedName,
    target_year: int | str | None,
    candidate: CandidateRecord,
) -> bool:
    """Whether a single candidate passes both the name and the year gate."""
    if normalize(candidate.title) != target:
        return False
    return year_within_tolerance(target_year, candidate.published_date)


def select_best(
    target: NormalizedName,
    target_year: int | str | None,
    candidates: Iterable[CandidateRecord],
) -> str | None:
    """Pick the id of the first acceptable candidate, in search-result order.

    There is no scoring: the catalog's ranking decides between candidates
    that both pass the name and year gates.
    """
    for candidate in candidates:
        if candidate_matches(target, target_year, candidate):
            return candidate.id
    return None
