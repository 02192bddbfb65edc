# ABOUTME: Title normalization for fuzzy-but-exact matching against catalog search results.
# ABOUTME: Folds case, diacritics, punctuation and Roman numeral suffixes into a comparable form.

import re
import unicodedata

from bookshelf.metadata.types import NormalizedName

# Trailing single-token Roman numerals and their Arabic equivalents.
# Only I-X are recognized; "Rocky XI" is left alone.
_ROMAN_NUMERALS: dict[str, str] = {
    "i": "1",
    "ii": "2",
    "iii": "3",
    "iv": "4",
    "v": "5",
    "vi": "6",
    "vii": "7",
    "viii": "8",
    "ix": "9",
    "x": "10",
}

# Modifier letters and combining diacritical marks left over after decomposition.
_DIACRITIC_FIRST = 0x02B0
_DIACRITIC_LAST = 0x0333

_REMOVE_CHARS = frozenset("\"'!`?")
# There are two dashes here with different code points: "-" and "–".
_SPACER_CHARS = frozenset("/,.:;\\(){}[]+-_=–*")

# Query title patterns, tried in order; the first one that matches wins.
# "Dune (1965)" gives name and year, the last resort takes the whole string as the name.
_QUERY_NAME_PATTERNS = (
    re.compile(r"^(?P<name>.*)\((?P<year>\d{4})\)\s*$"),
    re.compile(r"^(?P<name>.*)$"),
)


def _rewrite_roman_suffix(name: str) -> str:
    """Replace a trailing " iii"-style token with its Arabic numeral."""
    head, sep, tail = name.rpartition(" ")
    if sep and tail in _ROMAN_NUMERALS:
        return f"{head} {_ROMAN_NUMERALS[tail]}"
    return name


def _fold_characters(name: str) -> str:
    """Drop diacritics and noise punctuation, turn separators into spaces."""
    out: list[str] = []
    for char in name:
        if _DIACRITIC_FIRST <= ord(char) <= _DIACRITIC_LAST:
            continue
        if char in _REMOVE_CHARS:
            continue
        if char in _SPACER_CHARS:
            out.append(" ")
        elif char == "&":
            out.append(" and ")
        else:
            out.append(char)
    return "".join(out)


def normalize(raw: str) -> NormalizedName:
    """Reduce a title to the canonical form used for equality matching.

    Pipeline:
    1. Lower-case and NFKD-decompose (accents split into base + combining mark)
    2. Rewrite a trailing Roman numeral I-X as an Arabic numeral
    3. Drop diacritics and quote/bang characters, turn separators into
       spaces, expand "&" to "and"
    4. Remove every "the" (substring, not word: "other" becomes "or")
    5. Rewrite " - " as ": " (never fires, step 3 already took the hyphens)
    6. Collapse repeated spaces and strip

    The result is not meant for display.
    """
    name = unicodedata.normalize("NFKD", raw.lower())
    name = _rewrite_roman_suffix(name)
    name = _fold_characters(name)
    name = name.replace("the", "")
    name = name.replace(" - ", ": ")

    while "  " in name:
        name = name.replace("  ", " ")

    return name.strip()


def parse_query_name(name: str) -> tuple[str, str | None]:
    """Split a query title into (bare name, inferred year).

    "Dune (1965)" -> ("Dune", "1965"); anything else -> (name, None).
    """
    for pattern in _QUERY_NAME_PATTERNS:
        m = pattern.match(name)
        if m:
            return m.group("name").strip(), m.groupdict().get("year")
    return name.strip(), None
