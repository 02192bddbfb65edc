# ABOUTME: Shared pytest fixtures for bookshelf tests.
# ABOUTME: Provides sample EPUB files (titled, id-tagged, and corrupt) for testing.

from pathlib import Path

import pytest
from ebooklib import epub


def _write_epub(
    path: Path,
    title: str,
    date: str | None = None,
    google_id: str | None = None,
    id_scheme: str = "GOOGLE",
) -> Path:
    book = epub.EpubBook()
    book.set_identifier(f"urn:uuid:{path.stem}")
    book.set_title(title)
    book.set_language("en")
    book.add_author("Frank Herbert")
    if date is not None:
        book.add_metadata("DC", "date", date)
    if google_id is not None:
        book.add_metadata("DC", "identifier", google_id, {"scheme": id_scheme})

    # Add a minimal chapter so the EPUB is structurally valid
    chapter = epub.EpubHtml(title="Chapter 1", file_name="chap01.xhtml", lang="en")
    chapter.content = b"<html><body><h1>Chapter 1</h1><p>Content.</p></body></html>"
    book.add_item(chapter)

    book.toc = [epub.Link("chap01.xhtml", "Chapter 1", "chap01")]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", chapter]

    epub.write_epub(str(path), book)
    return path


@pytest.fixture
def sample_epub(tmp_path: Path) -> Path:
    """An EPUB titled "Dune" with a 1965 publication date."""
    return _write_epub(tmp_path / "dune.epub", "Dune", date="1965-08-01")


@pytest.fixture
def google_id_epub(tmp_path: Path) -> Path:
    """An EPUB that already carries a Google Books identifier."""
    return _write_epub(tmp_path / "tagged.epub", "Dune", google_id="abc")


@pytest.fixture
def corrupt_epub(tmp_path: Path) -> Path:
    """A corrupt file that is not a valid EPUB."""
    filepath = tmp_path / "corrupt.epub"
    filepath.write_text("this is not a valid epub file")
    return filepath


@pytest.fixture
def epub_library(tmp_path: Path) -> Path:
    """A directory with two EPUBs: one resolvable, one unknown."""
    root = tmp_path / "library"
    (root / "Frank Herbert").mkdir(parents=True)
    _write_epub(root / "Frank Herbert" / "dune.epub", "Dune", date="1965")
    _write_epub(root / "unknown.epub", "A Book Nobody Wrote")
    return root


@pytest.fixture
def make_epub(tmp_path: Path):
    """Factory writing an EPUB with the given title/date/identifier into tmp_path."""

    def _make(filename: str, title: str, **kwargs) -> Path:
        return _write_epub(tmp_path / filename, title, **kwargs)

    return _make
