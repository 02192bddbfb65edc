# ABOUTME: Shared Click options and factories for bookshelf CLI commands.
# ABOUTME: Catalog URL and timeout come from flags or BOOKSHELF_* environment variables.

import click

from bookshelf.core.resolver import Resolver
from bookshelf.metadata.googlebooks import GOOGLE_BOOKS_API_URL, GoogleBooksSource
from bookshelf.metadata.http import DEFAULT_TIMEOUT, BookshelfHttpClient

api_url_option = click.option(
    "--api-url",
    envvar="BOOKSHELF_API_URL",
    default=GOOGLE_BOOKS_API_URL,
    show_default=True,
    help="Google Books API base URL (env: BOOKSHELF_API_URL).",
)

timeout_option = click.option(
    "--timeout",
    envvar="BOOKSHELF_TIMEOUT",
    type=click.FloatRange(min=0.1),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="HTTP timeout in seconds (env: BOOKSHELF_TIMEOUT).",
)


def create_resolver(api_url: str, timeout: float) -> Resolver:
    """Create a Resolver backed by the Google Books API."""
    http_client = BookshelfHttpClient(timeout=timeout)
    return Resolver(GoogleBooksSource(http_client, base_url=api_url))
