# ABOUTME: The `bookshelf identify` command for resolving EPUB files in bulk.
# ABOUTME: Reads each EPUB's title/date/id, resolves them in parallel, and prints a summary table.

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookshelf.cli.options import api_url_option, create_resolver, timeout_option
from bookshelf.core.resolver import ResolveOutcome, ResolveResult
from bookshelf.formats.epub import EpubReadError, find_epubs, read_epub_query
from bookshelf.metadata.types import Query

_OUTCOME_STYLE = {
    ResolveOutcome.MATCHED: "[green]matched[/green]",
    ResolveOutcome.NOT_FOUND: "[yellow]not found[/yellow]",
    ResolveOutcome.CANCELLED: "[dim]cancelled[/dim]",
}


@click.command("identify")
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(1, 16),
    default=4,
    show_default=True,
    help="Number of resolutions to run in parallel.",
)
@api_url_option
@timeout_option
def identify(path: Path, jobs: int, api_url: str, timeout: float) -> None:
    """Resolve EPUB files at PATH (a file or a directory) against Google Books.

    Ctrl-C cancels queued files at once. Requests already on the wire are
    allowed to finish, which can take up to --timeout seconds; their
    responses are discarded.
    """
    console = Console()

    epubs = find_epubs(path)
    if not epubs:
        console.print("[yellow]No EPUB files found.[/yellow]")
        return

    queries: list[tuple[Path, Query]] = []
    errors = 0
    for epub_path in epubs:
        try:
            queries.append((epub_path, read_epub_query(epub_path)))
        except EpubReadError as exc:
            console.print(f"[red]Error reading:[/red] {exc}")
            errors += 1

    resolver = create_resolver(api_url, timeout)
    cancel_event = threading.Event()
    results: list[ResolveResult] = []

    try:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            futures = [
                executor.submit(resolver.resolve, query, cancel_event) for _, query in queries
            ]
            try:
                results = [future.result() for future in futures]
            except KeyboardInterrupt:
                # In-flight resolutions see the event at their next checkpoint.
                cancel_event.set()
                results = [future.result() for future in futures]
    finally:
        resolver.close()

    table = Table()
    table.add_column("File", style="bold")
    table.add_column("Query")
    table.add_column("Outcome")
    table.add_column("Google ID", style="dim")
    table.add_column("Title")

    matched = 0
    for (epub_path, query), result in zip(queries, results):
        record = result.metadata
        if result.found:
            matched += 1
        label = escape(query.name)
        if query.known_id is not None:
            label += " [dim](id)[/dim]"
        table.add_row(
            escape(epub_path.name),
            label,
            _OUTCOME_STYLE[result.outcome],
            (record.external_id or "") if record else "",
            escape(record.name) if record else "",
        )

    console.print(table)
    console.print(
        f"\n[dim]{matched} matched, {len(queries) - matched} unmatched, {errors} unreadable[/dim]"
    )
    if errors:
        raise SystemExit(1)
