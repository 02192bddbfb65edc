# ABOUTME: The `bookshelf search` command for listing catalog search candidates.
# ABOUTME: Shows the fixed search window with each candidate's normalized title and match status.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookshelf.cli.options import api_url_option, create_resolver, timeout_option
from bookshelf.core.resolver import Resolver
from bookshelf.metadata.matching import candidate_matches
from bookshelf.metadata.naming import normalize
from bookshelf.metadata.types import Query


@click.command("search")
@click.argument("name")
@click.option("-y", "--year", type=int, default=None, help="Expected publication year.")
@api_url_option
@timeout_option
def search(name: str, year: int | None, api_url: str, timeout: float) -> None:
    """List Google Books candidates for NAME and show which ones would match."""
    console = Console()
    query = Query(name=name, year=year)
    resolver = create_resolver(api_url, timeout)
    try:
        candidates = resolver.search_results(query)
    finally:
        resolver.close()

    if candidates is None:
        console.print("[red]Catalog did not respond.[/red]")
        raise SystemExit(1)
    if not candidates:
        console.print("[yellow]No results found.[/yellow]")
        return

    bare_name, target_year = Resolver.parse_query(query)
    target = normalize(bare_name)

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Published", width=10)
    table.add_column("Normalized")
    table.add_column("Match", width=8)

    selected = False
    for rank, candidate in enumerate(candidates, start=1):
        status = ""
        if candidate_matches(target, target_year, candidate):
            status = "ok" if selected else "[green]selected[/green]"
            selected = True
        table.add_row(
            str(rank),
            escape(candidate.id),
            escape(candidate.title),
            candidate.published_date or "?",
            normalize(candidate.title),
            status,
        )

    console.print(table)
    console.print(f"\n[dim]Looking for {target!r} (year={target_year or 'any'})[/dim]")
