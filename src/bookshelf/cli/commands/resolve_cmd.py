# ABOUTME: The `bookshelf resolve` command for resolving one title to catalog metadata.
# ABOUTME: Accepts "Name (Year)" titles, an explicit year, or a known Google Books id.

import json

import click
from rich.console import Console
from rich.markup import escape

from bookshelf.cli.display import metadata_table
from bookshelf.cli.options import api_url_option, create_resolver, timeout_option
from bookshelf.metadata.googlebooks import PROVIDER_ID_KEY
from bookshelf.metadata.types import MetadataRecord, Query


def _record_to_dict(record: MetadataRecord) -> dict[str, object]:
    return {
        "name": record.name,
        "overview": record.overview,
        "production_year": record.production_year,
        "studios": sorted(record.studios),
        "tags": sorted(record.tags),
        "community_rating": record.community_rating,
        "provider_ids": {PROVIDER_ID_KEY: record.external_id} if record.external_id else {},
        "image_url": record.image_url,
    }


@click.command("resolve")
@click.argument("name")
@click.option("-y", "--year", type=int, default=None, help="Expected publication year.")
@click.option("--id", "known_id", default=None, help="Known Google Books volume id.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the record as JSON.")
@api_url_option
@timeout_option
def resolve(
    name: str,
    year: int | None,
    known_id: str | None,
    as_json: bool,
    api_url: str,
    timeout: float,
) -> None:
    """Resolve NAME (e.g. "Dune (1965)") to Google Books metadata."""
    console = Console()
    resolver = create_resolver(api_url, timeout)
    try:
        result = resolver.resolve(Query(name=name, year=year, known_id=known_id))
    finally:
        resolver.close()

    if not result.found or result.metadata is None:
        console.print(f"[yellow]No match for {escape(repr(name))}.[/yellow]")
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(_record_to_dict(result.metadata), indent=2))
        return

    console.print(metadata_table(result.metadata))
