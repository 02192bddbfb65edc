# ABOUTME: The `bookshelf normalize` command for inspecting the title matching key.
# ABOUTME: Prints the normalized form of each given title, one per line.

import click
from rich.console import Console
from rich.markup import escape

from bookshelf.metadata.naming import normalize


@click.command("normalize")
@click.argument("titles", nargs=-1, required=True)
def normalize_name(titles: tuple[str, ...]) -> None:
    """Show the normalized matching key for one or more titles."""
    console = Console()
    for title in titles:
        console.print(f"{escape(title)} [dim]->[/dim] [bold]{escape(normalize(title))}[/bold]")
