# ABOUTME: CLI package for bookshelf, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from bookshelf.cli.commands import identify_cmd, normalize_cmd, resolve_cmd, search_cmd


def _configure_logging(verbose: int) -> None:
    """Route log records through Rich; -v for INFO, -vv for DEBUG."""
    if not verbose:
        return
    level = logging.INFO if verbose == 1 else logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="bookshelf")
@click.option("-v", "--verbose", count=True, help="Increase log output (-v, -vv).")
def cli(verbose: int) -> None:
    """bookshelf - resolve book titles to Google Books metadata."""
    _configure_logging(verbose)


cli.add_command(normalize_cmd.normalize_name)
cli.add_command(search_cmd.search)
cli.add_command(resolve_cmd.resolve)
cli.add_command(identify_cmd.identify)
