# ABOUTME: Rich rendering helpers shared by the resolve and identify commands.
# ABOUTME: Turns a MetadataRecord into a two-column field/value table.

from rich.table import Table

from bookshelf.metadata.types import MetadataRecord


def metadata_table(record: MetadataRecord) -> Table:
    """Build a field/value table for a resolved record, skipping empty fields."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("Name", record.name)
    if record.production_year is not None:
        table.add_row("Year", str(record.production_year))
    if record.studios:
        table.add_row("Publisher", ", ".join(sorted(record.studios)))
    if record.tags:
        table.add_row("Tags", ", ".join(sorted(record.tags)))
    if record.community_rating is not None:
        table.add_row("Rating", f"{record.community_rating:g}/10")
    if record.external_id:
        table.add_row("Google ID", record.external_id)
    if record.image_url:
        table.add_row("Cover", record.image_url)
    if record.overview:
        table.add_row("Overview", record.overview)
    return table
