"""
CSV Interchange Commands
------------------------

Commands for moving entries in and out of the notebook as CSV.

Commands:
    - import: Import a native, legacy-entry or legacy-series CSV file
    - export: Write every entry as native CSV
"""
from __future__ import annotations

import click
from pathlib import Path
from typing import Optional

from tankacho.core.logging_manager import TankaLogger, handle_cli_error
from tankacho.core.paths import DEFAULT_EXPORT_NAME, EXPORT_DIR
from tankacho.pipeline.csv_export import export_csv, export_csv_file
from tankacho.pipeline.csv_import import import_csv_file
from tankacho.pipeline.format_detector import CsvFormat

from .common import open_store


@click.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_csv_command(ctx: click.Context, file: str) -> None:
    """
    Import entries (and series) from a CSV file.

    The format is detected from the header row. Rows whose id already
    exists are skipped, so importing the same native file twice is safe.
    """
    logger: TankaLogger = ctx.obj["logger"]

    click.echo(f"📥 Importing {Path(file).name}...")

    try:
        store = open_store(ctx)
        stats = import_csv_file(store, Path(file), logger=logger)

        click.echo("\n✅ Import complete:")
        if stats.source_format:
            click.echo(f"  Format: {CsvFormat(stats.source_format).display_name}")
        click.echo(f"  Rows read: {stats.rows_read}")
        click.echo(f"  Entries imported: {stats.entries_imported}")
        click.echo(f"  Series created: {stats.series_created}")
        if stats.duplicates_skipped > 0:
            click.echo(f"  Duplicates skipped: {stats.duplicates_skipped}")
        if stats.blank_rows > 0:
            click.echo(f"  Blank rows: {stats.blank_rows}")
        if stats.invalid_rows > 0:
            click.echo(f"  ⚠️  Invalid rows: {stats.invalid_rows}")
        click.echo(f"  Duration: {stats.duration():.2f}s")

    except Exception as e:
        handle_cli_error(ctx, e, "import_csv", {"file": file})


@click.command("export")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output CSV file (prints to stdout if omitted)",
)
@click.option(
    "--save",
    is_flag=True,
    help=f"Write to the exports directory as {DEFAULT_EXPORT_NAME}",
)
@click.pass_context
def export_csv_command(ctx: click.Context, output: Optional[str], save: bool) -> None:
    """Export every entry as native CSV."""
    logger: TankaLogger = ctx.obj["logger"]

    try:
        store = open_store(ctx)
        if output is None and save:
            output = str(EXPORT_DIR / DEFAULT_EXPORT_NAME)
        if output is None:
            click.echo(export_csv(store))
            return

        stats = export_csv_file(store, Path(output), logger=logger)
        click.echo(f"✅ {stats.summary()}")

    except Exception as e:
        handle_cli_error(ctx, e, "export_csv", {"output": output})
