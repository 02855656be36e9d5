#!/usr/bin/env python3
"""
Tankachō CLI
------------

Command-line interface for the tanka notebook.

Command Groups:
    - Interchange: import, export
    - Entries: add, edit, list
    - Series: series-create, series-list, deck
    - Maintenance: status

Usage:
    # Bring in an old export, then write a native backup
    tanka import old_tanka.csv
    tanka export -o data/exports/tanka_entries.csv

    # Write and file a poem
    tanka add "春の夜の" "夢ばかりなる" "手枕に" --tags "spring, haru"
    tanka series-create "春" --plan 10
    tanka deck series-1700000000000 tanka-1700000000001

    # Look things up
    tanka list --tag haru --status published
    tanka status
"""
from __future__ import annotations

import click
from pathlib import Path

from tankacho.core.paths import LOG_DIR, STORE_PATH
from tankacho.core.cli import setup_logger


@click.group()
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False),
    default=str(STORE_PATH),
    help="SQLite file holding the notebook",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, store_path: str, log_dir: str, verbose: bool) -> None:
    """Tankachō: a notebook for tanka and their series"""
    ctx.ensure_object(dict)
    ctx.obj["store_path"] = Path(store_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    if ctx.obj.get("logger") is None:
        ctx.obj["logger"] = setup_logger(Path(log_dir), "cli")


# Import and register commands from submodules
from .transfer import import_csv_command, export_csv_command
from .entries import add, edit, list_entries
from .series import series_create, series_list, deck
from .maintenance import status

# Register commands
cli.add_command(import_csv_command)
cli.add_command(export_csv_command)
cli.add_command(add)
cli.add_command(edit)
cli.add_command(list_entries)
cli.add_command(series_create)
cli.add_command(series_list)
cli.add_command(deck)
cli.add_command(status)


if __name__ == "__main__":
    cli(obj={})
