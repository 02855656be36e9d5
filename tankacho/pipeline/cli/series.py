"""
Series Commands
---------------

Commands for managing series (連作) and their decks.

Commands:
    - series-create: Create an empty series
    - series-list: Show every series with its progress
    - deck: Show or replace a series' entry list
"""
from __future__ import annotations

import click
from typing import Optional, Tuple

from tankacho.core.logging_manager import handle_cli_error

from .common import format_entry, open_store


@click.command("series-create")
@click.argument("name")
@click.option("--plan", "plan_count", default="0", help="Planned number of poems (0 = none)")
@click.pass_context
def series_create(ctx: click.Context, name: str, plan_count: Optional[str]) -> None:
    """Create a new, empty series."""
    try:
        store = open_store(ctx)
        series = store.create_series(name, plan_count=plan_count)
        click.echo(f"✅ Created series {series.id}: {series.name} ({series.progress})")

    except Exception as e:
        handle_cli_error(ctx, e, "series_create", {"name": name})


@click.command("series-list")
@click.pass_context
def series_list(ctx: click.Context) -> None:
    """List every series with its progress."""
    try:
        store = open_store(ctx)
        if not store.series:
            click.echo("No series")
            return

        for series in store.series:
            click.echo(f"{series.id}  {series.name}  {store.series_progress(series.id)}")

    except Exception as e:
        handle_cli_error(ctx, e, "series_list")


@click.command()
@click.argument("series_id")
@click.argument("entry_ids", nargs=-1)
@click.option("--clear", is_flag=True, help="Remove every entry from the series")
@click.pass_context
def deck(
    ctx: click.Context, series_id: str, entry_ids: Tuple[str, ...], clear: bool
) -> None:
    """
    Show or replace the entries of a series.

    With no ENTRY_IDS the current deck is printed. Otherwise the deck becomes
    exactly ENTRY_IDS, in that order; entries left out are unassigned and
    entries taken from another series leave it.
    """
    try:
        store = open_store(ctx)
        if entry_ids or clear:
            series = store.set_deck_membership(series_id, list(entry_ids))
            click.echo(f"✅ {series.name}: {series.progress}")
            return

        series = store.get_series(series_id)
        if series is None:
            raise click.BadParameter(f"Unknown series: {series_id}", param_hint="SERIES_ID")
        click.echo(f"{series.name} ({series.progress})")
        for entry in store.series_entries(series_id):
            click.echo(f"  {format_entry(entry)}")

    except click.ClickException:
        raise
    except Exception as e:
        handle_cli_error(ctx, e, "deck", {"series_id": series_id})
