"""
Entry Commands
--------------

Commands for writing, editing and finding poems.

Commands:
    - add: Create an entry from poem lines
    - edit: Change fields of an existing entry
    - list: Filter entries, newest first
"""
from __future__ import annotations

import click
from typing import List, Optional, Tuple

from tankacho.core.logging_manager import handle_cli_error
from tankacho.dataclasses import EntryStatus
from tankacho.utils.parsers import parse_form_tags
from tankacho.utils.txt import split_form_text

from .common import format_entry, open_store


def _collect_lines(text: Tuple[str, ...]) -> List[str]:
    """Each argument is a line; an argument with line breaks counts as several."""
    lines: List[str] = []
    for part in text:
        lines.extend(split_form_text(part))
    return lines


@click.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--tags", default="", help="Comma-separated tags")
@click.option("--category", default="", help="Category")
@click.option("--series", "series_id", default="", help="Existing series id to join")
@click.option("--memo", default="", help="Memo")
@click.pass_context
def add(
    ctx: click.Context,
    text: Tuple[str, ...],
    tags: str,
    category: str,
    series_id: str,
    memo: str,
) -> None:
    """
    Add a poem. Pass up to five lines as separate arguments.

    Lines beyond the fifth are dropped.
    """
    try:
        store = open_store(ctx)
        entry = store.create_entry(
            _collect_lines(text),
            tags=parse_form_tags(tags),
            category=category,
            series_id=series_id,
            memo=memo,
        )
        click.echo(f"✅ Added {entry.id}")
        click.echo(f"  {format_entry(entry)}")

    except Exception as e:
        handle_cli_error(ctx, e, "add_entry")


@click.command()
@click.argument("entry_id")
@click.option("--line", "lines", multiple=True, help="Replacement poem line (repeatable)")
@click.option("--tags", default=None, help="Comma-separated tags (replaces all)")
@click.option("--category", default=None, help="Category")
@click.option("--series", "series_id", default=None, help='Series id ("" to unassign)')
@click.option("--memo", default=None, help="Memo")
@click.option(
    "--status",
    type=click.Choice(EntryStatus.choices()),
    default=None,
    help="Publication status",
)
@click.pass_context
def edit(
    ctx: click.Context,
    entry_id: str,
    lines: Tuple[str, ...],
    tags: Optional[str],
    category: Optional[str],
    series_id: Optional[str],
    memo: Optional[str],
    status: Optional[str],
) -> None:
    """Edit an entry. Options left out keep their current value."""
    try:
        store = open_store(ctx)
        entry = store.edit_entry(
            entry_id,
            lines=_collect_lines(lines) if lines else None,
            tags=parse_form_tags(tags) if tags is not None else None,
            category=category,
            series_id=series_id,
            memo=memo,
            status=EntryStatus(status) if status else None,
        )
        click.echo(f"✅ Updated {entry.id}")
        click.echo(f"  {format_entry(entry)}")

    except Exception as e:
        handle_cli_error(ctx, e, "edit_entry", {"entry_id": entry_id})


@click.command("list")
@click.option("-k", "--keyword", default=None, help="Text in a line or the memo")
@click.option("-t", "--tag", default=None, help="Tag substring (case-insensitive)")
@click.option("-c", "--category", default=None, help="Category substring (case-insensitive)")
@click.option(
    "-s",
    "--status",
    type=click.Choice(EntryStatus.choices()),
    default=None,
    help="Publication status",
)
@click.option("--on", "day", default=None, help="Only entries dated YYYY-MM-DD")
@click.pass_context
def list_entries(
    ctx: click.Context,
    keyword: Optional[str],
    tag: Optional[str],
    category: Optional[str],
    status: Optional[str],
    day: Optional[str],
) -> None:
    """List entries matching every given filter, newest first."""
    try:
        store = open_store(ctx)
        results = store.query(keyword=keyword, tag=tag, category=category, status=status)
        if day:
            on_day = {e.id for e in store.entries_on(day)}
            results = [e for e in results if e.id in on_day]

        if not results:
            click.echo("No entries found")
            return

        for entry in results:
            click.echo(format_entry(entry))
        click.echo(f"\n{len(results)} entries")

    except Exception as e:
        handle_cli_error(ctx, e, "list_entries")
