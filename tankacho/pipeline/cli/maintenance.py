"""
Maintenance Commands
--------------------

Commands:
    - status: Show notebook counts and check entry/series links
"""
from __future__ import annotations

import sys
import click

from tankacho.core.logging_manager import TankaLogger, handle_cli_error
from tankacho.dataclasses import EntryStatus

from .common import open_store


@click.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show notebook statistics and report broken entry/series links."""
    logger: TankaLogger = ctx.obj["logger"]
    click.echo("📊 Notebook Status\n")

    try:
        store = open_store(ctx)
        published = len(store.query(status=EntryStatus.PUBLISHED))

        click.echo(f"Store: {ctx.obj['store_path']}")
        click.echo(f"  Entries: {len(store)}")
        click.echo(f"  Published: {published}")
        click.echo(f"  Unpublished: {len(store) - published}")
        click.echo(f"  Series: {len(store.series)}")

        problems = store.check_integrity()

    except Exception as e:
        handle_cli_error(ctx, e, "status")
        return

    click.echo()
    if problems:
        logger.log_warning("Integrity problems found", {"count": len(problems)})
        click.echo(f"❌ {len(problems)} integrity problem(s):")
        for problem in problems:
            click.echo(f"  • {problem}")
        sys.exit(1)

    click.echo("✅ Entries and series are consistent")
