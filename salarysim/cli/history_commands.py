"""History CLI commands.

Read-only views of history.json. Entries are numbered from 0 (newest).
"""

import json

import click
from rich.console import Console

from salarysim.sdk import HistoryStore

from .renderers.result_renderer import render_history, render_result


def pick_entry(results, index: int):
    """Return history entry INDEX (0 = newest) or fail with a CLI error."""
    if index < 0 or index >= len(results):
        raise click.ClickException(f"No simulation #{index}. History has {len(results)} simulation(s).")
    return results[index]


@click.group("history")
def history():
    """Browse past simulations (newest first)."""
    pass


@history.command("list")
@click.option("--count", is_flag=True, help="Print only the number of simulations.")
@click.option("--limit", "-n", type=click.IntRange(min=1), help="Show only the N most recent.")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON records.")
def history_list(count, limit, as_json):
    """List past simulations."""
    results = HistoryStore().load()

    if count:
        click.echo(len(results))
        return

    if limit:
        results = results[:limit]

    if as_json:
        click.echo(json.dumps([r.to_record() for r in results], indent=2, ensure_ascii=False))
        return

    render_history(Console(width=140), results)


@history.command("show")
@click.argument("index", type=int, default=0, required=False)
def history_show(index):
    """Show the full breakdown of simulation INDEX (default: 0, the newest)."""
    results = HistoryStore().load()
    if not results:
        raise click.ClickException("No simulations in history. Run 'salary-sim simulate' first.")
    render_result(Console(width=140), pick_entry(results, index))
