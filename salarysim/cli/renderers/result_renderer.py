"""Rich renderers for simulation results and history.

Transforms SDK models into formatted Rich tables.
"""

from typing import List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from salarysim.sdk.notifications import Notification
from salarysim.sdk.report import REGIME_LABELS, breakdown_rows, format_amount
from salarysim.sdk.schemas import SimulationResult


def render_result(console: Console, result: SimulationResult) -> None:
    """Render one simulation as a breakdown table.

    Args:
        console: Rich Console instance
        result: Computed simulation
    """
    table = Table(
        title=escape(f"{result.name} ({result.identifier})"),
        show_header=False,
        box=box.SIMPLE,
    )
    table.add_column("item")
    table.add_column("amount", justify="right")

    for label, value in breakdown_rows(result):
        style = None
        if label.startswith("Net"):
            style = "bold"
        elif value < 0:
            style = "red"
        table.add_row(label, format_amount(value), style=style)

    table.add_row("Regime", REGIME_LABELS.get(result.tax_regime, result.tax_regime))
    table.add_row("Dependents", str(result.dependents))
    table.add_row("Meal allowance type", result.meal_allowance_mode)

    console.print(table)
    console.print(f"[dim]{escape(result.timestamp)}[/dim]")


def render_history(console: Console, results: List[SimulationResult]) -> None:
    """Render the history as one row per simulation, newest first."""
    if not results:
        console.print("No simulations yet.")
        return

    table = Table(title="History", box=box.SIMPLE_HEAD)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date")
    table.add_column("Name")
    table.add_column("Gross", justify="right")
    table.add_column("Net", justify="right", style="bold")

    for index, result in enumerate(results):
        table.add_row(
            str(index),
            result.timestamp,
            escape(result.name),
            format_amount(result.gross_salary),
            format_amount(result.net_monthly),
        )

    console.print(table)


def render_notification(console: Console, notification: Notification) -> None:
    """Render a notification as a colored panel."""
    color = "red" if notification.is_error else "green"
    console.print(Panel(
        f"[{color}]{notification.message}[/{color}]",
        border_style=color,
        expand=False,
    ))
