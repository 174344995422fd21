"""Salary Sim CLI - Command-line interface for net salary simulations."""

from pathlib import Path

import click
from rich.console import Console

from salarysim import __version__
from salarysim.sdk import (
    ExportPreconditionError,
    ProfileError,
    SalarySimulator,
    SimulationInput,
    load_defaults,
)

from .history_commands import history as history_group, pick_entry
from .profile_commands import profile as profile_group
from .settings_commands import settings as settings_group
from .renderers.result_renderer import render_notification, render_result


@click.group()
@click.version_option(version=__version__, prog_name="salary-sim")
def cli():
    """Salary Sim - net monthly and annual salary simulations.

    Every simulation is saved to a history (newest first) that can be
    listed and exported as PDF.

    Configuration is loaded from (in order):

    \b
    1. SALARY_SIM_CONFIG_PATH environment variable
    2. ~/.config/salary-sim/ (XDG default)

    Run 'salary-sim profile show' to see the default values.
    """
    pass


cli.add_command(history_group)
cli.add_command(profile_group)
cli.add_command(settings_group)


@cli.command("simulate")
@click.option("--name", default="", help="Employee name.")
@click.option("--number", "identifier", default="", help="Employee/reference number.")
@click.option("--gross", "gross_salary", help="Monthly gross salary (€).")
@click.option("--regime", "tax_regime", type=click.Choice(["single_holder", "dual_holder"]),
              help="Tax regime (informational).")
@click.option("--dependents", help="Number of dependents.")
@click.option("--ss-rate", "social_security_rate", help="Social security rate (%).")
@click.option("--meal-daily", "meal_allowance_daily", help="Meal allowance per working day (€).")
@click.option("--meal-mode", "meal_allowance_mode", type=click.Choice(["card", "cash"]),
              help="Meal allowance payment type (informational).")
@click.option("--other-deductions", help="Other monthly deductions (€).")
@click.option("--pdf", is_flag=True, help="Also export the result as PDF.")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False),
              help="Directory for --pdf (default: <data_dir>/exports)")
def simulate(pdf, output_dir, **fields):
    """Compute net salary and save the simulation to history.

    Options not given fall back to profile.yaml 'defaults'.

    \b
    Example:
        salary-sim simulate --name "Ana Silva" --number 1234 --gross 1500 \\
            --dependents 1 --ss-rate 11 --meal-daily 5 --other-deductions 50
    """
    try:
        defaults = load_defaults()
    except ProfileError as e:
        raise click.ClickException(str(e))

    for key, value in defaults.model_dump().items():
        if fields.get(key) is None and value is not None:
            fields[key] = value

    # Unset options are dropped so the schema defaults apply
    raw = SimulationInput(**{k: v for k, v in fields.items() if v is not None})

    console = Console(width=140)
    simulator = SalarySimulator()
    outcome = simulator.submit(raw)
    if not outcome.ok:
        raise click.ClickException(outcome.notification.message)

    render_result(console, outcome.result)
    render_notification(console, outcome.notification)

    if pdf:
        exported = simulator.export(output_dir=Path(output_dir) if output_dir else None)
        render_notification(console, exported.notification)
        click.echo(f"Saved: {exported.path}")


@cli.command("export")
@click.argument("index", type=int, default=0, required=False)
@click.option("--output-dir", "-o", type=click.Path(file_okay=False),
              help="Output directory (default: <data_dir>/exports)")
def export(index, output_dir):
    """Export simulation INDEX from history as PDF (default: 0, the newest)."""
    simulator = SalarySimulator()
    results = simulator.history
    # With an empty history, export() reports the missing result
    result = pick_entry(results, index) if results else None
    try:
        exported = simulator.export(
            output_dir=Path(output_dir) if output_dir else None,
            result=result,
        )
    except ExportPreconditionError as e:
        raise click.ClickException(str(e))

    render_notification(Console(width=140), exported.notification)
    click.echo(f"Saved: {exported.path}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
