"""Settings CLI commands for Salary Sim.

settings.json holds a single setting, data_dir: the directory for
history.json and exported PDF reports.
"""

from pathlib import Path

import click

from salarysim.sdk import (
    HistoryStore,
    get_data_path,
    get_exports_path,
    get_profile_path,
    get_settings_path,
    load_settings,
    save_settings,
    set_setting,
)


@click.group()
def settings():
    """Manage settings.json (data directory)."""
    pass


@settings.command("show")
def settings_show():
    """Show where settings, profile, history and exports live."""
    source = "settings.json" if load_settings().get("data_dir") else "default"
    store = HistoryStore()
    store.load()

    click.echo(f"Settings:  {get_settings_path()}")
    click.echo(f"Profile:   {get_profile_path()}")
    click.echo(f"Data dir:  {get_data_path()} ({source})")
    click.echo(f"History:   {store.path} ({len(store)} simulation(s))")
    click.echo(f"Exports:   {get_exports_path()}")


@settings.command("data-dir")
@click.argument("path", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option("--clear", is_flag=True, help="Go back to the default data directory.")
def settings_data_dir(path, clear):
    """Show, set or clear the data directory.

    An existing history.json is not moved: the new directory starts with
    whatever history it already holds.

    \b
    Examples:
        salary-sim settings data-dir
        salary-sim settings data-dir ~/salary-sim
        salary-sim settings data-dir --clear
    """
    if clear and path:
        raise click.UsageError("Give either PATH or --clear, not both.")

    if clear:
        current = load_settings()
        if current.pop("data_dir", None) is not None:
            save_settings(current)
    elif path:
        data_path = path.expanduser().resolve()
        try:
            data_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise click.ClickException(f"Cannot create data directory {data_path}: {e}")
        set_setting("data_dir", str(data_path))

    click.echo(f"Data directory: {get_data_path()}")
