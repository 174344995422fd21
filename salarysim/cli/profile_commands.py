"""Profile CLI commands for Salary Sim.

Manages profile.yaml - default values for new simulations.
"""

import click
import yaml

from salarysim.sdk import (
    get_profile_path,
    load_profile,
    load_defaults,
    get_profile_value,
    set_profile_value,
    ProfileDefaults,
    ProfileError,
)


@click.group()
def profile():
    """Manage your profile configuration (profile.yaml).

    The 'defaults' section pre-fills 'simulate' options:

    \b
    defaults:
      tax_regime: single_holder
      dependents: 0
      social_security_rate: 11
      meal_allowance_daily: 6.0
      meal_allowance_mode: card
    """
    pass


@profile.command("show")
def profile_show():
    """Show the active profile and the effective defaults."""
    profile_path = get_profile_path()
    click.echo(f"Profile: {profile_path}")

    if not profile_path.exists():
        click.echo()
        click.echo("Profile does not exist yet. Create with:")
        click.echo("  salary-sim profile set defaults.social_security_rate 11")
        return

    try:
        data = load_profile()
        defaults = load_defaults(data)
    except ProfileError as e:
        raise click.ClickException(str(e))

    click.echo()
    click.echo("Effective defaults:")
    for key, value in defaults.model_dump().items():
        shown = "(none)" if value is None else value
        click.echo(f"  {key}: {shown}")

    click.echo()
    click.echo("---")
    click.echo(yaml.dump(data, default_flow_style=False, sort_keys=False))


@profile.command("get")
@click.argument("key")
def profile_get(key):
    """Get a profile value.

    KEY is a dot-notation path like 'defaults.social_security_rate'
    """
    try:
        value = get_profile_value(key)
    except ProfileError as e:
        raise click.ClickException(str(e))

    if value is None:
        raise click.ClickException(f"Key '{key}' not found in profile")

    if isinstance(value, (dict, list)):
        raise click.ClickException(
            f"Key '{key}' is a complex value. Use 'salary-sim profile show' to view."
        )

    click.echo(value)


@profile.command("set")
@click.argument("key")
@click.argument("value")
def profile_set(key, value):
    """Set a profile value.

    KEY is 'defaults.<field>', VALUE is parsed as YAML (so 11 is a number).

    Examples:
        salary-sim profile set defaults.social_security_rate 11
        salary-sim profile set defaults.meal_allowance_mode cash
    """
    parts = key.split(".")
    if len(parts) != 2 or parts[0] != "defaults" or parts[1] not in ProfileDefaults.model_fields:
        valid = ", ".join(f"defaults.{name}" for name in ProfileDefaults.model_fields)
        raise click.ClickException(f"Unknown profile key '{key}'. Valid keys: {valid}")

    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        parsed = value

    try:
        path = set_profile_value(key, parsed)
    except ProfileError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key} = {parsed}")
    click.echo(f"Saved to: {path}")
