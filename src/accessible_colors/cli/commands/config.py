"""
Config command group.

Commands:
    - config show [--field FIELD]           # Display configuration
    - config set --option VALUE ...         # Update configuration
    - config validate                       # Validate config file
    - config reset [FIELD ...]              # Reset to defaults
"""

from pathlib import Path
from typing import Optional

import click

from accessible_colors.cli.params import LEVEL_CHOICE, load_config
from accessible_colors.models import DEFAULT_CONFIG_PATH, AppConfig, ComplianceLevel


def _config_path(ctx: click.Context) -> Path:
    return (ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH


def _display(value) -> str:
    return value.value if isinstance(value, ComplianceLevel) else str(value)


def _save(ctx: click.Context, config: AppConfig) -> None:
    path = _config_path(ctx)
    try:
        config.save(path)
    except OSError as e:
        click.echo(f"Error: Could not write {path}: {e}", err=True)
        ctx.exit(1)
    click.echo(f"\nConfiguration saved to {path}")


@click.group(name="config", invoke_without_command=True)
@click.pass_context
def config_group(ctx: click.Context):
    """Show or change the default settings."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(show_config)


@config_group.command(name="show")
@click.option("--field", "-f", type=str, default=None, help="Show a single field")
def show_config(field: Optional[str]):
    """Display the current configuration."""
    ctx = click.get_current_context()
    config = load_config(ctx)

    if field:
        if field not in AppConfig.model_fields:
            click.echo(f"Error: Field '{field}' does not exist", err=True)
            ctx.exit(1)
        click.echo(f"{field}: {_display(getattr(config, field))}")
        return

    click.echo(f"\nConfiguration ({_config_path(ctx)}):")
    click.echo("=" * 60)
    for key in AppConfig.model_fields:
        click.echo(f"  {key}: {_display(getattr(config, key))}")
    click.echo("")


@config_group.command(name="set")
@click.option("--precision", type=click.IntRange(0, 10), default=None,
              help="Decimal places used when reporting contrast ratios")
@click.option("--level", type=LEVEL_CHOICE, default=None,
              help="Default WCAG conformance level")
@click.option("--large/--normal", default=None, help="Default text size")
@click.option("--max-attempts", type=click.IntRange(min=1), default=None,
              help="Random colors to draw before giving up")
def set_config(
    precision: Optional[int],
    level: Optional[str],
    large: Optional[bool],
    max_attempts: Optional[int],
):
    """Update configuration values and save them."""
    ctx = click.get_current_context()
    updates = {
        "precision": precision,
        "default_level": ComplianceLevel(level.upper()) if level else None,
        "large_text": large,
        "max_random_attempts": max_attempts,
    }
    updates = {key: value for key, value in updates.items() if value is not None}
    if not updates:
        click.echo("Nothing to update. Run 'accessible-colors config set --help' for options.")
        return

    config = load_config(ctx).model_copy(update=updates)
    for key, value in updates.items():
        click.echo(f"[OK] {key} = {_display(value)}")
    _save(ctx, config)


@config_group.command(name="validate")
def validate_config():
    """Check that the configuration file loads."""
    ctx = click.get_current_context()
    path = _config_path(ctx)
    if not path.exists():
        click.echo(f"[OK] No configuration file at {path}, defaults are in use")
        return

    error = AppConfig.settings_file(path).problem()
    if error is None:
        click.echo(f"[OK] Configuration is valid: {path}")
        return

    click.echo(f"[FAIL] {error}", err=True)
    ctx.exit(1)


@config_group.command(name="reset")
@click.argument("fields", nargs=-1, type=str)
@click.confirmation_option(prompt="Are you sure you want to reset configuration?")
def reset_config(fields: tuple[str, ...]):
    """Reset all fields, or just FIELDS, to their defaults."""
    ctx = click.get_current_context()
    defaults = AppConfig()

    if not fields:
        click.echo("[OK] Reset all fields to defaults")
        _save(ctx, defaults)
        return

    updates = {}
    for field in fields:
        if field not in AppConfig.model_fields:
            click.echo(f"[FAIL] Field '{field}' does not exist", err=True)
            ctx.exit(1)
        updates[field] = getattr(defaults, field)
        click.echo(f"[OK] Reset {field} to default: {_display(updates[field])}")

    _save(ctx, load_config(ctx).model_copy(update=updates))
