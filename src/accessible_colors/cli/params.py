"""Shared Click parameter types and helpers for the CLI."""

from pathlib import Path
from typing import Optional

import click

from accessible_colors.codec import normalize_hex
from accessible_colors.exceptions import ConfigurationError, InvalidColorError
from accessible_colors.models import AppConfig, ComplianceLevel


class HexColorType(click.ParamType):
    """A ``#rrggbb`` color argument, normalized to lowercase."""

    name = "color"

    def convert(self, value, param, ctx):
        try:
            return normalize_hex(value)
        except InvalidColorError as e:
            self.fail(f"{e.user_message}. {e.recovery_hint}", param, ctx)


HEX_COLOR = HexColorType()

LEVEL_CHOICE = click.Choice([level.value for level in ComplianceLevel], case_sensitive=False)


def level_option(help_text: str = "WCAG conformance level (default: from config)"):
    """--level option shared by the check, suggest and random commands."""
    return click.option("--level", "-l", type=LEVEL_CHOICE, default=None, help=help_text)


def large_option():
    """--large/--normal option shared by the check, suggest and random commands."""
    return click.option(
        "--large/--normal",
        default=None,
        help="Use the large text thresholds (18.66px bold or 24px regular)",
    )


def load_config(ctx: click.Context) -> AppConfig:
    """
    Load the configuration selected by the root command.

    Configuration errors are shown with their recovery hint and abort the
    command with exit code 1.
    """
    config_path: Optional[Path] = ctx.obj.get("config_path") if ctx.obj else None
    try:
        return AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        click.echo(f"Error: {e.user_message}", err=True)
        if e.recovery_hint:
            click.echo(f"Hint: {e.recovery_hint}", err=True)
        ctx.exit(1)


def resolve_level(level: Optional[str], config: AppConfig) -> ComplianceLevel:
    """Use the given level, or the configured default."""
    if level is None:
        return config.default_level
    return ComplianceLevel(level.upper())


def resolve_large(large: Optional[bool], config: AppConfig) -> bool:
    """Use the given text size, or the configured default."""
    return config.large_text if large is None else large
