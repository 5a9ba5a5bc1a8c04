"""Variant suggestion command."""

from typing import Optional

import click

from accessible_colors.cli.params import (
    HEX_COLOR,
    large_option,
    level_option,
    load_config,
    resolve_large,
    resolve_level,
)
from accessible_colors.contrast import contrast
from accessible_colors.search import suggest_variant


@click.command(name="suggest")
@click.argument("to_change", type=HEX_COLOR)
@click.argument("to_keep", type=HEX_COLOR)
@level_option()
@large_option()
def suggest_cmd(to_change: str, to_keep: str, level: Optional[str], large: Optional[bool]):
    """
    Suggest the closest variant of TO_CHANGE that contrasts with TO_KEEP.

    Only the lightness of TO_CHANGE is adjusted; its hue and saturation are
    kept. Exits with 1 if no lightness reaches the required ratio.

    \b
    Examples:
      accessible-colors suggest '#8b6f6f' '#eabdbd'
      accessible-colors suggest '#ff0000' '#ffffff' --level AAA --large
    """
    ctx = click.get_current_context()
    config = load_config(ctx)
    chosen = resolve_level(level, config)
    is_large = resolve_large(large, config)

    suggestion = suggest_variant(to_change, to_keep, chosen, is_large)
    if suggestion is None:
        click.echo(
            f"No {chosen.value} variant of {to_change} exists against {to_keep} "
            f"(needs {chosen.min_ratio(is_large)}:1)",
            err=True,
        )
        ctx.exit(1)

    ratio = contrast(suggestion, to_keep, config.precision)
    if suggestion == to_change:
        click.echo(f"{suggestion} already meets {chosen.value} ({ratio}:1)")
    else:
        click.echo(f"{suggestion} ({ratio}:1 against {to_keep})")
