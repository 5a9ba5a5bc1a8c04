"""Luminance, contrast and compliance commands."""

from typing import Optional

import click

from accessible_colors.cli.params import (
    HEX_COLOR,
    large_option,
    level_option,
    load_config,
    resolve_large,
)
from accessible_colors.contrast import contrast, is_compliant, luminance
from accessible_colors.models import ComplianceLevel


def _status(passed: Optional[bool]) -> str:
    return "PASS" if passed else "FAIL"


@click.command(name="luminance")
@click.argument("color", type=HEX_COLOR)
@click.option("--precision", "-p", type=click.IntRange(0, 10), default=None,
              help="Decimal places (default: from config)")
def luminance_cmd(color: str, precision: Optional[int]):
    """Print the relative luminance of COLOR (0 = black, 1 = white)."""
    config = load_config(click.get_current_context())
    digits = config.precision if precision is None else precision
    click.echo(f"{luminance(color):.{digits}f}")


@click.command(name="contrast")
@click.argument("color1", type=HEX_COLOR)
@click.argument("color2", type=HEX_COLOR)
@click.option("--precision", "-p", type=click.IntRange(0, 10), default=None,
              help="Decimal places (default: from config)")
def contrast_cmd(color1: str, color2: str, precision: Optional[int]):
    """Print the contrast ratio between COLOR1 and COLOR2 (1 to 21)."""
    config = load_config(click.get_current_context())
    digits = config.precision if precision is None else precision
    click.echo(f"{contrast(color1, color2, digits)}:1")


@click.command(name="check")
@click.argument("color1", type=HEX_COLOR)
@click.argument("color2", type=HEX_COLOR)
@level_option(help_text="Check a single level and exit with 1 on failure")
@large_option()
def check_cmd(color1: str, color2: str, level: Optional[str], large: Optional[bool]):
    """
    Check COLOR1 and COLOR2 against the WCAG contrast thresholds.

    \b
    Without --level every level is reported for both text sizes:
      accessible-colors check '#777777' '#ffffff'
    With --level the exit code tells whether the pair passes:
      accessible-colors check '#595959' '#ffffff' --level AAA
    """
    ctx = click.get_current_context()
    config = load_config(ctx)
    ratio = contrast(color1, color2, config.precision)
    click.echo(f"Contrast {color1} / {color2}: {ratio}:1")

    if level is None:
        for each in ComplianceLevel:
            for size, is_large in (("normal", False), ("large", True)):
                passed = is_compliant(color1, color2, each, is_large)
                threshold = each.min_ratio(is_large)
                click.echo(f"  {each.value:3s} {size:6s} (>= {threshold}:1)  {_status(passed)}")
        return

    chosen = ComplianceLevel(level.upper())
    is_large = resolve_large(large, config)
    passed = is_compliant(color1, color2, chosen, is_large)
    size = "large" if is_large else "normal"
    click.echo(f"  {chosen.value} {size} (>= {chosen.min_ratio(is_large)}:1)  {_status(passed)}")
    if not passed:
        ctx.exit(1)
