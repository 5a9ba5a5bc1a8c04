"""Random color command."""

from typing import Optional

import click
import numpy as np

from accessible_colors.cli.params import (
    HEX_COLOR,
    large_option,
    level_option,
    load_config,
    resolve_large,
    resolve_level,
)
from accessible_colors.sampler import random_color, random_compliant_color


@click.command(name="random")
@click.option("--background", "-b", type=HEX_COLOR, default=None,
              help="Only return colors that contrast with this background")
@level_option()
@large_option()
@click.option("--seed", type=int, default=None, help="Seed for reproducible output")
@click.option("--max-attempts", type=click.IntRange(min=1), default=None,
              help="Colors to draw before giving up (default: from config)")
def random_cmd(
    background: Optional[str],
    level: Optional[str],
    large: Optional[bool],
    seed: Optional[int],
    max_attempts: Optional[int],
):
    """
    Print a random color.

    With --background, keep drawing until a color meets the contrast level
    against it. Exits with 1 if none is found within the attempt budget.
    """
    ctx = click.get_current_context()
    rng = np.random.default_rng(seed)

    if background is None:
        click.echo(random_color(rng))
        return

    config = load_config(ctx)
    chosen = resolve_level(level, config)
    attempts = config.max_random_attempts if max_attempts is None else max_attempts

    color = random_compliant_color(
        background, chosen, resolve_large(large, config), attempts, rng
    )
    if color is None:
        click.echo(
            f"No {chosen.value} color found against {background} in {attempts} attempts",
            err=True,
        )
        ctx.exit(1)

    click.echo(color)
