"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from accessible_colors import __version__

from .commands import (
    check_cmd,
    config_group,
    contrast_cmd,
    luminance_cmd,
    random_cmd,
    suggest_cmd,
)

logger = logging.getLogger(__name__)

_installed_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Console output goes to stderr so it never mixes with command results.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG regardless of verbosity
        log_file: Also log to this file, rotated at 10MB (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()

    # Handlers from an earlier invocation in the same process
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if log_file:
        file_level = logging.DEBUG if debug else getattr(logging, log_level.upper())
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)
        level = min(level, file_level)

    root_logger.setLevel(level)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="accessible-colors")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Configuration file (default: ~/.accessible-colors/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug logging'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Accessible Colors - WCAG 2.x contrast checks and accessible color suggestions.

    Colors are given as #RRGGBB (quote them in your shell, '#' starts a comment).

    \b
    Examples:
      # Contrast ratio between two colors
      accessible-colors contrast '#777777' '#ffffff'

      # Which WCAG levels does a pair pass?
      accessible-colors check '#777777' '#ffffff'

      # Closest AA-compliant variant of a text color on a background
      accessible-colors suggest '#8b6f6f' '#eabdbd'

      # Random color readable on black
      accessible-colors random --background '#000000' --level AAA

      # Change the defaults
      accessible-colors config set --level AAA --precision 2
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def main() -> None:
    """Run the CLI with user-friendly error reporting."""
    try:
        cli(standalone_mode=True)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        click.echo("\nInterrupted", err=True)
        sys.exit(130)
    except Exception as e:
        from accessible_colors.exceptions import format_error_for_display

        logger.exception("Error running command")

        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        sys.exit(1)


cli.add_command(luminance_cmd)
cli.add_command(contrast_cmd)
cli.add_command(check_cmd)
cli.add_command(suggest_cmd)
cli.add_command(random_cmd)
cli.add_command(config_group)

if __name__ == "__main__":
    main()
