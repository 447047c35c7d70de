"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorconv import __version__
from colorconv.models.config import DEFAULT_CONFIG_DIR

from .commands import config, hex_command, hsl_command, rgb_command

logger = logging.getLogger(__name__)

HANDLER_NAME = "colorconv"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where file logging goes for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "colorconv-debug.log"
    return DEFAULT_CONFIG_DIR / "logs" / "colorconv.log"


def setup_logging(
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    to_file: bool = True,
) -> None:
    """
    Configure logging for the application.

    The TUI owns the terminal, so it logs to a rotating file. One-shot
    commands log to stderr, and only when asked to with -v or --debug.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable DEBUG level (and ./colorconv-debug.log for the TUI)
        log_file: Custom log file path (optional)
        log_level: Log level used when --log-file is given
        to_file: Log to a file instead of stderr
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    if to_file or log_file:
        log_path = resolve_log_path(debug, log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    elif verbose or debug:
        log_path = None
        handler = logging.StreamHandler(sys.stderr)
    else:
        root_logger.setLevel(level)
        return

    handler.set_name(HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="colorconv")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.colorconv/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, TUI logs to ./colorconv-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
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
    Color Converter - keep HEX, RGB and HSL in sync.

    Without a command, opens the interactive converter: edit any field and
    the other two representations follow.

    \b
    Examples:
      # Interactive converter
      colorconv

      # One-shot conversions
      colorconv hex '#ff5733'
      colorconv rgb 255 87 51
      colorconv hsl 11 100 60 --json

      # Settings
      colorconv config show
      colorconv config set --seed-color '#336699'
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is not None:
        setup_logging(verbose, debug, log_file, log_level, to_file=False)
        return

    # Lazy import keeps one-shot commands free of the TUI stack
    from colorconv.core import ColorSyncController
    from colorconv.exceptions import ConfigurationError, ErrorContext, format_error_for_display
    from colorconv.models import AppConfig
    from colorconv.tui import ColorConverterApp

    setup_logging(verbose, debug, log_file, log_level, to_file=True)
    logger.info("Starting Color Converter")

    try:
        with ErrorContext("load configuration", logger):
            config_obj = AppConfig.load_or_default(config_path)
        controller = ColorSyncController.from_config(config_obj)
        ColorConverterApp(controller).run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except ConfigurationError as e:
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        click.echo(f"\nFor details, check the log file: {resolve_log_path(debug, log_file)}", err=True)
        sys.exit(1)


cli.add_command(hex_command)
cli.add_command(rgb_command)
cli.add_command(hsl_command)
cli.add_command(config)

if __name__ == "__main__":
    cli()
