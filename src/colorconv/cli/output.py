"""Shared output helpers for CLI commands."""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from colorconv.exceptions import ConfigurationError, ErrorContext, format_error_for_display
from colorconv.models import AppConfig, ColorState

logger = logging.getLogger(__name__)


def echo_state(state: ColorState, as_json: bool = False) -> None:
    """Print all three representations of a color."""
    if as_json:
        click.echo(json.dumps(state.to_display_dict()))
        return

    click.echo(f"HEX  {state.hex}")
    click.echo(f"RGB  {state.rgb.to_css()}")
    click.echo(f"HSL  {state.hsl.to_css()}")


def echo_error(error: Exception) -> None:
    """Print a user-facing error (and its recovery hint) to stderr."""
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"Error: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"Suggestion: {recovery_hint}", err=True)


def load_config(config_path: Optional[Path]) -> AppConfig:
    """Load settings, exiting with status 1 on a broken config file."""
    try:
        with ErrorContext("load configuration", logger):
            return AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        echo_error(e)
        raise SystemExit(1) from e
