"""CLI commands for colorconv."""

from .config import config
from .convert import hex_command, hsl_command, rgb_command

__all__ = ["config", "hex_command", "hsl_command", "rgb_command"]
