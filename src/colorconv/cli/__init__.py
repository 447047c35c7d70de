"""Command-line interface for colorconv."""

from .main import cli

__all__ = ["cli"]
