"""Textual user interface for colorconv."""

from .app import ColorConverterApp

__all__ = ["ColorConverterApp"]
