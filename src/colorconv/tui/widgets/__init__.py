"""Widgets for the color converter TUI."""

from .color_panel import ColorPanel
from .status_bar import StatusBar
from .swatch import ColorSwatch

__all__ = ["ColorPanel", "ColorSwatch", "StatusBar"]
