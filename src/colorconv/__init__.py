"""colorconv: HEX, RGB and HSL kept in sync."""

__version__ = "0.1.0"

from .core import (
    ColorSyncController,
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from .models import ColorSource, ColorState, HslColor, RangePolicy, RgbColor

__all__ = [
    "ColorSource",
    "ColorState",
    "ColorSyncController",
    "HslColor",
    "RangePolicy",
    "RgbColor",
    "hex_to_rgb",
    "hsl_to_rgb",
    "normalize_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
]
