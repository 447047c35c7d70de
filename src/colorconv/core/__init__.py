"""Core color engine: pure converters and the synchronization controller."""

from .converter import (
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_away,
)
from .sync_controller import ColorSyncController

__all__ = [
    "ColorSyncController",
    "hex_to_rgb",
    "hsl_to_rgb",
    "normalize_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
    "round_half_away",
]
