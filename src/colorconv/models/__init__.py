"""Data models for colorconv."""

from .color import HslColor, RgbColor
from .config import DEFAULT_CONFIG_PATH, DEFAULT_SEED_COLOR, AppConfig
from .enums import ColorSource, HslChannel, RangePolicy, RgbChannel
from .state import ColorState

__all__ = [
    # Models
    "AppConfig",
    "ColorState",
    "HslColor",
    "RgbColor",
    # Enums
    "ColorSource",
    "HslChannel",
    "RangePolicy",
    "RgbChannel",
    # Defaults
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_SEED_COLOR",
]
