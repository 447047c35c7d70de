"""Enumerations for colorconv."""

from enum import Enum


class ColorSource(str, Enum):
    """Which representation the user edited last."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


class RgbChannel(str, Enum):
    """Editable RGB channels."""

    R = "r"
    G = "g"
    B = "b"


class HslChannel(str, Enum):
    """Editable HSL channels."""

    H = "h"  # Degrees, circular
    S = "s"  # Percent
    L = "l"  # Percent


class RangePolicy(str, Enum):
    """What to do with numeric edits outside a channel's range."""

    CLAMP = "clamp"  # Pin to the nearest bound
    REJECT = "reject"  # Raise OutOfRangeError, keep previous color
