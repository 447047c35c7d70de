"""Pure conversions between HEX, RGB and HSL.

Every function here is side-effect free. Rounding happens only at the
output of each conversion; integer HSL is the one deliberately lossy step.
"""

import math
import re

from colorconv.exceptions import InvalidFormatError
from colorconv.models.color import HslColor, RgbColor

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (127.5 -> 128)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _clean_hex(text: str) -> str:
    """Strip one leading '#' and expand 3-digit shorthand to 6 digits."""
    if not isinstance(text, str):
        raise InvalidFormatError("hex", text, f"expected str, got {type(text).__name__}")

    clean = text.strip().removeprefix("#")
    if len(clean) not in (3, 6) or not _HEX_DIGITS.fullmatch(clean):
        raise InvalidFormatError("hex", text, f"expected 3 or 6 hex digits, got {clean!r}")

    if len(clean) == 3:
        clean = "".join(c * 2 for c in clean)
    return clean


def hex_to_rgb(hex_color: str) -> RgbColor:
    """
    Parse a HEX color into RGB.

    Accepts "#rrggbb", "rrggbb", "#rgb" or "rgb" in any letter case.

    Raises:
        InvalidFormatError: If the text is not 3 or 6 hexadecimal digits

    Example:
        >>> hex_to_rgb("#f0a")
        RgbColor(r=255, g=0, b=170)
    """
    value = int(_clean_hex(hex_color), 16)
    return RgbColor(r=(value >> 16) & 0xFF, g=(value >> 8) & 0xFF, b=value & 0xFF)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Format RGB channels as "#rrggbb" (lowercase).

    Channels are not clamped. A value above 255 yields more than two digits
    for that channel, so callers must keep channels in range.
    """
    return "#" + "".join(f"{c:02x}" for c in (r, g, b))


def normalize_hex(hex_color: str) -> str:
    """Return the canonical "#rrggbb" form of a HEX color.

    Raises:
        InvalidFormatError: If the text is not 3 or 6 hexadecimal digits
    """
    return "#" + _clean_hex(hex_color).lower()


def rgb_to_hsl(r: int, g: int, b: int) -> HslColor:
    """
    Convert RGB (0-255) to HSL with integer degrees and percentages.

    Grays (max == min) get hue and saturation 0. A hue that rounds up to
    360 is reported as 0.

    Example:
        >>> rgb_to_hsl(255, 87, 51)
        HslColor(h=11, s=100, l=60)
    """
    r, g, b = r / 255, g / 255, b / 255
    high, low = max(r, g, b), min(r, g, b)
    h = s = 0.0
    l = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if l > 0.5 else d / (high + low)
        if high == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HslColor(
        h=round_half_away(h * 360) % 360,
        s=round_half_away(s * 100),
        l=round_half_away(l * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    """Channel intensity for hue phase t (wrapped into [0, 1))."""
    t %= 1.0
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RgbColor:
    """
    Convert HSL (degrees, percent, percent) to RGB (0-255).

    Zero saturation short-circuits to a gray of the given lightness,
    whatever the hue.

    Example:
        >>> hsl_to_rgb(11, 100, 10)
        RgbColor(r=51, g=9, b=0)
    """
    h, s, l = h / 360, s / 100, l / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RgbColor(
        r=round_half_away(r * 255),
        g=round_half_away(g * 255),
        b=round_half_away(b * 255),
    )
