"""Snapshot of the current color in all three representations."""

from pydantic import BaseModel, ConfigDict, Field

from .color import HslColor, RgbColor
from .enums import ColorSource


class ColorState(BaseModel):
    """The current color as HEX, RGB and HSL plus which one was edited.

    `source` names the authoritative representation; the other two were
    derived from it in a single conversion.
    """

    model_config = ConfigDict(frozen=True)

    hex: str = Field(pattern=r"^#[0-9a-f]{6}$", description="Normalized #rrggbb")
    rgb: RgbColor
    hsl: HslColor
    source: ColorSource = Field(description="Representation the user edited last")

    def to_display_dict(self) -> dict[str, object]:
        """Plain dict for JSON output."""
        return {
            "hex": self.hex,
            "rgb": list(self.rgb.to_tuple()),
            "hsl": list(self.hsl.to_tuple()),
            "source": self.source.value,
        }
