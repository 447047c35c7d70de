"""Color value models."""

from pydantic import BaseModel, ConfigDict, Field


class RgbColor(BaseModel):
    """Standard 8-bit RGB color.

    The model is frozen so instances can be compared, hashed and shared
    between the controller and its observers without copying.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def black(cls) -> "RgbColor":
        """Create black."""
        return cls(r=0, g=0, b=0)

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    def to_css(self) -> str:
        """Format as a CSS functional notation.

        Example:
            >>> RgbColor(r=255, g=87, b=51).to_css()
            'rgb(255, 87, 51)'
        """
        return f"rgb({self.r}, {self.g}, {self.b})"


class HslColor(BaseModel):
    """HSL color with integer degrees and percentages.

    Hue is circular and stored in [0, 360). A saturation of 0 is
    achromatic; hue is then meaningless but kept as given.
    """

    model_config = ConfigDict(frozen=True)

    h: int = Field(ge=0, lt=360, description="Hue in degrees (0-359)")
    s: int = Field(ge=0, le=100, description="Saturation percent (0-100)")
    l: int = Field(ge=0, le=100, description="Lightness percent (0-100)")

    @property
    def is_achromatic(self) -> bool:
        """True for pure grays."""
        return self.s == 0

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to (h, s, l) tuple."""
        return (self.h, self.s, self.l)

    def to_css(self) -> str:
        """Format as a CSS functional notation.

        Example:
            >>> HslColor(h=11, s=100, l=60).to_css()
            'hsl(11, 100%, 60%)'
        """
        return f"hsl({self.h}, {self.s}%, {self.l}%)"
