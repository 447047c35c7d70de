"""Tests for data models."""

import pytest
from pydantic import ValidationError

from colorconv.models import (
    AppConfig,
    ColorSource,
    ColorState,
    HslColor,
    RangePolicy,
    RgbColor,
)


class TestRgbColor:
    """Test RgbColor model."""

    @pytest.mark.unit
    def test_create_color(self):
        color = RgbColor(r=100, g=50, b=25)
        assert color.to_tuple() == (100, 50, 25)

    @pytest.mark.unit
    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            RgbColor(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            RgbColor(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_frozen(self):
        color = RgbColor(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 10

    @pytest.mark.unit
    def test_hashable_and_comparable(self):
        assert RgbColor(r=1, g=2, b=3) == RgbColor(r=1, g=2, b=3)
        assert len({RgbColor(r=1, g=2, b=3), RgbColor(r=1, g=2, b=3)}) == 1

    @pytest.mark.unit
    def test_black(self):
        assert RgbColor.black() == RgbColor(r=0, g=0, b=0)

    @pytest.mark.unit
    def test_to_css(self):
        assert RgbColor(r=255, g=87, b=51).to_css() == "rgb(255, 87, 51)"


class TestHslColor:
    """Test HslColor model."""

    @pytest.mark.unit
    def test_hue_must_be_below_360(self):
        with pytest.raises(ValueError):
            HslColor(h=360, s=50, l=50)

    @pytest.mark.unit
    def test_percent_bounds(self):
        with pytest.raises(ValueError):
            HslColor(h=0, s=101, l=50)

        with pytest.raises(ValueError):
            HslColor(h=0, s=50, l=-1)

    @pytest.mark.unit
    def test_achromatic(self):
        assert HslColor(h=0, s=0, l=50).is_achromatic
        assert not HslColor(h=0, s=1, l=50).is_achromatic

    @pytest.mark.unit
    def test_to_css(self):
        assert HslColor(h=11, s=100, l=60).to_css() == "hsl(11, 100%, 60%)"


class TestColorState:
    """Test ColorState snapshot."""

    @pytest.fixture
    def state(self):
        return ColorState(
            hex="#ff5733",
            rgb=RgbColor(r=255, g=87, b=51),
            hsl=HslColor(h=11, s=100, l=60),
            source=ColorSource.HEX,
        )

    @pytest.mark.unit
    def test_hex_must_be_normalized(self, state):
        with pytest.raises(ValidationError):
            ColorState(hex="#FF5733", rgb=state.rgb, hsl=state.hsl, source=ColorSource.HEX)

        with pytest.raises(ValidationError):
            ColorState(hex="#f53", rgb=state.rgb, hsl=state.hsl, source=ColorSource.HEX)

    @pytest.mark.unit
    def test_to_display_dict(self, state):
        assert state.to_display_dict() == {
            "hex": "#ff5733",
            "rgb": [255, 87, 51],
            "hsl": [11, 100, 60],
            "source": "hex",
        }


class TestAppConfig:
    """Test AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()
        assert config.seed_color == "#ff5733"
        assert config.range_policy is RangePolicy.CLAMP

    @pytest.mark.unit
    def test_seed_color_normalized(self):
        assert AppConfig(seed_color="ABC").seed_color == "#aabbcc"

    @pytest.mark.unit
    def test_invalid_seed_color(self):
        with pytest.raises(ValidationError) as exc_info:
            AppConfig(seed_color="#12")

        assert exc_info.value.errors()[0]["loc"] == ("seed_color",)

    @pytest.mark.unit
    def test_invalid_range_policy(self):
        with pytest.raises(ValidationError):
            AppConfig(range_policy="wrap")
