"""Synchronization controller keeping HEX, RGB and HSL consistent."""

import logging
import math
import re
from typing import Any, Optional, Union

from colorconv.exceptions import ColorError, InvalidFormatError, OutOfRangeError
from colorconv.models import (
    AppConfig,
    ColorSource,
    ColorState,
    DEFAULT_SEED_COLOR,
    HslChannel,
    HslColor,
    RangePolicy,
    RgbChannel,
    RgbColor,
)
from colorconv.protocols import ColorEvent, ColorObserver
from colorconv.utils import ObserverManager

from .converter import (
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_away,
)

logger = logging.getLogger(__name__)

# Plain ASCII decimal, optional sign and fraction ("12", "-30", "12.5", ".5")
_NUMBER_TEXT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)

SourceValue = Union[str, RgbColor, HslColor]


class ColorSyncController:
    """
    Owns the current color and propagates user edits between representations.

    The controller is always in one of three states, named by the
    representation the user edited last (`last_edited`). On every edit it
    stores the edited value as the source and derives the other two from it
    with one conversion each. Derived values are never fed back into another
    conversion, so rounding in HSL cannot compound and no update cycle is
    possible.

    A rejected edit leaves the state untouched; the raw input stays
    available as `rejected_input` until the next committed edit.

    Not thread-safe: edits are applied one at a time, synchronously, from
    whatever drives the UI.

    Usage Example:
        ```python
        controller = ColorSyncController(seed="#ff5733")
        controller.on_hsl_channel_edited("l", 10)
        controller.current_state().hex   # '#330900'
        ```
    """

    def __init__(
        self,
        seed: str = DEFAULT_SEED_COLOR,
        range_policy: RangePolicy = RangePolicy.CLAMP,
    ):
        """
        Initialize the controller at its seed color.

        Args:
            seed: HEX color to start from (and to return to on reset)
            range_policy: Clamp or reject out-of-range numeric edits

        Raises:
            InvalidFormatError: If the seed is not a valid HEX color
        """
        self._seed = normalize_hex(seed)
        self._range_policy = RangePolicy(range_policy)
        self._rejected_input: Optional[str] = None
        self._observers = ObserverManager[ColorObserver](observer_type_name="color")
        self._state = self._derive(ColorSource.HEX, self._seed)

        logger.info(f"ColorSyncController initialized at {self._seed} ({self._range_policy.value} policy)")

    @classmethod
    def from_config(cls, config: AppConfig) -> "ColorSyncController":
        """Create a controller from application settings."""
        return cls(seed=config.seed_color, range_policy=config.range_policy)

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: ColorObserver) -> None:
        """Register an observer to receive color events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: ColorObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    # =================================================================
    # Queries
    # =================================================================

    def current_state(self) -> ColorState:
        """Snapshot of the current color in all three representations."""
        return self._state

    @property
    def last_edited(self) -> ColorSource:
        """Representation that is authoritative for the current color."""
        return self._state.source

    @property
    def source_value(self) -> SourceValue:
        """The value of the last edited representation, as committed."""
        if self._state.source is ColorSource.HEX:
            return self._state.hex
        if self._state.source is ColorSource.RGB:
            return self._state.rgb
        return self._state.hsl

    @property
    def rejected_input(self) -> Optional[str]:
        """Raw text of the last rejected edit, or None after a committed one."""
        return self._rejected_input

    @property
    def range_policy(self) -> RangePolicy:
        return self._range_policy

    @property
    def seed(self) -> str:
        return self._seed

    # =================================================================
    # Edits
    # =================================================================

    def on_hex_edited(self, raw_text: str) -> str:
        """
        Apply an edit to the HEX field.

        Args:
            raw_text: Text as typed, e.g. "#F0A", "ff5733"

        Returns:
            The normalized "#rrggbb" value

        Raises:
            InvalidFormatError: If the text is not a 3 or 6 digit HEX color
        """
        try:
            hex_value = normalize_hex(raw_text)
        except InvalidFormatError as e:
            self._reject(raw_text, e)
            raise

        self._commit(self._derive(ColorSource.HEX, hex_value))
        return hex_value

    def on_rgb_channel_edited(self, channel: Union[RgbChannel, str], raw_value: Any) -> RgbColor:
        """
        Apply an edit to one RGB channel.

        The other two channels keep their currently displayed values.

        Args:
            channel: "r", "g" or "b"
            raw_value: Number or numeric text; fractions are rounded

        Returns:
            The committed RGB color

        Raises:
            ValueError: If channel is not r, g or b
            InvalidFormatError: If raw_value is not a finite number
            OutOfRangeError: If outside 0-255 under the reject policy
        """
        channel = RgbChannel(channel)
        try:
            value = self._coerce_bounded(channel.value, raw_value, 0, 255)
        except ColorError as e:
            self._reject(raw_value, e)
            raise

        rgb = self._state.rgb.model_copy(update={channel.value: value})
        self._commit(self._derive(ColorSource.RGB, rgb))
        return rgb

    def on_rgb_edited(self, r: Any, g: Any, b: Any) -> RgbColor:
        """Apply an edit to all three RGB channels at once.

        Either every channel is accepted or the edit is rejected as a whole.
        """
        raw = (r, g, b)
        try:
            values = [
                self._coerce_bounded(channel.value, value, 0, 255)
                for channel, value in zip(RgbChannel, raw)
            ]
        except ColorError as e:
            self._reject(" ".join(str(v) for v in raw), e)
            raise

        rgb = RgbColor(r=values[0], g=values[1], b=values[2])
        self._commit(self._derive(ColorSource.RGB, rgb))
        return rgb

    def on_hsl_channel_edited(self, channel: Union[HslChannel, str], raw_value: Any) -> HslColor:
        """
        Apply an edit to one HSL channel.

        Hue wraps around 360 (so -30 becomes 330). Saturation and lightness
        follow the range policy.

        Args:
            channel: "h", "s" or "l"
            raw_value: Number or numeric text; fractions are rounded

        Returns:
            The committed HSL color

        Raises:
            ValueError: If channel is not h, s or l
            InvalidFormatError: If raw_value is not a finite number
            OutOfRangeError: If s/l is outside 0-100 under the reject policy
        """
        channel = HslChannel(channel)
        try:
            if channel is HslChannel.H:
                value = self._coerce_hue(raw_value)
            else:
                value = self._coerce_bounded(channel.value, raw_value, 0, 100)
        except ColorError as e:
            self._reject(raw_value, e)
            raise

        hsl = self._state.hsl.model_copy(update={channel.value: value})
        self._commit(self._derive(ColorSource.HSL, hsl))
        return hsl

    def on_hsl_edited(self, h: Any, s: Any, l: Any) -> HslColor:
        """Apply an edit to all three HSL channels at once."""
        try:
            hsl = HslColor(
                h=self._coerce_hue(h),
                s=self._coerce_bounded(HslChannel.S.value, s, 0, 100),
                l=self._coerce_bounded(HslChannel.L.value, l, 0, 100),
            )
        except ColorError as e:
            self._reject(f"{h} {s} {l}", e)
            raise

        self._commit(self._derive(ColorSource.HSL, hsl))
        return hsl

    def reset(self) -> ColorState:
        """Return to the seed color."""
        self._state = self._derive(ColorSource.HEX, self._seed)
        self._rejected_input = None
        logger.debug(f"Reset to seed {self._seed}")
        self._observers.notify("on_color_event", ColorEvent.RESET, self._state)
        return self._state

    # =================================================================
    # Internals
    # =================================================================

    @staticmethod
    def _derive(source: ColorSource, value: SourceValue) -> ColorState:
        """Build a full snapshot from the edited representation alone."""
        if source is ColorSource.HEX:
            rgb = hex_to_rgb(value)
            return ColorState(hex=value, rgb=rgb, hsl=rgb_to_hsl(*rgb.to_tuple()), source=source)

        if source is ColorSource.RGB:
            return ColorState(
                hex=rgb_to_hex(*value.to_tuple()),
                rgb=value,
                hsl=rgb_to_hsl(*value.to_tuple()),
                source=source,
            )

        rgb = hsl_to_rgb(*value.to_tuple())
        return ColorState(hex=rgb_to_hex(*rgb.to_tuple()), rgb=rgb, hsl=value, source=source)

    def _commit(self, state: ColorState) -> None:
        self._state = state
        self._rejected_input = None
        logger.debug(
            f"Committed {state.source.value} edit: {state.hex} {state.rgb.to_css()} {state.hsl.to_css()}"
        )
        self._observers.notify("on_color_event", ColorEvent.COLOR_CHANGED, state)

    def _reject(self, raw_value: Any, error: ColorError) -> None:
        self._rejected_input = "" if raw_value is None else str(raw_value)
        logger.info(f"Rejected edit: {error.technical_message}")
        self._observers.notify("on_color_event", ColorEvent.EDIT_REJECTED, self._state, error=error)

    @staticmethod
    def _parse_number(field: str, raw_value: Any) -> float:
        if isinstance(raw_value, bool):
            raise InvalidFormatError(field, raw_value, "booleans are not channel values")

        if isinstance(raw_value, (int, float)):
            number = float(raw_value)
        elif isinstance(raw_value, str):
            text = raw_value.strip()
            if not _NUMBER_TEXT.fullmatch(text):
                raise InvalidFormatError(field, raw_value, "not a number")
            number = float(text)
        else:
            raise InvalidFormatError(field, raw_value, f"unsupported type {type(raw_value).__name__}")

        if not math.isfinite(number):
            raise InvalidFormatError(field, raw_value, "not a finite number")
        return number

    def _coerce_bounded(self, field: str, raw_value: Any, minimum: int, maximum: int) -> int:
        value = round_half_away(self._parse_number(field, raw_value))
        if minimum <= value <= maximum:
            return value

        if self._range_policy is RangePolicy.REJECT:
            raise OutOfRangeError(field, value, minimum, maximum)

        clamped = min(max(value, minimum), maximum)
        logger.debug(f"Clamped {field}={value} to {clamped}")
        return clamped

    def _coerce_hue(self, raw_value: Any) -> int:
        return round_half_away(self._parse_number(HslChannel.H.value, raw_value)) % 360
