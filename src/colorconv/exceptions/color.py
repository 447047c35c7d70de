"""Color input exceptions.

This module defines exceptions raised when a user edit cannot be committed:
- ColorError: Base class for color input errors
- InvalidFormatError: Text does not parse as a HEX color or a number
- OutOfRangeError: Numeric channel outside its range (reject policy only)
"""

from typing import Any

from .base import ColorConvError


class ColorError(ColorConvError):
    """A color edit was rejected."""
    pass


class InvalidFormatError(ColorError):
    """Input text is not a valid HEX color or numeric channel value."""

    def __init__(self, field: str, raw_value: Any, reason: str):
        """
        Initialize invalid format error.

        Args:
            field: Which input was edited ("hex", "r", "h", ...)
            raw_value: The text or value exactly as received
            reason: Why it failed to parse
        """
        if field == "hex":
            user_msg = f"'{raw_value}' is not a valid HEX color"
            recovery = "Use 3 or 6 hexadecimal digits, optionally prefixed with '#' (e.g. #f0a or #ff5733)"
        else:
            user_msg = f"'{raw_value}' is not a valid value for channel '{field}'"
            recovery = "Enter a number"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Invalid {field} input {raw_value!r}: {reason}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.raw_value = raw_value
        self.reason = reason


class OutOfRangeError(ColorError):
    """Numeric channel value lies outside its allowed range."""

    def __init__(self, field: str, value: int, minimum: int, maximum: int):
        """
        Initialize out of range error.

        Args:
            field: Channel name ("r", "g", "b", "s", "l")
            value: The (rounded) value that was entered
            minimum: Smallest accepted value
            maximum: Largest accepted value
        """
        super().__init__(
            user_message=f"Channel '{field}' must be between {minimum} and {maximum}, got {value}",
            technical_message=f"Out of range {field}={value} (allowed {minimum}..{maximum})",
            recoverable=True,
            recovery_hint=(
                f"Enter a value from {minimum} to {maximum}, "
                "or set range_policy to 'clamp' with 'colorconv config set --range-policy clamp'"
            ),
        )
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
