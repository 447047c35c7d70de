"""Errors raised while reading or validating ~/.colorconv/config.json."""

from typing import Any, Optional

from .base import ColorConvError


class ConfigurationError(ColorConvError):
    """Settings could not be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The config file is not parseable JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Path of the unreadable file
            parse_error: Parser detail, kept for the log
        """
        reason = parse_error.lower()
        if "empty" in reason:
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} or run 'colorconv config reset' to recreate it"
        elif "trailing comma" in reason:
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Remove the comma after the last setting in {file_path}"
        else:
            user_msg = "Configuration file has invalid syntax"
            recovery = (
                f"Fix the JSON in {file_path} (a settings file looks like "
                '{"seed_color": "#ff5733", "range_policy": "clamp"}), '
                "or run 'colorconv config reset'"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if "seed_color" in field:
            recovery += "\nUse a HEX color such as #ff5733"
        elif "range_policy" in field:
            recovery += "\nValid policies: clamp, reject"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery
        )
        self.field = field
        self.value = value
        self.file_path = file_path
