"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from colorconv.utils.persistence import PydanticPersistence

from .enums import RangePolicy

DEFAULT_CONFIG_DIR = Path.home() / ".colorconv"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"
DEFAULT_SEED_COLOR = "#ff5733"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    seed_color: str = Field(
        default=DEFAULT_SEED_COLOR,
        description="Color shown when a session starts (HEX, 3 or 6 digits)",
    )
    range_policy: RangePolicy = Field(
        default=RangePolicy.CLAMP,
        description=(
            "How out-of-range RGB/saturation/lightness edits are handled: "
            "'clamp' pins them to the nearest bound, 'reject' refuses the edit. "
            "Hue always wraps around 360."
        ),
    )

    @field_validator("seed_color")
    @classmethod
    def validate_seed_color(cls, v: str) -> str:
        """Normalize the seed to #rrggbb."""
        from colorconv.core.converter import normalize_hex
        from colorconv.exceptions import InvalidFormatError

        try:
            return normalize_hex(v)
        except InvalidFormatError as e:
            raise ValueError(e.user_message) from e

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.colorconv/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (atomic write, keeps a .bak of the previous one)."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
