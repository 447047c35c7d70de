"""Tests for config persistence (backups, atomic writes, corruption handling)."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel

from colorconv.exceptions import ConfigFileInvalidError, ConfigValidationError
from colorconv.models import AppConfig, RangePolicy
from colorconv.utils import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original", value=1), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, SampleModel).name == "original"
        assert PydanticPersistence.load_json(config_path, SampleModel).name == "modified"

    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(value=2), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        """Test that temporary file is cleaned up after successful write."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="test", value=123), config_path)

        assert not config_path.with_suffix(".json.tmp").exists()
        assert PydanticPersistence.load_json(config_path, SampleModel).value == 123

    def test_creates_parent_directories(self, tmp_path: Path):
        config_path = tmp_path / "nested" / "dir" / "config.json"
        PydanticPersistence.save_json(SampleModel(), config_path)
        assert config_path.exists()

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", SampleModel)

    def test_load_or_default_missing_file(self, tmp_path: Path):
        loaded = PydanticPersistence.load_json_or_default(tmp_path / "missing.json", SampleModel)
        assert loaded == SampleModel()
        assert not (tmp_path / "missing.json").exists()

    def test_empty_file(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        config_path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, SampleModel)

        assert exc_info.value.user_message == "Configuration file is empty"

    def test_invalid_json_syntax(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        config_path.write_text('{"name": "test",')

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(config_path, SampleModel)

    def test_corrupted_file_is_not_replaced_by_default(self, tmp_path: Path):
        """A broken file raises instead of silently falling back to defaults."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json_or_default(config_path, SampleModel)

        assert config_path.read_text() == "{not json"

    def test_validate_json(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        PydanticPersistence.save_json(SampleModel(), config_path)
        assert PydanticPersistence.validate_json(config_path, SampleModel) == (True, None)

        is_valid, error = PydanticPersistence.validate_json(tmp_path / "missing.json", SampleModel)
        assert not is_valid
        assert "File not found" in error


class TestAppConfigPersistence:
    """Test loading and saving AppConfig."""

    def test_round_trip(self, config_path):
        AppConfig(seed_color="#369", range_policy="reject").save(config_path)

        loaded = AppConfig.load_or_default(config_path)
        assert loaded.seed_color == "#336699"
        assert loaded.range_policy is RangePolicy.REJECT

    def test_saved_as_plain_json(self, config_path):
        AppConfig().save(config_path)
        assert json.loads(config_path.read_text()) == {"seed_color": "#ff5733", "range_policy": "clamp"}

    def test_missing_file_gives_defaults(self, config_path):
        assert AppConfig.load_or_default(config_path) == AppConfig()

    def test_invalid_value(self, config_path):
        config_path.write_text(json.dumps({"seed_color": "#gg0000"}))

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.field == "seed_color"
        assert "#ff5733" in exc_info.value.recovery_hint
