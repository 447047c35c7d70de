"""JSON files backed by Pydantic models.

Only settings go through here; the color being edited is never written to
disk. Writes keep a `.bak` of the previous file and replace the target in one
rename, so an interrupted save leaves the old settings intact.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from colorconv.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    wrap_pydantic_error,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _sibling(path: Path, extra_suffix: str) -> Path:
    return path.with_suffix(path.suffix + extra_suffix)


class PydanticPersistence:
    """
    Load, save and check JSON files for a Pydantic model type.

        config = PydanticPersistence.load_json_or_default(path, AppConfig)
        PydanticPersistence.save_json(config, path)
    """

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Read `path` and validate it as `model_type`.

        Raises:
            FileNotFoundError: No file at `path`
            ConfigFileInvalidError: Empty file, bad JSON, or the file could not be read
            ConfigValidationError: Valid JSON with values the model rejects
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        name = model_type.__name__
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            model = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"{path} is not a valid {name}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {name} from {path}")
        return model

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
    ) -> None:
        """
        Write `data` to `path` as indented JSON.

        Args:
            data: Model to write
            path: Target file
            indent: JSON indentation
            create_parents: Create missing parent directories
            backup: Copy an existing target to `<name>.bak` first

        Raises:
            OSError: The file system refused the write
            ConfigurationError: The model could not be serialized
        """
        name = type(data).__name__
        try:
            content = data.model_dump_json(indent=indent)
        except ValueError as e:
            raise ConfigurationError(
                user_message=f"Failed to save configuration to {path}",
                technical_message=f"Cannot serialize {name}: {e}",
            ) from e

        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            shutil.copy2(path, _sibling(path, ".bak"))
            logger.debug(f"Backed up {path}")

        temp_path = _sibling(path, ".tmp")
        try:
            temp_path.write_text(content, encoding="utf-8")
            temp_path.replace(path)
        except OSError as e:
            logger.error(f"Could not write {name} to {path}: {e}")
            raise
        finally:
            temp_path.unlink(missing_ok=True)

        logger.debug(f"Saved {name} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Callable[[], M] | None = None
    ) -> M:
        """
        Like load_json, but a missing file yields a default instance.

        The default is not written to disk, and a file that exists but is
        broken still raises.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"No file at {path}, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()

    @staticmethod
    def validate_json(path: Path, model_type: type[M]) -> tuple[bool, str | None]:
        """Return (True, None) if `path` loads cleanly, else (False, reason)."""
        try:
            PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            return False, f"File not found: {path}"
        except ConfigurationError as e:
            return False, e.user_message
        return True, None
