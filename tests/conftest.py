"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from colorconv.core import ColorSyncController
from colorconv.models import RangePolicy


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def controller():
    """Controller at the default seed (#ff5733) with the clamp policy."""
    return ColorSyncController()


@pytest.fixture
def strict_controller():
    """Controller at the default seed with the reject policy."""
    return ColorSyncController(range_policy=RangePolicy.REJECT)
