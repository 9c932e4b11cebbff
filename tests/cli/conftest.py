"""pytest configuration for edgeapp CLI tests."""

import os
from pathlib import Path

import pytest

from edgeapp.cli.core.constants import APP_CONFIG_FILENAME


# Set environment variables needed for tests
def pytest_configure(config):
    """Configure pytest environment."""
    # API endpoint configuration
    os.environ.setdefault("EDGEAPP_API_BASE_URL", "http://localhost:3000/api")
    os.environ.setdefault("EDGEAPP_API_KEY", "test-token")
    os.environ.setdefault("EDGEAPP_VERBOSE", "true")


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    """A project directory whose app.yaml caches an app id."""
    (tmp_path / APP_CONFIG_FILENAME).write_text(
        "name: my-app\napp_id: app_from_config\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """A directory without any project config."""
    directory = tmp_path / "no-config"
    directory.mkdir()
    return directory
