# tests/conftest.py

"""Shared pytest fixtures for the fakestore tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from fakestore.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path) -> Generator[Path, None, None]:
    """Pin the API host and send log files to a temp dir.

    Keeps a developer's ``.env`` or ``FAKESTORE_API_URL`` from leaking
    into URL assertions.
    """
    logs_dir = tmp_path / "logs"
    with (
        patch.object(Settings, "API_BASE_URL", "https://fakestoreapi.com"),
        patch.object(Settings, "LOGS_DIR", logs_dir),
    ):
        yield logs_dir
