# tests/conftest.py

"""Shared pytest fixtures for all storefront tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path) -> Generator[None, None, None]:
    """Point storage and logs at a temp dir so tests never touch the repo."""
    saved = (Settings.STORAGE_PATH, Settings.LOGS_DIR)
    Settings.STORAGE_PATH = tmp_path / "data" / "storage.json"
    Settings.LOGS_DIR = tmp_path / "logs"
    yield
    Settings.STORAGE_PATH, Settings.LOGS_DIR = saved
