"""Pytest configuration and fixtures."""

import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from PIL import Image

from photo_album.core.config import Config, reset_config
from photo_album.library.repository import LibraryRepository
from photo_album.storage.store import PersistenceStore


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_global_state():
    """Drop handlers and global config installed by a test."""
    yield
    for name in ("photo_album", "photo_album.audit"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
    reset_config()


@pytest.fixture
def test_config(temp_dir):
    """Create test configuration rooted in the temporary directory."""
    return Config(
        data_dir=temp_dir / "library",
        log_dir=temp_dir / "logs",
        stock_dir=temp_dir / "stock_images",
    )


@pytest.fixture
def store(test_config):
    """Persistence store over an empty data directory."""
    return PersistenceStore(test_config)


@pytest.fixture
def repository(test_config):
    """Repository loaded from an empty data directory."""
    return LibraryRepository(test_config)


@pytest.fixture
def make_image():
    """Factory writing a small real image file with a chosen modification time."""
    def _make_image(path: Path, modified: datetime = None, color=(200, 30, 30)) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        image_format = "PNG" if path.suffix.lower() == ".png" else "JPEG"
        Image.new("RGB", (8, 8), color).save(path, format=image_format)
        if modified is not None:
            timestamp = modified.timestamp()
            os.utime(path, (timestamp, timestamp))
        return path

    return _make_image


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
